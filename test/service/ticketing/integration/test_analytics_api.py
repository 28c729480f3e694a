from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import DASHBOARD_ANALYTICS, TICKET_ANALYTICS
from test.shared.utils import assert_response_status, create_ticket


@pytest.fixture
def seeded_tickets(client: TestClient, creator_headers):
    return [
        create_ticket(
            client,
            creator_headers,
            price=200,
            priority='low',
            status='closed',
            due_date='2099-03-01T10:00:00Z',
        ),
        create_ticket(
            client,
            creator_headers,
            price=100,
            priority='high',
            type='movie',
            due_date='2099-03-03T10:00:00Z',
        ),
        create_ticket(
            client,
            creator_headers,
            price=50,
            priority='high',
            status='in-progress',
            venue='Arena',
            due_date='2099-03-05T10:00:00Z',
        ),
    ]


@pytest.mark.integration
class TestAnalyticsAPI:
    def test_dashboard_without_filters(self, client: TestClient, creator_headers, seeded_tickets):
        response = client.get(DASHBOARD_ANALYTICS, headers=creator_headers)

        assert_response_status(response, 200)
        data = response.json()['data']
        assert data['totalTickets'] == 3
        assert data['closedTickets'] + data['openTickets'] + data['inProgressTickets'] == 3
        assert data['averageCustomerSpending'] == 116.67
        assert data['averageTicketsBookedPerDay'] == pytest.approx(3 / 5)
        assert data['priorityDistribution']['high']['count'] == 2
        assert data['priorityDistribution']['high']['avgTicketsPerDay'] == pytest.approx(2 / 3)
        assert data['typeDistribution'] == {
            'concert': 2,
            'movie': 1,
            'sports': 0,
            'theatre': 0,
            'exhibition': 0,
            'conference': 0,
        }

    def test_dashboard_filtered_by_priority_and_status(
        self, client: TestClient, creator_headers, seeded_tickets
    ):
        response = client.get(
            DASHBOARD_ANALYTICS,
            params={'priority': 'low', 'status': 'closed'},
            headers=creator_headers,
        )

        data = response.json()['data']
        assert data['totalTickets'] == 1
        assert data['averageCustomerSpending'] == 200.0
        assert data['averageTicketsBookedPerDay'] == 1.0

    def test_dashboard_date_range(self, client: TestClient, creator_headers, seeded_tickets):
        response = client.get(
            DASHBOARD_ANALYTICS,
            params={'startDate': '2099-03-02', 'endDate': '2099-03-03'},
            headers=creator_headers,
        )

        data = response.json()['data']
        assert data['totalTickets'] == 1
        assert data['typeDistribution']['movie'] == 1
        assert data['typeDistribution']['concert'] == 0

    def test_empty_result(self, client: TestClient, creator_headers):
        response = client.get(DASHBOARD_ANALYTICS, headers=creator_headers)

        assert_response_status(response, 200)
        data = response.json()['data']
        assert data['totalTickets'] == 0
        assert data['averageCustomerSpending'] == 0
        assert data['averageTicketsBookedPerDay'] == 0

    def test_ticket_analytics_matches_dashboard(
        self, client: TestClient, creator_headers, seeded_tickets
    ):
        params = {'venue': 'Blue Note'}

        tickets = client.get(TICKET_ANALYTICS, params=params, headers=creator_headers).json()
        dashboard = client.get(DASHBOARD_ANALYTICS, params=params, headers=creator_headers).json()

        assert tickets['data']['totalTickets'] == dashboard['data']['totalTickets'] == 2
        assert tickets['data']['typeDistribution'] == dashboard['data']['typeDistribution']
        assert [t['id'] for t in tickets['data']['tickets']] == [
            seeded_tickets[0]['id'],
            seeded_tickets[1]['id'],
        ]

    def test_invalid_filter(self, client: TestClient, creator_headers):
        response = client.get(
            TICKET_ANALYTICS, params={'priority': 'urgent'}, headers=creator_headers
        )

        assert_response_status(response, 400)
        assert response.json()['errorsValidation'] == [
            {'priority': "'urgent' is not one of: low, medium, high"}
        ]
