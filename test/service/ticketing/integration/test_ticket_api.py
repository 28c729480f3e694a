"""
Ticket creation, lookup and assignment against PostgreSQL
"""

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import TICKET_ASSIGN, TICKET_CREATE, TICKET_GET
from test.shared.utils import (
    assert_response_status,
    create_ticket,
    create_user,
    login_user,
    ticket_payload,
)
from test.util_constant import DEFAULT_PASSWORD


def _assign(client: TestClient, ticket_id: int, user_id: int, headers):
    return client.put(
        TICKET_ASSIGN.format(ticket_id=ticket_id), json={'userId': user_id}, headers=headers
    )


@pytest.mark.integration
class TestTicketAPI:
    def test_create_and_get_ticket(self, client: TestClient, creator_user, creator_headers):
        ticket = create_ticket(client, creator_headers, price=99.5)

        response = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=creator_headers)

        assert_response_status(response, 200)
        data = response.json()['data']
        assert data['created_by'] == creator_user['id']
        assert data['price'] == 99.5
        assert data['status'] == 'open'
        assert data['assigned_users'] == []

    def test_past_due_date_is_rejected(self, client: TestClient, creator_headers):
        response = client.post(
            TICKET_CREATE,
            json=ticket_payload(due_date='2000-01-01T00:00:00Z'),
            headers=creator_headers,
        )

        assert_response_status(response, 400)

    def test_creator_assigns_customer(
        self, client: TestClient, creator_headers, customer_user
    ):
        ticket = create_ticket(client, creator_headers)

        response = _assign(client, ticket['id'], customer_user['id'], creator_headers)

        assert_response_status(response, 200)
        assert response.json()['data']['assigned_users'] == [customer_user['id']]

        detail = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=creator_headers)
        assert detail.json()['data']['assigned_users'] == [
            {
                'id': customer_user['id'],
                'name': customer_user['name'],
                'email': customer_user['email'],
            }
        ]

    def test_admin_assigns_on_any_ticket(
        self, client: TestClient, creator_headers, admin_headers, customer_user
    ):
        ticket = create_ticket(client, creator_headers)

        response = _assign(client, ticket['id'], customer_user['id'], admin_headers)

        assert_response_status(response, 200)

    def test_duplicate_assignment(self, client: TestClient, creator_headers, customer_user):
        ticket = create_ticket(client, creator_headers)
        _assign(client, ticket['id'], customer_user['id'], creator_headers)

        response = _assign(client, ticket['id'], customer_user['id'], creator_headers)

        assert_response_status(response, 409)

    def test_other_customer_cannot_assign(
        self, client: TestClient, creator_headers, customer_headers, customer_user
    ):
        ticket = create_ticket(client, creator_headers)

        response = _assign(client, ticket['id'], customer_user['id'], customer_headers)

        assert_response_status(response, 403)

    def test_closed_ticket_rejects_before_authorization(
        self, client: TestClient, creator_headers, customer_headers, customer_user
    ):
        ticket = create_ticket(client, creator_headers, status='closed')

        response = _assign(client, ticket['id'], customer_user['id'], customer_headers)

        assert_response_status(response, 400)
        assert response.json()['errorType'] == 'InvalidState'

    def test_admin_cannot_be_assigned(
        self, client: TestClient, creator_headers, admin_user
    ):
        ticket = create_ticket(client, creator_headers)

        response = _assign(client, ticket['id'], admin_user['id'], creator_headers)

        assert_response_status(response, 400)
        assert response.json()['errorType'] == 'InvalidTarget'

    def test_assignment_limit(self, client: TestClient, creator_headers):
        ticket = create_ticket(client, creator_headers)
        limit = settings.MAX_ASSIGNEES_PER_TICKET
        users = [
            create_user(client, f'user{i}@test.com', DEFAULT_PASSWORD, f'User {i}', 'customer')
            for i in range(limit + 1)
        ]

        for user in users[:limit]:
            assert_response_status(_assign(client, ticket['id'], user['id'], creator_headers), 200)
        response = _assign(client, ticket['id'], users[limit]['id'], creator_headers)

        assert_response_status(response, 400)
        assert response.json()['errorType'] == 'LimitExceeded'
        detail = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=creator_headers)
        assert len(detail.json()['data']['assigned_users']) == limit

    def test_concurrent_assignments_respect_the_limit(self, client: TestClient, creator_headers):
        ticket = create_ticket(client, creator_headers)
        limit = settings.MAX_ASSIGNEES_PER_TICKET
        users = [
            create_user(client, f'racer{i}@test.com', DEFAULT_PASSWORD, f'Racer {i}', 'customer')
            for i in range(limit + 3)
        ]

        with ThreadPoolExecutor(max_workers=4) as pool:
            responses = list(
                pool.map(
                    lambda user: _assign(client, ticket['id'], user['id'], creator_headers), users
                )
            )

        assert sum(response.status_code == 200 for response in responses) == limit
        detail = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=creator_headers)
        assigned = [user['id'] for user in detail.json()['data']['assigned_users']]
        assert len(assigned) == len(set(assigned)) == limit

    def test_unknown_ticket_and_user(self, client: TestClient, creator_headers, customer_user):
        ticket = create_ticket(client, creator_headers)

        assert _assign(client, 999999, customer_user['id'], creator_headers).status_code == 404
        assert _assign(client, ticket['id'], 999999, creator_headers).status_code == 404

    def test_login_of_assigned_user_still_works(
        self, client: TestClient, creator_headers, customer_user
    ):
        ticket = create_ticket(client, creator_headers)
        _assign(client, ticket['id'], customer_user['id'], creator_headers)

        headers = login_user(client, customer_user['email'], DEFAULT_PASSWORD)
        response = client.get(TICKET_GET.format(ticket_id=ticket['id']), headers=headers)

        assert_response_status(response, 200)
