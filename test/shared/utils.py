from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import TICKET_CREATE, USER_CREATE, USER_LOGIN
from test.util_constant import DEFAULT_DESCRIPTION, DEFAULT_TITLE, DEFAULT_VENUE


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, email: str, password: str, name: str, type: str
) -> Dict[str, Any]:
    response = client.post(
        USER_CREATE,
        json={'email': email, 'password': password, 'name': name, 'type': type},
    )
    assert_response_status(response, 201, f'Failed to create {type} user: {response.text}')
    return response.json()['data']


def login_user(client: TestClient, email: str, password: str) -> Dict[str, str]:
    """Log in and return the Authorization header for the issued token."""
    response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return {'Authorization': f'Bearer {response.json()["data"]["token"]}'}


def ticket_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        'title': DEFAULT_TITLE,
        'description': DEFAULT_DESCRIPTION,
        'type': 'concert',
        'venue': DEFAULT_VENUE,
        'status': 'open',
        'price': 200,
        'priority': 'low',
        'due_date': '2099-01-01T20:00:00Z',
    }
    payload.update(overrides)
    return payload


def create_ticket(client: TestClient, headers: Dict[str, str], **overrides: Any) -> Dict[str, Any]:
    response = client.post(TICKET_CREATE, json=ticket_payload(**overrides), headers=headers)
    assert_response_status(response, 201, f'Failed to create ticket: {response.text}')
    return response.json()['data']
