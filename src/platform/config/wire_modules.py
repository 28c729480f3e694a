"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    assign_user_to_ticket_use_case,
    create_ticket_use_case,
    create_user_use_case,
)
from src.service.ticketing.app.query import (
    get_dashboard_analytics_use_case,
    get_ticket_analytics_use_case,
    get_ticket_use_case,
    user_query_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import (
    auth_controller,
    dashboard_controller,
    ticket_controller,
    user_controller,
)


WIRE_MODULES: list[ModuleType] = [
    create_user_use_case,
    create_ticket_use_case,
    assign_user_to_ticket_use_case,
    get_ticket_use_case,
    get_ticket_analytics_use_case,
    get_dashboard_analytics_use_case,
    user_query_use_case,
    auth_controller,
    user_controller,
    ticket_controller,
    dashboard_controller,
]
