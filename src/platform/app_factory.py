"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    AUTH_BASE,
    DASHBOARD_BASE,
    HEALTH,
    TICKET_BASE,
    USER_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.ticketing.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.ticketing.driving_adapter.http_controller.dashboard_controller import (
    router as dashboard_router,
)
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    HealthResponse,
)
from src.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[Any]]] = None,
    title_suffix: str = '',
    description: str = 'Ticket management and analytics API',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['ticket'])
    app.include_router(dashboard_router, prefix=DASHBOARD_BASE, tags=['dashboard'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH, response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Liveness probe; does not touch the database."""
        return HealthResponse(status='healthy')
