"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticket Desk] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticket Desk] Dependency injection wired')

    database = container.database()
    await database.connect()

    Logger.base.info('✅ [Ticket Desk] Ready to serve requests')
    try:
        yield
    finally:
        Logger.base.info('🛑 [Ticket Desk] Shutting down...')
        await database.dispose()
        container.unwire()
        Logger.base.info('👋 [Ticket Desk] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
