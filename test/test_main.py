"""
Test-specific FastAPI Application

Same routes as production; the lifespan also creates missing tables.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    database = container.database()
    await database.connect()
    await database.create_tables()
    Logger.base.info('🗄️  [Test App] Database ready')

    try:
        yield
    finally:
        await database.dispose()
        container.unwire()
        Logger.base.info('👋 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
