from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.logging_config import configure_logging
from src.taskapi.infrastructure.postgres.orm import PostgresOrm
from src.taskapi.presentation.routes import router as api_router

settings = get_api_settings()
configure_logging(settings.LOG_LEVEL)
configure_di()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await inject.instance(PostgresOrm).dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task management API: register users and create tasks they own",
    lifespan=lifespan,
)

app.include_router(api_router, prefix="")
