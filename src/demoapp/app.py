"""FastAPI application factory with an explicit init/destroy lifespan."""

from __future__ import annotations

import logging
import os
import signal
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response

from demoapp.api.management.router import router as management_router
from demoapp.api.router import app_router
from demoapp.config import Settings, get_settings
from demoapp.services.cancellation import TaskInterrupted
from demoapp.services.demo_service import DemoService

logger = logging.getLogger(__name__)


def signal_self() -> None:
    """Send SIGTERM to this process so shutdown follows the signal path."""
    os.kill(os.getpid(), signal.SIGTERM)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Run the startup and shutdown hooks around the serving period.

    On startup: capture the service start time (before the listener binds).
    On shutdown: cancel in-flight work and log total uptime.
    """
    service: DemoService = app.state.demo_service
    service.initialize()

    yield

    service.shutdown()


async def task_interrupted_handler(request: Request, exc: TaskInterrupted) -> Response:
    """Close the request without a body when a long task was stopped early."""
    logger.info(
        "Request %s %s ended without completion (%s)",
        request.method,
        request.url.path,
        exc.reason,
    )
    return Response(status_code=503, headers={"Connection": "close"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Uvicorn can call it with the --factory flag:
        uvicorn demoapp.app:create_app --factory
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.demo_service = DemoService(settings)
    app.state.shutdown_trigger = signal_self

    app.add_exception_handler(TaskInterrupted, task_interrupted_handler)
    app.include_router(app_router)

    if settings.management_enabled:
        app.include_router(
            management_router,
            prefix=settings.management_base_path,
            tags=["management"],
        )

    return app
