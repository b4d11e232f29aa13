"""Management endpoints used by the start/stop tooling.

Mounted under ``settings.management_base_path`` (``/actuator`` by default).
The shutdown endpoint replies first and triggers the stop afterwards, so the
caller always receives its acknowledgement.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request

from demoapp.api.deps import get_demo_service
from demoapp.schemas.responses import (
    AppInfo,
    ManagementHealth,
    ManagementIndex,
    ManagementInfo,
    ManagementLink,
    ShutdownResponse,
)
from demoapp.services.demo_service import DemoService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ManagementIndex, response_model_by_alias=True)
async def index(
    request: Request,
    service: DemoService = Depends(get_demo_service),
) -> ManagementIndex:
    """List the available management endpoints."""
    base = str(request.base_url).rstrip("/") + service.settings.management_base_path
    links = {
        "self": ManagementLink(href=base),
        "health": ManagementLink(href=f"{base}/health"),
        "info": ManagementLink(href=f"{base}/info"),
    }
    if service.settings.management_shutdown_enabled:
        links["shutdown"] = ManagementLink(href=f"{base}/shutdown")
    return ManagementIndex(links=links)


@router.get("/health", response_model=ManagementHealth)
async def health() -> ManagementHealth:
    return ManagementHealth(status="UP")


@router.get("/info", response_model=ManagementInfo)
async def info(service: DemoService = Depends(get_demo_service)) -> ManagementInfo:
    return ManagementInfo(
        app=AppInfo(name=service.settings.app_name, version=service.settings.app_version)
    )


@router.post("/shutdown", response_model=ShutdownResponse)
async def shutdown(
    request: Request,
    background_tasks: BackgroundTasks,
    service: DemoService = Depends(get_demo_service),
) -> ShutdownResponse:
    """Acknowledge, then stop the process through the normal signal path."""
    if not service.settings.management_shutdown_enabled:
        raise HTTPException(status_code=404, detail="Not Found")

    logger.info("Shutdown requested via %s/shutdown", service.settings.management_base_path)
    service.request_stop()
    background_tasks.add_task(request.app.state.shutdown_trigger)
    return ShutdownResponse(message="Shutting down, bye...")
