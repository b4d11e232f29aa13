"""Simulated business endpoints under ``/api``."""

from fastapi import APIRouter, Depends, Request

from demoapp.api.deps import get_demo_service
from demoapp.schemas.responses import (
    ApiTestResponse,
    LongTaskResult,
    SystemInfoResponse,
)
from demoapp.services.demo_service import DemoService

router = APIRouter()


@router.get("/test", response_model=ApiTestResponse)
async def api_test(
    service: DemoService = Depends(get_demo_service),
) -> ApiTestResponse:
    """Return a fixed success payload with a fake user record."""
    return service.api_test()


@router.get("/system", response_model=SystemInfoResponse)
def system_info(
    service: DemoService = Depends(get_demo_service),
) -> SystemInfoResponse:
    """Return live interpreter, OS, memory and CPU facts."""
    return service.system()


@router.get("/long-task", response_model=LongTaskResult)
async def long_task(
    request: Request,
    service: DemoService = Depends(get_demo_service),
) -> LongTaskResult:
    """Wait through the configured steps, then report completion.

    Stops early when the service is shutting down or the client goes away;
    ``TaskInterrupted`` is turned into an empty response by the app's
    exception handler.
    """
    return await service.long_task(disconnected=request.is_disconnected)
