"""Root info and health endpoints polled by the start/stop tooling."""

from fastapi import APIRouter, Depends

from demoapp.api.deps import get_demo_service
from demoapp.schemas.responses import HealthResponse, InfoResponse
from demoapp.services.demo_service import DemoService

router = APIRouter()


@router.get("/", response_model=InfoResponse)
async def home(service: DemoService = Depends(get_demo_service)) -> InfoResponse:
    """Return application identity, start/current timestamps and uptime."""
    return service.info()


@router.get("/health", response_model=HealthResponse)
async def health(service: DemoService = Depends(get_demo_service)) -> HealthResponse:
    """Return ``UP`` with three fixed sub-checks.

    Kept free of I/O so it answers immediately after startup.
    """
    return service.health()
