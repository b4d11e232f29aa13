"""Top-level router aggregating the demo sub-routers."""

from fastapi import APIRouter

from demoapp.api.demo.router import router as demo_router
from demoapp.api.info.router import router as info_router

app_router = APIRouter()
app_router.include_router(info_router, tags=["info"])
app_router.include_router(demo_router, prefix="/api", tags=["demo"])
