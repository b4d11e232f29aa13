"""Shared FastAPI dependencies."""

from fastapi import Request

from demoapp.services.demo_service import DemoService


async def get_demo_service(request: Request) -> DemoService:
    """Return the DemoService instance stored on app state.

    The service is created by the app factory and initialized during the
    application lifespan.
    """
    return request.app.state.demo_service
