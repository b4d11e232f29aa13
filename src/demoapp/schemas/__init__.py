"""Pydantic schemas for API response models."""

from demoapp.schemas.responses import (
    ApiTestData,
    ApiTestResponse,
    AppInfo,
    HealthChecks,
    HealthResponse,
    InfoResponse,
    LongTaskResult,
    ManagementHealth,
    ManagementIndex,
    ManagementInfo,
    ManagementLink,
    ShutdownResponse,
    SystemInfoResponse,
)

__all__ = [
    "ApiTestData",
    "ApiTestResponse",
    "AppInfo",
    "HealthChecks",
    "HealthResponse",
    "InfoResponse",
    "LongTaskResult",
    "ManagementHealth",
    "ManagementIndex",
    "ManagementInfo",
    "ManagementLink",
    "ShutdownResponse",
    "SystemInfoResponse",
]
