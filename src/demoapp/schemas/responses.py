"""Response models for the demo and management endpoints.

Fields are declared in snake_case and serialized in camelCase, which is the
wire format the external start/stop tooling reads.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Demo endpoints
# ---------------------------------------------------------------------------


class InfoResponse(CamelModel):
    """Application identity and uptime returned by ``GET /``."""

    application: str
    version: str
    port: int
    start_time: str
    current_time: str
    uptime: int
    status: str
    message: str


class HealthChecks(CamelModel):
    application: str = "UP"
    database: str = "UP"
    disk_space: str = "UP"


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    checks: HealthChecks


class ApiTestData(CamelModel):
    user_id: int
    user_name: str
    operation: str


class ApiTestResponse(CamelModel):
    message: str
    timestamp: str
    data: ApiTestData


class SystemInfoResponse(CamelModel):
    """Runtime environment facts; memory figures are whole megabytes."""

    python_version: str
    python_vendor: str
    os_name: str
    os_version: str
    total_memory: int
    free_memory: int
    max_memory: int
    processors: int


class LongTaskResult(CamelModel):
    message: str
    duration: str
    completed_at: str


# ---------------------------------------------------------------------------
# Management endpoints
# ---------------------------------------------------------------------------


class ManagementLink(BaseModel):
    href: str


class ManagementIndex(BaseModel):
    links: dict[str, ManagementLink] = Field(alias="_links")

    model_config = ConfigDict(populate_by_name=True)


class ManagementHealth(BaseModel):
    status: str


class AppInfo(BaseModel):
    name: str
    version: str


class ManagementInfo(BaseModel):
    app: AppInfo


class ShutdownResponse(BaseModel):
    message: str
