from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables with DEMOAPP_ prefix."""

    # App identity
    app_name: str = "Shell Manager Test App"
    app_version: str = "1.0.0"
    debug: bool = False
    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(default=8801, ge=1, le=65535)
    graceful_shutdown_timeout: int = Field(default=30, ge=0)
    log_level: str = "INFO"
    # Simulated long task
    long_task_steps: int = Field(default=10, ge=1)
    long_task_step_seconds: float = Field(default=1.0, ge=0)
    # Management endpoints
    management_enabled: bool = True
    management_base_path: str = "/actuator"
    management_shutdown_enabled: bool = True

    model_config = SettingsConfigDict(env_prefix="DEMOAPP_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
