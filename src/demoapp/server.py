"""Process entry point: logging, startup banner, and the uvicorn server.

Run with ``python -m demoapp`` or the ``demoapp`` console script. SIGTERM
and SIGINT cancel in-flight long tasks before uvicorn begins its graceful
shutdown, so those requests end at their next checkpoint instead of holding
the process open.
"""

from __future__ import annotations

import logging
import sys
from types import FrameType

import uvicorn

from demoapp.app import create_app
from demoapp.config import Settings, get_settings
from demoapp.services.clock import TIMESTAMP_FORMAT, format_timestamp, now
from demoapp.services.demo_service import DemoService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt=TIMESTAMP_FORMAT,
        stream=sys.stdout,
    )


def banner_lines(settings: Settings) -> list[str]:
    """Startup banner with the URLs the start/stop tooling talks to."""
    base = f"http://localhost:{settings.port}"
    lines = [
        f"=== {settings.app_name} Starting ===",
        f"Start time: {format_timestamp(now())}",
        f"Listening port: {settings.port}",
        f"Health check: {base}/health",
    ]
    if settings.management_enabled:
        management = base + settings.management_base_path
        lines.append(f"Management endpoints: {management}")
        lines.append(f"Management health: {management}/health")
        lines.append(f"Application info: {management}/info")
        if settings.management_shutdown_enabled:
            lines.append(f"Graceful stop: POST {management}/shutdown")
    lines.append("=" * 47)
    return lines


class DemoServer(uvicorn.Server):
    """uvicorn server that cancels in-flight work as soon as exit is requested.

    Args:
        config: uvicorn configuration.
        service: The DemoService whose cancellation token is set on exit.
    """

    def __init__(self, config: uvicorn.Config, service: DemoService) -> None:
        super().__init__(config)
        self.service = service

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        self.service.request_stop()
        super().handle_exit(sig, frame)


def build_server(settings: Settings) -> DemoServer:
    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.graceful_shutdown_timeout,
    )
    return DemoServer(config, app.state.demo_service)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    for line in banner_lines(settings):
        logger.info(line)
    server = build_server(settings)
    server.run()


if __name__ == "__main__":
    main()
