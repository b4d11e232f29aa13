"""DemoService -- owns the service clock and builds every endpoint payload.

One instance lives on ``app.state.demo_service`` for the lifetime of the
process. The lifespan startup hook calls ``initialize()`` and the shutdown
hook calls ``shutdown()``; route handlers only read from it.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from demoapp.config import Settings
from demoapp.schemas.responses import (
    ApiTestData,
    ApiTestResponse,
    HealthChecks,
    HealthResponse,
    InfoResponse,
    LongTaskResult,
    SystemInfoResponse,
)
from demoapp.services.cancellation import CancellationToken
from demoapp.services.clock import ServiceClock, format_timestamp, now
from demoapp.services.long_task import LongTaskRunner
from demoapp.services.system_info import collect_system_info

logger = logging.getLogger(__name__)

INFO_MESSAGE = "Application is running normally and can be used to test startup.sh"
TEST_MESSAGE = "Test endpoint called successfully"

# Literal fixture values; the health sub-checks never probe anything.
FAKE_USER_ID = 12345
FAKE_USER_NAME = "testUser"
FAKE_OPERATION = "startup.sh script test"


class DemoService:
    """Process-scoped service state and response builders.

    Args:
        settings: Application settings (identity, port, long-task shape).
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.clock = ServiceClock()
        self.token = CancellationToken()

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Capture the start time. Runs once, before the listener binds."""
        started = self.clock.start()
        logger.info("Application initialized: %s", format_timestamp(started))

    def request_stop(self) -> None:
        """Flag in-flight cancellable work to stop at its next checkpoint."""
        if not self.token.cancelled:
            logger.info("Stop requested, cancelling in-flight tasks")
        self.token.cancel()

    def shutdown(self) -> None:
        """Log the shutdown timestamp and total uptime."""
        self.request_stop()
        moment = now()
        logger.info("Application shutting down: %s", format_timestamp(moment))
        if self.clock.started:
            logger.info("Uptime: %d seconds", self.clock.uptime_seconds(moment))
        logger.info("=== %s stopped ===", self.settings.app_name)

    # ------------------------------------------------------------------
    # Response builders
    # ------------------------------------------------------------------

    def info(self) -> InfoResponse:
        moment = now()
        return InfoResponse(
            application=self.settings.app_name,
            version=self.settings.app_version,
            port=self.settings.port,
            start_time=format_timestamp(self.clock.start_time),
            current_time=format_timestamp(moment),
            uptime=self.clock.uptime_seconds(moment),
            status="running",
            message=INFO_MESSAGE,
        )

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="UP",
            timestamp=format_timestamp(now()),
            checks=HealthChecks(),
        )

    def api_test(self) -> ApiTestResponse:
        return ApiTestResponse(
            message=TEST_MESSAGE,
            timestamp=format_timestamp(now()),
            data=ApiTestData(
                user_id=FAKE_USER_ID,
                user_name=FAKE_USER_NAME,
                operation=FAKE_OPERATION,
            ),
        )

    def system(self) -> SystemInfoResponse:
        return SystemInfoResponse(**collect_system_info())

    async def long_task(
        self,
        disconnected: Callable[[], Awaitable[bool]] | None = None,
    ) -> LongTaskResult:
        """Run the simulated long task; raises ``TaskInterrupted`` on stop."""
        runner = LongTaskRunner(
            self.token,
            steps=self.settings.long_task_steps,
            step_seconds=self.settings.long_task_step_seconds,
        )
        result = await runner.run(disconnected)
        return LongTaskResult(
            message=result["message"],
            duration=result["duration"],
            completed_at=result["completedAt"],
        )
