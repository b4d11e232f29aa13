"""Simulated long-running task used to exercise graceful shutdown.

The task waits in fixed increments and checks for cancellation between them.
Follows the sleep-loop pattern of a background timer, but runs inside the
request instead of as a detached task.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from demoapp.services.cancellation import CancellationToken, TaskInterrupted
from demoapp.services.clock import format_timestamp, now

logger = logging.getLogger(__name__)


class LongTaskRunner:
    """Run ``steps`` sequential waits of ``step_seconds`` each.

    Before every wait the runner checks its checkpoints: the shared
    cancellation token and, when given, a ``disconnected`` probe for the
    client connection. A wait already in progress is never cut short.

    Args:
        token: Service-wide cancellation token.
        steps: Number of wait increments (default 10).
        step_seconds: Length of each increment in seconds (default 1.0).
    """

    def __init__(
        self,
        token: CancellationToken,
        steps: int = 10,
        step_seconds: float = 1.0,
    ) -> None:
        self.token = token
        self.steps = steps
        self.step_seconds = step_seconds

    @property
    def duration_label(self) -> str:
        return f"{self.steps * self.step_seconds:g} seconds"

    async def run(
        self,
        disconnected: Callable[[], Awaitable[bool]] | None = None,
    ) -> dict[str, str]:
        """Run the task to completion or raise ``TaskInterrupted``."""
        logger.info("Long task started: %s", format_timestamp(now()))
        completed = 0
        try:
            for step in range(1, self.steps + 1):
                if self.token.cancelled:
                    raise TaskInterrupted(completed, "shutdown")
                if disconnected is not None and await disconnected():
                    raise TaskInterrupted(completed, "client-disconnect")
                await asyncio.sleep(self.step_seconds)
                completed = step
                logger.info("Long task progress: %d/%d", step, self.steps)
        except TaskInterrupted as exc:
            logger.warning(
                "Long task interrupted at %d/%d (%s)",
                exc.completed_steps,
                self.steps,
                exc.reason,
            )
            raise
        except asyncio.CancelledError:
            logger.warning(
                "Long task cancelled by server at %d/%d", completed, self.steps
            )
            raise

        completed_at = format_timestamp(now())
        logger.info("Long task completed: %s", completed_at)
        return {
            "message": "Long task completed",
            "duration": self.duration_label,
            "completedAt": completed_at,
        }
