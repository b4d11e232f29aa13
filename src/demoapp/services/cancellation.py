"""Cooperative cancellation for in-flight work during shutdown."""

from __future__ import annotations

import threading


class TaskInterrupted(Exception):
    """A cancellable wait was stopped at a checkpoint before finishing.

    Args:
        completed_steps: Number of wait increments finished before the stop.
        reason: ``"shutdown"`` or ``"client-disconnect"``.
    """

    def __init__(self, completed_steps: int, reason: str) -> None:
        super().__init__(f"interrupted after {completed_steps} step(s): {reason}")
        self.completed_steps = completed_steps
        self.reason = reason


class CancellationToken:
    """Thread-safe stop flag.

    Set from signal handlers or the management shutdown endpoint, read by
    request handlers at their checkpoints. Once set it stays set.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
