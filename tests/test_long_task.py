"""Tests for the cancellable long-task runner."""

import asyncio

import pytest

from demoapp.services.cancellation import CancellationToken, TaskInterrupted
from demoapp.services.long_task import LongTaskRunner


def test_default_duration_label():
    assert LongTaskRunner(CancellationToken()).duration_label == "10 seconds"


def test_runs_all_steps(caplog):
    caplog.set_level("INFO", logger="demoapp.services.long_task")
    runner = LongTaskRunner(CancellationToken(), steps=10, step_seconds=0)

    result = asyncio.run(runner.run())

    assert result["message"] == "Long task completed"
    progress = [r for r in caplog.records if "progress" in r.getMessage()]
    assert [r.getMessage() for r in progress][-1] == "Long task progress: 10/10"
    assert len(progress) == 10


def test_stops_after_disconnect_at_checkpoint(caplog):
    caplog.set_level("INFO", logger="demoapp.services.long_task")
    checks = 0

    async def disconnected():
        nonlocal checks
        checks += 1
        return checks > 3

    runner = LongTaskRunner(CancellationToken(), steps=10, step_seconds=0)
    with pytest.raises(TaskInterrupted) as excinfo:
        asyncio.run(runner.run(disconnected))

    assert excinfo.value.completed_steps == 3
    assert excinfo.value.reason == "client-disconnect"
    assert not any("completed" in r.getMessage() for r in caplog.records)


def test_stops_when_token_cancelled_mid_run():
    token = CancellationToken()
    checks = 0

    async def disconnected():
        nonlocal checks
        checks += 1
        if checks == 4:
            token.cancel()
        return False

    runner = LongTaskRunner(token, steps=10, step_seconds=0)
    with pytest.raises(TaskInterrupted) as excinfo:
        asyncio.run(runner.run(disconnected))

    # Token is checked before the disconnect probe, so the step that
    # cancelled still runs and the next checkpoint stops the loop.
    assert excinfo.value.completed_steps == 4
    assert excinfo.value.reason == "shutdown"


def test_cancelled_token_stops_before_first_wait():
    token = CancellationToken()
    token.cancel()
    runner = LongTaskRunner(token, steps=10, step_seconds=1.0)

    with pytest.raises(TaskInterrupted) as excinfo:
        asyncio.run(runner.run())

    assert excinfo.value.completed_steps == 0
