"""Tests for the demo endpoints, driven through the app factory."""

import logging
from datetime import datetime, timedelta

from demoapp.config import Settings
from demoapp.services.clock import TIMESTAMP_FORMAT
from demoapp.services.demo_service import DemoService


def _parse(value):
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def test_root_info(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()

    assert body["application"] == "Shell Manager Test App"
    assert body["version"] == "1.0.0"
    assert body["port"] == 8801
    assert body["status"] == "running"
    assert body["message"]

    start, current = _parse(body["startTime"]), _parse(body["currentTime"])
    assert current >= start
    assert body["uptime"] >= 0
    # Both timestamps are truncated to the second.
    assert abs(body["uptime"] - (current - start).total_seconds()) <= 1


def test_uptime_after_five_seconds():
    service = DemoService(Settings())
    service.clock.start(datetime.now() - timedelta(seconds=5))

    info = service.info()

    assert 4 <= info.uptime <= 6


def test_health_is_always_up(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()

    assert body["status"] == "UP"
    assert body["checks"] == {"application": "UP", "database": "UP", "diskSpace": "UP"}
    _parse(body["timestamp"])


def test_health_ignores_query_parameters(client):
    body = client.get("/health", params={"status": "DOWN"}).json()
    assert body["status"] == "UP"


def test_api_test_fixed_payload(client):
    body = client.get("/api/test").json()

    assert body["data"]["userId"] == 12345
    assert body["data"]["userName"] == "testUser"
    assert body["data"]["operation"] == "startup.sh script test"
    assert body["message"]
    _parse(body["timestamp"])


def test_system_info(client):
    response = client.get("/api/system")
    assert response.status_code == 200
    body = response.json()

    assert body["processors"] >= 1
    for key in ("totalMemory", "freeMemory", "maxMemory"):
        assert isinstance(body[key], int)
        assert body[key] >= 0
    assert body["freeMemory"] <= body["totalMemory"] <= body["maxMemory"]
    assert body["pythonVersion"]
    assert body["osName"]


def test_long_task_completes(client, caplog):
    caplog.set_level(logging.INFO)

    response = client.get("/api/long-task")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Long task completed"
    assert body["duration"] == "0.1 seconds"
    _parse(body["completedAt"])
    progress = [r.getMessage() for r in caplog.records if "progress" in r.getMessage()]
    assert progress == [f"Long task progress: {i}/10" for i in range(1, 11)]


def test_long_task_interrupted_by_shutdown(app, client):
    app.state.demo_service.request_stop()

    response = client.get("/api/long-task")

    assert response.status_code == 503
    assert response.content == b""
    assert response.headers["connection"] == "close"


def test_unknown_route_is_404(client):
    assert client.get("/api/missing").status_code == 404
