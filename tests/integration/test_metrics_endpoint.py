import logging
import re

import pytest
from fastapi.testclient import TestClient

from backend.core.metrics import RequestCounter
from backend.application import create_app
from backend.simulation import MetricsGenerator, MetricsSnapshot


def test_metrics_returns_exactly_the_documented_fields(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.headers["access-control-allow-origin"] == "*"

    payload = response.json()
    assert set(payload) == {"cpu_usage", "latency_ms", "memory_usage_mb", "request_count"}
    assert all(type(value) is int for value in payload.values())
    assert 0 <= payload["cpu_usage"] <= 99
    assert 0 <= payload["latency_ms"] <= 299
    assert 100 <= payload["memory_usage_mb"] <= 3999


def test_first_two_requests_count_one_then_two(client):
    assert client.get("/metrics").json()["request_count"] == 1
    assert client.get("/metrics").json()["request_count"] == 2


def test_sequential_requests_have_no_gaps_or_repeats(client, app):
    counts = [client.get("/metrics").json()["request_count"] for _ in range(25)]

    assert counts == list(range(1, 26))
    assert app.state.counter.value == 25


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "OPTIONS", "TRACE", "PROPFIND"])
def test_any_method_is_served_and_counted(client, method):
    response = client.request(method, "/metrics")

    assert response.status_code == 200
    assert response.json()["request_count"] == 1


def test_values_stay_in_range_across_many_responses(client):
    for _ in range(200):
        payload = client.get("/metrics").json()
        assert 0 <= payload["cpu_usage"] <= 99
        assert 0 <= payload["latency_ms"] <= 299
        assert 100 <= payload["memory_usage_mb"] <= 3999


def test_request_logs_include_service_time(client, caplog):
    with caplog.at_level(logging.INFO, logger="metrics"):
        client.get("/metrics")

    messages = [record.getMessage() for record in caplog.records]
    assert "Handling /metrics request" in messages
    assert any(re.fullmatch(r"Metrics served in [0-9.]+(ns|µs|ms|s)", message) for message in messages)


def test_request_id_is_echoed(client):
    response = client.get("/metrics", headers={"X-Request-ID": "dash-1"})

    assert response.headers["x-request-id"] == "dash-1"
    assert client.get("/metrics").headers["x-request-id"]


class _NaNGenerator(MetricsGenerator):
    def generate(self, request_count: int) -> MetricsSnapshot:
        return MetricsSnapshot(
            cpu_usage_percent=float("nan"),  # type: ignore[arg-type]
            latency_milliseconds=1,
            memory_usage_megabytes=100,
            request_count=request_count,
        )


def test_encoding_failure_returns_generic_500(settings, logger, caplog):
    counter = RequestCounter()
    app = create_app(settings, logger=logger, counter=counter, generator=_NaNGenerator(seed=1))

    with TestClient(app) as client, caplog.at_level(logging.ERROR, logger="metrics"):
        response = client.get("/metrics")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert response.headers["content-type"].startswith("text/plain")
    assert "access-control-allow-origin" not in response.headers
    assert counter.value == 1

    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert any(record.getMessage().startswith("Failed to encode metrics response:") for record in errors)
    assert any(record.exc_info and record.exc_info[0] is ValueError for record in errors)


class _BrokenGenerator(MetricsGenerator):
    def generate(self, request_count: int) -> MetricsSnapshot:
        raise RuntimeError("random source unavailable")


def test_unexpected_errors_return_generic_json_500(settings, logger, caplog):
    app = create_app(settings, logger=logger, generator=_BrokenGenerator(seed=1))
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="metrics"):
        response = client.get("/metrics")

    assert response.status_code == 500
    assert response.json() == {
        "error": "internal_error",
        "message": "Something unexpected happened. Please try again later.",
    }
    assert "random source unavailable" not in response.text
    assert any(
        record.getMessage() == "Unhandled exception on GET /metrics" for record in caplog.records
    )
