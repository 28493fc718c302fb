"""
Test cases for the /check HTTP endpoint.
"""

import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

import config
from server import app, configure_logging


@pytest.fixture
def client():
    return TestClient(app)


class TestCheckEndpoint:
    """Test the analysis endpoint end to end."""

    def test_weak_password(self, client):
        response = client.post("/check", json={"password": "password"})

        assert response.status_code == 200
        body = response.json()
        assert body["strength"] == "weak"
        assert body["score"] == 29
        assert body["crack_time"] == "21 seconds"
        assert [c["id"] for c in body["checks"]] == [
            "length", "length-strong", "uppercase", "lowercase", "number", "symbol", "no-common",
        ]
        assert len(body["suggestions"]) == 5
        assert body["explanation"].startswith("Your password meets only 2 of 7")

    def test_strong_password(self, client):
        response = client.post("/check", json={"password": "Zebra!Cloud9x"})

        assert response.status_code == 200
        body = response.json()
        assert body["strength"] == "strong"
        assert body["score"] == 100
        assert body["suggestions"] == []
        assert all(c["passed"] for c in body["checks"])

    def test_empty_password(self, client):
        response = client.post("/check", json={"password": ""})

        assert response.status_code == 200
        assert response.json()["crack_time"] == "Instantly"

    def test_response_does_not_echo_password(self, client):
        response = client.post("/check", json={"password": "Tr0ub4dor&3"})

        assert response.status_code == 200
        assert "Tr0ub4dor&3" not in response.text

    def test_password_too_long(self, client):
        response = client.post("/check", json={"password": "a" * (config.MAX_PASSWORD_LENGTH + 1)})

        assert response.status_code == 400
        assert response.json() == {"detail": "password too long"}

    def test_max_length_is_accepted(self, client):
        response = client.post("/check", json={"password": "a" * config.MAX_PASSWORD_LENGTH})

        assert response.status_code == 200
        assert response.json()["crack_time"] == "Centuries"

    @pytest.mark.parametrize("payload", [{}, {"password": 123}, {"password": None}])
    def test_invalid_payload(self, client, payload):
        response = client.post("/check", json=payload)

        assert response.status_code == 422


class TestRequestLogging:
    """Test the structured log events emitted by /check."""

    def test_analysis_event_omits_password(self, client):
        with capture_logs() as logs:
            response = client.post("/check", json={"password": "Tr0ub4dor&3"})

        assert response.status_code == 200
        events = [e for e in logs if e["event"] == "password analyzed"]
        assert len(events) == 1
        event = events[0]
        assert event["log_level"] == "info"
        assert event["length"] == 11
        assert event["score"] == 86
        assert event["strength"] == "strong"
        assert event["passed"] == 6
        assert all("Tr0ub4dor&3" not in str(value) for e in logs for value in e.values())

    def test_rejection_event_omits_password(self, client):
        password = "Zq9!" * (config.MAX_PASSWORD_LENGTH // 4 + 1)
        with capture_logs() as logs:
            response = client.post("/check", json={"password": password})

        assert response.status_code == 400
        events = [e for e in logs if e["event"] == "password rejected"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert events[0]["reason"] == "too long"
        assert events[0]["length"] == len(password)
        assert not any(e["event"] == "password analyzed" for e in logs)
        assert all("Zq9!Zq9!" not in str(value) for e in logs for value in e.values())


class TestConfigureLogging:
    """Test log level validation."""

    @pytest.mark.parametrize("level", ["verbose", "LOUD", ""])
    def test_unknown_level_raises(self, level):
        with pytest.raises(ValueError, match="unknown log level"):
            configure_logging(level=level)

    @pytest.mark.parametrize("level", ["debug", "INFO", "warning"])
    def test_level_names_are_case_insensitive(self, level):
        try:
            configure_logging(level=level)
        finally:
            configure_logging()
