"""Tests for the cached AI availability check."""

from types import SimpleNamespace

import httpx
import openai
import pytest

from app.ai_status import AIStatusCache

REQUEST = httpx.Request("POST", "http://ai.test/v1/chat/completions")


class FakeClient:
    def __init__(self, error=None):
        self.calls = 0
        self._error = error
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return SimpleNamespace(choices=[])


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    monkeypatch.delenv("AI_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "real-looking-key-123")


def test_missing_key_skips_request(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY")
    client = FakeClient()
    status = AIStatusCache(client_factory=lambda: client).get()
    assert status["available"] is False
    assert status["api_key_set"] is False
    assert client.calls == 0


def test_placeholder_key_skips_request(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "your_api_key_here")
    client = FakeClient()
    status = AIStatusCache(client_factory=lambda: client).get()
    assert status["available"] is False
    assert status["api_key_set"] is True
    assert "placeholder" in status["reason"]
    assert client.calls == 0


def test_available(monkeypatch):
    monkeypatch.setenv("AI_MODEL", "test-model")
    status = AIStatusCache(client_factory=FakeClient).get()
    assert status == {
        "available": True,
        "reason": "AI features available",
        "api_key_set": True,
        "model": "test-model",
    }


@pytest.mark.parametrize(
    "error, reason",
    [
        (
            openai.AuthenticationError(
                "bad key", response=httpx.Response(401, request=REQUEST), body=None
            ),
            "GEMINI_API_KEY is invalid or expired",
        ),
        (openai.APITimeoutError(request=REQUEST), "API request timed out (check network)"),
        (
            openai.APIConnectionError(request=REQUEST),
            "Could not reach the AI endpoint (check AI_BASE_URL)",
        ),
        (RuntimeError("unexpected"), "API test failed: unexpected"),
    ],
)
def test_failure_reasons(error, reason):
    status = AIStatusCache(client_factory=lambda: FakeClient(error=error)).get()
    assert status["available"] is False
    assert status["api_key_set"] is True
    assert status["reason"] == reason


def test_result_cached_until_ttl_expires():
    client = FakeClient()
    clock = FakeClock()
    cache = AIStatusCache(ttl=30.0, client_factory=lambda: client, clock=clock)

    cache.get()
    clock.now = 29.0
    cache.get()
    assert client.calls == 1

    clock.now = 31.0
    cache.get()
    assert client.calls == 2


def test_reset_forces_new_request():
    client = FakeClient()
    cache = AIStatusCache(client_factory=lambda: client)
    cache.get()
    cache.reset()
    cache.get()
    assert client.calls == 2


def test_returned_status_is_a_copy():
    cache = AIStatusCache(client_factory=FakeClient)
    cache.get()["available"] = False
    assert cache.get()["available"] is True
