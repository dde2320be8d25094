"""AI service status checking."""

import threading
import time
from typing import Any, Callable, Dict, Optional

import openai

from .config import get_ai_api_key, get_ai_model
from .services.ai import build_client

CACHE_TTL = 30.0  # seconds
PLACEHOLDER_KEYS = ("your_api_key_here",)


def _status(available: bool, reason: str, api_key_set: bool) -> Dict[str, Any]:
    return {
        "available": available,
        "reason": reason,
        "api_key_set": api_key_set,
        "model": get_ai_model(),
    }


def _failure_reason(exc: Exception) -> str:
    """Map a failed probe request to a short user-facing reason."""
    if isinstance(exc, openai.AuthenticationError):
        return "GEMINI_API_KEY is invalid or expired"
    if isinstance(exc, openai.APITimeoutError):
        return "API request timed out (check network)"
    if isinstance(exc, openai.APIConnectionError):
        return "Could not reach the AI endpoint (check AI_BASE_URL)"
    return f"API test failed: {str(exc)[:100]}"


class AIStatusCache:
    """Availability of the rewrite model, probed with a one-token request.

    Probe results are cached for ``ttl`` seconds. Missing or placeholder keys
    are reported without a request and are not cached.
    """

    def __init__(
        self,
        ttl: float = CACHE_TTL,
        client_factory: Callable[[], Optional[Any]] = build_client,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._client_factory = client_factory
        self._clock = clock
        self._lock = threading.Lock()
        self._cached: Optional[Dict[str, Any]] = None
        self._cached_at = 0.0

    def get(self) -> Dict[str, Any]:
        key = get_ai_api_key()
        if not key:
            return _status(False, "GEMINI_API_KEY not set", False)
        if key in PLACEHOLDER_KEYS or key.startswith("your_api_key"):
            return _status(False, "GEMINI_API_KEY not configured (still using placeholder)", True)

        with self._lock:
            if self._cached is not None and self._clock() - self._cached_at < self.ttl:
                return dict(self._cached)
            status = self._probe()
            self._cached = status
            self._cached_at = self._clock()
            return dict(status)

    def reset(self) -> None:
        with self._lock:
            self._cached = None
            self._cached_at = 0.0

    def _probe(self) -> Dict[str, Any]:
        client = self._client_factory()
        if client is None:
            return _status(False, "GEMINI_API_KEY not set", False)
        try:
            client.chat.completions.create(
                model=get_ai_model(),
                messages=[{"role": "user", "content": "test"}],
                max_tokens=1,
            )
        except Exception as exc:
            return _status(False, _failure_reason(exc), True)
        return _status(True, "AI features available", True)


ai_status_cache = AIStatusCache()


def get_ai_status() -> Dict[str, Any]:
    """Check rewrite model availability and return status info."""
    return ai_status_cache.get()
