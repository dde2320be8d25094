"""Configuration from environment."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_AI_MODEL = "gemini-2.5-flash"
DEFAULT_AI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_CORS_ORIGINS = "https://hgit474.github.io"


def get_ai_api_key() -> str:
    """API key for the code rewrite model. Empty disables AI features."""
    key = os.environ.get("GEMINI_API_KEY", "").strip()
    if not key:
        key = os.environ.get("AI_API_KEY", "").strip()
    return key


def get_ai_model() -> str:
    """Rewrite model. Default: gemini-2.5-flash."""
    return os.environ.get("AI_MODEL", DEFAULT_AI_MODEL).strip() or DEFAULT_AI_MODEL


def get_ai_base_url() -> str:
    """OpenAI-compatible endpoint of the rewrite model."""
    return os.environ.get("AI_BASE_URL", DEFAULT_AI_BASE_URL).strip() or DEFAULT_AI_BASE_URL


def get_ai_temperature() -> float:
    try:
        return float(os.environ.get("AI_TEMPERATURE", "0.3"))
    except ValueError:
        return 0.3


def get_ai_timeout() -> float:
    """Client-side timeout (seconds) for one rewrite request."""
    try:
        return float(os.environ.get("AI_TIMEOUT_SECONDS", "60"))
    except ValueError:
        return 60.0


def get_cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging() -> None:
    """Set up root logging once, at the level named by LOG_LEVEL."""
    level = getattr(logging, get_log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
