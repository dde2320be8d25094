"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from .config import get_ai_api_key, get_ai_model

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Warn if .env or the AI API key is missing. The service still starts; only code rewrites are disabled."""
    env_file = Path(".env")
    env_exists = env_file.exists()
    key_set = bool(get_ai_api_key())
    if not env_exists and not key_set:
        logger.warning(".env file not found and GEMINI_API_KEY not set. Suggested code will be disabled.")
    elif not key_set:
        logger.warning("GEMINI_API_KEY not set. Suggested code will be disabled.")
    else:
        logger.info("AI code rewrites enabled (model: %s)", get_ai_model())
