"""Services for checker and AI integration."""

from .checker import CheckerService, record_to_out, report_to_out
from .ai import AIService

__all__ = ["CheckerService", "AIService", "report_to_out", "record_to_out"]
