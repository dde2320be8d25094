"""
In-memory history of past analyses, most recent first.
"""

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Deque, List, Optional

from .report import Report

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class SessionRecord:
    """Summary of one analysis. The report itself is not kept."""
    timestamp: str
    language: str
    total: int
    warnings: int
    suggestions: int


class SessionLog:
    """Append-only, process-scoped list of session records.

    Safe to share between request threads: ``record`` and ``list`` run under
    one lock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._records: Deque[SessionRecord] = deque()
        self._lock = threading.Lock()
        self._clock = clock or datetime.now

    def record(self, language: str, report: Report) -> SessionRecord:
        """Prepend a summary of ``report``."""
        entry = SessionRecord(
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            language=language,
            total=report.total,
            warnings=report.warnings,
            suggestions=report.suggestions,
        )
        with self._lock:
            self._records.appendleft(entry)
        return entry

    def list(self) -> List[SessionRecord]:
        """Snapshot of all records, most recent first."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
