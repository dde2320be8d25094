"""Checker service: wraps code_quality_checker and maps to API models."""

from code_quality_checker.analyzer import CodeQualityAnalyzer
from code_quality_checker.report import Report
from code_quality_checker.session_log import SessionLog, SessionRecord
from deps import List, Optional, logging
from ..schemas import AnalyzeResponse, SessionRecordOut

logger = logging.getLogger(__name__)


def report_to_out(report: Report) -> AnalyzeResponse:
    return AnalyzeResponse(**report.to_dict())


def record_to_out(record: SessionRecord) -> SessionRecordOut:
    return SessionRecordOut(
        timestamp=record.timestamp,
        language=record.language,
        total=record.total,
        warnings=record.warnings,
        suggestions=record.suggestions,
    )


class CheckerService:
    """Wraps CodeQualityAnalyzer and the session log for use by the API."""

    def __init__(
        self,
        analyzer: Optional[CodeQualityAnalyzer] = None,
        session_log: Optional[SessionLog] = None,
    ):
        self.analyzer = analyzer or CodeQualityAnalyzer()
        self.session_log = session_log if session_log is not None else SessionLog()

    def analyze_code(self, code: str, language: str) -> Report:
        """Run rule-based checks on raw code and record the result in the session log."""
        report = self.analyzer.analyze(code, language)
        self.session_log.record(language, report)
        logger.info(
            "Recorded %s analysis: %d issue(s) (%d warning(s), %d suggestion(s))",
            language, report.total, report.warnings, report.suggestions,
        )
        return report

    def list_reports(self) -> List[SessionRecordOut]:
        """Session log, most recent first."""
        return [record_to_out(r) for r in self.session_log.list()]
