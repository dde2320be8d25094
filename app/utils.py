"""Utility functions for the API."""

from code_quality_checker.report import Report
from deps import HTTPException, logging
from .schemas import AnalyzeRequest
from .services import AIService, CheckerService

logger = logging.getLogger(__name__)

checker_svc = CheckerService()
ai_svc = AIService()


def validate_request(req: AnalyzeRequest) -> None:
    """Reject requests missing code or language (400) before any analysis."""
    missing = req.missing_fields()
    if missing:
        raise HTTPException(
            400,
            f"Missing 'code' or 'language' in request body. Missing: {', '.join(missing)}",
        )


def run_check(req: AnalyzeRequest) -> Report:
    """Validate and run the rule-based checks. No AI."""
    validate_request(req)
    try:
        return checker_svc.analyze_code(req.code, req.language)
    except Exception as exc:
        logger.exception("Analysis failed for %s snippet", req.language)
        raise HTTPException(500, "Analysis failed") from exc


def run_analysis(req: AnalyzeRequest) -> Report:
    """Rule-based checks plus at most one rewrite request. A failed rewrite leaves suggested_code unset."""
    report = run_check(req)
    try:
        suggested = ai_svc.suggest_code(req.code, req.language)
    except Exception:
        logger.warning("Rewrite collaborator raised; returning report without suggested code", exc_info=True)
        suggested = None
    return report.with_suggested_code(suggested)
