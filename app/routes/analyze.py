"""Analyze routes (rules + AI suggested code)."""

from fastapi import APIRouter
from fastapi.responses import Response

from ..report_formatter import format_markdown_report
from ..schemas import AnalyzeRequest, AnalyzeResponse, ErrorDetail
from ..services import report_to_out
from ..utils import run_analysis

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse, responses={400: {"model": ErrorDetail}})
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    """Full analysis: rule-based issues plus AI suggested code when available."""
    return report_to_out(run_analysis(req))


@router.post("/analyze/download", responses={400: {"model": ErrorDetail}})
def analyze_download(req: AnalyzeRequest) -> Response:
    """Full analysis rendered as a Markdown attachment."""
    report = run_analysis(req)
    body = format_markdown_report(report, req.language)
    return Response(
        content=body,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="code-quality-report.md"'},
    )
