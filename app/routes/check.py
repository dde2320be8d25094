"""Check route (rules-only analysis)."""

from fastapi import APIRouter

from ..schemas import AnalyzeRequest, AnalyzeResponse, ErrorDetail
from ..services import report_to_out
from ..utils import run_check

router = APIRouter()


@router.post("/check", response_model=AnalyzeResponse, responses={400: {"model": ErrorDetail}})
def check(req: AnalyzeRequest) -> AnalyzeResponse:
    """Rules-only analysis. No AI; suggested_code is always null."""
    return report_to_out(run_check(req))
