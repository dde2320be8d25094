"""Session log route."""

from fastapi import APIRouter

from ..schemas import ReportsResponse
from ..utils import checker_svc

router = APIRouter()


@router.get("/reports", response_model=ReportsResponse)
def reports() -> ReportsResponse:
    """Past analyses of this process, most recent first."""
    return ReportsResponse(reports=checker_svc.list_reports())
