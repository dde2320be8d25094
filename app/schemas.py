"""Pydantic request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from code_quality_checker.utils import KNOWN_LANGUAGES


# --- Request ---


class AnalyzeRequest(BaseModel):
    """Request body for snippet analysis. Both fields are required and must be non-empty."""

    code: Optional[str] = Field(default=None, description="Source code to analyze")
    language: Optional[str] = Field(default=None, description=f"Language tag: {', '.join(KNOWN_LANGUAGES)} or any other")

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        missing = []
        if not self.code:
            missing.append("code")
        if not self.language:
            missing.append("language")
        return missing


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single code quality issue."""

    type: str = Field(..., description="warning or suggestion")
    title: str
    message: str = Field(..., description="'Line <N>: <explanation>'")
    line_number: int = Field(..., ge=1, description="1-based line the issue refers to")


# --- Responses ---


class AnalyzeResponse(BaseModel):
    """Response for POST /analyze and POST /check."""

    warnings: int = Field(..., ge=0)
    suggestions: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    issues: List[IssueOut] = Field(default_factory=list)
    suggested_code: Optional[str] = Field(default=None, description="AI-rewritten code, null when unavailable")


class SessionRecordOut(BaseModel):
    """One past analysis in the session log."""

    timestamp: str
    language: str
    total: int
    warnings: int
    suggestions: int


class ReportsResponse(BaseModel):
    """Response for GET /reports (most recent first)."""

    reports: List[SessionRecordOut] = Field(default_factory=list)


class AIStatusResponse(BaseModel):
    """Response for GET /ai-status."""

    available: bool
    reason: str
    api_key_set: bool
    model: str


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
