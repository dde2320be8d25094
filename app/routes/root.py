"""Root route."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root() -> dict:
    """Root: service banner."""
    return {"message": "Code Quality Assistant is running!"}
