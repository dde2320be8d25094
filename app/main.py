"""FastAPI app: /, /health, /ai-status, /check, /analyze, /reports."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, get_cors_origins, get_host, get_port
from .routes import analyze_router, check_router, health_router, reports_router, root_router
from .startup import validate_config

configure_logging()

app = FastAPI(
    title="Code Quality Assistant API",
    description="Line-based code quality checks plus AI suggested rewrites.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(check_router)
app.include_router(analyze_router)
app.include_router(reports_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Validate config at startup and warn if .env or the AI API key is missing."""
    validate_config()


def main() -> None:
    """Entry point for the code-quality-api script."""
    import uvicorn

    uvicorn.run("app.main:app", host=get_host(), port=get_port(), reload=False)


if __name__ == "__main__":
    main()
