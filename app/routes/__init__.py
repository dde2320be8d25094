"""Route handlers."""

from .analyze import router as analyze_router
from .check import router as check_router
from .health import router as health_router
from .reports import router as reports_router
from .root import router as root_router

__all__ = ["root_router", "health_router", "check_router", "analyze_router", "reports_router"]
