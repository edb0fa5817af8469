"""HTTP routers mounted under /api."""

from src.api.analyze import router as analyze_router
from src.api.repos import router as repos_router

__all__ = [
    "analyze_router",
    "repos_router",
]
