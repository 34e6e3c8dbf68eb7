"""API routers for Workflow Board."""

from .columns import router as columns_router
from .workflows import router as workflows_router

__all__ = [
    "columns_router",
    "workflows_router",
]
