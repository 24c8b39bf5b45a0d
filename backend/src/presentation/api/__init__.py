"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.dm import router as dm_router
from src.presentation.api.friends import router as friends_router
from src.presentation.api.metrics import router as metrics_router

__all__ = [
    "dm_router",
    "friends_router",
    "metrics_router",
]
