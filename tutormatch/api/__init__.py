"""
API Package - FastAPI Routers

Exports all API routers for main app registration.
"""

from tutormatch.api.router import api_router
from tutormatch.api.match import router as match_router
from tutormatch.api.search import router as search_router
from tutormatch.api.availability import router as availability_router

API_VERSION = "1.0.0"

__all__ = [
    "api_router",
    "match_router",
    "search_router",
    "availability_router",
    "API_VERSION",
]
