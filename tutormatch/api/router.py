"""
Central API Router

Aggregates all endpoint routers; main.py mounts it under /api.
"""

import logging
from fastapi import APIRouter

from tutormatch.api.availability import router as availability_router
from tutormatch.api.match import router as match_router
from tutormatch.api.search import router as search_router

logger = logging.getLogger(__name__)

api_router = APIRouter()

ROUTERS = [
    match_router,
    search_router,
    availability_router,
]

for router in ROUTERS:
    api_router.include_router(router)
    logger.debug(f"Registered router at {router.prefix}")
