"""
FastAPI Application Entry Point

Tutor matching service: ranking, search and weekly availability editing.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tutormatch.api import api_router, API_VERSION
from tutormatch.constants import TRACE_HEADER_NAME, normalize_trace_id
from tutormatch.core.config import settings, is_production
from tutormatch.core.errors import AppError
from tutormatch.core.logging import setup_logging, set_trace_id, get_trace_id
from tutormatch.tools import tutor_store_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup logging; close the tutor store client on shutdown."""
    setup_logging()
    logger.info("Tutor matching service starting up...")

    yield

    logger.info("Tutor matching service shutting down...")
    await tutor_store_client.aclose_client()
    logger.info("Tutor matching service shutdown complete")


app = FastAPI(
    title="Tutor Matching Service",
    description="Tutor ranking, search and weekly availability editing",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production() else "/docs",
    redoc_url=None if is_production() else "/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def trace_id_middleware(request: Request, call_next):
    """Bind x-request-id (or a fresh uuid) to the request's logging context."""
    trace_id = normalize_trace_id(request.headers.get(TRACE_HEADER_NAME))
    set_trace_id(trace_id)
    response = await call_next(request)
    response.headers[TRACE_HEADER_NAME] = trace_id
    return response


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    trace_id = get_trace_id()
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(trace_id=None if trace_id == "-" else trace_id)
    )


app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "service": "Tutor Matching Service",
        "status": "running",
        "version": API_VERSION
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "tutormatch",
        "components": {
            "api": "ok",
            "matching": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
