# -*- coding: utf-8 -*-
"""
FastAPI API for the release notes service.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import __version__
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestIDMiddleware
from .models import FormatRequest, FormatResponse, HealthResponse
from .pipeline import release_notes_pipeline

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info("Starting release notes service", extra={"version": __version__})
    yield
    logger.info("Shutting down release notes service")


app = FastAPI(
    title="Release Notes Service",
    description="Reduces markdown release bodies to plain-text release notes",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


def _check_body_length(body: str | None) -> None:
    limit = settings.MAX_BODY_LENGTH
    if limit > 0 and body is not None and len(body) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Release body exceeds {limit} characters",
        )


def _format(request: FormatRequest) -> FormatResponse:
    result = release_notes_pipeline.process(request.body)
    return FormatResponse(
        notes=result.notes,
        has_content=result.has_content,
        line_count=len(result.lines),
        steps_applied=result.steps_applied,
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/format", response_model=FormatResponse)
async def format_notes(request: FormatRequest) -> FormatResponse:
    """
    Format a release body as plain-text release notes.

    - **body**: Raw markdown release body; may be null or blank

    `notes` is null when nothing in the body survives formatting.
    """
    _check_body_length(request.body)

    logger.info(
        "Format request received",
        extra={"body_length": len(request.body or "")},
    )

    response = _format(request)

    logger.info(
        "Format completed",
        extra={
            "has_content": response.has_content,
            "line_count": response.line_count,
        },
    )
    return response


@app.post("/format/batch")
async def format_batch(requests: list[FormatRequest]) -> list[FormatResponse]:
    """
    Format several release bodies.

    Returns a list of FormatResponse in request order.
    """
    if len(requests) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.MAX_BATCH_SIZE} items",
        )
    for request in requests:
        _check_body_length(request.body)

    logger.info("Batch format request", extra={"item_count": len(requests)})

    return [_format(request) for request in requests]
