#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.matcher.exceptions import (
    MatchingError,
    FamilyNotFoundError,
    CaregiverNotFoundError,
    IdempotencyConflictError,
)

logger = logging.getLogger(__name__)


async def matching_exception_handler(
    request: Request,
    exc: MatchingError
) -> JSONResponse:
    """
    Handle domain errors raised by the matching services.

    Not-found errors map to 404 and a reused idempotency key to 409;
    everything else (including datastore failures) maps to 500 with the
    underlying message.
    """
    status_code = 500
    if isinstance(exc, IdempotencyConflictError):
        status_code = 409
        logger.warning(f"{request.url.path}: {exc}")
    elif isinstance(exc, (FamilyNotFoundError, CaregiverNotFoundError)):
        status_code = 404
        logger.warning(f"{request.url.path}: {exc}")
    else:
        logger.error(f"Matching error in {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with a generic error message.
    """
    logger.error(f"Unexpected error in {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
