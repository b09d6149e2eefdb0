#!/usr/bin/env python3
"""
Tavara Matching API - FastAPI Application

Caregiver matching endpoints with automatic API documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.matcher.exceptions import MatchingError
from .config import get_config
from .exceptions import (
    matching_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    assignments_router,
    matches_router,
    caregivers_router
)

# Load configuration
config = get_config()

# Configure logging
logging.basicConfig(
    level=config.logging.level,
    format=config.logging.format
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Tavara Matching API",
    description="Caregiver/family matching and automatic assignment",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS: every origin may call the matching functions, preflight included
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.web.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(MatchingError, matching_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(assignments_router)
app.include_router(matches_router)
app.include_router(caregivers_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "tavara-matching"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Tavara Matching API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
