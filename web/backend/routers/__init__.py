"""API route handlers."""

from .assignments import router as assignments_router
from .matches import router as matches_router
from .caregivers import router as caregivers_router
