"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 200 even without an AI credential; it only reports the mode

Design Decisions:
    - Missing credential degrades chat to fallback replies, so it never fails readiness
"""

import logging
from fastapi import APIRouter, Depends, status

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "ai-tutor-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — reports whether chat uses the live provider."""
    ai_mode = "configured" if settings.ai_configured else "fallback"
    return {"status": "ready", "checks": {"ai_provider": ai_mode}}
