"""Health domain router.

Liveness string at ``/`` and a database-backed check at ``/health``.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text

from app.core.constants import Routes
from app.core.deps import SessionDep

LIVENESS_MESSAGE = "Blood Donation Server is running"

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return LIVENESS_MESSAGE


@router.get("/health")
async def health(session: SessionDep):
    """Health check endpoint with database connectivity verification."""
    try:
        session.exec(text("SELECT 1"))
        return {"status": "ok", "database": "ok"}
    except Exception:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error"},
        )
