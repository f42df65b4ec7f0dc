"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.constants import Routes
from app.core.deps import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@router.get("")
async def health(session: SessionDep):
    """Health check endpoint with database connectivity verification."""
    try:
        session.exec(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check failed: database unreachable", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "database": "error",
                "timestamp": _timestamp(),
            },
        )
    return {"status": "ok", "database": "ok", "timestamp": _timestamp()}
