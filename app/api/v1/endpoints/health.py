"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness proves the database answers.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.dependencies import AppSettings
from app.db.session import DbSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health(settings: AppSettings):
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can we reach the database?"""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
