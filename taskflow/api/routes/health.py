import logging

from fastapi import APIRouter, Request
from sqlalchemy import text

from taskflow.adapter.repositories.integrity import CONNECTIVITY_ERRORS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(request: Request):
    """Liveness plus a database round trip"""
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        return {"status": "ok", "database": "uninitialized"}

    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except CONNECTIVITY_ERRORS:
        logger.warning("Health check could not reach the database", exc_info=True)
        return {"status": "degraded", "database": "unavailable"}

    return {"status": "ok", "database": "ok"}
