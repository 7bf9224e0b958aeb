from time import perf_counter

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health(request: Request):
    settings = request.app.state.settings
    return {"status": "ok", "service": settings.PROJECT_NAME, "version": settings.PROJECT_VERSION}


@router.get("/_health/db", status_code=status.HTTP_200_OK)
async def health_db(request: Request):
    db: DatabaseSessionFactory = request.app.state.db
    t0 = perf_counter()
    try:
        async with db.create_session() as s:
            await s.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "ok": False,
                "checks": {"db": "SELECT 1 failed"},
                "error": type(e).__name__,
            },
        )
    dt_ms = int((perf_counter() - t0) * 1000)
    return {"ok": True, "checks": {"db_select_1_ms": dt_ms}}
