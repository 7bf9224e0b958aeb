"""
Clinic Service Application
FastAPI app factory wiring config, logging, tracing, persistence and routes
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# registers every table on Base.metadata before create_all runs
import clinic.infrastructure.persistence.models  # noqa: F401
from clinic.api.routes import router as clinic_router
from shared.api.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from shared.config import Settings, get_settings
from shared.exceptions import register_exception_handlers
from shared.health import router as health_router
from shared.infrastructure.database import DatabaseSessionFactory
from shared.infrastructure.observability import configure_logging, configure_tracer, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    db: DatabaseSessionFactory = app.state.db

    if settings.AUTO_MIGRATE:
        await db.create_all()
    logger.info(
        "Clinic service started",
        environment=settings.ENVIRONMENT,
        version=settings.PROJECT_VERSION,
    )
    try:
        yield
    finally:
        await db.dispose()
        logger.info("Clinic service stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.json_logs)
    configure_tracer(service_name=settings.SERVICE_NAME, enabled=settings.TRACING_ENABLED)

    app = FastAPI(
        title="Clinic Service API",
        version=settings.PROJECT_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = DatabaseSessionFactory(
        database_url=settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )

    # Middleware: the last one added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(health_router)
    app.include_router(clinic_router, prefix=settings.API_V1_STR)

    # Centralized error handling → {code, message, details?, correlation_id?}
    register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": "Clinic Service API",
            "docs": "/docs",
            "health": "/health",
        }

    return app
