# moviecatalog/main.py
from __future__ import annotations

"""
# What To Watch API · Application Entrypoint (FastAPI)

ASGI application factory and lifecycle for the movie catalog backend.

## Design Goals
- Deterministic, testable **app factory** (`create_app(settings)`) with an
  explicit lifespan.
- Explicit **middleware order**: 1) request id → 2) CORS.
- Centralized problem+json exception handling.
- Controllers receive the `Settings` instance; nothing else reads it implicitly.

## Probes
- `/healthz`: liveness (process up).
- `/readyz`: readiness (quick DB check).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# -- Logging bootstrap (Loguru + stdlib intercept) ----------------------------
from moviecatalog.core import logger as _logsetup  # noqa: F401
from moviecatalog.api.routers import build_router
from moviecatalog.core.config import Settings, settings as default_settings
from moviecatalog.core.exception_handlers import install_exception_handlers
from moviecatalog.db.base import Base
from moviecatalog.db.session import async_engine, db_healthcheck
from moviecatalog.middleware.request_id import RequestIDMiddleware


# ─────────────────────────────────────────────────────────────────────────────
# 🔄 Lifespan: startup & shutdown
# ─────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Startup:
        - Verify the database is reachable (abort startup otherwise).
        - Create tables when `DB_CREATE_ALL` is set (dev convenience; use
          Alembic migrations everywhere else).
    Shutdown:
        - Dispose the async engine.
    """
    settings: Settings = app.state.settings
    logger.info(f"✅ {settings.PROJECT_NAME} starting up ({settings.ENV})")

    if not await db_healthcheck():
        raise RuntimeError("Database is not reachable; check DATABASE_URL / DB_* settings")
    logger.info("🔌 Database connection established")

    if settings.DB_CREATE_ALL:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("🧱 Database tables ensured")

    try:
        yield
    finally:
        await async_engine.dispose()
        logger.info("🛑 Database engine disposed")
        logger.info(f"🛑 {settings.PROJECT_NAME} shutting down")


# ─────────────────────────────────────────────────────────────────────────────
# 🏗️ App factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and configure the FastAPI app instance.

    Returns:
        FastAPI: application with middleware, exception handlers, controller
        routers and health/readiness endpoints.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url="/docs" if settings.ENABLE_DOCS else None,
        redoc_url="/redoc" if settings.ENABLE_DOCS else None,
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Middlewares (order matters) ─────────────────────────────────────────
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=3600,
    )

    install_exception_handlers(app)

    # ── Controllers ─────────────────────────────────────────────────────────
    app.include_router(build_router(settings), prefix=settings.API_PREFIX)

    # ── Meta endpoints ──────────────────────────────────────────────────────
    @app.get("/healthz", tags=["meta"])
    async def healthz() -> dict[str, bool]:
        """Liveness probe: `{"ok": true}` while the process is responsive."""
        return {"ok": True}

    @app.get("/readyz", tags=["meta"])
    async def readyz() -> dict[str, object]:
        """Readiness probe (quick `SELECT 1`)."""
        db_ok = await db_healthcheck()
        return {"ready": db_ok, "checks": {"db": db_ok}}

    return app


# ─────────────────────────────────────────────────────────────────────────────
# 🚀 Module-level ASGI app for Uvicorn
# ─────────────────────────────────────────────────────────────────────────────
app = create_app()


def run() -> None:
    """Console entrypoint: serve `moviecatalog.main:app` with uvicorn."""
    import uvicorn

    uvicorn.run(
        "moviecatalog.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=_logsetup.LOG_LEVEL.lower(),
    )


__all__ = ["create_app", "app", "run"]

if __name__ == "__main__":
    run()
