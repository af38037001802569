"""
FastAPI main application for the POS backend.

To run: uvicorn pos_backend.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pos_backend.api.v1 import api_router
from pos_backend.core.config import Settings, get_settings
from pos_backend.core.database import Store, get_store
from pos_backend.error_handlers import register_exception_handlers
from pos_backend.logging_config import setup_logging, get_logger
from pos_backend.middleware import RequestLoggingMiddleware
from pos_backend.schemas.health import HealthCheck

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    store: Optional[Store] = getattr(app.state, "store", None)
    owns_store = store is None
    if owns_store:
        if not settings.database_url:
            logger.critical("DATABASE_URL is not set, cannot connect to the database")
            raise RuntimeError("DATABASE_URL is not set")
        store = Store.from_settings(settings)
        app.state.store = store

    if settings.db_create_tables:
        await store.create_all()
    logger.info("Connected to the database")

    yield

    logger.info("Shutting down application...")
    if owns_store:
        await store.dispose()
        app.state.store = None


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build and configure the application.

    Args:
        settings: Settings to use instead of the process-wide ones
        store: Pre-built store client; when omitted one is created from
            ``settings.database_url`` at startup
    """
    settings = settings or get_settings()

    setup_logging(
        settings.log_level,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Point-of-sale backend - product catalog and sales invoices",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )
    app.state.settings = settings
    if store is not None:
        app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/health", response_model=HealthCheck, tags=["Health"])
    async def health_check(store: Store = Depends(get_store)):
        """Simple health check endpoint."""
        database = await store.ping()
        return HealthCheck(
            status="healthy" if database else "degraded",
            version=settings.app_version,
            database=database,
            timestamp=datetime.now(timezone.utc)
        )

    # Client application bundle, served for every non-API path
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory '{static_dir}' not found, client app will not be served")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pos_backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
