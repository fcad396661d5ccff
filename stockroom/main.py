"""Stockroom — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from stockroom.core.config import settings
from stockroom.core.exceptions import register_exception_handlers
from stockroom.db.base import engine, init_db
from stockroom.middleware.method_override import MethodOverrideMiddleware
from stockroom.middleware.request_log import RequestLogMiddleware
from stockroom.routers.products import router as products_router
from stockroom.routers.suppliers import router as suppliers_router
from stockroom.schemas.common import HealthResponse


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.db_auto_create:
        await init_db()
    yield


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # --- Middleware (last added runs first: override before logging) ---
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(MethodOverrideMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Pages ---
    app.include_router(suppliers_router)
    app.include_router(products_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(
            app=settings.app_name, env=settings.app_env, database=engine.dialect.name
        )

    return app


app = create_app()
