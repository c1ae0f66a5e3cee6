"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error handlers, per-app DB engine.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.error_handlers import register_error_handlers
from app.api.v1.router import api_router
from app.config import Settings, get_settings
from app.core.observability import setup_logging
from app.db.session import build_engine, build_session_maker

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log where we're pointed. Shutdown: release pooled connections."""
    logger.info("Starting %s", app.state.settings.app_name)
    yield
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app around an explicit Settings. Each app owns its own engine."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Items, reviews and comments with token auth and author-only edits.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_maker = build_session_maker(app.state.engine)

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
