"""
FastAPI application entry point.
Mounts routes, CORS and Prometheus middleware, and the centralized error translator.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from skillloop.api.router import api_router
from skillloop.config import get_settings
from skillloop.core.errors import register_exception_handlers
from skillloop.core.logging_config import setup_logging
from skillloop.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("%s starting (environment=%s)", settings.app_name, settings.environment)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Peer skill-exchange marketplace: users, skills and exchange requests.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    register_exception_handlers(app)

    @app.get("/", tags=["health"])
    async def root():
        return {"success": True, "message": "SkillLoop API is running"}

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
