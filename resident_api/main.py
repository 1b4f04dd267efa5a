"""
FastAPI application entry point.
Mounts routes, error handlers, Prometheus metrics; owns the resident registry.
Run: uvicorn resident_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from resident_api import __version__
from resident_api.api.router import api_router
from resident_api.config import Settings, get_settings
from resident_api.core.errors import register_exception_handlers
from resident_api.services.resident_registry import ResidentRegistry

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown logging. Residents live only as long as the process."""
    settings: Settings = app.state.settings
    logger.info("%s starting (environment=%s)", settings.app_name, settings.environment)
    yield
    logger.info("%s stopping; %d resident(s) discarded", settings.app_name, len(app.state.registry))


def create_app(settings: Settings | None = None, registry: ResidentRegistry | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Health check and in-memory resident registry (create, list, delete).",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else ResidentRegistry()

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router)

    return app


app = create_app()
