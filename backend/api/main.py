"""
backend.api.main

Purpose:
    FastAPI application entrypoint for the local Say Hi service: the origin greeting route
    plus (optionally) the edge relay simulator in front of it.

Usage:
    uvicorn backend.api.main:app

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from fastapi import FastAPI

from backend.api.settings import Settings, get_settings
from backend.api.routes.health import router as health_router
from backend.api.routes.greeting import router as greeting_router

from backend.api.middleware.edge_relay import EdgeRelayMiddleware
from backend.api.middleware.request_id import RequestIdMiddleware
from backend.api.contracts.request_id_policy import RequestIdPolicy

from backend.api.logging.logging_config import configure_logging
from backend.api.error_handlers import register_error_handlers
from backend.origin.failure import RandomFailureInjector


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.state.settings = settings
    app.state.failure_source = RandomFailureInjector(rate=settings.failure_rate)

    @app.get("/")
    def root():
        return {"status": "ok", "service": settings.service_name}

    # Last added runs first: request ids wrap the relay so hook logs carry them.
    if settings.edge_relay_enabled:
        app.add_middleware(EdgeRelayMiddleware, settings=settings)
    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(greeting_router)

    return app


app = create_app()
