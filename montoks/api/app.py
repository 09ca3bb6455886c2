"""FastAPI application factory for the token analysis API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from montoks.api.middleware import SecurityHeadersMiddleware
from montoks.api.registry import registry


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        registry.init(settings)
        try:
            yield
        finally:
            await registry.close()

    app = FastAPI(
        title="Montoks Token Analysis API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Import and include routers
    from montoks.api.routers.health import router as health_router
    from montoks.api.routers.network import router as network_router
    from montoks.api.routers.proxy import router as proxy_router
    from montoks.api.routers.tokens import router as tokens_router

    app.include_router(health_router)
    app.include_router(network_router)
    app.include_router(tokens_router)
    app.include_router(proxy_router)

    return app
