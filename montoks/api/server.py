"""API server: runs uvicorn inside the current asyncio event loop."""

from __future__ import annotations

import uvicorn
from loguru import logger

from config.settings import settings


async def run_api_server() -> None:
    """Start uvicorn serving the FastAPI app.

    Uses ``uvicorn.Server.serve()`` which is fully async.
    """
    from montoks.api.app import create_app

    app = create_app(settings)
    config = uvicorn.Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="warning",
        loop="none",  # use the existing event loop
    )
    server = uvicorn.Server(config)
    logger.info(f"Token API starting on http://{settings.api_host}:{settings.api_port}")
    await server.serve()
