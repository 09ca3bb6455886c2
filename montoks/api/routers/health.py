"""Health check: no auth required."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from montoks.api.registry import registry

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    cache_size: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    analyzer = registry.analyzer
    return HealthResponse(
        status="ok" if analyzer is not None else "starting",
        version="0.1.0",
        cache_size=len(analyzer.cache) if analyzer is not None else 0,
    )
