"""FastAPI dependency injection: registry lookups."""

from __future__ import annotations

from fastapi import HTTPException, status

from montoks.api.registry import registry
from montoks.parsers.analyzer import TokenAnalyzer
from montoks.parsers.blockvision.client import BlockvisionClient
from montoks.parsers.monorail.client import MonorailClient
from montoks.parsers.rpc.client import RpcClient


def _unavailable(name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"{name} not initialized",
    )


def get_analyzer() -> TokenAnalyzer:
    if registry.analyzer is None:
        raise _unavailable("Analyzer")
    return registry.analyzer


def get_monorail() -> MonorailClient:
    if registry.monorail is None:
        raise _unavailable("Monorail client")
    return registry.monorail


def get_blockvision() -> BlockvisionClient:
    if registry.blockvision is None:
        raise _unavailable("Blockvision client")
    return registry.blockvision


def get_rpc() -> RpcClient:
    if registry.rpc is None:
        raise _unavailable("RPC client")
    return registry.rpc
