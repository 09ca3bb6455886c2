"""Token endpoints: full analysis and holder count."""

from __future__ import annotations

import asyncio
import re
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from config.settings import settings
from montoks.api.dependencies import get_analyzer
from montoks.models.token import TokenRecord
from montoks.parsers.analyzer import TokenAnalyzer

router = APIRouter(prefix="/api/token", tags=["tokens"])

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def validate_address(address: str) -> str:
    """Reject anything that is not a 0x-prefixed 20-byte hex address."""
    if not ADDRESS_RE.match(address):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid contract address format",
        )
    return address


@router.get("/{contract_address}")
async def analyze_token(
    contract_address: str,
    analyzer: TokenAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    """Aggregated token record with risk analysis.

    Partial upstream failures are encoded in sentinel field values; the
    response is 200 unless the address itself is malformed.
    """
    address = validate_address(contract_address)
    try:
        record = await asyncio.wait_for(
            analyzer.analyze(address), timeout=settings.analyze_timeout_sec
        )
    except TimeoutError:
        logger.warning(
            f"[API] Analysis of {address} exceeded {settings.analyze_timeout_sec}s"
        )
        record = TokenRecord.failed(address)
    return record.to_response()


@router.get("/{contract_address}/holders/count")
async def holders_count(
    contract_address: str,
    analyzer: TokenAnalyzer = Depends(get_analyzer),
) -> dict[str, int]:
    address = validate_address(contract_address)
    return {"totalHolders": await analyzer.count_holders(address)}
