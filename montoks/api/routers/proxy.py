"""Direct pass-through endpoints to Monorail categories and Blockvision."""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from montoks.api.dependencies import get_blockvision, get_monorail
from montoks.parsers.blockvision.client import BlockvisionClient
from montoks.parsers.monorail.client import TOKEN_CATEGORIES, MonorailClient

router = APIRouter(prefix="/api", tags=["proxy"])


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("/tokens/category/{category}")
async def tokens_by_category(
    category: str,
    address: str | None = Query(None, max_length=64),
    monorail: MonorailClient = Depends(get_monorail),
) -> Any:
    if category not in TOKEN_CATEGORIES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid category")

    tokens = await monorail.get_category_tokens(category, address)
    if tokens is None:
        raise _server_error("Failed to fetch tokens by category")
    return tokens


async def _forward(client: BlockvisionClient, path: str, params: dict[str, Any], what: str) -> Any:
    try:
        return await client.get_raw(path, params)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"[PROXY] Blockvision {what} failed: {e}")
        raise _server_error(f"Failed to fetch {what}") from e


@router.get("/blockvision/token/gating")
async def token_gating(
    account_address: str | None = Query(None, alias="accountAddress"),
    token_address: str | None = Query(None, alias="tokenAddress"),
    blockvision: BlockvisionClient = Depends(get_blockvision),
) -> Any:
    if not account_address or not token_address:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing accountAddress or tokenAddress parameters",
        )
    params = {"accountAddress": account_address, "tokenAddress": token_address}
    return await _forward(blockvision, "/token/gating", params, "token gating data")


@router.get("/blockvision/token/{address}/holders")
async def token_holders(
    address: str,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    blockvision: BlockvisionClient = Depends(get_blockvision),
) -> Any:
    params = {"contractAddress": address, "pageIndex": page, "pageSize": limit}
    return await _forward(blockvision, "/token/holders", params, "token holders")


@router.get("/blockvision/token/{address}/detail")
async def token_detail(
    address: str,
    blockvision: BlockvisionClient = Depends(get_blockvision),
) -> Any:
    return await _forward(blockvision, "/token/detail", {"address": address}, "token detail")
