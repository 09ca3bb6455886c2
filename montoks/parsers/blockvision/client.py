"""Blockvision indexer API client: token detail, holders, raw pass-through."""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from montoks.parsers.blockvision.models import BlockvisionHoldersPage, BlockvisionTokenDetail


class BlockvisionClient:
    """Async HTTP client for Blockvision (x-api-key auth)."""

    def __init__(self, base_url: str, api_key: str = "", timeout: float = 15.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"accept": "application/json", "x-api-key": api_key},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def get_token_detail(self, address: str) -> BlockvisionTokenDetail:
        """Fetch token metadata. Returns ``code=-1`` detail when unavailable."""
        try:
            resp = await self._client.get("/token/detail", params={"address": address})
            if resp.status_code != 200:
                logger.debug(f"[BLOCKVISION] detail HTTP {resp.status_code} for {address[:12]}")
                return BlockvisionTokenDetail()
            return BlockvisionTokenDetail.model_validate(resp.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"[BLOCKVISION] Detail fetch failed for {address[:12]}: {e}")
            return BlockvisionTokenDetail()

    async def get_holders_page(
        self, address: str, page_index: int, page_size: int,
    ) -> BlockvisionHoldersPage | None:
        """Fetch one page of holders. None on HTTP error or ``code != 0``."""
        params = {
            "contractAddress": address,
            "pageIndex": page_index,
            "pageSize": page_size,
        }
        try:
            resp = await self._client.get("/token/holders", params=params)
            if resp.status_code != 200:
                logger.debug(f"[BLOCKVISION] holders HTTP {resp.status_code} page={page_index}")
                return None
            data = resp.json()
            result = data.get("result") if isinstance(data, dict) else None
            if data.get("code") != 0 or not isinstance(result, dict) or result.get("data") is None:
                logger.debug(f"[BLOCKVISION] Invalid holders payload on page {page_index}")
                return None
            return BlockvisionHoldersPage.model_validate(result)
        except (httpx.HTTPError, ValueError, AttributeError, ValidationError) as e:
            logger.warning(f"[BLOCKVISION] Holders page {page_index} failed for {address[:12]}: {e}")
            return None

    async def get_raw(self, path: str, params: dict[str, Any]) -> Any:
        """Forward a GET to Blockvision and return the decoded JSON body as-is.

        Raises ``httpx.HTTPError`` / ``ValueError``; proxy routes map those to 500.
        """
        resp = await self._client.get(path, params=params)
        return resp.json()
