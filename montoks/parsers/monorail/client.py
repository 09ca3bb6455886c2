"""Monorail API client: market data, token categories and MON price."""

from decimal import Decimal, InvalidOperation
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from montoks.parsers.monorail.models import MonorailToken

TOKEN_CATEGORIES = frozenset({"wallet", "verified", "stable", "lst", "bridged", "meme"})


class MonorailClient:
    """Async HTTP client for the Monorail testnet API.

    Every method swallows transport and payload errors and returns an empty
    sentinel so callers can run it alongside other providers.
    """

    def __init__(self, base_url: str, identifier: str = "", timeout: float = 15.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"X-Public-Identifier": identifier},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def get_token(self, address: str) -> MonorailToken:
        """Fetch market data for a token. Empty model when unavailable."""
        try:
            resp = await self._client.get(f"/token/{address}")
            if resp.status_code != 200:
                logger.debug(f"[MONORAIL] HTTP {resp.status_code} for {address[:12]}")
                return MonorailToken()
            return MonorailToken.model_validate(resp.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"[MONORAIL] Token fetch failed for {address[:12]}: {e}")
            return MonorailToken()

    async def get_category_tokens(
        self, category: str, address: str | None = None,
    ) -> list[dict[str, Any]] | None:
        """List tokens in a category, optionally with balances for ``address``.

        Items are returned exactly as Monorail sends them.
        """
        params = {"address": address} if address else None
        try:
            resp = await self._client.get(f"/tokens/category/{category}", params=params)
            if resp.status_code != 200:
                logger.debug(f"[MONORAIL] HTTP {resp.status_code} for category {category}")
                return None
            data = resp.json()
            if not isinstance(data, list):
                logger.warning(f"[MONORAIL] Category {category}: unexpected payload")
                return None
            return data
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"[MONORAIL] Category {category} fetch failed: {e}")
            return None

    async def get_symbol_price(self, pair: str = "MONUSD") -> Decimal | None:
        """Latest price for a trading pair such as MONUSD."""
        try:
            resp = await self._client.get(f"/symbol/{pair}")
            if resp.status_code != 200:
                logger.debug(f"[MONORAIL] HTTP {resp.status_code} for {pair}")
                return None
            return Decimal(str(resp.json().get("price") or "0"))
        except (httpx.HTTPError, ValueError, AttributeError, InvalidOperation) as e:
            logger.warning(f"[MONORAIL] Price fetch failed for {pair}: {e}")
            return None
