"""Token analysis pipeline: fan-out to providers, assemble, score, cache.

One request runs four branches concurrently:

    Monorail /token            → market data (price, categories, fallback metadata)
    Blockvision /token/detail  → primary metadata (name, decimals, supply, verified)
    Etherscan creation lookup  → creator address
    Blockvision /token/holders → holder count + top-10 (paginated)

Every branch degrades to a sentinel on failure, so ``asyncio.gather`` never
loses the other three. No retries: each upstream is hit at most once.
"""

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from loguru import logger

from montoks.models.token import (
    LiquidityLock,
    MintAuthority,
    Sentinel,
    TokenRecord,
    Verification,
)
from montoks.parsers.blockvision.client import BlockvisionClient
from montoks.parsers.blockvision.models import BlockvisionTokenDetail
from montoks.parsers.cache import TokenCache
from montoks.parsers.creator import resolve_creator_balance
from montoks.parsers.etherscan.client import EtherscanClient
from montoks.parsers.holders import (
    MAX_PAGES,
    PAGE_DELAY_SEC,
    PAGE_SIZE,
    HolderSummary,
    paginate_holders,
)
from montoks.parsers.monorail.client import MonorailClient
from montoks.parsers.monorail.models import MonorailToken
from montoks.parsers.risk import analyze_risks
from montoks.parsers.supply import format_supply

DEFAULT_DECIMALS = 18

T = TypeVar("T")


def _first(*values: Any) -> Any:
    """First truthy value, else None."""
    for value in values:
        if value:
            return value
    return None


def _to_float(value: str | None) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


async def _safe(coro: Awaitable[T], default: T, label: str) -> T:
    """Await ``coro``; log and return ``default`` on any exception."""
    try:
        return await coro
    except Exception as e:
        logger.warning(f"[ANALYZE] {label} failed: {e}")
        return default


class TokenAnalyzer:
    """Assembles ``TokenRecord`` objects from all providers."""

    def __init__(
        self,
        monorail: MonorailClient,
        blockvision: BlockvisionClient,
        etherscan: EtherscanClient,
        cache: TokenCache | None = None,
        *,
        holders_page_size: int = PAGE_SIZE,
        holders_max_pages: int = MAX_PAGES,
        holders_page_delay: float = PAGE_DELAY_SEC,
    ) -> None:
        self._monorail = monorail
        self._blockvision = blockvision
        self._etherscan = etherscan
        self._cache = cache if cache is not None else TokenCache()
        self._page_size = holders_page_size
        self._max_pages = holders_max_pages
        self._page_delay = holders_page_delay

    @property
    def cache(self) -> TokenCache:
        return self._cache

    async def _holders(self, address: str) -> HolderSummary:
        return await paginate_holders(
            self._blockvision,
            address,
            page_size=self._page_size,
            max_pages=self._max_pages,
            page_delay=self._page_delay,
        )

    async def count_holders(self, address: str) -> int:
        """Total holder count only (no caching, no scoring)."""
        summary = await self._holders(address)
        return summary.total_holders

    async def analyze(self, address: str) -> TokenRecord:
        """Full analysis for a validated contract address. Never raises."""
        try:
            cached = self._cache.get(address)
            if cached is not None:
                logger.debug(f"[ANALYZE] Cache hit for {address[:12]}")
                return cached

            logger.info(f"[ANALYZE] Analyzing token {address}")
            market, detail, creator, holders = await asyncio.gather(
                _safe(self._monorail.get_token(address), MonorailToken(), "Monorail"),
                _safe(
                    self._blockvision.get_token_detail(address),
                    BlockvisionTokenDetail(),
                    "Blockvision detail",
                ),
                _safe(
                    self._etherscan.get_contract_creator(address),
                    Sentinel.NO_DATA.value,
                    "Etherscan",
                ),
                _safe(self._holders(address), HolderSummary(), "Holder pagination"),
            )

            record = self._assemble(address, market, detail, creator, holders)
            self._cache.set(address, record)

            logger.info(
                f"[ANALYZE] Done {address[:12]}: creator={record.creator}, "
                f"creator_balance={record.creator_balance}, "
                f"risk={record.risk_analysis.score}/100"
            )
            return record

        except Exception:
            logger.exception(f"[ANALYZE] Critical error analyzing {address}")
            return TokenRecord.failed(address)

    @staticmethod
    def _assemble(
        address: str,
        market: MonorailToken,
        detail: BlockvisionTokenDetail,
        creator: str,
        holders: HolderSummary,
    ) -> TokenRecord:
        info = detail.result if detail.ok else None

        reported_decimals = info.decimals if info is not None else None
        decimals = (
            reported_decimals
            if reported_decimals is not None and reported_decimals >= 0
            else DEFAULT_DECIMALS
        )
        raw_supply = _first(info and info.totalSupply, market.totalSupply) or "0"
        # Negative decimals make the supply unformattable but keep the rest of the record.
        supply_decimals = reported_decimals if reported_decimals is not None else DEFAULT_DECIMALS

        draft = TokenRecord(
            address=address,
            name=_first(info and info.name, market.name) or Sentinel.ERROR.value,
            symbol=_first(info and info.symbol, market.symbol) or Sentinel.ERROR.value,
            logo=_first(info and info.logo, market.logo),
            price_usd=_to_float(market.usd_per_token),
            price_mon=_to_float(market.mon_per_token),
            total_supply=format_supply(raw_supply, supply_decimals),
            decimals=decimals,
            creator=creator,
            creator_balance=resolve_creator_balance(creator, holders.top_holders),
            holders_count=(
                str(holders.total_holders) if holders.total_holders > 0 else Sentinel.ERROR.value
            ),
            # No mint/LP source is wired for this chain yet.
            mint_authority=MintAuthority.NO_DATA,
            lp_locked=LiquidityLock.NO_DATA,
            verified=(
                Verification.VERIFIED if info is not None and info.verified else Verification.UNVERIFIED
            ),
            categories=market.categories or [],
            top_holders=holders.top_holders,
        )
        return draft.model_copy(update={"risk_analysis": analyze_risks(draft)})
