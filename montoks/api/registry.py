"""Singleton registry for the provider clients and analyzer used by the API.

Populated once in the app lifespan. Routers read these references through
``montoks.api.dependencies``; safe because everything runs in one event loop.
"""

from __future__ import annotations

from loguru import logger

from config.settings import Settings
from montoks.parsers.analyzer import TokenAnalyzer
from montoks.parsers.blockvision.client import BlockvisionClient
from montoks.parsers.cache import TokenCache
from montoks.parsers.etherscan.client import EtherscanClient
from montoks.parsers.monorail.client import MonorailClient
from montoks.parsers.rpc.client import RpcClient


class ServiceRegistry:
    """Holds references to runtime objects for API access."""

    monorail: MonorailClient | None = None
    blockvision: BlockvisionClient | None = None
    etherscan: EtherscanClient | None = None
    rpc: RpcClient | None = None
    analyzer: TokenAnalyzer | None = None

    def init(self, settings: Settings) -> None:
        timeout = settings.http_timeout_sec
        self.monorail = MonorailClient(
            settings.monorail_api_base, settings.monorail_identifier, timeout=timeout
        )
        self.blockvision = BlockvisionClient(
            settings.blockvision_api_base, settings.blockvision_api_key, timeout=timeout
        )
        self.etherscan = EtherscanClient(
            settings.etherscan_api_base,
            settings.etherscan_api_key,
            chain_id=settings.chain_id,
            timeout=timeout,
        )
        self.rpc = RpcClient(settings.rpc_url, timeout=timeout)
        self.analyzer = TokenAnalyzer(
            self.monorail,
            self.blockvision,
            self.etherscan,
            TokenCache(settings.cache_max_entries, settings.cache_ttl_sec),
            holders_page_size=settings.holders_page_size,
            holders_max_pages=settings.holders_max_pages,
            holders_page_delay=settings.holders_page_delay_sec,
        )
        logger.info(f"[REGISTRY] Services ready (chain_id={settings.chain_id})")

    async def close(self) -> None:
        for client in (self.monorail, self.blockvision, self.etherscan, self.rpc):
            if client is not None:
                await client.close()
        self.monorail = self.blockvision = self.etherscan = self.rpc = None
        self.analyzer = None


registry = ServiceRegistry()
