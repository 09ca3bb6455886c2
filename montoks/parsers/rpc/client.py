"""JSON-RPC client: network gas price."""

from dataclasses import dataclass
from decimal import Decimal

import httpx
from loguru import logger

WEI_PER_GWEI = Decimal(10) ** 9


@dataclass(frozen=True)
class GasPrice:
    wei: int

    @property
    def gwei(self) -> Decimal:
        return Decimal(self.wei) / WEI_PER_GWEI


class RpcClient:
    """Minimal async JSON-RPC client for the chain's public endpoint."""

    def __init__(self, rpc_url: str, timeout: float = 10.0) -> None:
        self._rpc_url = rpc_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_gas_price(self) -> GasPrice | None:
        """``eth_gasPrice`` → wei. None when the endpoint is missing or errors."""
        if not self._rpc_url:
            logger.debug("[RPC] No rpc_url configured")
            return None

        payload = {"jsonrpc": "2.0", "method": "eth_gasPrice", "params": [], "id": 1}
        try:
            resp = await self._client.post(self._rpc_url, json=payload)
            if resp.status_code != 200:
                logger.debug(f"[RPC] eth_gasPrice HTTP {resp.status_code}")
                return None

            data = resp.json()
            if data.get("error"):
                logger.warning(f"[RPC] eth_gasPrice error: {data['error'].get('message')}")
                return None
            return GasPrice(wei=int(data["result"], 16))
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"[RPC] eth_gasPrice failed: {e}")
            return None
