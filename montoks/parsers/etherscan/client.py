"""Etherscan v2 client: contract creator lookup for the configured chain."""

import httpx
from loguru import logger

from montoks.models.token import Sentinel


class EtherscanClient:
    """Async client for the multichain Etherscan v2 API."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        chain_id: int = 10143,
        timeout: float = 15.0,
    ) -> None:
        self._api_key = api_key
        self._chain_id = chain_id
        self._api_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_contract_creator(self, address: str) -> str:
        """Return the deployer address, or "No Data" on any failure."""
        params = {
            "chainid": self._chain_id,
            "module": "contract",
            "action": "getcontractcreation",
            "contractaddresses": address,
            "apikey": self._api_key,
        }
        try:
            resp = await self._client.get(self._api_url, params=params)
            if resp.status_code != 200:
                logger.debug(f"[ETHERSCAN] HTTP {resp.status_code} for {address[:12]}")
                return Sentinel.NO_DATA.value

            data = resp.json()
            result = data.get("result")
            if data.get("status") != "1" or not isinstance(result, list) or not result:
                logger.debug(f"[ETHERSCAN] Creator not found for {address[:12]}: {data.get('message')}")
                return Sentinel.NO_DATA.value

            creator = result[0].get("contractCreator")
            return creator or Sentinel.NO_DATA.value
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning(f"[ETHERSCAN] Creator lookup failed for {address[:12]}: {e}")
            return Sentinel.NO_DATA.value
