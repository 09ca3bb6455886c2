"""Network stats: gas price and MON/USD price."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from montoks.api.dependencies import get_monorail, get_rpc
from montoks.parsers.monorail.client import MonorailClient
from montoks.parsers.rpc.client import RpcClient

router = APIRouter(prefix="/api", tags=["network"])


@router.get("/gas-price")
async def gas_price(rpc: RpcClient = Depends(get_rpc)) -> dict[str, str]:
    price = await rpc.get_gas_price()
    if price is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch gas price",
        )
    return {"gasPrice": f"{price.gwei:.2f}", "gasPriceWei": str(price.wei)}


@router.get("/mon-price")
async def mon_price(monorail: MonorailClient = Depends(get_monorail)) -> dict[str, str]:
    price = await monorail.get_symbol_price("MONUSD")
    if price is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch MON price",
        )
    return {"price": f"{price:.4f}"}
