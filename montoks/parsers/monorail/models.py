"""Pydantic models for Monorail market-data API responses."""

from pydantic import BaseModel


class MonorailToken(BaseModel):
    """Response from /token/{address}. Every field is optional upstream."""

    address: str | None = None
    name: str | None = None
    symbol: str | None = None
    logo: str | None = None
    decimals: int | None = None
    totalSupply: str | None = None
    usd_per_token: str | None = None
    mon_per_token: str | None = None
    categories: list[str] | None = None

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}
