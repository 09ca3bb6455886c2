"""Pydantic models for Blockvision indexer API responses."""

from pydantic import BaseModel


class BlockvisionTokenInfo(BaseModel):
    contractAddress: str | None = None
    name: str | None = None
    symbol: str | None = None
    logo: str | None = None
    decimals: int | None = None
    totalSupply: str | None = None
    website: str | None = None
    verified: bool = False

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


class BlockvisionTokenDetail(BaseModel):
    """Response from /token/detail. ``code == 0`` means success."""

    code: int = -1
    reason: str = ""
    message: str = ""
    result: BlockvisionTokenInfo | None = None

    model_config = {"extra": "ignore"}

    @property
    def ok(self) -> bool:
        return self.code == 0 and self.result is not None


class BlockvisionHolder(BaseModel):
    """One row of /token/holders. The address key varies between deployments."""

    holder: str | None = None
    accountAddress: str | None = None
    address: str | None = None
    percentage: str | float | None = None
    amount: str | float | None = None
    isContract: bool | None = None

    model_config = {"extra": "ignore"}

    @property
    def effective_address(self) -> str:
        return self.holder or self.accountAddress or self.address or "Unknown"

    @property
    def effective_percentage(self) -> float:
        if self.percentage is None or self.percentage == "":
            return 0.0
        try:
            return float(self.percentage)
        except (TypeError, ValueError):
            return 0.0


class BlockvisionHoldersPage(BaseModel):
    data: list[BlockvisionHolder] = []
    nextPageIndex: int | None = None
    total: int | None = None

    model_config = {"extra": "ignore"}
