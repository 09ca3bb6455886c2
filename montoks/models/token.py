"""Canonical token record assembled from all upstream providers.

Closed vocabularies are str-valued enums so the exact external spellings
("No Data", "SOLD", "Verified", ...) only materialize at JSON serialization.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer

FAILED_ANALYSIS_REASON = "Unable to analyze token due to data fetch errors"
LIMITED_DATA_REASON = "Limited data available - Risk assessment may be incomplete"


class Sentinel(str, Enum):
    NO_DATA = "No Data"
    ERROR = "Error"


class MintAuthority(str, Enum):
    REVOKED = "Revoked"
    ENABLED = "Enabled"
    NO_DATA = "No Data"
    ERROR = "Error"


class LiquidityLock(str, Enum):
    YES = "Yes"
    FULL = "100%"
    NO = "No"
    NO_DATA = "No Data"
    ERROR = "Error"


class Verification(str, Enum):
    VERIFIED = "Verified"
    UNVERIFIED = "Unverified"
    ERROR = "Error"


class RiskLevel(str, Enum):
    GOOD = "Good"  # 0-30
    NORMAL = "Normal"  # 31-60
    DANGER = "Danger"  # 61-100

    @classmethod
    def from_score(cls, score: int) -> RiskLevel:
        if score <= 30:
            return cls.GOOD
        if score <= 60:
            return cls.NORMAL
        return cls.DANGER


class CreatorBalanceKind(str, Enum):
    HELD = "held"
    SOLD = "SOLD"
    NO_DATA = "No Data"
    ERROR = "Error"


class CreatorBalance(BaseModel):
    """Creator's share among tracked holders.

    ``percentage`` is only set for HELD. SOLD means the creator was not found
    among the tracked top holders.
    """

    model_config = ConfigDict(frozen=True)

    kind: CreatorBalanceKind
    percentage: float | None = None

    @classmethod
    def held(cls, percentage: float) -> CreatorBalance:
        return cls(kind=CreatorBalanceKind.HELD, percentage=percentage)

    @classmethod
    def sold(cls) -> CreatorBalance:
        return cls(kind=CreatorBalanceKind.SOLD)

    @classmethod
    def no_data(cls) -> CreatorBalance:
        return cls(kind=CreatorBalanceKind.NO_DATA)

    @classmethod
    def error(cls) -> CreatorBalance:
        return cls(kind=CreatorBalanceKind.ERROR)

    def __str__(self) -> str:
        if self.kind is CreatorBalanceKind.HELD and self.percentage is not None:
            return f"{self.percentage:.2f}%"
        return self.kind.value


class HolderShare(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    percentage: float


class Market(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str


class RiskAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(0, ge=0, le=100)
    level: RiskLevel = RiskLevel.GOOD
    reasons: list[str] = []

    @property
    def key_factors(self) -> list[str]:
        """Reasons without the advisory limited-data note."""
        return [r for r in self.reasons if r != LIMITED_DATA_REASON]


class TokenRecord(BaseModel):
    """Assembled token view returned by ``GET /api/token/{address}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    address: str
    name: str = Sentinel.ERROR.value
    symbol: str = Sentinel.ERROR.value
    logo: str | None = Field(None, alias="avatarUrl")
    price_usd: float = Field(0.0, alias="price")
    price_mon: float = Field(0.0, alias="priceMon")
    total_supply: str = Field(Sentinel.ERROR.value, alias="totalSupply")
    decimals: int = Field(18, ge=0)
    creator: Sentinel | str = Sentinel.ERROR
    creator_balance: CreatorBalance = Field(
        default_factory=CreatorBalance.error, alias="creatorBalance"
    )
    holders_count: str = Field(Sentinel.ERROR.value, alias="holdersCount")
    mint_authority: MintAuthority = Field(MintAuthority.NO_DATA, alias="mintAuthority")
    lp_locked: LiquidityLock = Field(LiquidityLock.NO_DATA, alias="lpLocked")
    verified: Verification = Verification.ERROR
    categories: list[str] = []
    top_holders: list[HolderShare] = Field([], alias="topHolders")
    markets: list[Market] = []
    risk_analysis: RiskAnalysis = Field(default_factory=RiskAnalysis, alias="riskAnalysis")

    @field_serializer("creator_balance")
    def _serialize_creator_balance(self, value: CreatorBalance) -> str:
        return str(value)

    @classmethod
    def failed(cls, address: str) -> TokenRecord:
        """All-error record returned when assembly itself blew up."""
        return cls(
            address=address,
            creator=Sentinel.ERROR,
            creator_balance=CreatorBalance.error(),
            verified=Verification.ERROR,
            risk_analysis=RiskAnalysis(reasons=[FAILED_ANALYSIS_REASON]),
        )

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
