from montoks.models.token import (
    CreatorBalance,
    CreatorBalanceKind,
    HolderShare,
    LiquidityLock,
    Market,
    MintAuthority,
    RiskAnalysis,
    RiskLevel,
    Sentinel,
    TokenRecord,
    Verification,
)

__all__ = [
    "CreatorBalance",
    "CreatorBalanceKind",
    "HolderShare",
    "LiquidityLock",
    "Market",
    "MintAuthority",
    "RiskAnalysis",
    "RiskLevel",
    "Sentinel",
    "TokenRecord",
    "Verification",
]
