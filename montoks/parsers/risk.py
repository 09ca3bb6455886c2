"""Heuristic token risk score (0-100, higher = riskier).

Rules are additive and evaluated in a fixed order; each triggered rule
contributes one reason string. Weights:

    mint authority not revoked     +25
    top-10 concentration >90 / >70 +30 / +20
    largest holder >20%            +10
    creator sold / holds <2%       +20 / +15
    liquidity not locked           +15
    not verified                   +10
"""

from montoks.models.token import (
    LIMITED_DATA_REASON,
    CreatorBalanceKind,
    MintAuthority,
    RiskAnalysis,
    RiskLevel,
    Sentinel,
    TokenRecord,
    Verification,
)

TOP_HOLDERS_WINDOW = 10


def analyze_risks(record: TokenRecord) -> RiskAnalysis:
    """Score a token record. Pure function of its fields."""
    reasons: list[str] = []
    score = 0

    # 1. Mint authority
    if record.mint_authority is not MintAuthority.REVOKED:
        score += 25
        reasons.append("Mint authority enabled - Owner can create unlimited tokens")

    # 2-3. Holder concentration (may both fire on the same holder list)
    if record.top_holders:
        top10 = sum(h.percentage for h in record.top_holders[:TOP_HOLDERS_WINDOW])
        if top10 > 90:
            score += 30
            reasons.append(f"Extreme concentration - Top 10 control {top10:.2f}% of supply")
        elif top10 > 70:
            score += 20
            reasons.append(f"High concentration - Top 10 control {top10:.2f}% of supply")

        largest = record.top_holders[0].percentage
        if largest > 20:
            score += 10
            reasons.append(f"Single holder dominance - Largest holder has {largest:.2f}%")

    # 4. Creator balance (skipped for No Data / Error)
    balance = record.creator_balance
    if balance.kind is CreatorBalanceKind.SOLD:
        score += 20
        reasons.append("Creator sold all tokens - High abandonment risk")
    elif balance.kind is CreatorBalanceKind.HELD and balance.percentage is not None:
        if balance.percentage < 2:
            score += 15
            reasons.append(f"Low creator holding - Only {balance}")

    # 5. Liquidity lock
    lp = record.lp_locked.value
    if "100" not in lp and "Yes" not in lp:
        score += 15
        reasons.append("Liquidity not locked - High rug pull risk")

    # 6. Verification
    if record.verified is not Verification.VERIFIED:
        score += 10
        reasons.append("Token not verified - Higher scam risk")

    score = max(0, min(score, 100))

    if record.creator == Sentinel.NO_DATA or record.lp_locked.value == Sentinel.NO_DATA.value:
        reasons.append(LIMITED_DATA_REASON)

    return RiskAnalysis(score=score, level=RiskLevel.from_score(score), reasons=reasons)
