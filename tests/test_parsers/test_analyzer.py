"""Tests for the token analysis pipeline (fan-out, assembly, caching)."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from montoks.models.token import (
    FAILED_ANALYSIS_REASON,
    LIMITED_DATA_REASON,
    CreatorBalanceKind,
    LiquidityLock,
    MintAuthority,
    RiskLevel,
    Sentinel,
    Verification,
)
from montoks.parsers.analyzer import TokenAnalyzer
from montoks.parsers.blockvision.models import (
    BlockvisionHolder,
    BlockvisionHoldersPage,
    BlockvisionTokenDetail,
)
from montoks.parsers.monorail.models import MonorailToken

TOKEN = "0x1111111111111111111111111111111111111111"
CREATOR = "0xc0ffee0000000000000000000000000000000001"


def _detail(**result) -> BlockvisionTokenDetail:
    return BlockvisionTokenDetail.model_validate({"code": 0, "result": result})


def _holders_page(*percentages: float, start: int = 0) -> BlockvisionHoldersPage:
    return BlockvisionHoldersPage(
        data=[
            BlockvisionHolder(holder=f"0x{start + i:040x}", percentage=str(p))
            for i, p in enumerate(percentages)
        ]
    )


def _analyzer(
    market: MonorailToken | Exception | None = None,
    detail: BlockvisionTokenDetail | Exception | None = None,
    creator: str | Exception = CREATOR,
    pages: list | None = None,
) -> TokenAnalyzer:
    monorail = MagicMock()
    monorail.get_token = AsyncMock(
        side_effect=market if isinstance(market, Exception) else None,
        return_value=market or MonorailToken(),
    )
    blockvision = MagicMock()
    blockvision.get_token_detail = AsyncMock(
        side_effect=detail if isinstance(detail, Exception) else None,
        return_value=detail or BlockvisionTokenDetail(),
    )
    blockvision.get_holders_page = AsyncMock(side_effect=pages if pages is not None else [None])
    etherscan = MagicMock()
    etherscan.get_contract_creator = AsyncMock(
        side_effect=creator if isinstance(creator, Exception) else None,
        return_value=creator if isinstance(creator, str) else None,
    )
    return TokenAnalyzer(monorail, blockvision, etherscan, holders_page_delay=0)


@pytest.mark.asyncio
async def test_end_to_end_scenario_scores_90_danger() -> None:
    analyzer = _analyzer(
        detail=_detail(
            name="Foo",
            symbol="FOO",
            decimals=18,
            totalSupply="1000000000000000000000",
            verified=True,
        ),
        pages=[_holders_page(40, 30, 10, 5, 5)],
    )

    record = await analyzer.analyze(TOKEN)

    assert record.name == "Foo"
    assert record.symbol == "FOO"
    assert record.total_supply == "1000"
    assert record.decimals == 18
    assert record.verified is Verification.VERIFIED
    assert record.holders_count == "5"
    assert record.creator == CREATOR
    assert record.creator_balance.kind is CreatorBalanceKind.SOLD
    assert record.mint_authority is MintAuthority.NO_DATA
    assert record.lp_locked is LiquidityLock.NO_DATA

    risk = record.risk_analysis
    # 25 mint + 20 concentration (sum 90 is not >90) + 10 dominance + 20 sold + 15 lp
    assert risk.score == 90
    assert risk.level is RiskLevel.DANGER
    assert risk.reasons[-1] == LIMITED_DATA_REASON
    assert len(risk.key_factors) == 5


@pytest.mark.asyncio
async def test_market_data_fallbacks() -> None:
    analyzer = _analyzer(
        market=MonorailToken(
            name="MarketFoo",
            symbol="MFOO",
            logo="https://img/foo.png",
            totalSupply="5000000",
            usd_per_token="0.25",
            mon_per_token="1.5",
            categories=["meme"],
        ),
        detail=BlockvisionTokenDetail(code=-1),
    )

    record = await analyzer.analyze(TOKEN)

    assert record.name == "MarketFoo"
    assert record.symbol == "MFOO"
    assert record.logo == "https://img/foo.png"
    assert record.decimals == 18
    assert record.total_supply == "0.000000000005"
    assert record.price_usd == 0.25
    assert record.price_mon == 1.5
    assert record.categories == ["meme"]
    assert record.verified is Verification.UNVERIFIED


@pytest.mark.asyncio
async def test_indexer_wins_over_market_data() -> None:
    analyzer = _analyzer(
        market=MonorailToken(name="MarketFoo", symbol="MFOO", totalSupply="1"),
        detail=_detail(name="Foo", symbol="FOO", decimals=6, totalSupply="2500000", logo="bv.png"),
    )
    record = await analyzer.analyze(TOKEN)
    assert (record.name, record.symbol, record.logo) == ("Foo", "FOO", "bv.png")
    assert record.total_supply == "2.5"
    assert record.decimals == 6


@pytest.mark.asyncio
async def test_every_upstream_down_degrades_to_sentinels() -> None:
    analyzer = _analyzer(
        market=RuntimeError("monorail down"),
        detail=RuntimeError("blockvision down"),
        creator=RuntimeError("etherscan down"),
        pages=RuntimeError("holders down"),
    )

    record = await analyzer.analyze(TOKEN)

    assert record.name == "Error"
    assert record.symbol == "Error"
    assert record.logo is None
    assert record.total_supply == "0"
    assert record.creator == Sentinel.NO_DATA
    assert record.creator_balance.kind is CreatorBalanceKind.NO_DATA
    assert record.holders_count == "Error"
    assert record.top_holders == []
    # mint 25 + lp 15 + unverified 10; creator rule skipped
    assert record.risk_analysis.score == 50
    assert record.risk_analysis.level is RiskLevel.NORMAL
    assert LIMITED_DATA_REASON in record.risk_analysis.reasons


@pytest.mark.asyncio
async def test_creator_failure_does_not_fire_creator_rule() -> None:
    analyzer = _analyzer(creator="No Data", pages=[_holders_page(10, 5)])
    record = await analyzer.analyze(TOKEN)
    assert record.creator_balance.kind is CreatorBalanceKind.NO_DATA
    assert not any(r.startswith("Creator sold") for r in record.risk_analysis.reasons)


@pytest.mark.asyncio
async def test_creator_among_holders() -> None:
    page = BlockvisionHoldersPage(data=[
        BlockvisionHolder(holder="0x" + "a" * 40, percentage="50"),
        BlockvisionHolder(accountAddress=CREATOR.upper().replace("0X", "0x"), percentage="1.25"),
    ])
    record = await _analyzer(pages=[page]).analyze(TOKEN)
    assert str(record.creator_balance) == "1.25%"
    assert "Low creator holding - Only 1.25%" in record.risk_analysis.reasons


@pytest.mark.asyncio
async def test_second_request_served_from_cache() -> None:
    analyzer = _analyzer(detail=_detail(name="Foo", symbol="FOO"), pages=[_holders_page(5)])

    first = await analyzer.analyze(TOKEN)
    second = await analyzer.analyze(TOKEN.upper().replace("0X", "0x"))

    assert first == second
    assert analyzer._monorail.get_token.await_count == 1
    assert analyzer._blockvision.get_token_detail.await_count == 1


@pytest.mark.asyncio
async def test_negative_decimals_only_breaks_supply() -> None:
    analyzer = _analyzer(
        detail=_detail(name="Foo", symbol="FOO", decimals=-1, totalSupply="100", verified=True),
        pages=[_holders_page(5.0)],
    )

    record = await analyzer.analyze(TOKEN)

    assert record.name == "Foo"
    assert record.symbol == "FOO"
    assert record.total_supply == "Error"
    assert record.decimals == 18
    assert record.creator == CREATOR
    assert record.holders_count == "1"
    assert record.verified is Verification.VERIFIED
    assert FAILED_ANALYSIS_REASON not in record.risk_analysis.reasons
    assert TOKEN in analyzer.cache


@pytest.mark.asyncio
async def test_assembly_error_returns_failed_record(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(record):
        raise RuntimeError("scorer crashed")

    monkeypatch.setattr("montoks.parsers.analyzer.analyze_risks", _boom)
    analyzer = _analyzer(detail=_detail(name="Foo", decimals=18))

    record = await analyzer.analyze(TOKEN)

    assert record.name == "Error"
    assert record.total_supply == "Error"
    assert record.creator == Sentinel.ERROR
    assert str(record.creator_balance) == "Error"
    assert record.verified is Verification.ERROR
    assert record.risk_analysis.score == 0
    assert record.risk_analysis.level is RiskLevel.GOOD
    assert record.risk_analysis.reasons == [FAILED_ANALYSIS_REASON]
    assert TOKEN not in analyzer.cache


@pytest.mark.asyncio
async def test_branches_run_concurrently() -> None:
    started: list[str] = []
    release = asyncio.Event()

    async def _wait(name: str, value):
        started.append(name)
        await release.wait()
        return value

    analyzer = _analyzer()
    analyzer._monorail.get_token = lambda a: _wait("monorail", MonorailToken())
    analyzer._blockvision.get_token_detail = lambda a: _wait("detail", BlockvisionTokenDetail())
    analyzer._etherscan.get_contract_creator = lambda a: _wait("etherscan", CREATOR)

    task = asyncio.create_task(analyzer.analyze(TOKEN))
    for _ in range(10):
        await asyncio.sleep(0)
    assert set(started) == {"monorail", "detail", "etherscan"}

    release.set()
    record = await task
    assert record.creator == CREATOR


@pytest.mark.asyncio
async def test_count_holders() -> None:
    analyzer = _analyzer(pages=[_holders_page(*([1.0] * 50)), _holders_page(1.0, 1.0)])
    # First page has no nextPageIndex, so pagination ends there
    assert await analyzer.count_holders(TOKEN) == 50


@pytest.mark.asyncio
async def test_success_code_without_result_uses_market_metadata() -> None:
    analyzer = _analyzer(
        market=MonorailToken(name="Market", symbol="MKT", totalSupply="5000000000000000000"),
        detail=BlockvisionTokenDetail(code=0, result=None),
    )

    record = await analyzer.analyze(TOKEN)

    assert record.name == "Market"
    assert record.symbol == "MKT"
    assert record.total_supply == "5"
    assert record.verified is Verification.UNVERIFIED
