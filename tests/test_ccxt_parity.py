from __future__ import annotations

from dataclasses import dataclass

import pytest

from category_report.core.errors import TransportError
from tests.provider_cases import VENUES, VenueCase

ccxt = pytest.importorskip("ccxt")

# ccxt and exchangeInfo disagree on a handful of delisted or renamed assets.
MAX_MISMATCH_RATIO = 0.05


@dataclass(slots=True)
class ParityContext:
    case: VenueCase
    ours: frozenset[str]
    theirs: frozenset[str]


@pytest.fixture(scope="module")
def ccxt_markets():
    exchange = ccxt.binance({"enableRateLimit": True})
    try:
        markets = exchange.load_markets()
    except ccxt.BaseError as exc:  # pragma: no cover - depends on external service
        pytest.skip(f"ccxt binance unavailable: {exc}")
    finally:
        close = getattr(exchange, "close", None)
        if close is not None:
            close()
    return list(markets.values())


def _ccxt_assets(markets, case: VenueCase) -> frozenset[str]:
    assets: set[str] = set()
    for market in markets:
        if not market.get(case.ccxt_type):
            continue
        info = market.get("info") or {}
        base = info.get("baseAsset") or market.get("baseId")
        if base:
            assets.add(base)
        quote = info.get("quoteAsset") or market.get("quoteId")
        if case.include_quote and quote:
            assets.add(quote)
    return frozenset(assets)


@pytest.fixture(scope="module", params=VENUES, ids=lambda case: case.name)
def parity(request: pytest.FixtureRequest, ccxt_markets) -> ParityContext:
    case: VenueCase = request.param
    source = case.factory()
    try:
        ours = source.get_assets()
    except TransportError as exc:  # pragma: no cover - depends on external service
        pytest.skip(f"{case.name} API unavailable: {exc}")
    finally:
        source.close()
    return ParityContext(case=case, ours=ours, theirs=_ccxt_assets(ccxt_markets, case))


@pytest.mark.network
@pytest.mark.integration
def test_venue_assets_match_ccxt(parity: ParityContext) -> None:
    if not parity.theirs:
        pytest.skip(f"ccxt returned no {parity.case.ccxt_type} markets")
    mismatch = parity.ours ^ parity.theirs

    assert parity.case.expected_asset in parity.theirs
    assert len(mismatch) <= MAX_MISMATCH_RATIO * len(parity.ours | parity.theirs), sorted(mismatch)
