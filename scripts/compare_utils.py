"""Shared helpers for manual venue-vs-CCXT comparisons."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Callable, Iterable, Sequence

import ccxt  # type: ignore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from category_report.contracts.interface import VenueInstrumentSource
from category_report.exchanges.binance.exchange_info import BinanceExchangeInfoSource
from category_report.models.shared import VenueMarket


@dataclass(slots=True)
class MarketCase:
    name: str
    source_factory: Callable[[], VenueInstrumentSource]
    ccxt_type: str
    include_quote: bool


CASES: Sequence[MarketCase] = (
    MarketCase(
        name="spot",
        source_factory=lambda: BinanceExchangeInfoSource(VenueMarket.SPOT),
        ccxt_type="spot",
        include_quote=True,
    ),
    MarketCase(
        name="usdm_futures",
        source_factory=lambda: BinanceExchangeInfoSource(VenueMarket.USDM_FUTURES),
        ccxt_type="linear",
        include_quote=True,
    ),
    MarketCase(
        name="coinm_futures",
        source_factory=lambda: BinanceExchangeInfoSource(VenueMarket.COINM_FUTURES),
        ccxt_type="inverse",
        include_quote=False,
    ),
)


def iter_cases(targets: Iterable[str] | None = None) -> Iterable[MarketCase]:
    if not targets:
        yield from CASES
        return
    selected = {t.lower() for t in targets}
    for case in CASES:
        if case.name.lower() in selected:
            yield case


def ccxt_assets(markets: Iterable[dict], case: MarketCase) -> set[str]:
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
    return assets
