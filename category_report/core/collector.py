"""Builds the venue asset set from the Binance market sources."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

from ..contracts.interface import VenueInstrumentSource
from ..exchanges.binance.exchange_info import BinanceExchangeInfoSource
from ..models.shared import VenueAssetSet, VenueMarket
from .errors import FetchError

logger = logging.getLogger(__name__)

SourceResolver = Callable[[VenueMarket], VenueInstrumentSource]

DEFAULT_MARKETS: tuple[VenueMarket, ...] = (
    VenueMarket.SPOT,
    VenueMarket.USDM_FUTURES,
    VenueMarket.COINM_FUTURES,
)


class VenueAssetCollector:
    """Unions the asset symbols of every venue market.

    A market whose fetch fails is logged and skipped; the remaining markets
    still contribute, so the result may be a strict subset of the venue's
    listings (or empty when every market fails).
    """

    def __init__(
        self,
        *,
        markets: Sequence[VenueMarket] = DEFAULT_MARKETS,
        source_overrides: Mapping[VenueMarket, VenueInstrumentSource] | None = None,
        resolver: SourceResolver = BinanceExchangeInfoSource,
    ) -> None:
        self._markets = tuple(markets)
        self._resolver = resolver
        self._sources: dict[VenueMarket, VenueInstrumentSource] = {}
        self._owned: set[VenueMarket] = set()
        if source_overrides:
            self._sources.update(source_overrides)

    def collect(self) -> VenueAssetSet:
        assets: set[str] = set()
        for market in self._markets:
            source = self._get_source(market)
            try:
                contribution = source.get_assets()
            except FetchError as exc:
                logger.warning("Error fetching %s exchange info: %s", market, exc)
                continue
            logger.debug("%s exchange info contributed %d assets", market, len(contribution))
            assets.update(contribution)
        logger.info("Collected %d venue assets", len(assets))
        return frozenset(assets)

    def close(self) -> None:
        """Close the sources this collector created itself."""

        for market in self._owned:
            self._sources.pop(market).close()
        self._owned.clear()

    def _get_source(self, market: VenueMarket) -> VenueInstrumentSource:
        try:
            return self._sources[market]
        except KeyError:
            source = self._resolver(market)
            self._sources[market] = source
            self._owned.add(market)
            return source
