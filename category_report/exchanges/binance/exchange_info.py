"""Binance exchange-info sources for spot, USD-M and COIN-M markets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import requests

from ...contracts.interface import VenueInstrumentSource
from ...core.errors import DecodeError, TransportError
from ...models.shared import VenueAssetSet, VenueMarket

SPOT_BASE_URL = "https://api.binance.com"
USDM_BASE_URL = "https://fapi.binance.com"
COINM_BASE_URL = "https://dapi.binance.com"
SPOT_EXCHANGE_INFO_ENDPOINT = "/api/v3/exchangeInfo"
USDM_EXCHANGE_INFO_ENDPOINT = "/fapi/v1/exchangeInfo"
COINM_EXCHANGE_INFO_ENDPOINT = "/dapi/v1/exchangeInfo"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class MarketEndpoint:
    base_url: str
    path: str
    include_quote: bool


# COIN-M contracts all settle against "USD", which is not a tradable asset on
# its own, so only base assets are taken from that market.
MARKET_ENDPOINTS: dict[VenueMarket, MarketEndpoint] = {
    VenueMarket.SPOT: MarketEndpoint(SPOT_BASE_URL, SPOT_EXCHANGE_INFO_ENDPOINT, include_quote=True),
    VenueMarket.USDM_FUTURES: MarketEndpoint(USDM_BASE_URL, USDM_EXCHANGE_INFO_ENDPOINT, include_quote=True),
    VenueMarket.COINM_FUTURES: MarketEndpoint(COINM_BASE_URL, COINM_EXCHANGE_INFO_ENDPOINT, include_quote=False),
}


class BinanceExchangeInfoSource(VenueInstrumentSource):
    """Requests-backed :class:`VenueInstrumentSource` for one Binance market."""

    def __init__(
        self,
        market: VenueMarket,
        *,
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        endpoint = MARKET_ENDPOINTS[market]
        self.market = market
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._base_url = (base_url or endpoint.base_url).rstrip("/")
        self._path = endpoint.path
        self._include_quote = endpoint.include_quote
        self._timeout = timeout

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._path}"

    def get_assets(self) -> VenueAssetSet:
        symbols = self.get_symbols()
        return extract_assets(symbols, include_quote=self._include_quote)

    def get_symbols(self) -> Sequence[dict[str, Any]]:
        """Return the raw ``symbols`` entries of the exchange-info payload."""

        payload = self._request()
        symbols = payload.get("symbols") if isinstance(payload, dict) else None
        if not isinstance(symbols, list):
            raise DecodeError(f"Binance {self.market} exchange info has no symbols list")
        return [entry for entry in symbols if isinstance(entry, dict)]

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Internal helpers
    def _request(self) -> Any:
        try:
            response = self._session.get(self.url, params={}, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Failed to fetch {self.url}: {exc}") from exc

        if response.status_code >= 400:
            raise TransportError(f"Unexpected status code {response.status_code} for {self.url}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Failed to decode response from {self.url}") from exc
        if isinstance(payload, dict) and payload.get("code") not in (0, None):
            raise TransportError(payload.get("msg") or f"Binance error code {payload['code']}")
        return payload


def extract_assets(symbols: Sequence[dict[str, Any]], *, include_quote: bool) -> VenueAssetSet:
    """Collect base assets, and optionally quote assets, from symbol entries."""

    assets: set[str] = set()
    for entry in symbols:
        base = entry.get("baseAsset")
        if base:
            assets.add(str(base))
        if include_quote:
            quote = entry.get("quoteAsset")
            if quote:
                assets.add(str(quote))
    return frozenset(assets)
