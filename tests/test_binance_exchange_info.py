from __future__ import annotations

import pytest
import requests

from category_report.core.errors import DecodeError, TransportError
from category_report.exchanges.binance import exchange_info as binance_module
from category_report.exchanges.binance.exchange_info import MARKET_ENDPOINTS, BinanceExchangeInfoSource, extract_assets
from category_report.models.shared import VenueMarket
from tests.stubs import NOT_JSON, StubSession

SYMBOLS = [
    {"symbol": "BTCUSDT", "baseAsset": "BTC", "quoteAsset": "USDT"},
    {"symbol": "ETHBTC", "baseAsset": "ETH", "quoteAsset": "BTC"},
    {"symbol": "SOLFDUSD", "baseAsset": "SOL", "quoteAsset": "FDUSD"},
]

COINM_SYMBOLS = [
    {"symbol": "BTCUSD_PERP", "baseAsset": "BTC", "quoteAsset": "USD"},
    {"symbol": "ADAUSD_PERP", "baseAsset": "ADA", "quoteAsset": "USD"},
]


@pytest.fixture()
def session() -> StubSession:
    return StubSession()


def test_spot_includes_base_and_quote_assets(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    session.queue({"timezone": "UTC", "symbols": SYMBOLS})

    assets = source.get_assets()

    assert assets == frozenset({"BTC", "USDT", "ETH", "SOL", "FDUSD"})
    assert session.calls[0]["url"] == binance_module.SPOT_BASE_URL + binance_module.SPOT_EXCHANGE_INFO_ENDPOINT


def test_usdm_futures_includes_quote_assets(session):
    source = BinanceExchangeInfoSource(VenueMarket.USDM_FUTURES, session=session)
    session.queue({"symbols": [{"baseAsset": "DOGE", "quoteAsset": "USDC"}]})

    assert source.get_assets() == frozenset({"DOGE", "USDC"})
    assert session.calls[0]["url"].endswith(binance_module.USDM_EXCHANGE_INFO_ENDPOINT)


def test_coinm_futures_excludes_settlement_quote(session):
    source = BinanceExchangeInfoSource(VenueMarket.COINM_FUTURES, session=session)
    session.queue({"symbols": COINM_SYMBOLS})

    assets = source.get_assets()

    assert assets == frozenset({"BTC", "ADA"})
    assert "USD" not in assets
    assert session.calls[0]["url"].endswith(binance_module.COINM_EXCHANGE_INFO_ENDPOINT)


def test_base_url_override_keeps_market_path(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session, base_url="https://testnet.binance.vision/")
    session.queue({"symbols": []})

    assert source.get_assets() == frozenset()
    assert session.calls[0]["url"] == "https://testnet.binance.vision/api/v3/exchangeInfo"


def test_extract_assets_skips_missing_fields():
    symbols = [{"baseAsset": "BTC"}, {"quoteAsset": "USDT"}, {"baseAsset": "", "quoteAsset": None}]

    assert extract_assets(symbols, include_quote=True) == frozenset({"BTC", "USDT"})
    assert extract_assets(symbols, include_quote=False) == frozenset({"BTC"})


def test_http_error_raises_transport_error(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    session.queue({"code": -1003, "msg": "Too many requests"}, status_code=429)

    with pytest.raises(TransportError, match="429"):
        source.get_assets()


def test_network_failure_raises_transport_error(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    session.queue_error(requests.ConnectionError("connection reset"))

    with pytest.raises(TransportError, match="connection reset"):
        source.get_assets()


def test_api_error_code_raises_transport_error(session):
    source = BinanceExchangeInfoSource(VenueMarket.USDM_FUTURES, session=session)
    session.queue({"code": -1000, "msg": "An unknown error occurred"})

    with pytest.raises(TransportError, match="unknown error"):
        source.get_assets()


def test_non_json_body_raises_decode_error(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    session.queue(NOT_JSON)

    with pytest.raises(DecodeError):
        source.get_assets()


def test_missing_symbols_raises_decode_error(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    session.queue({"timezone": "UTC"})

    with pytest.raises(DecodeError):
        source.get_assets()


def test_close_leaves_injected_session_open(session):
    source = BinanceExchangeInfoSource(VenueMarket.SPOT, session=session)
    source.close()

    assert session.closed is False


def test_every_market_has_an_endpoint():
    assert set(MARKET_ENDPOINTS) == set(VenueMarket)
    assert [market for market, endpoint in MARKET_ENDPOINTS.items() if not endpoint.include_quote] == [
        VenueMarket.COINM_FUTURES
    ]
