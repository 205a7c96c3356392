"""Provider category report cross-referenced with venue listings.

This module exposes the public API: the provider and venue sources, the
driver that reconciles them, and the models and errors they share.
"""

from .allow_list import AllowList, load_allow_list
from .contracts.interface import CategoryDataSource, VenueInstrumentSource
from .core.collector import VenueAssetCollector
from .core.coordinator import CategoryFailure, CategoryReport, ReportAborted, ReportDriver, ReportEntry
from .core.errors import CategoryReportError, ConfigurationError, DecodeError, FetchError, TransportError
from .core.queries import CategoryQuery
from .core.selection import match_venue_symbols, select_categories
from .exchanges.binance.exchange_info import BinanceExchangeInfoSource
from .models.categories import Category, CategoryMember
from .models.shared import VenueAssetSet, VenueMarket
from .providers.coinmarketcap import CoinMarketCapClient
from .report import render_report

__all__ = [
    "AllowList",
    "load_allow_list",
    "CategoryDataSource",
    "VenueInstrumentSource",
    "VenueAssetCollector",
    "CategoryFailure",
    "CategoryReport",
    "ReportAborted",
    "ReportDriver",
    "ReportEntry",
    "CategoryQuery",
    "match_venue_symbols",
    "select_categories",
    "BinanceExchangeInfoSource",
    "Category",
    "CategoryMember",
    "VenueAssetSet",
    "VenueMarket",
    "CoinMarketCapClient",
    "render_report",
    "CategoryReportError",
    "ConfigurationError",
    "FetchError",
    "TransportError",
    "DecodeError",
]
