"""Shared domain models used across venue and provider code."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias


class VenueMarket(StrEnum):
    """Market segments listed by the reference trading venue.

    Values double as the collector keys and the labels used in log messages.
    """

    SPOT = "spot"
    USDM_FUTURES = "usdm_futures"
    COINM_FUTURES = "coinm_futures"


# Unique ticker symbols tradable on the venue (e.g. ``{"BTC", "USDT"}``).
VenueAssetSet: TypeAlias = frozenset[str]

EMPTY_ASSET_SET: VenueAssetSet = frozenset()
