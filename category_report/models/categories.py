"""Snapshots of the market-data provider's category listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Category:
    """Aggregate statistics for one provider category."""

    id: str
    name: str
    title: str = ""
    description: str = ""
    num_tokens: int = 0
    avg_price_change: float = 0.0
    market_cap: float = 0.0
    market_cap_change: float = 0.0
    volume: float = 0.0
    volume_change: float = 0.0

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "Category":
        """Build a category from one entry of the ``/categories`` payload.

        Absent or ``null`` numbers decode to zero.
        """

        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name") or ""),
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            num_tokens=int(raw.get("num_tokens") or 0),
            avg_price_change=float(raw.get("avg_price_change") or 0.0),
            market_cap=float(raw.get("market_cap") or 0.0),
            market_cap_change=float(raw.get("market_cap_change") or 0.0),
            volume=float(raw.get("volume") or 0.0),
            volume_change=float(raw.get("volume_change") or 0.0),
        )


@dataclass(frozen=True, slots=True)
class CategoryMember:
    """A constituent asset of a category, quoted in USD."""

    symbol: str
    name: str = ""
    volume_24h: float = 0.0
    market_cap: float = 0.0

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "CategoryMember":
        quote = raw.get("quote") or {}
        if not isinstance(quote, Mapping):
            raise ValueError(f"quote must be an object, got {type(quote).__name__}")
        usd = quote.get("USD") or {}
        if not isinstance(usd, Mapping):
            raise ValueError(f"USD quote must be an object, got {type(usd).__name__}")
        return cls(
            symbol=str(raw["symbol"]),
            name=str(raw.get("name") or ""),
            volume_24h=float(usd.get("volume_24h") or 0.0),
            market_cap=float(usd.get("market_cap") or 0.0),
        )
