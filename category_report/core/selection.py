"""Pure filtering and matching rules applied by the report driver."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ..models.categories import Category, CategoryMember
from ..models.shared import VenueAssetSet

EXCLUDED_NAME_FRAGMENT = "portfolio"


def sort_by_market_cap(categories: Iterable[Category]) -> list[Category]:
    """Return categories ordered by descending market cap (stable for ties)."""

    return sorted(categories, key=lambda category: category.market_cap, reverse=True)


def is_retained(category: Category, allow_list: Mapping[str, str]) -> bool:
    if category.num_tokens == 0:
        return False
    if EXCLUDED_NAME_FRAGMENT in category.name.lower():
        return False
    return category.id in allow_list


def select_categories(categories: Iterable[Category], allow_list: Mapping[str, str]) -> list[Category]:
    """Sort categories by market cap and keep the ones the report covers."""

    return [category for category in sort_by_market_cap(categories) if is_retained(category, allow_list)]


def match_venue_symbols(members: Sequence[CategoryMember], venue_assets: VenueAssetSet) -> list[str]:
    """Return member symbols listed on the venue, in member order."""

    return [member.symbol for member in members if member.symbol in venue_assets]
