"""Protocols describing the remote sources the report depends on."""

from __future__ import annotations

from typing import ClassVar, Protocol, Sequence, runtime_checkable

from ..core.queries import CategoryQuery
from ..models.categories import Category, CategoryMember
from ..models.shared import VenueAssetSet, VenueMarket


@runtime_checkable
class VenueInstrumentSource(Protocol):
    """One venue market's instrument listing, reduced to asset symbols."""

    market: VenueMarket

    def get_assets(self) -> VenueAssetSet:
        """Return the asset symbols this market contributes to the venue set."""

    def close(self) -> None:
        """Release any resources held by the source."""


@runtime_checkable
class CategoryDataSource(Protocol):
    """Market-data provider serving categories and their constituents."""

    provider: ClassVar[str]

    def fetch_categories(self) -> Sequence[Category]:
        """Return every category with its aggregate statistics."""

    def fetch_category_members(
        self, query: CategoryQuery | str, *, expected: int | None = None
    ) -> Sequence[CategoryMember]:
        """Return the constituents of a single category.

        ``expected`` is the token count the category advertises, used to stop
        paging early.
        """
