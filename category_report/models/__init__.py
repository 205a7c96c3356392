"""Domain models for the category report."""

from .categories import Category, CategoryMember
from .shared import EMPTY_ASSET_SET, VenueAssetSet, VenueMarket

__all__ = [
    "Category",
    "CategoryMember",
    "EMPTY_ASSET_SET",
    "VenueAssetSet",
    "VenueMarket",
]
