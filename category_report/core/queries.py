"""Query helper objects shared across data sources."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MEMBER_LIMIT = 100
DEFAULT_CONVERT = "USD"


@dataclass(frozen=True, slots=True)
class CategoryQuery:
    """Represents one page of a category membership request."""

    category_id: str
    limit: int = DEFAULT_MEMBER_LIMIT
    convert: str = DEFAULT_CONVERT
    start: int = 1

    def __post_init__(self) -> None:
        if not self.category_id:
            raise ValueError("category_id must be a non-empty string")
        if self.limit <= 0:
            raise ValueError("limit must be a positive integer")
        if self.start < 1:
            raise ValueError("start must be 1 or greater")

    def next_page(self) -> "CategoryQuery":
        """Return the query for the page that follows this one."""

        return CategoryQuery(
            category_id=self.category_id,
            limit=self.limit,
            convert=self.convert,
            start=self.start + self.limit,
        )

    def params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "id": self.category_id,
            "limit": self.limit,
            "convert": self.convert,
        }
        if self.start > 1:
            params["start"] = self.start
        return params
