"""Plain-text rendering of a :class:`CategoryReport`."""

from __future__ import annotations

from .core.coordinator import CategoryFailure, CategoryReport, ReportEntry

BILLION = 1_000_000_000


def render_entry(entry: ReportEntry) -> str:
    """Render one category block, preceded by a blank line."""

    category = entry.category
    lines = [
        "",
        f"Category: {category.name}[{category.num_tokens}] ({category.title})",
        f"ID: {category.id}",
        f"Description: {category.description}",
        f"MarketCap B: {category.market_cap / BILLION} (24h change: {category.market_cap_change})",
        f"Vol B: {category.volume / BILLION} (24h change: {category.volume_change})",
        f"Coins: [{', '.join(entry.symbols)}]",
    ]
    return "\n".join(lines)


def render_failure(failure: CategoryFailure) -> str:
    return f"Category {failure.category.name} ({failure.category.id}): {failure.error}"


def render_report(report: CategoryReport) -> str:
    return "\n".join(render_entry(entry) for entry in report.entries)
