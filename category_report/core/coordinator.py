"""Driver that reconciles provider categories with venue listings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..contracts.interface import CategoryDataSource
from ..models.categories import Category
from ..models.shared import EMPTY_ASSET_SET, VenueAssetSet
from .collector import VenueAssetCollector
from .errors import FetchError
from .selection import match_venue_symbols, select_categories

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """A retained category with its constituents listed on the venue."""

    category: Category
    symbols: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CategoryFailure:
    """A retained category whose membership could not be fetched."""

    category: Category
    error: FetchError


@dataclass(slots=True)
class CategoryReport:
    venue_assets: VenueAssetSet = EMPTY_ASSET_SET
    entries: list[ReportEntry] = field(default_factory=list)
    failures: list[CategoryFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ReportAborted(FetchError):
    """Raised in fail-fast mode; carries the entries completed before the failure."""

    def __init__(self, report: CategoryReport, error: FetchError) -> None:
        super().__init__(str(error))
        self.report = report
        self.error = error


class ReportDriver:
    """Sequences the venue collector and provider calls into a report.

    Venue failures never stop the run. A failing categories request raises
    :class:`FetchError`. A failing membership request is recorded on the
    report and the remaining categories are still processed, unless
    ``fail_fast`` is set, in which case :class:`ReportAborted` is raised with
    the partial report.
    """

    def __init__(
        self,
        *,
        provider: CategoryDataSource,
        collector: VenueAssetCollector,
        allow_list: Mapping[str, str],
        fail_fast: bool = False,
    ) -> None:
        self._provider = provider
        self._collector = collector
        self._allow_list = allow_list
        self._fail_fast = fail_fast

    def run(self) -> CategoryReport:
        venue_assets = self._collector.collect()
        categories = self._provider.fetch_categories()
        selected = select_categories(categories, self._allow_list)
        logger.info("Retained %d of %d categories", len(selected), len(categories))

        report = CategoryReport(venue_assets=venue_assets)
        for category in selected:
            try:
                members = self._provider.fetch_category_members(category.id, expected=category.num_tokens)
            except FetchError as exc:
                logger.info("Failed to fetch members of category %s (%s): %s", category.name, category.id, exc)
                report.failures.append(CategoryFailure(category=category, error=exc))
                if self._fail_fast:
                    raise ReportAborted(report, exc) from exc
                continue
            symbols = match_venue_symbols(members, venue_assets)
            report.entries.append(ReportEntry(category=category, symbols=tuple(symbols)))
        return report
