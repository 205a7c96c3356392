"""Command-line entry point for the category report.

Usage
-----
After installation the report is available as ``category-report``:

    $ CMC_API_KEY=... category-report
    $ category-report --limit 500 --allow-list categories.yaml
    $ category-report --paginate --fail-fast -v

Or run as a module:

    $ python -m category_report
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .allow_list import load_allow_list
from .config import Settings, load_settings
from .core.collector import VenueAssetCollector
from .core.coordinator import CategoryReport, ReportAborted, ReportDriver
from .core.errors import ConfigurationError, FetchError
from .providers.coinmarketcap import CoinMarketCapClient
from .report import render_failure, render_report

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Send log records to stderr so stdout only carries the report."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _echo_report(report: CategoryReport) -> None:
    text = render_report(report)
    if text:
        click.echo(text)


def apply_overrides(settings: Settings, **overrides) -> Settings:
    """Return settings with the non-``None`` CLI overrides applied."""
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return settings
    return settings.model_copy(update={"provider": settings.provider.model_copy(update=update)})


@click.command()
@click.option("--limit", "member_limit", type=click.IntRange(1, 5000), default=None, help="Category members per page")
@click.option("--paginate/--no-paginate", default=None, help="Request every page of category members")
@click.option(
    "--allow-list",
    "allow_list_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file of category ids to report on",
)
@click.option("--fail-fast/--keep-going", default=None, help="Abort on the first failing category")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def main(
    member_limit: int | None,
    paginate: bool | None,
    allow_list_path: Path | None,
    fail_fast: bool | None,
    verbose: bool,
) -> None:
    """Report provider categories and their constituents listed on Binance."""
    try:
        settings = apply_overrides(
            load_settings(),
            member_limit=member_limit,
            paginate=paginate,
            allow_list_path=allow_list_path,
            fail_fast=fail_fast,
        )
        provider_settings = settings.provider
        api_key = provider_settings.require_api_key()
        allow_list = load_allow_list(provider_settings.allow_list_path)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    setup_logging("DEBUG" if verbose else settings.logging.level)

    client = CoinMarketCapClient(
        api_key,
        base_url=provider_settings.base_url,
        timeout=provider_settings.timeout,
        member_limit=provider_settings.member_limit,
        paginate=provider_settings.paginate,
    )
    collector = VenueAssetCollector()
    driver = ReportDriver(
        provider=client,
        collector=collector,
        allow_list=allow_list,
        fail_fast=provider_settings.fail_fast,
    )
    try:
        report = driver.run()
    except ReportAborted as exc:
        _echo_report(exc.report)
        click.echo(f"Error: {render_failure(exc.report.failures[-1])}", err=True)
        sys.exit(1)
    except FetchError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        collector.close()
        client.close()

    _echo_report(report)
    if not report.ok:
        click.echo(f"\n{len(report.failures)} categories could not be fetched:", err=True)
        for failure in report.failures:
            click.echo(f"  {render_failure(failure)}", err=True)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
