"""Compare venue asset sets against CCXT's Binance market definitions."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import ccxt_assets, iter_cases

from category_report.core.errors import FetchError


def main(targets: Iterable[str] | None = None) -> None:
    exchange = ccxt.binance({"enableRateLimit": True})
    try:
        markets = list(exchange.load_markets().values())
    except ccxt.BaseError as exc:
        print(f"ccxt error: {exc}")
        return
    finally:
        try:
            exchange.close()
        except Exception:
            pass

    for case in iter_cases(targets):
        print(f"\n=== {case.name} assets ===")
        source = case.source_factory()
        try:
            ours = source.get_assets()
        except FetchError as exc:
            print(f"provider error: {exc}")
            continue
        finally:
            source.close()

        theirs = ccxt_assets(markets, case)
        print(f"provider {len(ours)} ccxt {len(theirs)} shared {len(ours & theirs)}")
        print("only provider", sorted(ours - theirs))
        print("only ccxt", sorted(theirs - ours))


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
