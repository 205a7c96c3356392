"""Core utilities for the category report."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "CategoryQuery",
    "CategoryReport",
    "ReportDriver",
    "VenueAssetCollector",
    "select_categories",
    "CategoryReportError",
    "ConfigurationError",
    "FetchError",
    "TransportError",
    "DecodeError",
]

_lazy_targets = {
    "CategoryQuery": ("queries", "CategoryQuery"),
    "CategoryReport": ("coordinator", "CategoryReport"),
    "ReportDriver": ("coordinator", "ReportDriver"),
    "VenueAssetCollector": ("collector", "VenueAssetCollector"),
    "select_categories": ("selection", "select_categories"),
    "CategoryReportError": ("errors", "CategoryReportError"),
    "ConfigurationError": ("errors", "ConfigurationError"),
    "FetchError": ("errors", "FetchError"),
    "TransportError": ("errors", "TransportError"),
    "DecodeError": ("errors", "DecodeError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:
        raise AttributeError(f"module 'category_report.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
