"""Custom exception hierarchy for the category report."""

from __future__ import annotations


class CategoryReportError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class ConfigurationError(CategoryReportError):
    """Raised when required settings are missing or unusable."""


class FetchError(CategoryReportError):
    """Base class for failures talking to a remote endpoint."""


class TransportError(FetchError):
    """Network failures, non-success HTTP statuses and API error envelopes."""


class DecodeError(FetchError):
    """Raised when a response body is not JSON or has an unexpected shape."""
