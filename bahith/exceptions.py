"""
Custom exceptions for Bahith library.

All exceptions inherit from BahithError for easy catching of library-specific errors.
Query-time code never raises for empty queries, empty catalogs or unknown ids;
these exceptions cover catalog ingestion and configuration only.
"""

from typing import Any


class BahithError(Exception):
    """Base exception for all Bahith errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class CatalogError(BahithError):
    """Raised when a catalog snapshot cannot be built from the supplied records."""

    def __init__(
        self,
        message: str,
        record_id: str | None = None,
        category: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if record_id:
            ctx["record_id"] = record_id
        if category:
            ctx["category"] = category
        super().__init__(message, ctx)
        self.record_id = record_id
        self.category = category


class DuplicateRecordError(CatalogError):
    """Raised when two records in one snapshot share an id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Duplicate record id in catalog: {record_id}", record_id=record_id)


class ConfigurationError(BahithError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name
