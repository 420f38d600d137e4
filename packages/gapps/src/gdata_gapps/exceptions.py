"""Exceptions raised while building hosted-groups API queries."""

from __future__ import annotations


class GAppsError(Exception):
    """Root exception for the gdata-gapps toolkit."""


class InvalidArgumentError(GAppsError, ValueError):
    """Raised when a query or its configuration receives an unusable value."""


class MissingRequiredFieldError(InvalidArgumentError):
    """Raised when a field required for URL construction is unset.

    Usage: query builders raise this from ``get_query_url()`` when a
    mandatory path segment (e.g. the group id) has not been provided.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} must not be null")
