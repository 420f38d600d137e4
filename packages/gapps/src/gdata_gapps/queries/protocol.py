"""IAppsQuery — structural contract shared by every query builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..endpoints import AppsEndpoints
    from ..query_string import QueryParameters


@runtime_checkable
class IAppsQuery(Protocol):
    """A query that can render itself as a feed URL.

    Implementations own a :class:`~gdata_gapps.query_string.QueryParameters`
    instance rather than inheriting one.
    """

    domain: str | None
    params: QueryParameters
    endpoints: AppsEndpoints

    def get_query_url(self) -> str:
        """Return the feed URL for the current field values."""
        ...


def domain_segment(domain: str | None) -> str:
    """Render the hosted-domain path segment; an unset domain is empty."""
    return "/" + (domain if domain is not None else "")
