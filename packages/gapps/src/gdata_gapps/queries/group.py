"""GroupQuery — URLs for hosted groups, optionally filtered by member."""

from __future__ import annotations

import logging

from ..endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from ..exceptions import InvalidArgumentError
from ..query_string import QueryParameters
from .protocol import domain_segment

logger = logging.getLogger(__name__)

MEMBER_PARAM = "member"
DIRECT_ONLY_PARAM = "directOnly"
START_PARAM = "start"


class GroupQuery:
    """Assembles queries for group entries.

    Without a ``group_id`` the URL addresses the whole group feed of the
    domain. ``member`` restricts the feed to groups the given member
    belongs to; ``direct_only`` then excludes groups reached only through
    nested membership. Parameters always render as
    ``member``, ``directOnly``, ``start`` whatever order they were set in.
    """

    def __init__(
        self,
        domain: str | None = None,
        group_id: str | None = None,
        member: str | None = None,
        direct_only: bool | None = None,
        start_group_id: str | None = None,
        *,
        endpoints: AppsEndpoints | None = None,
    ) -> None:
        """
        Initialize GroupQuery.

        Args:
            domain: The hosted domain used when constructing the URL.
            group_id: Address a single group.
            member: Only return groups this member belongs to.
            direct_only: Only return direct memberships of ``member``.
            start_group_id: First group id to return when listing groups.
            endpoints: Feed URI and paths; defaults to the public API.
        """
        self.domain = domain
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self.params = QueryParameters(
            order=(MEMBER_PARAM, DIRECT_ONLY_PARAM, START_PARAM)
        )
        self.group_id = group_id
        self.member = member
        self.direct_only = direct_only
        self.start_group_id = start_group_id

    @property
    def member(self) -> str | None:
        return self.params.get(MEMBER_PARAM)

    @member.setter
    def member(self, value: str | None) -> None:
        self.params.set(MEMBER_PARAM, value)

    @property
    def direct_only(self) -> bool | None:
        raw = self.params.get(DIRECT_ONLY_PARAM)
        return None if raw is None else raw == "true"

    @direct_only.setter
    def direct_only(self, value: bool | None) -> None:
        rendered = None if value is None else str(value).lower()
        self.params.set(DIRECT_ONLY_PARAM, rendered)

    @property
    def start_group_id(self) -> str | None:
        return self.params.get(START_PARAM)

    @start_group_id.setter
    def start_group_id(self, value: str | None) -> None:
        self.params.set(START_PARAM, value)

    def get_query_url(self) -> str:
        """Return the group feed URL for this query.

        Raises:
            InvalidArgumentError: If ``direct_only`` is set without ``member``.
        """
        if self.direct_only is not None and self.member is None:
            raise InvalidArgumentError("directOnly requires member")

        uri = self.endpoints.group_feed()
        uri += domain_segment(self.domain)
        if self.group_id is not None:
            uri += "/" + self.group_id
        uri += self.params.render()
        logger.debug("Built group query URL %s", uri)
        return uri

    def __str__(self) -> str:
        return self.get_query_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain!r}, "
            f"group_id={self.group_id!r}, params={self.params!r})"
        )
