"""MemberQuery — URLs for the members of a hosted group."""

from __future__ import annotations

import logging

from ..endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from ..exceptions import MissingRequiredFieldError
from ..query_string import QueryParameters
from .protocol import domain_segment

logger = logging.getLogger(__name__)

START_PARAM = "start"


class MemberQuery:
    """Assembles queries for the member entries of a group.

    The resulting URL has the form
    ``<feed><group path>/<domain>/<groupId>/member[/<memberId>][?start=...]``.
    Instances can be passed anywhere a URL string is expected.

    Example:
        ```python
        query = MemberQuery("example.com", group_id="sales")
        query.start_member_id = "abc"
        query.get_query_url()
        # ".../group/example.com/sales/member?start=abc"
        ```
    """

    def __init__(
        self,
        domain: str | None = None,
        group_id: str | None = None,
        member_id: str | None = None,
        start_member_id: str | None = None,
        *,
        endpoints: AppsEndpoints | None = None,
    ) -> None:
        """
        Initialize MemberQuery.

        Args:
            domain: The hosted domain used when constructing the URL.
            group_id: Group whose members are queried; required to build a URL.
            member_id: Restrict the query to a single member.
            start_member_id: First member id to return when listing members.
            endpoints: Feed URI and paths; defaults to the public API.
        """
        self.domain = domain
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self.params = QueryParameters()
        self.group_id = group_id
        self.member_id = member_id
        self.start_member_id = start_member_id

    @property
    def start_member_id(self) -> str | None:
        """First member id returned when listing, or ``None`` if disabled."""
        return self.params.get(START_PARAM)

    @start_member_id.setter
    def start_member_id(self, value: str | None) -> None:
        self.params.set(START_PARAM, value)

    def get_query_url(self) -> str:
        """Return the member feed URL for this query.

        Raises:
            MissingRequiredFieldError: If ``group_id`` is not set.
        """
        uri = self.endpoints.group_feed()
        uri += domain_segment(self.domain)
        if self.group_id is not None:
            uri += "/" + self.group_id
        else:
            logger.debug("Member query for domain %r has no group id", self.domain)
            raise MissingRequiredFieldError("groupId")

        uri += "/member"

        if self.member_id is not None:
            uri += "/" + self.member_id
        uri += self.params.render()
        logger.debug("Built member query URL %s", uri)
        return uri

    def __str__(self) -> str:
        return self.get_query_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain!r}, "
            f"group_id={self.group_id!r}, member_id={self.member_id!r}, "
            f"params={self.params!r})"
        )
