"""UserQuery — URLs for user accounts of a hosted domain."""

from __future__ import annotations

import logging

from ..endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from ..query_string import QueryParameters
from .protocol import domain_segment

logger = logging.getLogger(__name__)

START_PARAM = "startUsername"


class UserQuery:
    """Queries ``<feed><user path>/<domain>[/<username>][?startUsername=...]``."""

    def __init__(
        self,
        domain: str | None = None,
        username: str | None = None,
        start_username: str | None = None,
        *,
        endpoints: AppsEndpoints | None = None,
    ) -> None:
        self.domain = domain
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self.params = QueryParameters()
        self.username = username
        self.start_username = start_username

    @property
    def start_username(self) -> str | None:
        """First username returned when listing, or ``None`` if disabled."""
        return self.params.get(START_PARAM)

    @start_username.setter
    def start_username(self, value: str | None) -> None:
        self.params.set(START_PARAM, value)

    def get_query_url(self) -> str:
        uri = self.endpoints.user_feed()
        uri += domain_segment(self.domain)
        if self.username is not None:
            uri += "/" + self.username
        uri += self.params.render()
        logger.debug("Built user query URL %s", uri)
        return uri

    def __str__(self) -> str:
        return self.get_query_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain!r}, "
            f"username={self.username!r}, params={self.params!r})"
        )
