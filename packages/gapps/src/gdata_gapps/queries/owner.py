"""OwnerQuery — URLs for the owners of a hosted group."""

from __future__ import annotations

import logging

from ..endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from ..exceptions import MissingRequiredFieldError
from ..query_string import QueryParameters
from .protocol import domain_segment

logger = logging.getLogger(__name__)


class OwnerQuery:
    """Queries ``<feed><group path>/<domain>/<groupId>/owner[/<ownerEmail>]``."""

    def __init__(
        self,
        domain: str | None = None,
        group_id: str | None = None,
        owner_email: str | None = None,
        *,
        endpoints: AppsEndpoints | None = None,
    ) -> None:
        self.domain = domain
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self.params = QueryParameters()
        self.group_id = group_id
        self.owner_email = owner_email

    def get_query_url(self) -> str:
        if self.group_id is None:
            logger.debug("Owner query for domain %r has no group id", self.domain)
            raise MissingRequiredFieldError("groupId")

        uri = self.endpoints.group_feed()
        uri += domain_segment(self.domain)
        uri += "/" + self.group_id + "/owner"
        if self.owner_email is not None:
            uri += "/" + self.owner_email
        uri += self.params.render()
        logger.debug("Built owner query URL %s", uri)
        return uri

    def __str__(self) -> str:
        return self.get_query_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain!r}, "
            f"group_id={self.group_id!r}, owner_email={self.owner_email!r}, "
            f"params={self.params!r})"
        )
