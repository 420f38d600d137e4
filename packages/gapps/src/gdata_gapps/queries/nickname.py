"""NicknameQuery — URLs for nicknames (email aliases) of user accounts."""

from __future__ import annotations

import logging

from ..endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from ..query_string import QueryParameters
from .protocol import domain_segment

logger = logging.getLogger(__name__)

USERNAME_PARAM = "username"
START_PARAM = "startNickname"


class NicknameQuery:
    """Queries ``<feed><nickname path>/<domain>[/<nickname>]``.

    ``username`` limits the feed to the nicknames of one account and
    ``start_nickname`` is the pagination cursor when listing. ``username`` always
    renders before ``startNickname``.
    """

    def __init__(
        self,
        domain: str | None = None,
        nickname: str | None = None,
        username: str | None = None,
        start_nickname: str | None = None,
        *,
        endpoints: AppsEndpoints | None = None,
    ) -> None:
        self.domain = domain
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self.params = QueryParameters(order=(USERNAME_PARAM, START_PARAM))
        self.nickname = nickname
        self.username = username
        self.start_nickname = start_nickname

    @property
    def username(self) -> str | None:
        return self.params.get(USERNAME_PARAM)

    @username.setter
    def username(self, value: str | None) -> None:
        self.params.set(USERNAME_PARAM, value)

    @property
    def start_nickname(self) -> str | None:
        return self.params.get(START_PARAM)

    @start_nickname.setter
    def start_nickname(self, value: str | None) -> None:
        self.params.set(START_PARAM, value)

    def get_query_url(self) -> str:
        uri = self.endpoints.nickname_feed()
        uri += domain_segment(self.domain)
        if self.nickname is not None:
            uri += "/" + self.nickname
        uri += self.params.render()
        logger.debug("Built nickname query URL %s", uri)
        return uri

    def __str__(self) -> str:
        return self.get_query_url()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self.domain!r}, "
            f"nickname={self.nickname!r}, params={self.params!r})"
        )
