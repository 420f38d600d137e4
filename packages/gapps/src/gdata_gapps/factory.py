"""QueryFactory — query builders pre-bound to one hosted domain."""

from __future__ import annotations

from .endpoints import DEFAULT_ENDPOINTS, AppsEndpoints
from .exceptions import InvalidArgumentError
from .queries import GroupQuery, MemberQuery, NicknameQuery, OwnerQuery, UserQuery


class QueryFactory:
    """Creates queries that share a domain and an endpoint configuration.

    Every call returns a new, independent query object.

    Example:
        ```python
        factory = QueryFactory("example.com")
        url = factory.member_query("sales", member_id="jsmith").get_query_url()
        ```
    """

    def __init__(self, domain: str, *, endpoints: AppsEndpoints | None = None) -> None:
        """Initialize the factory.

        Args:
            domain: Hosted domain inserted into every URL.
            endpoints: Feed URI and paths; defaults to the public API.
        """
        if not domain:
            raise InvalidArgumentError("domain must not be empty")
        self._domain = domain
        self._endpoints = endpoints or DEFAULT_ENDPOINTS

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def endpoints(self) -> AppsEndpoints:
        return self._endpoints

    def member_query(
        self,
        group_id: str | None = None,
        member_id: str | None = None,
        start_member_id: str | None = None,
    ) -> MemberQuery:
        return MemberQuery(
            self._domain,
            group_id,
            member_id,
            start_member_id,
            endpoints=self._endpoints,
        )

    def owner_query(
        self, group_id: str | None = None, owner_email: str | None = None
    ) -> OwnerQuery:
        return OwnerQuery(
            self._domain, group_id, owner_email, endpoints=self._endpoints
        )

    def group_query(
        self,
        group_id: str | None = None,
        member: str | None = None,
        direct_only: bool | None = None,
        start_group_id: str | None = None,
    ) -> GroupQuery:
        return GroupQuery(
            self._domain,
            group_id,
            member,
            direct_only,
            start_group_id,
            endpoints=self._endpoints,
        )

    def user_query(
        self, username: str | None = None, start_username: str | None = None
    ) -> UserQuery:
        return UserQuery(
            self._domain, username, start_username, endpoints=self._endpoints
        )

    def nickname_query(
        self,
        nickname: str | None = None,
        username: str | None = None,
        start_nickname: str | None = None,
    ) -> NicknameQuery:
        return NicknameQuery(
            self._domain,
            nickname,
            username,
            start_nickname,
            endpoints=self._endpoints,
        )
