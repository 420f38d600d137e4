"""Query builders for the hosted-groups (Google Apps provisioning) feeds."""

from __future__ import annotations

from .endpoints import (
    APPS_BASE_FEED_URI,
    APPS_GROUP_PATH,
    APPS_NICKNAME_PATH,
    APPS_USER_PATH,
    DEFAULT_ENDPOINTS,
    AppsEndpoints,
)
from .exceptions import GAppsError, InvalidArgumentError, MissingRequiredFieldError
from .factory import QueryFactory
from .queries import (
    GroupQuery,
    IAppsQuery,
    MemberQuery,
    NicknameQuery,
    OwnerQuery,
    UserQuery,
)
from .query_string import QueryParameters

__all__ = [
    "APPS_BASE_FEED_URI",
    "APPS_GROUP_PATH",
    "APPS_NICKNAME_PATH",
    "APPS_USER_PATH",
    "DEFAULT_ENDPOINTS",
    "AppsEndpoints",
    "GAppsError",
    "GroupQuery",
    "IAppsQuery",
    "InvalidArgumentError",
    "MemberQuery",
    "MissingRequiredFieldError",
    "NicknameQuery",
    "OwnerQuery",
    "QueryFactory",
    "QueryParameters",
    "UserQuery",
]
