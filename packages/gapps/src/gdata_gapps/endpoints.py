"""Feed URI and resource paths of the hosted-groups provisioning API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

APPS_BASE_FEED_URI = "https://apps-apis.google.com/a/feeds"
APPS_GROUP_PATH = "/group"
APPS_USER_PATH = "/user/2.0"
APPS_NICKNAME_PATH = "/nickname/2.0"


class AppsEndpoints(BaseModel):
    """Immutable set of endpoint prefixes used by the query builders.

    Attributes:
        base_feed_uri: Feed URI shared by every resource collection.
        group_path: Segment for group, member and owner feeds.
        user_path: Segment for user account feeds.
        nickname_path: Segment for nickname feeds.
    """

    model_config = ConfigDict(frozen=True)

    base_feed_uri: str = APPS_BASE_FEED_URI
    group_path: str = APPS_GROUP_PATH
    user_path: str = APPS_USER_PATH
    nickname_path: str = APPS_NICKNAME_PATH

    @field_validator("base_feed_uri")
    @classmethod
    def check_base_feed_uri(cls, value: str) -> str:
        if not value or value.endswith("/"):
            raise ValueError("base_feed_uri must be non-empty without a trailing '/'")
        return value

    @field_validator("group_path", "user_path", "nickname_path")
    @classmethod
    def check_resource_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("resource paths must start with '/'")
        return value

    def group_feed(self) -> str:
        return self.base_feed_uri + self.group_path

    def user_feed(self) -> str:
        return self.base_feed_uri + self.user_path

    def nickname_feed(self) -> str:
        return self.base_feed_uri + self.nickname_path


DEFAULT_ENDPOINTS = AppsEndpoints()
