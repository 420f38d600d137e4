"""Tests for QueryFactory."""

from __future__ import annotations

import pytest

from gdata_gapps import (
    APPS_BASE_FEED_URI,
    AppsEndpoints,
    GroupQuery,
    InvalidArgumentError,
    MemberQuery,
    QueryFactory,
)


def test_member_query_is_bound_to_domain() -> None:
    factory = QueryFactory("example.com")
    query = factory.member_query("sales", member_id="jsmith")
    assert isinstance(query, MemberQuery)
    assert query.domain == "example.com"
    assert query.get_query_url() == (
        APPS_BASE_FEED_URI + "/group/example.com/sales/member/jsmith"
    )


def test_factory_passes_endpoints() -> None:
    endpoints = AppsEndpoints(base_feed_uri="http://localhost:8080/a/feeds")
    factory = QueryFactory("example.com", endpoints=endpoints)
    assert factory.endpoints is endpoints
    url = factory.user_query("jsmith").get_query_url()
    assert url == "http://localhost:8080/a/feeds/user/2.0/example.com/jsmith"
    assert factory.owner_query("sales").endpoints is endpoints
    assert factory.nickname_query().endpoints is endpoints


def test_factory_returns_independent_queries() -> None:
    factory = QueryFactory("example.com")
    first = factory.group_query(start_group_id="a")
    second = factory.group_query()
    assert isinstance(first, GroupQuery)
    assert first is not second
    assert second.start_group_id is None


def test_factory_rejects_empty_domain() -> None:
    with pytest.raises(InvalidArgumentError):
        QueryFactory("")
