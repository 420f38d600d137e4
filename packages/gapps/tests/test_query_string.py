"""Tests for QueryParameters."""

from __future__ import annotations

from gdata_gapps.queries import MemberQuery
from gdata_gapps.query_string import QueryParameters


def test_empty_renders_empty_string() -> None:
    assert QueryParameters().render() == ""


def test_render_keeps_insertion_order() -> None:
    params = QueryParameters()
    params.set("zeta", "1")
    params.set("alpha", "2")
    params.set("mid", "3")
    assert params.render() == "?zeta=1&alpha=2&mid=3"


def test_set_none_removes_key() -> None:
    params = QueryParameters({"start": "abc"})
    params.set("start", None)
    assert "start" not in params
    assert params.get("start") is None
    assert params.render() == ""


def test_set_none_for_missing_key_is_noop() -> None:
    params = QueryParameters()
    params.set("start", None)
    assert len(params) == 0


def test_initial_none_values_are_dropped() -> None:
    params = QueryParameters({"a": "1", "b": None})  # type: ignore[dict-item]
    assert list(params) == ["a"]


def test_private_keys_are_not_rendered() -> None:
    params = QueryParameters({"_internal": "x", "start": "abc"})
    assert params.render() == "?start=abc"
    assert params["_internal"] == "x"


def test_only_private_keys_render_empty() -> None:
    assert QueryParameters({"_internal": "x"}).render() == ""


def test_values_and_names_are_form_encoded() -> None:
    params = QueryParameters({"start name": "a b/c?d"})
    assert params.render() == "?start+name=a+b%2Fc%3Fd"


def test_mapping_protocol() -> None:
    params = QueryParameters()
    params["a"] = "1"
    params["b"] = "2"
    del params["a"]
    assert dict(params) == {"b": "2"}
    assert params == {"b": "2"}


def test_item_assignment_of_none_removes_key() -> None:
    params = QueryParameters({"start": "abc"})
    params["start"] = None  # type: ignore[assignment]
    assert "start" not in params
    assert params.render() == ""


def test_member_query_params_none_is_not_rendered() -> None:
    query = MemberQuery("example.com", "sales")
    query.params["start"] = None  # type: ignore[assignment]
    assert query.start_member_id is None
    assert "start" not in query.params
    assert query.get_query_url().endswith("/sales/member")


def test_declared_order_wins_over_insertion_order() -> None:
    params = QueryParameters(order=("member", "start"))
    params.set("extra", "x")
    params.set("start", "a")
    params.set("member", "jsmith")
    assert params.render() == "?member=jsmith&start=a&extra=x"


def test_tilde_is_left_unencoded() -> None:
    assert QueryParameters({"start": "j~smith"}).render() == "?start=j~smith"
