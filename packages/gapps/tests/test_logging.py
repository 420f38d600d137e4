"""Tests for debug logging emitted by the query builders."""

from __future__ import annotations

import pytest

from gdata_gapps.exceptions import MissingRequiredFieldError
from gdata_gapps.queries import MemberQuery


def test_built_url_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    url = MemberQuery("example.com", "sales").get_query_url()
    assert any(url in record.getMessage() for record in caplog.records)


def test_missing_group_id_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(MissingRequiredFieldError):
        MemberQuery("example.com").get_query_url()
    assert any("no group id" in record.getMessage() for record in caplog.records)
