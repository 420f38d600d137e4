"""Shared fixtures for gdata-gapps tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="gdata_gapps")
