"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def base_url() -> str:
    """httpbin-compatible service the live tests talk to."""
    return os.environ.get("LAAKHAY_HTTP_TEST_URL", "https://httpbin.org").rstrip("/")
