"""Unit tests for authorization header builders."""

from laakhay.http.body import basic_auth_header, bearer_auth_header


def test_basic_auth_header():
    assert basic_auth_header("user", "pass") == "Basic dXNlcjpwYXNz"


def test_basic_auth_header_utf8_credentials():
    assert basic_auth_header("jörg", "pä") == "Basic asO2cmc6cMOk"


def test_bearer_auth_header():
    assert bearer_auth_header("tok123") == "Bearer tok123"
