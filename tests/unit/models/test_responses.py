"""Unit tests for response wrappers."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from laakhay.http.models import (
    BinaryResponse,
    FileResponse,
    MappedResponse,
    NoBodyResponse,
    StringResponse,
)


class Payload:
    """Arbitrary mapper output."""


def test_string_response_is_frozen():
    response = StringResponse(code=200, headers={}, body="ok")
    with pytest.raises(ValidationError):
        response.body = "changed"


def test_no_body_response_has_no_body_field():
    response = NoBodyResponse(code=204, headers={"Content-Length": ["0"]})

    assert "body" not in NoBodyResponse.model_fields
    assert not hasattr(response, "body")


def test_multi_valued_headers_kept_in_order():
    response = StringResponse(code=200, headers={"Set-Cookie": ["a=1", "b=2"]}, body="")

    assert response.headers["Set-Cookie"] == ("a=1", "b=2")
    assert response.header("set-cookie") == "a=1"
    assert response.header("X-Missing") is None


@pytest.mark.parametrize(("code", "ok"), [(200, True), (299, True), (301, False), (404, False)])
def test_ok(code, ok):
    assert NoBodyResponse(code=code).ok is ok


def test_binary_and_file_bodies():
    assert BinaryResponse(code=200, body=b"\x00\x01").body == b"\x00\x01"
    assert FileResponse(code=200, body=Path("/tmp/out.bin")).body == Path("/tmp/out.bin")


def test_mapped_response_keeps_mapper_object():
    payload = Payload()

    response = MappedResponse(code=201, headers={"Location": ["/items/1"]}, body=payload)

    assert response.body is payload
    assert response.code == 201


def test_headers_are_read_only():
    response = StringResponse(code=200, headers={"ETag": ["v1"]}, body="")

    with pytest.raises(TypeError):
        response.headers["X-Injected"] = ("1",)
    assert response.headers["ETag"] == ("v1",)
    assert response.model_dump()["headers"] == {"ETag": ["v1"]}


def test_default_headers_are_read_only():
    with pytest.raises(TypeError):
        NoBodyResponse(code=204).headers["X"] = ("1",)
