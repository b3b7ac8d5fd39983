"""Unit tests for multipart/form-data bodies."""

from pathlib import Path

import pytest

from laakhay.http.body import (
    generate_boundary,
    guess_content_type,
    multipart_content_type,
    multipart_data,
)


def test_single_field_exact_bytes():
    body = multipart_data({"field": "hello"}, "B1")

    assert body == b'--B1\r\nContent-Disposition: form-data; name="field"\r\n\r\nhello\r\n--B1--'


def test_fields_keep_order_and_terminate_once():
    body = multipart_data({"a": 1, "b": "two"}, "XYZ")

    assert body == (
        b'--XYZ\r\nContent-Disposition: form-data; name="a"\r\n\r\n1\r\n'
        b'--XYZ\r\nContent-Disposition: form-data; name="b"\r\n\r\ntwo\r\n'
        b"--XYZ--"
    )


def test_file_part(tmp_path):
    upload = tmp_path / "note.txt"
    upload.write_bytes(b"file contents")

    body = multipart_data({"doc": upload}, "B2")

    assert body == (
        b'--B2\r\nContent-Disposition: form-data; name="doc"; filename="note.txt"\r\n'
        b"Content-Type: text/plain\r\n\r\n"
        b"file contents\r\n"
        b"--B2--"
    )


def test_file_part_unknown_type_uses_octet_stream(tmp_path):
    upload = tmp_path / "payload.zzunknown"
    upload.write_bytes(b"\x00\x01")

    body = multipart_data({"blob": upload}, "B3")

    assert b"Content-Type: application/octet-stream\r\n\r\n\x00\x01\r\n" in body


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        multipart_data({"doc": tmp_path / "missing.bin"}, "B4")


def test_bytes_value_is_embedded_verbatim():
    body = multipart_data({"raw": b"\xff\xfe"}, "B5")

    assert b"\r\n\r\n\xff\xfe\r\n--B5--" in body


def test_charset_applies_to_text():
    body = multipart_data({"name": "ü"}, "B6", charset="latin-1")

    assert b"\r\n\r\n\xfc\r\n" in body


def test_guess_content_type():
    assert guess_content_type(Path("image.png")) == "image/png"
    assert guess_content_type(Path("no_extension")) == "application/octet-stream"


def test_generate_boundary_is_random_decimal():
    first = generate_boundary()
    second = generate_boundary()

    assert first.isdigit()
    assert int(first) < 2**256
    assert first != second


def test_multipart_content_type():
    assert multipart_content_type("B1") == "multipart/form-data; boundary=B1"
