# topmark:header:start
#
#   project      : MimeSniff
#   file         : test_app.py
#   file_relpath : tests/test_app.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the sniffing WSGI application."""

from __future__ import annotations

import io
import json
from typing import Any

import pytest
from werkzeug.test import Client

from mimesniff.app import SniffApp, create_app
from mimesniff.source import SourceNotFoundError
from tests.conftest import make_config

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def client() -> Client:
    return Client(create_app())


def _json(response: Any) -> dict[str, Any]:
    return json.loads(response.get_data(as_text=True))


def test_raw_body_is_sniffed(client: Client) -> None:
    response = client.post("/", data=PNG_MAGIC + b"\x00" * 16)
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert _json(response) == {"mime": "image/png", "extra": "png"}


def test_form_upload_is_sniffed(client: Client) -> None:
    response = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"<html><body></body></html>"), "page.html")},
    )
    assert response.status_code == 200
    assert _json(response) == {"mime": "text/html; charset=utf-8", "extra": ""}


def test_get_is_not_allowed(client: Client) -> None:
    response = client.get("/")
    assert response.status_code == 405
    assert response.headers["Allow"] == "POST"
    assert _json(response)["error"] == "method_not_allowed"


def test_empty_body_is_bad_request(client: Client) -> None:
    response = client.post("/", data=b"")
    assert response.status_code == 400
    body = _json(response)
    assert body["error"] == "empty_body"
    assert body["message"]


def test_missing_form_field_is_bad_request(client: Client) -> None:
    response = client.post("/", data={"other": (io.BytesIO(b"abc"), "a.txt")})
    assert response.status_code == 400
    assert _json(response)["error"] == "missing_file_field"


def test_malformed_form_is_bad_request(client: Client) -> None:
    response = client.post(
        "/", data=b"garbage-not-multipart", content_type="multipart/form-data; boundary=x"
    )
    assert response.status_code == 400
    assert _json(response)["error"] == "form_parse_error"


def test_configured_methods_are_honored() -> None:
    client = Client(create_app(make_config(methods=["PUT"])))
    assert client.put("/", data=b"%PDF-1.5").status_code == 200
    response = client.post("/", data=b"%PDF-1.5")
    assert response.status_code == 405
    assert response.headers["Allow"] == "PUT"


def test_unknown_source_fails_at_construction() -> None:
    with pytest.raises(SourceNotFoundError):
        SniffApp(make_config(sources=["missing"]))
