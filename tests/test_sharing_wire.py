"""Tests for the versioned wire payload and token compression helpers.

Updates:
  v0.1.2 - 2026-10-18 - Cover display of rejected versions.
  v0.1.1 - 2026-10-16 - Cover capped inflation of oversized streams.
  v0.1.0 - 2026-10-12 - Cover payload parsing and URL-safe tokens.
"""

from __future__ import annotations

import json
import re

import pytest

from core.exceptions import DataCorruptionError
from core.sharing import WIRE_VERSION, EncodedPayload, deflate_to_token, inflate_token
from core.sharing.wire import INVALID_FORMAT_MESSAGE


def _payload_bytes(**document: object) -> bytes:
    return json.dumps(document).encode("utf-8")


def test_encoded_payload_serialises_compact_json() -> None:
    """Payloads use short keys, the wire version, and no padding whitespace."""
    payload = EncodedPayload(t="Título", c="Body", cat="Work", cs="0badc0de")

    raw = payload.to_json_bytes()

    assert raw == '{"v":"1.0","t":"Título","c":"Body","cat":"Work","cs":"0badc0de"}'.encode()
    assert EncodedPayload.from_json_bytes(raw) == payload


def test_encoded_payload_rejects_unsupported_version() -> None:
    """Any version other than the supported one is named in the error."""
    raw = _payload_bytes(v="2.0", t="T", c="C", cat="K", cs="x")

    with pytest.raises(DataCorruptionError) as excinfo:
        EncodedPayload.from_json_bytes(raw)

    assert "v2.0 is not supported" in str(excinfo.value)
    assert excinfo.value.details == {"reason": "unsupported_version", "version": "2.0"}


@pytest.mark.parametrize(
    ("version", "shown"),
    [
        (None, "unknown"),
        (2, "2"),
        ("<b></b>", "unknown"),
        ("<script>x</script>3.0", "3.0"),
        ("1" * 40, "1" * 16),
    ],
)
def test_encoded_payload_shows_sanitized_version(version: object, shown: str) -> None:
    """Rejected versions are sanitized, shortened, and never shown as None."""
    raw = _payload_bytes(v=version, t="T", c="C", cat="K", cs="x")

    with pytest.raises(DataCorruptionError) as excinfo:
        EncodedPayload.from_json_bytes(raw)

    assert f"format v{shown} is not supported" in str(excinfo.value)
    assert excinfo.value.details["version"] == shown


@pytest.mark.parametrize(
    "raw",
    [
        b"{invalid json}",
        b"[1, 2, 3]",
        b"\xff\xfe",
        _payload_bytes(v=WIRE_VERSION, t="T", c="C", cat="K"),
        _payload_bytes(v=WIRE_VERSION, t="T", c=5, cat="K", cs="x"),
    ],
)
def test_encoded_payload_rejects_malformed_documents(raw: bytes) -> None:
    """Malformed JSON, non-objects, and missing or non-text fields are corruption."""
    with pytest.raises(DataCorruptionError) as excinfo:
        EncodedPayload.from_json_bytes(raw)

    assert str(excinfo.value) == INVALID_FORMAT_MESSAGE


def test_deflate_to_token_is_url_safe() -> None:
    """Tokens only use the URL-safe base64 alphabet without padding."""
    token = deflate_to_token(("Hello? World & friends / + = " * 20).encode("utf-8"))

    assert re.fullmatch(r"[A-Za-z0-9_-]+", token)


def test_inflate_token_restores_original_bytes() -> None:
    """Inflating a token yields the bytes that were deflated."""
    raw = "Zażółć gęślą jaźń\n\t你好".encode()

    assert inflate_token(deflate_to_token(raw), 1_000) == raw


def test_inflate_token_stops_one_byte_past_the_bound() -> None:
    """Oversized streams are cut off right after the bound is exceeded."""
    token = deflate_to_token(b"\0" * 5_000_000)

    inflated = inflate_token(token, 100)

    assert len(inflated) == 101


@pytest.mark.parametrize(
    "token",
    ["not-a-real-token", "abcde", "has spaces", "plus+slash/", "ünïcode"],
)
def test_inflate_token_rejects_garbage(token: str) -> None:
    """Garbage tokens surface as invalid-format corruption errors."""
    with pytest.raises(DataCorruptionError) as excinfo:
        inflate_token(token, 1_000)

    assert str(excinfo.value) == INVALID_FORMAT_MESSAGE


def test_inflate_token_rejects_truncated_stream() -> None:
    """A token cut short never inflates to a partial payload."""
    token = deflate_to_token(b'{"v":"1.0","t":"Title","c":"Some content here","cat":"Work"}')

    with pytest.raises(DataCorruptionError):
        inflate_token(token[:-8], 1_000)
