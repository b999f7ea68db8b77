"""
Canonical JSON and URL-safe Base64 framing for token segments.

JSON goes through orjson: output is compact (no insignificant whitespace),
keeps mapping insertion order and is UTF-8 encoded, which is what makes the
header and claims segments reproducible byte for byte.
"""

from __future__ import annotations

import base64
import binascii
import math
from typing import Any

import orjson

from .constants import (
    JSON_ERROR_CTRL_CHAR,
    JSON_ERROR_DEPTH,
    JSON_ERROR_MESSAGES,
    JSON_ERROR_SYNTAX,
    JSON_ERROR_UTF8,
)
from .exceptions import EncodingError

_TO_STANDARD = str.maketrans("-_", "+/")
_TO_URLSAFE = str.maketrans("+/", "-_")


# =============================================================================
# Base64Url
# =============================================================================


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe Base64."""
    return base64.b64encode(data).decode("ascii").translate(_TO_URLSAFE).rstrip("=")


def base64url_decode(data: str) -> bytes:
    """Decode URL-safe Base64, restoring any stripped padding first.

    Raises:
        EncodingError: The input holds characters outside the Base64 alphabet
            or has a length no padding can repair.
    """
    standard = data.translate(_TO_STANDARD)
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"Invalid base64url input: {exc}", reason="BASE64") from exc


# =============================================================================
# JSON
# =============================================================================


def _error_code(exc: Exception) -> str:
    """Map an orjson error message onto a JSON error code."""
    text = str(exc).lower()
    if "recursion" in text or "depth" in text:
        return JSON_ERROR_DEPTH
    if "control character" in text:
        return JSON_ERROR_CTRL_CHAR
    if "utf-8" in text or "utf8" in text:
        return JSON_ERROR_UTF8
    return JSON_ERROR_SYNTAX


def _error_message(code: str) -> str:
    return JSON_ERROR_MESSAGES.get(code, f"unknown parse error: {code}")


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_non_finite(item) for item in value)
    return False


def json_encode(value: Any) -> str:
    """Serialize a value to compact JSON text.

    Raises:
        EncodingError: The value contains something JSON cannot represent
            (unsupported types, non-string keys, out of range integers, NaN or
            infinity), or a non-null input serialized to ``null``.
    """
    try:
        encoded = orjson.dumps(value)
    except orjson.JSONEncodeError as exc:
        code = _error_code(exc)
        if code == JSON_ERROR_DEPTH:
            raise EncodingError(_error_message(code), reason=code) from exc
        raise EncodingError(f"Value cannot be encoded as JSON: {exc}", reason="UNSUPPORTED_TYPE") from exc

    # orjson writes NaN and infinity as null; its depth limit bounds the scan.
    if b"null" in encoded and _has_non_finite(value):
        raise EncodingError("Non-finite number cannot be represented in JSON", reason="INF_OR_NAN")
    if encoded == b"null" and value is not None:
        raise EncodingError("null result with non-null input", reason="NULL_RESULT")
    return encoded.decode("utf-8")


def json_decode(text: str | bytes) -> Any:
    """Parse JSON text into Python values.

    Raises:
        EncodingError: The text is not valid JSON. ``reason`` is one of the
            JSON error codes in ``hsjwt.constants``.
    """
    try:
        value = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        code = _error_code(exc)
        raise EncodingError(_error_message(code), reason=code) from exc

    literal = text if isinstance(text, str) else bytes(text).decode("utf-8", errors="replace")
    if value is None and literal != "null":
        raise EncodingError("null result with non-null input", reason="NULL_RESULT")
    return value
