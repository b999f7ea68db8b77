"""
Shared constants for token encoding and verification.

Every table here is built once at import time and exposed read-only, so it
can be shared between threads without locking.
"""

from __future__ import annotations

import hashlib
from types import MappingProxyType
from typing import Any, Callable, Mapping


# ================================
# Algorithms
# ================================

# Signing algorithm name -> hash constructor used with HMAC
ALGORITHMS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "HS256": hashlib.sha256,
        "HS384": hashlib.sha384,
        "HS512": hashlib.sha512,
    }
)

DEFAULT_ALGORITHM = "HS256"

TOKEN_TYPE = "JWT"


# ================================
# Serialization
# ================================

SEGMENT_SEPARATOR = "."

SEGMENT_COUNT = 3

DEFAULT_HEADERS: Mapping[str, Any] = MappingProxyType(
    {
        "typ": TOKEN_TYPE,
        "alg": DEFAULT_ALGORITHM,
    }
)


# ================================
# JSON errors
# ================================

JSON_ERROR_DEPTH = "DEPTH"
JSON_ERROR_CTRL_CHAR = "CTRL_CHAR"
JSON_ERROR_SYNTAX = "SYNTAX"
JSON_ERROR_UTF8 = "UTF8"

JSON_ERROR_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        JSON_ERROR_DEPTH: "maximum nesting depth exceeded",
        JSON_ERROR_CTRL_CHAR: "unexpected control character",
        JSON_ERROR_SYNTAX: "syntax error, malformed input",
    }
)
