"""
Compact token parsing and signature verification.

Verification signs the header and claims segments exactly as they were
received. Re-serializing the decoded JSON is never used, because a second
encoding is not guaranteed to reproduce the transmitted bytes.
"""

from __future__ import annotations

import hmac
from typing import Any, Optional

from .codec import base64url_decode, base64url_encode, json_decode
from .constants import SEGMENT_COUNT, SEGMENT_SEPARATOR
from .exceptions import (
    EncodingError,
    MalformedTokenError,
    MissingAlgorithmError,
    SignatureVerificationError,
)
from .signer import KeyLike, sign
from .token import Token


def _decode_segment(segment: str, name: str) -> dict[str, Any]:
    try:
        value = json_decode(base64url_decode(segment))
    except EncodingError as exc:
        raise MalformedTokenError("invalid segment encoding", segment=name) from exc
    if not isinstance(value, dict):
        raise MalformedTokenError("invalid segment encoding", segment=name)
    return value


def _decode_signature(segment: str, alg: str) -> bytes:
    try:
        signature = base64url_decode(segment)
    except EncodingError as exc:
        raise SignatureVerificationError(algorithm=alg) from exc
    # Reject alternative spellings of the same bytes (non-zero padding bits).
    if base64url_encode(signature) != segment:
        raise SignatureVerificationError(algorithm=alg)
    return signature


def decode(jwt: str, key: Optional[KeyLike] = None, verify: bool = True) -> Token:
    """Parse a compact token and, unless told otherwise, verify its signature.

    Passing ``verify=False`` skips the algorithm and signature checks
    entirely. The returned claims are then untrusted: anyone can produce a
    token that decodes this way. Only use it to inspect tokens.

    Raises:
        MalformedTokenError: Wrong segment count, or a header or claims
            segment that is not Base64Url-encoded JSON object text.
        MissingAlgorithmError: ``verify`` is set and the header has no ``alg``.
        UnsupportedAlgorithmError: ``alg`` is not an HMAC algorithm.
        SignatureVerificationError: The signature does not match.
    """
    parts = jwt.split(SEGMENT_SEPARATOR)
    if len(parts) != SEGMENT_COUNT:
        raise MalformedTokenError("wrong number of segments")

    header_segment, claims_segment, signature_segment = parts
    headers = _decode_segment(header_segment, "header")
    claims = _decode_segment(claims_segment, "claims")

    if verify:
        alg = headers.get("alg")
        if not alg:
            raise MissingAlgorithmError()

        signing_input = f"{header_segment}{SEGMENT_SEPARATOR}{claims_segment}"
        expected = sign(signing_input, key, alg)
        provided = _decode_signature(signature_segment, alg)
        if not hmac.compare_digest(provided, expected):
            raise SignatureVerificationError(algorithm=alg)

    return Token.from_parts(headers, claims)
