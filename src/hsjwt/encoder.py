from __future__ import annotations

from typing import Optional

from .codec import base64url_encode, json_encode
from .constants import SEGMENT_SEPARATOR
from .signer import KeyLike, sign
from .token import Token


def encode(token: Token, key: Optional[KeyLike] = None, algorithm: Optional[str] = None) -> str:
    """Serialize and sign a token into its compact form.

    ``key`` and ``algorithm`` override the token's key and ``alg`` header for
    this call only; the token itself is not modified.

    Raises:
        EncodingError: The header or claims cannot be serialized.
        UnsupportedAlgorithmError: ``alg`` is missing or not an HMAC algorithm.
    """
    headers = token.get_headers()
    if algorithm is not None:
        headers["alg"] = algorithm
    if key is None:
        key = token.get_key()

    segments = [
        base64url_encode(json_encode(headers).encode("utf-8")),
        base64url_encode(json_encode(token.get_claims()).encode("utf-8")),
    ]
    signing_input = SEGMENT_SEPARATOR.join(segments)
    segments.append(base64url_encode(sign(signing_input, key, headers.get("alg"))))
    return SEGMENT_SEPARATOR.join(segments)
