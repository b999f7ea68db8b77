"""
Compact JSON Web Tokens signed with HMAC-SHA2 (HS256, HS384, HS512).

Usage:
    from hsjwt import Token, decode, encode

    token = Token({"sub": "1234567890"})
    raw = encode(token, key=b"secret")
    decode(raw, key=b"secret").get_claim("sub")  # "1234567890"
"""

from .codec import base64url_decode, base64url_encode, json_decode, json_encode
from .constants import ALGORITHMS, DEFAULT_ALGORITHM
from .decoder import decode
from .encoder import encode
from .exceptions import (
    EncodingError,
    ErrorKind,
    JwtError,
    MalformedTokenError,
    MissingAlgorithmError,
    NotFoundError,
    SignatureVerificationError,
    UnsupportedAlgorithmError,
)
from .result import Err, Ok, try_decode, try_encode
from .signer import sign, supported_algorithms, verify
from .token import Token

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "EncodingError",
    "Err",
    "ErrorKind",
    "JwtError",
    "MalformedTokenError",
    "MissingAlgorithmError",
    "NotFoundError",
    "Ok",
    "SignatureVerificationError",
    "Token",
    "UnsupportedAlgorithmError",
    "base64url_decode",
    "base64url_encode",
    "decode",
    "encode",
    "json_decode",
    "json_encode",
    "sign",
    "supported_algorithms",
    "try_decode",
    "try_encode",
    "verify",
]
