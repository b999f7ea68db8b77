"""
Error taxonomy for token encoding, decoding and claim access.

All errors share the ``JwtError`` root so callers can catch them in one
place, and each carries a stable ``code`` and an ``ErrorKind`` for callers
that prefer to branch on the kind instead of the class.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    MALFORMED_TOKEN = "malformed_token"
    ENCODING = "encoding"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    MISSING_ALGORITHM = "missing_algorithm"
    SIGNATURE_VERIFICATION = "signature_verification"
    NOT_FOUND = "not_found"


class JwtError(Exception):
    """Base class for every error raised by hsjwt."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class MalformedTokenError(JwtError, ValueError):
    """The compact token is structurally invalid.

    Raised for a wrong number of segments and for header or claims segments
    that are not valid Base64Url-encoded JSON objects.
    """

    kind = ErrorKind.MALFORMED_TOKEN

    def __init__(self, message: str, *, segment: Optional[str] = None) -> None:
        details = {"segment": segment} if segment else {}
        super().__init__(message, code="MALFORMED_TOKEN", details=details)


class EncodingError(JwtError, ValueError):
    """JSON or Base64Url (de)serialization failed.

    ``reason`` holds the machine readable cause, for example ``DEPTH`` or
    ``SYNTAX`` for JSON parse failures.
    """

    kind = ErrorKind.ENCODING

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message, code="ENCODING_ERROR", details={"reason": reason})
        self.reason = reason


class UnsupportedAlgorithmError(JwtError, ValueError):
    kind = ErrorKind.UNSUPPORTED_ALGORITHM

    def __init__(self, algorithm: Any) -> None:
        super().__init__(
            f"algorithm not supported: {algorithm!r}",
            code="UNSUPPORTED_ALGORITHM",
            details={"algorithm": algorithm},
        )
        self.algorithm = algorithm


class MissingAlgorithmError(JwtError, ValueError):
    kind = ErrorKind.MISSING_ALGORITHM

    def __init__(self, message: str = "empty algorithm") -> None:
        super().__init__(message, code="MISSING_ALGORITHM")


class SignatureVerificationError(JwtError, ValueError):
    kind = ErrorKind.SIGNATURE_VERIFICATION

    def __init__(self, message: str = "signature verification failed", *, algorithm: Optional[str] = None) -> None:
        details = {"algorithm": algorithm} if algorithm else {}
        super().__init__(message, code="SIGNATURE_VERIFICATION_FAILED", details=details)


class NotFoundError(JwtError, LookupError):
    """A header or claim that does not exist was requested."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, *, name: str, section: str) -> None:
        super().__init__(
            f"{section} '{name}' is not a valid value",
            code="NOT_FOUND",
            details={"name": name, "section": section},
        )
        self.name = name
        self.section = section
