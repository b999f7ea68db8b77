from __future__ import annotations

import hmac
from typing import Any, Optional, Union

from .constants import ALGORITHMS
from .exceptions import UnsupportedAlgorithmError

KeyLike = Union[bytes, bytearray, str]


def _to_bytes(value: Optional[KeyLike]) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def supported_algorithms() -> tuple[str, ...]:
    return tuple(ALGORITHMS)


def sign(message: bytes | str, key: Optional[KeyLike], algorithm: Any) -> bytes:
    """Compute the raw HMAC of ``message`` for a registered algorithm.

    A missing key signs with the empty key.

    Raises:
        UnsupportedAlgorithmError: ``algorithm`` is not in the registry.
    """
    if not isinstance(algorithm, str) or algorithm not in ALGORITHMS:
        raise UnsupportedAlgorithmError(algorithm)
    return hmac.new(_to_bytes(key), _to_bytes(message), ALGORITHMS[algorithm]).digest()


def verify(message: bytes | str, signature: bytes, key: Optional[KeyLike], algorithm: Any) -> bool:
    """Check ``signature`` against a freshly computed MAC in constant time."""
    expected = sign(message, key, algorithm)
    return hmac.compare_digest(expected, bytes(signature))
