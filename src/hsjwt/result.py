"""
Value-or-error wrappers around encode and decode.

``try_encode`` and ``try_decode`` return ``Ok`` or ``Err`` instead of
raising, so callers can branch with ``match``::

    match try_decode(raw, key):
        case Ok(token):
            ...
        case Err(SignatureVerificationError()):
            ...

Only ``JwtError`` is captured; anything else still propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .decoder import decode
from .encoder import encode
from .exceptions import JwtError
from .signer import KeyLike
from .token import Token

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: JwtError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> None:
        raise self.error


Result = Union[Ok[T], Err]


def try_encode(token: Token, key: Optional[KeyLike] = None, algorithm: Optional[str] = None) -> Result[str]:
    try:
        return Ok(encode(token, key, algorithm))
    except JwtError as exc:
        return Err(exc)


def try_decode(jwt: str, key: Optional[KeyLike] = None, verify: bool = True) -> Result[Token]:
    try:
        return Ok(decode(jwt, key, verify))
    except JwtError as exc:
        return Err(exc)
