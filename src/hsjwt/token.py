"""
In-memory token: a header mapping, a claims mapping and an optional key.

The key is never serialized. Claims can also be reached with mapping syntax
(``token["sub"]``), which goes through the same accessors and raises
``NotFoundError`` for missing names.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .constants import DEFAULT_HEADERS
from .exceptions import NotFoundError
from .signer import KeyLike


class Token:
    def __init__(
        self,
        claims: Optional[Mapping[str, Any]] = None,
        *,
        headers: Optional[Mapping[str, Any]] = None,
        key: Optional[KeyLike] = None,
    ) -> None:
        self._headers: dict[str, Any] = dict(DEFAULT_HEADERS)
        self._claims: dict[str, Any] = {}
        self._key: Optional[KeyLike] = None
        if headers:
            self.set_headers(headers)
        if claims:
            self.set_claims(claims)
        if key is not None:
            self.set_key(key)

    @classmethod
    def from_parts(cls, headers: Mapping[str, Any], claims: Mapping[str, Any]) -> Token:
        """Build a token whose header is exactly ``headers``, without defaults."""
        token = cls()
        token._headers = {str(name): value for name, value in headers.items()}
        token._claims = {str(name): value for name, value in claims.items()}
        return token

    def __repr__(self) -> str:
        return f"Token(headers={self._headers!r}, claims={self._claims!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._headers == other._headers and self._claims == other._claims

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # Headers
    # =========================================================================

    def get_header(self, name: str) -> Any:
        name = str(name)
        if name not in self._headers:
            raise NotFoundError(name=name, section="header")
        return self._headers[name]

    def get_headers(self) -> dict[str, Any]:
        return dict(self._headers)

    def set_header(self, name: str, value: Any) -> Token:
        self._headers[str(name)] = value
        return self

    def set_headers(self, headers: Mapping[str, Any]) -> Token:
        """Merge ``headers`` into the current header, replacing existing names."""
        for name, value in headers.items():
            self.set_header(name, value)
        return self

    # =========================================================================
    # Claims
    # =========================================================================

    def has_claim(self, name: str) -> bool:
        return str(name) in self._claims

    def get_claim(self, name: str) -> Any:
        name = str(name)
        if name not in self._claims:
            raise NotFoundError(name=name, section="claim")
        return self._claims[name]

    def get_claims(self) -> dict[str, Any]:
        return dict(self._claims)

    def set_claim(self, name: str, value: Any) -> Token:
        self._claims[str(name)] = value
        return self

    def set_claims(self, claims: Mapping[str, Any]) -> Token:
        """Merge ``claims`` into the current claims, replacing existing names."""
        for name, value in claims.items():
            self.set_claim(name, value)
        return self

    def remove_claim(self, name: str) -> Token:
        self._claims.pop(str(name), None)
        return self

    # Mapping-style access to claims

    def __contains__(self, name: object) -> bool:
        return self.has_claim(str(name))

    def __getitem__(self, name: str) -> Any:
        return self.get_claim(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_claim(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove_claim(name)

    # =========================================================================
    # Key
    # =========================================================================

    def get_key(self) -> Optional[KeyLike]:
        return self._key

    def set_key(self, key: Optional[KeyLike]) -> Token:
        self._key = key
        return self
