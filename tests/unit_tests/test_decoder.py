"""
Decoder tests: structural parsing, verification and tamper detection.
"""

from __future__ import annotations

import hmac
import json

import pytest

from hsjwt import (
    JwtError,
    MalformedTokenError,
    MissingAlgorithmError,
    SignatureVerificationError,
    Token,
    UnsupportedAlgorithmError,
    decode,
    encode,
)
from hsjwt import decoder
from hsjwt.codec import base64url_encode
from hsjwt.signer import sign

ALGORITHMS = ["HS256", "HS384", "HS512"]


def _segment(text: str) -> str:
    return base64url_encode(text.encode("utf-8"))


def _signed(header_json: str, claims_json: str, key: bytes = b"k", alg: str = "HS256") -> str:
    signing_input = f"{_segment(header_json)}.{_segment(claims_json)}"
    return f"{signing_input}.{base64url_encode(sign(signing_input, key, alg))}"


class TestReferenceVector:
    def test_decodes_and_verifies(self, reference_token: str) -> None:
        token = decode(reference_token, b"secret")
        assert token.get_headers() == {"typ": "JWT", "alg": "HS256"}
        assert token.get_claims() == {"sub": "1234567890", "name": "John Doe"}
        assert token.get_claim("name") == "John Doe"

    def test_decoded_token_has_no_key(self, reference_token: str) -> None:
        assert decode(reference_token, b"secret").get_key() is None


class TestRoundTrip:
    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize(
        "claims",
        [
            {},
            {"sub": "1", "admin": True, "n": None},
            {"scores": [1, 2.5, -3], "nested": {"a": {"b": [{}, []]}}},
            {"name": "Zoë", "emoji": "🔑"},
        ],
    )
    def test_claims_and_headers_survive(self, algorithm: str, claims: dict) -> None:
        token = Token(claims, headers={"alg": algorithm, "kid": "k1"})
        restored = decode(encode(token, b"key"), b"key", verify=True)
        assert restored.get_claims() == claims
        assert restored.get_headers() == token.get_headers()
        assert list(restored.get_claims()) == list(claims)


class TestSegments:
    @pytest.mark.parametrize("raw", ["a.b.c.d", "a.b", "", "abc", "a..b.c"])
    def test_wrong_number_of_segments(self, raw: str) -> None:
        with pytest.raises(MalformedTokenError, match="wrong number of segments"):
            decode(raw, b"k")

    @pytest.mark.parametrize("verify", [True, False])
    def test_undecodable_header(self, verify: bool) -> None:
        with pytest.raises(MalformedTokenError, match="invalid segment encoding") as exc_info:
            decode("!!!.e30.sig", b"k", verify=verify)
        assert exc_info.value.details == {"segment": "header"}

    def test_header_that_is_not_json(self) -> None:
        with pytest.raises(MalformedTokenError) as exc_info:
            decode(f"{_segment('not json')}.e30.sig", b"k")
        assert exc_info.value.__cause__ is not None

    def test_claims_that_are_not_json(self) -> None:
        with pytest.raises(MalformedTokenError) as exc_info:
            decode(f"{_segment('{}')}.{_segment('{oops')}.sig", b"k", verify=False)
        assert exc_info.value.details == {"segment": "claims"}

    @pytest.mark.parametrize("payload", ["null", "[1,2]", '"text"', "42"])
    def test_claims_must_be_an_object(self, payload: str) -> None:
        with pytest.raises(MalformedTokenError):
            decode(f"{_segment('{}')}.{_segment(payload)}.", verify=False)

    def test_null_header(self) -> None:
        with pytest.raises(MalformedTokenError):
            decode(f"{_segment('null')}.e30.", verify=False)


class TestVerification:
    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_wrong_key_is_rejected(self, algorithm: str) -> None:
        raw = encode(Token({"sub": "1"}), b"key-a", algorithm)
        with pytest.raises(SignatureVerificationError) as exc_info:
            decode(raw, b"key-b")
        assert exc_info.value.details == {"algorithm": algorithm}

    def test_missing_key_only_matches_empty_key(self) -> None:
        raw = encode(Token({"sub": "1"}), b"")
        assert decode(raw).get_claim("sub") == "1"
        with pytest.raises(SignatureVerificationError):
            decode(encode(Token({"sub": "1"}), b"k"))

    @pytest.mark.parametrize("header", ['{"typ":"JWT"}', '{"typ":"JWT","alg":""}', '{"alg":null}'])
    def test_missing_algorithm(self, header: str) -> None:
        with pytest.raises(MissingAlgorithmError):
            decode(f"{_segment(header)}.e30.", b"k")

    @pytest.mark.parametrize("alg", ["none", "None", "RS256", "HS1024"])
    def test_unsupported_algorithm(self, alg: str) -> None:
        header = json.dumps({"alg": alg})
        claims = _segment('{"sub":"1"}')
        raw = f"{_segment(header)}.{claims}."
        with pytest.raises(UnsupportedAlgorithmError):
            decode(raw, b"k")

    def test_non_string_algorithm(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            decode(_segment('{"alg":256}') + ".e30.", b"k")

    def test_signature_over_transmitted_bytes(self) -> None:
        """Whitespace and key order in the received JSON are what gets verified."""
        raw = _signed('{ "alg" : "HS256",  "typ":"JWT" }', '{"b": 1,\n "a": [1, 2]}')
        token = decode(raw, b"k")
        assert token.get_claims() == {"b": 1, "a": [1, 2]}
        assert list(token.get_headers()) == ["alg", "typ"]

    def test_non_canonical_signature_is_rejected(self, reference_token: str) -> None:
        # 'E' and 'F' differ only in the unused low bits of the final character
        assert reference_token.endswith("E")
        with pytest.raises(SignatureVerificationError):
            decode(reference_token[:-1] + "F", b"secret")

    def test_undecodable_signature_is_rejected(self, reference_token: str) -> None:
        with pytest.raises(SignatureVerificationError):
            decode(reference_token[:-4] + "!!!!", b"secret")

    def test_truncated_signature_is_rejected(self, reference_token: str) -> None:
        with pytest.raises(SignatureVerificationError):
            decode(reference_token[:-2], b"secret")

    def test_comparison_is_constant_time(self, monkeypatch, reference_token: str) -> None:
        calls = []
        real_compare = hmac.compare_digest

        def spy(a, b):
            calls.append((a, b))
            return real_compare(a, b)

        monkeypatch.setattr(decoder.hmac, "compare_digest", spy)
        decode(reference_token, b"secret")
        assert len(calls) == 1


class TestTamperDetection:
    @staticmethod
    def _replace(raw: str, index: int) -> str:
        current = raw[index]
        replacement = "A" if current != "A" else "B"
        return raw[:index] + replacement + raw[index + 1 :]

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_any_changed_character_is_detected(self, algorithm: str) -> None:
        raw = encode(Token({"sub": "1234567890", "role": "user"}), b"key", algorithm)
        signature_start = raw.rindex(".") + 1
        for index, char in enumerate(raw):
            if char == ".":
                continue
            tampered = self._replace(raw, index)
            expected = SignatureVerificationError if index >= signature_start else JwtError
            with pytest.raises(expected):
                decode(tampered, b"key")

    def test_swapped_claims_segment(self) -> None:
        original = encode(Token({"role": "user"}), b"key")
        forged = encode(Token({"role": "admin"}), b"other")
        header, _, signature = original.split(".")
        with pytest.raises(SignatureVerificationError):
            decode(f"{header}.{forged.split('.')[1]}.{signature}", b"key")


class TestVerifySkip:
    def test_bad_signature_is_accepted_without_verification(self, reference_token: str) -> None:
        tampered = reference_token.rsplit(".", 1)[0] + ".not-a-signature"
        token = decode(tampered, b"wrong", verify=False)
        assert token.get_headers() == {"typ": "JWT", "alg": "HS256"}
        assert token.get_claims() == {"sub": "1234567890", "name": "John Doe"}

    def test_header_is_returned_unchanged(self) -> None:
        raw = _segment('{"alg":"none","x":1}') + "." + _segment('{"a":1}') + "."
        token = decode(raw, verify=False)
        assert token.get_headers() == {"alg": "none", "x": 1}

    def test_missing_algorithm_is_not_checked(self) -> None:
        token = decode(f"{_segment('{}')}.e30.", verify=False)
        assert token.get_headers() == {}
