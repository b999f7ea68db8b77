"""
Command line access to token encoding and verification.

    hsjwt encode --claims '{"sub": "42"}' --key secret
    hsjwt decode <token> --key secret
    hsjwt decode <token> --no-verify
    hsjwt verify <token> --key secret

The key falls back to ``HSJWT_SECRET`` when ``--key`` is not given.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

from .codec import json_decode, json_encode
from .config import Settings
from .constants import ALGORITHMS
from .decoder import decode
from .encoder import encode
from .exceptions import JwtError
from .logging import configure_logging, get_logger
from .token import Token

logger = get_logger("hsjwt.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hsjwt", description="Encode and verify HMAC-signed JSON Web Tokens.")
    parser.add_argument("--log-level", default=None, help="Override HSJWT_LOG_LEVEL")
    commands = parser.add_subparsers(dest="command", required=True)

    encode_cmd = commands.add_parser("encode", help="Sign claims into a compact token")
    encode_cmd.add_argument("--claims", default="{}", help="Claims as a JSON object")
    encode_cmd.add_argument("--header", default=None, help="Extra header fields as a JSON object")
    encode_cmd.add_argument("--alg", choices=sorted(ALGORITHMS), default=None, help="Signing algorithm")
    encode_cmd.add_argument("--key", default=None, help="Shared secret (default: HSJWT_SECRET)")

    decode_cmd = commands.add_parser("decode", help="Decode a token and print its header and claims")
    decode_cmd.add_argument("token")
    decode_cmd.add_argument("--key", default=None, help="Shared secret (default: HSJWT_SECRET)")
    decode_cmd.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip signature verification. The output is untrusted.",
    )

    verify_cmd = commands.add_parser("verify", help="Check a token's signature")
    verify_cmd.add_argument("token")
    verify_cmd.add_argument("--key", default=None, help="Shared secret (default: HSJWT_SECRET)")

    return parser


def _json_object(parser: argparse.ArgumentParser, raw: str, name: str) -> dict[str, Any]:
    value = json_decode(raw)
    if not isinstance(value, dict):
        parser.error(f"--{name} must be a JSON object")
    return value


def _run_encode(parser: argparse.ArgumentParser, args: argparse.Namespace, settings: Settings) -> str:
    token = Token(_json_object(parser, args.claims, "claims"))
    header = _json_object(parser, args.header, "header") if args.header else {}
    token.set_headers(header)
    algorithm = args.alg or header.get("alg") or settings.jwt.algorithm
    key = args.key if args.key is not None else settings.jwt.key
    result = encode(token, key, algorithm)
    logger.info("token_encoded", alg=algorithm)
    return result


def _run_decode(args: argparse.Namespace, settings: Settings, *, verify: bool) -> Token:
    key = args.key if args.key is not None else settings.jwt.key
    token = decode(args.token.strip(), key, verify)
    if verify:
        logger.info("token_verified", alg=token.get_headers().get("alg"))
    else:
        logger.warning("token_not_verified", alg=token.get_headers().get("alg"))
    return token


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    # Read per invocation so the environment at call time applies.
    settings = Settings()
    configure_logging(
        level=args.log_level or settings.logging.level.value,
        sinks=settings.logging.sinks,
        fmt=settings.logging.format.value,
        file_path=settings.logging.file_path,
        stream=sys.stderr,
    )

    try:
        if args.command == "encode":
            print(_run_encode(parser, args, settings))
        elif args.command == "decode":
            verify = settings.jwt.verify and not args.no_verify
            token = _run_decode(args, settings, verify=verify)
            print(json_encode({"header": token.get_headers(), "claims": token.get_claims()}))
        else:
            _run_decode(args, settings, verify=True)
            print("valid")
    except JwtError as exc:
        logger.error(f"{args.command}_failed", code=exc.code, error=exc.message, **exc.details)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
