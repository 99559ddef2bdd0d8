"""Command line: encrypt a text with Playfair and decrypt it again."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from classicciphers.playfair import playfair_decrypt, playfair_encrypt


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicciphers",
        description="Encrypt a text with the Playfair cipher and decrypt it again.",
    )
    parser.add_argument("key", nargs="?", default="Ahoj", help="cipher key")
    parser.add_argument("text", nargs="?", default="Balloon", help="text to encrypt")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the encrypted text and its decryption; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        encrypted = playfair_encrypt(args.key, args.text)
        print(f"Encrypted: {encrypted}")
        decrypted = playfair_decrypt(args.key, encrypted)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Decrypted: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())