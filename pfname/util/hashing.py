"""
MIT License

Deterministic hashing used to derive publisher identifiers.
"""

from __future__ import annotations

import base64
import hashlib

CROCKFORD_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
HASH_TRUNCATION_LENGTH = 8

# RFC 4648 base32 and Crockford share bit layout, only the symbols differ.
_RFC4648_TO_CROCKFORD = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", CROCKFORD_ALPHABET)


def crockford_encode(data: bytes) -> str:
    """Encode bytes as unpadded lowercase Crockford Base32."""
    encoded = base64.b32encode(data).decode("ascii").rstrip("=")
    return encoded.translate(_RFC4648_TO_CROCKFORD)


def publisher_hash(text: str) -> str:
    """
    Return the 13 character publisher hash for ``text``.

    The text is hashed as UTF-16LE code units with SHA-256, lone
    surrogates included; the first eight digest bytes are Crockford
    encoded, the last symbol carrying one zero pad bit.
    """
    digest = hashlib.sha256(text.encode("utf-16-le", "surrogatepass")).digest()
    return crockford_encode(digest[:HASH_TRUNCATION_LENGTH])


__all__ = ["CROCKFORD_ALPHABET", "HASH_TRUNCATION_LENGTH", "crockford_encode", "publisher_hash"]
