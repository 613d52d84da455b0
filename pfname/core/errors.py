"""
MIT License

Validation errors raised when parsing identities from external text.
"""

from __future__ import annotations

PUBLISHER_ID_LENGTH = 13


class ValidationError(ValueError):
    """Base class for identity parsing failures."""

    message = "Invalid identity"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidLength(ValidationError):
    message = f"Expected Publisher Id length of {PUBLISHER_ID_LENGTH}"


class InvalidCharacters(ValidationError):
    message = "Expected Crockford Base-32 string (A-Z0-9 except no I, L, O, or U)"


class NoSeparator(ValidationError):
    message = "Expected Package Family Name with an underscore between name and Publisher Id"


__all__ = [
    "PUBLISHER_ID_LENGTH",
    "ValidationError",
    "InvalidLength",
    "InvalidCharacters",
    "NoSeparator",
]
