"""
MIT License

Publisher Id value type.

A Publisher Id is the 13 character Crockford Base32 code derived from the
publisher string of a package identity. Stored characters keep their case;
equality, ordering and hashing compare the ASCII case-folded form.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .errors import PUBLISHER_ID_LENGTH, InvalidCharacters, InvalidLength
from ..util.hashing import publisher_hash

CROCKFORD_OMITTED_CHARACTERS = frozenset("ilou")


def fold(text: str) -> bytes:
    """Return the ASCII case-folded UTF-8 bytes used for comparisons."""
    return text.encode("utf-8", "surrogatepass").lower()


def _is_crockford_char(char: str) -> bool:
    return char.isascii() and char.isalnum() and char.lower() not in CROCKFORD_OMITTED_CHARACTERS


@total_ordering
@dataclass(frozen=True, eq=False)
class PublisherId:
    """A validated Publisher Id. Bad characters are reported before a bad length."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Expected string Publisher Id, got {type(self.value).__name__}")
        if not all(_is_crockford_char(char) for char in self.value):
            raise InvalidCharacters()
        if len(self.value) != PUBLISHER_ID_LENGTH:
            raise InvalidLength()

    @classmethod
    def derive(cls, publisher: str) -> "PublisherId":
        """Derive the id of a publisher string. Never fails."""
        return cls(publisher_hash(publisher))

    @classmethod
    def parse(cls, candidate: str) -> "PublisherId":
        """Validate ``candidate`` as a Publisher Id, raising ``ValidationError``."""
        return cls(candidate)

    @classmethod
    def placeholder(cls) -> "PublisherId":
        return cls("0" * PUBLISHER_ID_LENGTH)

    def _key(self) -> bytes:
        return fold(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublisherId):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublisherId):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


__all__ = ["PublisherId", "CROCKFORD_OMITTED_CHARACTERS", "fold"]
