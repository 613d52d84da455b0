"""
MIT License

Package Family Name value type: a display name joined to a Publisher Id.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Tuple

from .errors import NoSeparator
from .publisher_id import PublisherId, fold

SEPARATOR = "_"


@total_ordering
@dataclass(frozen=True, eq=False)
class PackageFamilyName:
    """
    Canonical ``<name>_<publisherid>`` identity of an installable package.

    The name is stored verbatim. A name containing an underscore is
    accepted here but will not survive ``parse(str(x))`` intact, since
    parsing splits on the first underscore.
    """

    name: str
    publisher_id: PublisherId

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Expected string name, got {type(self.name).__name__}")
        if not isinstance(self.publisher_id, PublisherId):
            raise TypeError(f"Expected PublisherId, got {type(self.publisher_id).__name__}")

    @classmethod
    def from_publisher(cls, name: str, publisher: str) -> "PackageFamilyName":
        """Build the family name for ``name`` signed by ``publisher``."""
        return cls(name, PublisherId.derive(publisher))

    @classmethod
    def parse(cls, text: str) -> "PackageFamilyName":
        """
        Parse a canonical family name.

        Raises ``NoSeparator`` when ``text`` has no underscore, or the
        ``PublisherId`` validation error of the suffix.
        """
        name, separator, publisher_id = text.partition(SEPARATOR)
        if not separator:
            raise NoSeparator()
        return cls(name, PublisherId.parse(publisher_id))

    @classmethod
    def placeholder(cls) -> "PackageFamilyName":
        return cls("", PublisherId.placeholder())

    def with_name(self, name: str) -> "PackageFamilyName":
        return replace(self, name=name)

    def _key(self) -> Tuple[bytes, PublisherId]:
        return fold(self.name), self.publisher_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageFamilyName):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageFamilyName):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((fold(self.name), SEPARATOR, hash(self.publisher_id)))

    def __str__(self) -> str:
        return f"{self.name}{SEPARATOR}{self.publisher_id}"


__all__ = ["PackageFamilyName", "SEPARATOR"]
