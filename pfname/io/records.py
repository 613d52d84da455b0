"""
MIT License

String interchange for identity values.

Both value types travel as their canonical text; decoding delegates to the
``parse`` operations so callers see the same validation errors.
"""

from __future__ import annotations

from ..core.family_name import PackageFamilyName
from ..core.publisher_id import PublisherId


def encode_identity(value: object) -> str:
    """Serialize an identity value; suitable as ``json.dumps(default=...)``."""
    if isinstance(value, (PublisherId, PackageFamilyName)):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def decode_publisher_id(value: object) -> PublisherId:
    if not isinstance(value, str):
        raise TypeError(f"Expected string Publisher Id, got {type(value).__name__}")
    return PublisherId.parse(value)


def decode_family_name(value: object) -> PackageFamilyName:
    if not isinstance(value, str):
        raise TypeError(f"Expected string Package Family Name, got {type(value).__name__}")
    return PackageFamilyName.parse(value)


__all__ = ["encode_identity", "decode_publisher_id", "decode_family_name"]
