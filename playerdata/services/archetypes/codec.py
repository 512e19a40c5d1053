"""Serialization of archetype pages."""

from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from .errors import CodecError


class Codec(Protocol):
    """Encodes a list of identifiers to bytes and back (exact round trip)."""

    def encode(self, archetype_ids: list[str]) -> bytes:
        ...

    def decode(self, data: bytes) -> list[str]:
        ...


class JsonListCodec:
    """Compact JSON array codec.

    Encoded size is measured in UTF-8 bytes, which is what the store's
    per-value ceiling counts.

    Example:
        >>> JsonListCodec().encode(["a", "b"])
        b'["a","b"]'
    """

    def __init__(self):
        self._adapter = TypeAdapter(list[str])

    def encode(self, archetype_ids: list[str]) -> bytes:
        return self._adapter.dump_json(archetype_ids)

    def decode(self, data: bytes) -> list[str]:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as e:
            raise CodecError(f"Invalid archetype page: {e.error_count()} error(s)") from e
