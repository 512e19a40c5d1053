"""Persisted profile record."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileRecord(BaseModel):
    """Profile metadata as stored in the PlayerMetadata store.

    Serialized with camelCase field names:
    ``{"id": 7, "timeFirstPlayed": 1700000000000, "timeLastPlayed": 1700000000000}``
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Player ID")
    time_first_played: int = Field(..., description="First session, ms since epoch")
    time_last_played: int = Field(..., description="Latest session, ms since epoch")

    def to_json_bytes(self) -> bytes:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True).encode()

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "ProfileRecord":
        return cls.model_validate_json(data)
