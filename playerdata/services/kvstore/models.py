"""Data models returned by key listings."""

from pydantic import BaseModel, ConfigDict, Field


class KeyInfo(BaseModel):
    """One entry of a paginated key listing."""

    model_config = ConfigDict(frozen=True)

    key_name: str = Field(..., description="Full key name, relative to the store namespace")
