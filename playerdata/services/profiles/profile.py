"""Player profile entity."""

from dataclasses import dataclass, field
from typing import Sequence

from playerdata.services.archetypes import ArchetypeInventory

from .models import ProfileRecord


@dataclass
class Profile:
    """A player's profile bound to the archetype inventory it reads and writes.

    Attributes:
        id: Player ID, also the root of the profile's store keys
        time_first_played: First session, ms since epoch
        time_last_played: Latest session, ms since epoch
        inventory: Archetype inventory holding this profile's pages
    """

    id: int
    time_first_played: int
    time_last_played: int
    inventory: ArchetypeInventory = field(repr=False, compare=False)

    def get_archetype_ids(self) -> list[str]:
        """Return every archetype ID the player owns."""
        return self.inventory.get_archetype_ids(self.id)

    def update_archetype_ids(self, archetype_ids: Sequence[str]) -> None:
        """Replace the player's owned archetype ID list."""
        self.inventory.update_archetype_ids(self.id, archetype_ids)

    def delete(self) -> None:
        """Delete all player data."""
        raise NotImplementedError("Deleting player data is not supported")

    def to_record(self) -> ProfileRecord:
        return ProfileRecord(
            id=self.id,
            time_first_played=self.time_first_played,
            time_last_played=self.time_last_played,
        )
