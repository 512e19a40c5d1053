"""Loading and creating player profiles."""

import logging
import time
from typing import Callable

from playerdata.services.archetypes import ArchetypeInventory
from playerdata.services.kvstore import KeyValueStore

from .errors import ProfileNotFoundError
from .models import ProfileRecord
from .profile import Profile

logger = logging.getLogger(__name__)


def now_millis() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)


class ProfileRepository:
    """Profile lookup over the metadata store.

    Profile records live in the metadata store under ``str(player_id)``.
    Archetype pages live in the inventory's own store.
    """

    def __init__(
        self,
        metadata_store: KeyValueStore,
        inventory: ArchetypeInventory,
        clock: Callable[[], int] = now_millis,
    ):
        """Initialize repository.

        Args:
            metadata_store: Store holding profile records
            inventory: Archetype inventory bound to returned profiles
            clock: Returns the current time in ms (injectable for tests)
        """
        self.metadata_store = metadata_store
        self.inventory = inventory
        self.clock = clock

    def new(self, record: ProfileRecord) -> Profile:
        """Build a Profile from a record without touching the store."""
        return Profile(
            id=record.id,
            time_first_played=record.time_first_played,
            time_last_played=record.time_last_played,
            inventory=self.inventory,
        )

    def from_id(self, player_id: int, create_if_not_found: bool = False) -> Profile:
        """Load a profile, optionally creating its record on first access.

        Args:
            player_id: Player ID
            create_if_not_found: Create and persist a record when none exists

        Returns:
            Profile for player_id

        Raises:
            ProfileNotFoundError: If no record exists and creation was not requested
        """
        key = str(player_id)
        data = self.metadata_store.get(key)

        if data is None and create_if_not_found:
            played_at = self.clock()
            record = ProfileRecord(
                id=player_id,
                time_first_played=played_at,
                time_last_played=played_at,
            )
            data = record.to_json_bytes()
            self.metadata_store.set(key, data, associated_ids=[player_id])
            logger.info(f"Created profile for player {player_id}")

        if data is None:
            raise ProfileNotFoundError(player_id)

        return self.new(ProfileRecord.from_json_bytes(data))

    def exists(self, player_id: int) -> bool:
        """Check whether a profile record exists."""
        return self.metadata_store.get(str(player_id)) is not None
