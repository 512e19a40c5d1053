"""In-memory key-value store implementation.

This implementation stores values in Python dictionaries (no persistence).
Useful for unit tests and local development without a MinIO server.
"""

import logging
from typing import Optional

from .cursor import BatchedKeyCursor
from .errors import ValueTooLargeError
from .models import KeyInfo

logger = logging.getLogger(__name__)

DEFAULT_MAX_VALUE_SIZE = 4_194_304
DEFAULT_LIST_PAGE_SIZE = 50


class InMemoryKeyValueStore:
    """In-memory KeyValueStore (no persistence).

    Enforces the same per-value size ceiling and paginated listing as the
    remote backends so callers exercise identical code paths.

    Example:
        >>> store = InMemoryKeyValueStore()
        >>> store.set("1/archetypes/1", b'["sword"]')
        >>> store.get("1/archetypes/1")
        b'["sword"]'
    """

    def __init__(
        self,
        max_value_size: int = DEFAULT_MAX_VALUE_SIZE,
        list_page_size: int = DEFAULT_LIST_PAGE_SIZE,
    ):
        """Initialize an empty store.

        Args:
            max_value_size: Per-value ceiling in bytes
            list_page_size: Number of keys per listing page
        """
        self.max_value_size = max_value_size
        self.list_page_size = list_page_size
        self._values: dict[str, bytes] = {}
        self._associated_ids: dict[str, list[int]] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._values.get(key)

    def set(
        self,
        key: str,
        value: bytes,
        associated_ids: Optional[list[int]] = None,
    ) -> None:
        if len(value) > self.max_value_size:
            raise ValueTooLargeError(key, len(value), self.max_value_size)
        self._values[key] = value
        self._associated_ids[key] = list(associated_ids or [])
        logger.debug(f"Stored {len(value)} bytes at {key}")

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
        self._associated_ids.pop(key, None)

    def list_keys(self, prefix: str) -> BatchedKeyCursor:
        # Snapshot so callers may remove keys while draining the cursor
        names = sorted(name for name in self._key_names() if name.startswith(prefix))
        return BatchedKeyCursor(
            [KeyInfo(key_name=name) for name in names],
            page_size=self.list_page_size,
        )

    def get_associated_ids(self, key: str) -> list[int]:
        """Return the player IDs recorded with the value at key."""
        return list(self._associated_ids.get(key, []))

    def count(self) -> int:
        """Get total number of stored values."""
        return len(self._values)

    def clear(self) -> None:
        """Remove all values."""
        self._values.clear()
        self._associated_ids.clear()

    def _key_names(self) -> list[str]:
        return list(self._values)
