"""Protocol definitions for key-value stores.

Protocols define interfaces without implementation, enabling:
- In-memory fakes for tests
- Swappable backends (in-memory, MinIO)
- Constructor injection into the archetype and profile services
"""

from typing import Optional, Protocol

from .models import KeyInfo


class KeyCursor(Protocol):
    """Cursor over a paginated key listing.

    The cursor starts positioned on the first page. A listing with no
    matching keys has a single empty page and is already finished.
    """

    @property
    def is_finished(self) -> bool:
        """True when the current page is the last one."""
        ...

    def current_page(self) -> list[KeyInfo]:
        """Return the keys of the current page."""
        ...

    def advance(self) -> None:
        """Move to the next page, blocking until it is available.

        Raises:
            CursorExhaustedError: If the cursor is already finished
        """
        ...


class KeyValueStore(Protocol):
    """Remote key-value store with a per-value size ceiling."""

    def get(self, key: str) -> Optional[bytes]:
        """Retrieve a value by exact key.

        Args:
            key: Key to look up

        Returns:
            Stored bytes, or None if the key has no value
        """
        ...

    def set(
        self,
        key: str,
        value: bytes,
        associated_ids: Optional[list[int]] = None,
    ) -> None:
        """Store a value, overwriting any existing one.

        Args:
            key: Key to write
            value: Serialized value
            associated_ids: Optional player IDs the value belongs to

        Raises:
            ValueTooLargeError: If value exceeds the store's size ceiling
        """
        ...

    def remove(self, key: str) -> None:
        """Remove a key. Removing a missing key is not an error."""
        ...

    def list_keys(self, prefix: str) -> KeyCursor:
        """List keys starting with prefix through a paginated cursor.

        Args:
            prefix: Key prefix to match

        Returns:
            Cursor positioned on the first page of matching keys
        """
        ...
