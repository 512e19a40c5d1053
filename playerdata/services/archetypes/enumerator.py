"""Draining paginated key listings."""

from typing import Iterator

from playerdata.services.kvstore import KeyInfo, KeyValueStore


class PageEnumerator:
    """Turns a store's paginated key listing into a lazy sequence.

    Each call starts a fresh listing. Pages are requested only as the
    caller iterates, in the order the store returns them. Store failures
    propagate to the caller unchanged.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def iter_pages(self, prefix: str) -> Iterator[list[KeyInfo]]:
        """Yield each listing page of keys starting with prefix."""
        cursor = self.store.list_keys(prefix)
        while True:
            yield cursor.current_page()
            if cursor.is_finished:
                return
            cursor.advance()

    def iter_keys(self, prefix: str) -> Iterator[str]:
        """Yield every key name starting with prefix."""
        for page in self.iter_pages(prefix):
            for key in page:
                yield key.key_name
