"""Reading archetype pages back into one list."""

import logging
from typing import Optional

from playerdata.lib.logging_config import log_with_context
from playerdata.services.kvstore import KeyValueStore

from .codec import Codec, JsonListCodec
from .enumerator import PageEnumerator
from .errors import CodecError
from .keys import archetype_prefix

logger = logging.getLogger(__name__)


class ArchetypeReader:
    """Collects every archetype page of a profile.

    A listed key without a value (torn write) or with an undecodable value is
    deleted and skipped. That is expected transient inconsistency, so it is
    logged rather than raised. Store failures propagate.
    """

    def __init__(self, store: KeyValueStore, codec: Optional[Codec] = None):
        """Initialize reader.

        Args:
            store: Store holding archetype pages
            codec: Page serializer (JsonListCodec if None)
        """
        self.store = store
        self.codec = codec or JsonListCodec()
        self.enumerator = PageEnumerator(store)

    def get_archetype_ids(self, profile_id: int) -> list[str]:
        """Return the concatenation of all pages in listing order.

        Args:
            profile_id: Owning profile

        Returns:
            Archetype IDs (empty if the profile has no pages)
        """
        archetype_ids: list[str] = []

        for key in self.enumerator.iter_keys(archetype_prefix(profile_id)):
            data = self.store.get(key)
            if data is None:
                self._discard(profile_id, key, "missing value")
                continue

            try:
                page = self.codec.decode(data)
            except CodecError as e:
                self._discard(profile_id, key, str(e))
                continue

            archetype_ids.extend(page)

        return archetype_ids

    def _discard(self, profile_id: int, key: str, reason: str) -> None:
        self.store.remove(key)
        log_with_context(
            logger,
            "warning",
            f"Removed unreadable archetype page {key}: {reason}",
            profile_id=profile_id,
            key=key,
        )
