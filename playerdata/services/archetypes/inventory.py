"""Archetype inventory facade over one store."""

from typing import Optional, Sequence

from playerdata.services.kvstore import KeyValueStore

from .codec import Codec, JsonListCodec
from .paginator import DEFAULT_PAGE_SIZE_LIMIT, ArchetypePaginator
from .reader import ArchetypeReader


class ArchetypeInventory:
    """Reads and writes paginated archetype lists sharing one store and codec."""

    def __init__(
        self,
        store: KeyValueStore,
        codec: Optional[Codec] = None,
        page_size_limit: int = DEFAULT_PAGE_SIZE_LIMIT,
    ):
        codec = codec or JsonListCodec()
        self.store = store
        self.reader = ArchetypeReader(store, codec)
        self.paginator = ArchetypePaginator(store, codec, page_size_limit)

    def get_archetype_ids(self, profile_id: int) -> list[str]:
        return self.reader.get_archetype_ids(profile_id)

    def update_archetype_ids(self, profile_id: int, archetype_ids: Sequence[str]) -> None:
        self.paginator.update_archetype_ids(profile_id, archetype_ids)
