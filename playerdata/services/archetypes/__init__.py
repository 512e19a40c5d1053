"""Archetype inventory service: paginated archetype ID lists per profile.

A profile's archetype list is stored as pages ``"<id>/archetypes/1"``,
``"<id>/archetypes/2"``, ... each encoding to less than the page size limit.

Example usage:
    >>> from playerdata.services.kvstore import create_in_memory_store
    >>> from playerdata.services.archetypes import ArchetypeInventory
    >>>
    >>> inventory = ArchetypeInventory(create_in_memory_store())
    >>> inventory.update_archetype_ids(42, ["sword", "shield"])
    >>> sorted(inventory.get_archetype_ids(42))
    ['shield', 'sword']
"""

from .codec import Codec, JsonListCodec
from .enumerator import PageEnumerator
from .errors import ArchetypeTooLargeError, CodecError
from .inventory import ArchetypeInventory
from .keys import archetype_prefix, page_key, parse_page_number
from .paginator import DEFAULT_PAGE_SIZE_LIMIT, ArchetypePaginator, paginate
from .reader import ArchetypeReader

__all__ = [
    # Codec
    "Codec",
    "JsonListCodec",
    # Key scheme
    "archetype_prefix",
    "page_key",
    "parse_page_number",
    # Errors
    "ArchetypeTooLargeError",
    "CodecError",
    # Implementations
    "PageEnumerator",
    "ArchetypePaginator",
    "ArchetypeReader",
    "ArchetypeInventory",
    "paginate",
    "DEFAULT_PAGE_SIZE_LIMIT",
]
