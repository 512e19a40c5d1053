"""Size-bounded pagination of archetype ID lists.

A player's archetype list can outgrow the store's per-value ceiling, so it is
split over several page keys. Splitting is greedy tail overflow: while a page
encodes to ``size_limit`` bytes or more, its last identifier moves to the end
of the next page. Identifiers that spill therefore land on the next page in
last-to-first order. Round trips preserve the multiset of identifiers, not
their positions across page boundaries.

The page count is minimal for this greedy strategy, not a global optimum.
"""

import logging
from typing import Callable, Optional, Sequence

from playerdata.lib.logging_config import log_with_context
from playerdata.services.kvstore import KeyValueStore

from .codec import Codec, JsonListCodec
from .enumerator import PageEnumerator
from .errors import ArchetypeTooLargeError
from .keys import archetype_prefix, page_key, parse_page_number

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE_LIMIT = 4_194_304

Encoder = Callable[[list[str]], bytes]


def paginate(
    archetype_ids: Sequence[str],
    size_limit: int,
    encode: Encoder,
) -> list[list[str]]:
    """Split identifiers into pages that each encode to fewer than size_limit bytes.

    Page 1 starts with every identifier; each page then hands its overflow
    to the next page, last element first.

    Args:
        archetype_ids: Identifiers in caller order
        size_limit: Exclusive upper bound on a page's encoded size in bytes
        encode: Serializer whose output length is measured

    Returns:
        Non-empty list of pages. An empty input yields one empty page.

    Raises:
        ValueError: If even an empty page does not fit under size_limit
        ArchetypeTooLargeError: If one identifier alone does not fit
    """
    empty_size = len(encode([]))
    if empty_size >= size_limit:
        raise ValueError(
            f"size_limit {size_limit} is too small, an empty page encodes to {empty_size} bytes"
        )

    for archetype_id in dict.fromkeys(archetype_ids):
        size = len(encode([archetype_id]))
        if size >= size_limit:
            raise ArchetypeTooLargeError(archetype_id, size, size_limit)

    pages = [list(archetype_ids)]
    index = 0
    while index < len(pages):
        page = pages[index]
        keep = _fitting_length(page, size_limit, encode)
        if keep < len(page):
            if index + 1 == len(pages):
                pages.append([])
            pages[index + 1].extend(reversed(page[keep:]))
            del page[keep:]
        index += 1

    return pages


def _fitting_length(page: list[str], size_limit: int, encode: Encoder) -> int:
    """Longest prefix length of page whose encoding is under size_limit.

    Encoded size grows with prefix length, so bisection finds the same cut
    as removing tail elements one at a time. Callers guarantee a one-element
    prefix fits.
    """
    if len(encode(page)) < size_limit:
        return len(page)

    lo, hi = 1, len(page) - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if len(encode(page[:mid])) < size_limit:
            lo = mid
        else:
            hi = mid - 1
    return lo


class ArchetypePaginator:
    """Writes a profile's archetype list as pages and prunes stale ones.

    Updates are not transactional across pages: a failure while writing page
    k leaves pages 1..k-1 updated and the rest stale. The next successful
    update rewrites the full list and reconciles.
    """

    def __init__(
        self,
        store: KeyValueStore,
        codec: Optional[Codec] = None,
        size_limit: int = DEFAULT_PAGE_SIZE_LIMIT,
    ):
        """Initialize paginator.

        Args:
            store: Store holding archetype pages
            codec: Page serializer (JsonListCodec if None)
            size_limit: Exclusive upper bound on a page's encoded size
        """
        self.store = store
        self.codec = codec or JsonListCodec()
        self.size_limit = size_limit
        self.enumerator = PageEnumerator(store)

    def paginate(self, archetype_ids: Sequence[str]) -> list[list[str]]:
        """Split archetype_ids into pages using this paginator's codec and limit."""
        return paginate(archetype_ids, self.size_limit, self.codec.encode)

    def update_archetype_ids(self, profile_id: int, archetype_ids: Sequence[str]) -> None:
        """Replace the stored archetype list of a profile.

        Args:
            profile_id: Owning profile
            archetype_ids: Complete new list of identifiers
        """
        pages = self.paginate(archetype_ids)

        for page_number, page in enumerate(pages, start=1):
            self.store.set(page_key(profile_id, page_number), self.codec.encode(page))

        pruned = self.prune(profile_id, len(pages))

        log_with_context(
            logger,
            "info",
            f"Stored {len(archetype_ids)} archetype IDs for profile {profile_id} "
            f"in {len(pages)} page(s)",
            profile_id=profile_id,
            page_count=len(pages),
            archetype_count=len(archetype_ids),
            pruned_pages=pruned,
        )

    def prune(self, profile_id: int, page_count: int) -> int:
        """Remove pages numbered above page_count.

        Keys under the prefix that do not end in a page number are left alone.

        Args:
            profile_id: Owning profile
            page_count: Number of pages that are current

        Returns:
            Number of keys removed
        """
        removed = 0
        for key in self.enumerator.iter_keys(archetype_prefix(profile_id)):
            page_number = parse_page_number(key)
            if page_number is not None and page_number > page_count:
                self.store.remove(key)
                removed += 1
                logger.debug(f"Pruned stale archetype page {key}")
        return removed
