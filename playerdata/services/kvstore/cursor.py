"""Fixed-size paging over a key iterable."""

from itertools import islice
from typing import Iterable

from .errors import CursorExhaustedError
from .models import KeyInfo


class BatchedKeyCursor:
    """KeyCursor implementation that slices an iterable into pages.

    The source is consumed lazily, one page ahead of the current page, so
    backends that fetch listings over the network only issue requests as
    the caller advances.

    Example:
        >>> cursor = BatchedKeyCursor([KeyInfo(key_name="a")], page_size=50)
        >>> [k.key_name for k in cursor.current_page()]
        ['a']
        >>> cursor.is_finished
        True
    """

    def __init__(self, keys: Iterable[KeyInfo], page_size: int):
        """Initialize the cursor on the first page.

        Args:
            keys: Keys in listing order
            page_size: Maximum number of keys per page (>= 1)
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.page_size = page_size
        self._source = iter(keys)
        self._page = self._take()
        self._next_page = self._take()

    def _take(self) -> list[KeyInfo]:
        return list(islice(self._source, self.page_size))

    @property
    def is_finished(self) -> bool:
        return not self._next_page

    def current_page(self) -> list[KeyInfo]:
        return list(self._page)

    def advance(self) -> None:
        if self.is_finished:
            raise CursorExhaustedError("Key listing has no further pages")
        self._page = self._next_page
        self._next_page = self._take()
