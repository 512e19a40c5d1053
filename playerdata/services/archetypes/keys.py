"""Store key scheme for archetype pages.

Pages of a profile live at ``"<profile_id>/archetypes/<page_number>"`` with
page numbers counting up from 1. Both the writer and the pruning pass go
through these helpers so the format is defined in one place.
"""

import re
from typing import Optional

ARCHETYPES_SEGMENT = "archetypes"

_PAGE_NUMBER = re.compile(r"[0-9]+")


def archetype_prefix(profile_id: int) -> str:
    """Key prefix shared by every archetype page of a profile.

    >>> archetype_prefix(42)
    '42/archetypes'
    """
    return f"{profile_id}/{ARCHETYPES_SEGMENT}"


def page_key(profile_id: int, page_number: int) -> str:
    """Key of one archetype page.

    >>> page_key(42, 3)
    '42/archetypes/3'
    """
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")
    return f"{archetype_prefix(profile_id)}/{page_number}"


def parse_page_number(key: str) -> Optional[int]:
    """Parse the page number from the text after the last ``/``.

    Returns None when that text is not a decimal number, so foreign keys
    under the prefix are never mistaken for pages.

    >>> parse_page_number("42/archetypes/12")
    12
    >>> parse_page_number("42/archetypes/notes") is None
    True
    """
    suffix = key[key.rfind("/") + 1:]
    if not _PAGE_NUMBER.fullmatch(suffix):
        return None
    return int(suffix)
