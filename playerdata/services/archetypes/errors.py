"""Errors raised by the archetype services."""


class CodecError(ValueError):
    """Raised when a stored page cannot be decoded."""


class ArchetypeTooLargeError(ValueError):
    """Raised when one identifier cannot fit on a page by itself.

    Attributes:
        archetype_id: The offending identifier
        encoded_size: Encoded size of a page holding only that identifier
        size_limit: Page size limit in bytes
    """

    def __init__(self, archetype_id: str, encoded_size: int, size_limit: int):
        self.archetype_id = archetype_id
        self.encoded_size = encoded_size
        self.size_limit = size_limit
        preview = archetype_id if len(archetype_id) <= 64 else archetype_id[:61] + "..."
        super().__init__(
            f"Archetype ID {preview!r} encodes to {encoded_size} bytes on its own, "
            f"page limit is {size_limit} bytes"
        )
