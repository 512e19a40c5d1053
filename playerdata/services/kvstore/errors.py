"""Errors raised by key-value store implementations."""


class KeyValueStoreError(RuntimeError):
    """Base class for failures raised by a key-value store."""


class ValueTooLargeError(KeyValueStoreError):
    """Raised when a value exceeds the store's per-value size ceiling."""

    def __init__(self, key: str, size: int, max_size: int):
        self.key = key
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Value for key {key!r} is {size} bytes, store ceiling is {max_size} bytes"
        )


class CursorExhaustedError(KeyValueStoreError):
    """Raised when advancing a key cursor that has already finished."""
