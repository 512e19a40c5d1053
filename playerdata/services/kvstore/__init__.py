"""Key-value store service with paginated key listings.

This module provides:
- KeyValueStore / KeyCursor protocols (interfaces for dependency injection)
- InMemoryKeyValueStore (tests and development)
- MinIOKeyValueStore (object storage)
- KeyValueStoreService for named stores over the configured backend

Example:
    >>> from playerdata.services.kvstore import create_in_memory_store
    >>> store = create_in_memory_store()
    >>> store.set("42/archetypes/1", b'["sword"]')
    >>> cursor = store.list_keys("42/archetypes")
    >>> [k.key_name for k in cursor.current_page()]
    ['42/archetypes/1']
"""

from .config import KeyValueStoreConfig
from .cursor import BatchedKeyCursor
from .errors import CursorExhaustedError, KeyValueStoreError, ValueTooLargeError
from .factory import create_in_memory_store, create_minio_client, create_store_service
from .in_memory_store import InMemoryKeyValueStore
from .minio_store import MinIOKeyValueStore
from .models import KeyInfo
from .protocols import KeyCursor, KeyValueStore
from .service import KeyValueStoreService

__all__ = [
    # Protocols
    "KeyValueStore",
    "KeyCursor",
    # Models
    "KeyInfo",
    # Errors
    "KeyValueStoreError",
    "ValueTooLargeError",
    "CursorExhaustedError",
    # Configuration
    "KeyValueStoreConfig",
    # Implementations
    "BatchedKeyCursor",
    "InMemoryKeyValueStore",
    "MinIOKeyValueStore",
    "KeyValueStoreService",
    # Factories
    "create_in_memory_store",
    "create_minio_client",
    "create_store_service",
]
