"""Named store lookup over the configured backend."""

import logging
from typing import Callable, Optional

from minio import Minio

from .config import KeyValueStoreConfig
from .in_memory_store import InMemoryKeyValueStore
from .minio_store import MinIOKeyValueStore
from .protocols import KeyValueStore

logger = logging.getLogger(__name__)


class KeyValueStoreService:
    """Hands out one KeyValueStore per store name.

    Repeated lookups of the same name return the same store instance, so
    in-memory stores keep their contents across callers.

    Example:
        >>> service = KeyValueStoreService(KeyValueStoreConfig(backend="memory"))
        >>> service.get_store("Inventory") is service.get_store("Inventory")
        True
    """

    def __init__(
        self,
        config: KeyValueStoreConfig,
        client_factory: Optional[Callable[[KeyValueStoreConfig], Minio]] = None,
    ):
        """Initialize the service.

        Args:
            config: Store configuration (validated here)
            client_factory: Builds the MinIO client for the "minio" backend
        """
        config.validate()
        self.config = config
        self._client_factory = client_factory
        self._client: Optional[Minio] = None
        self._stores: dict[str, KeyValueStore] = {}

    def get_store(self, name: str) -> KeyValueStore:
        """Return the store registered under name, creating it on first use.

        Args:
            name: Store name (e.g., "PlayerMetadata", "Inventory")

        Returns:
            KeyValueStore for that name
        """
        if not name or "/" in name:
            raise ValueError(f"Invalid store name: {name!r}")

        store = self._stores.get(name)
        if store is None:
            store = self._create_store(name)
            self._stores[name] = store
            logger.info(f"Opened {self.config.backend} store {name}")
        return store

    def _create_store(self, name: str) -> KeyValueStore:
        if self.config.backend == "memory":
            return InMemoryKeyValueStore(
                max_value_size=self.config.max_value_size,
                list_page_size=self.config.list_page_size,
            )

        return MinIOKeyValueStore(
            client=self._get_client(),
            bucket=self.config.minio_bucket,
            namespace=name,
            max_value_size=self.config.max_value_size,
            list_page_size=self.config.list_page_size,
        )

    def _get_client(self) -> Minio:
        if self._client is None:
            if self._client_factory is None:
                from .factory import create_minio_client

                self._client_factory = create_minio_client
            self._client = self._client_factory(self.config)
        return self._client
