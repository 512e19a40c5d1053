"""Factory functions for creating key-value store instances."""

import logging
from typing import Optional

from minio import Minio

from playerdata.lib.config_manager import config as config_manager

from .config import KeyValueStoreConfig
from .in_memory_store import (
    DEFAULT_LIST_PAGE_SIZE,
    DEFAULT_MAX_VALUE_SIZE,
    InMemoryKeyValueStore,
)
from .service import KeyValueStoreService

logger = logging.getLogger(__name__)


def create_in_memory_store(
    max_value_size: int = DEFAULT_MAX_VALUE_SIZE,
    list_page_size: int = DEFAULT_LIST_PAGE_SIZE,
) -> InMemoryKeyValueStore:
    """Create an InMemoryKeyValueStore for tests and development.

    Example:
        >>> store = create_in_memory_store(list_page_size=2)
        >>> store.set("a", b"1")
        >>> assert store.get("a") == b"1"
    """
    return InMemoryKeyValueStore(max_value_size=max_value_size, list_page_size=list_page_size)


def create_minio_client(config: KeyValueStoreConfig) -> Minio:
    """Create a MinIO client and ensure the configured bucket exists.

    Args:
        config: Store configuration with MinIO connection details

    Returns:
        Connected Minio client
    """
    logger.info(
        f"Connecting to MinIO at {config.minio_endpoint} "
        f"(bucket {config.minio_bucket}, access key "
        f"{config_manager.mask_value('MINIO_ACCESS_KEY', config.minio_access_key)})"
    )
    client = Minio(
        config.minio_endpoint,
        access_key=config.minio_access_key,
        secret_key=config.minio_secret_key,
        secure=config.minio_secure,
    )
    if not client.bucket_exists(bucket_name=config.minio_bucket):
        client.make_bucket(bucket_name=config.minio_bucket)
    return client


def create_store_service(config: Optional[KeyValueStoreConfig] = None) -> KeyValueStoreService:
    """Create a KeyValueStoreService from configuration.

    Args:
        config: Store configuration (loaded from the config manager if None)

    Returns:
        KeyValueStoreService for the configured backend
    """
    return KeyValueStoreService(config or KeyValueStoreConfig())
