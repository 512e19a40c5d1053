"""MinIO-backed key-value store.

Each named store lives under its own object-name prefix inside one bucket:
key ``"7/archetypes/1"`` of the ``"Inventory"`` store is the object
``"Inventory/7/archetypes/1"``.
"""

import logging
from io import BytesIO
from typing import Iterator, Optional

from minio import Minio
from minio.error import S3Error

from playerdata.lib.retry import retry_on_failure

from .cursor import BatchedKeyCursor
from .errors import ValueTooLargeError
from .in_memory_store import DEFAULT_LIST_PAGE_SIZE, DEFAULT_MAX_VALUE_SIZE
from .models import KeyInfo

logger = logging.getLogger(__name__)

MISSING_OBJECT_CODES = ("NoSuchKey", "NoSuchObject")
ASSOCIATED_IDS_METADATA = "associated-ids"


class MinIOKeyValueStore:
    """KeyValueStore over MinIO object storage."""

    def __init__(
        self,
        client: Minio,
        bucket: str,
        namespace: str,
        max_value_size: int = DEFAULT_MAX_VALUE_SIZE,
        list_page_size: int = DEFAULT_LIST_PAGE_SIZE,
    ):
        """Initialize the store.

        Args:
            client: Connected MinIO client
            bucket: Bucket holding all stores
            namespace: Store name, used as the object-name prefix
            max_value_size: Per-value ceiling in bytes
            list_page_size: Number of keys per listing page
        """
        self.client = client
        self.bucket = bucket
        self.namespace = namespace
        self.max_value_size = max_value_size
        self.list_page_size = list_page_size
        self._object_prefix = f"{namespace}/"

    def _object_name(self, key: str) -> str:
        return self._object_prefix + key

    @retry_on_failure(max_retries=3, base_delay=0.5)
    def get(self, key: str) -> Optional[bytes]:
        try:
            response = self.client.get_object(
                bucket_name=self.bucket, object_name=self._object_name(key)
            )
        except S3Error as e:
            if e.code in MISSING_OBJECT_CODES:
                return None
            raise

        try:
            return response.read()
        finally:
            response.close()
            response.release_conn()

    @retry_on_failure(max_retries=3, base_delay=0.5)
    def set(
        self,
        key: str,
        value: bytes,
        associated_ids: Optional[list[int]] = None,
    ) -> None:
        if len(value) > self.max_value_size:
            raise ValueTooLargeError(key, len(value), self.max_value_size)

        metadata = None
        if associated_ids:
            metadata = {ASSOCIATED_IDS_METADATA: ",".join(str(i) for i in associated_ids)}

        self.client.put_object(
            bucket_name=self.bucket,
            object_name=self._object_name(key),
            data=BytesIO(value),
            length=len(value),
            content_type="application/json",
            metadata=metadata,
        )
        logger.debug(f"Stored {len(value)} bytes at {self.bucket}/{self._object_name(key)}")

    @retry_on_failure(max_retries=3, base_delay=0.5)
    def remove(self, key: str) -> None:
        self.client.remove_object(bucket_name=self.bucket, object_name=self._object_name(key))

    @retry_on_failure(max_retries=3, base_delay=0.5)
    def list_keys(self, prefix: str) -> BatchedKeyCursor:
        # The cursor pulls the first pages eagerly, so the first listing
        # request happens (and is retried) here.
        return BatchedKeyCursor(self._iter_keys(prefix), page_size=self.list_page_size)

    def _iter_keys(self, prefix: str) -> Iterator[KeyInfo]:
        objects = self.client.list_objects(
            bucket_name=self.bucket,
            prefix=self._object_name(prefix),
            recursive=True,
        )
        for obj in objects:
            if obj.is_dir:
                continue
            yield KeyInfo(key_name=obj.object_name[len(self._object_prefix):])
