"""Key-value store configuration from the config manager."""

from dataclasses import dataclass, field

from playerdata.lib.config_manager import get_config

BACKENDS = ("memory", "minio")


@dataclass
class KeyValueStoreConfig:
    """Configuration for key-value store backends.

    All settings resolve through ``playerdata.lib.config_manager`` (.env →
    environment → defaults).

    Note: Uses field(default_factory=...) to read values at instance
    creation time, not at class definition time.
    """

    backend: str = field(default_factory=lambda: get_config("PLAYERDATA_STORE_BACKEND"))
    max_value_size: int = field(default_factory=lambda: get_config("PLAYERDATA_MAX_VALUE_SIZE"))
    list_page_size: int = field(default_factory=lambda: get_config("PLAYERDATA_LIST_PAGE_SIZE"))
    minio_url: str = field(default_factory=lambda: get_config("MINIO_URL"))
    minio_access_key: str = field(default_factory=lambda: get_config("MINIO_ACCESS_KEY"))
    minio_secret_key: str = field(default_factory=lambda: get_config("MINIO_SECRET_KEY"))
    minio_bucket: str = field(default_factory=lambda: get_config("MINIO_BUCKET"))
    minio_secure: bool = field(default_factory=lambda: get_config("MINIO_SECURE"))

    @property
    def minio_endpoint(self) -> str:
        """MinIO host:port without the URL scheme."""
        return self.minio_url.replace("http://", "").replace("https://", "")

    def validate(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If a setting is missing or out of range
        """
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Invalid store backend: {self.backend}. Must be one of {', '.join(BACKENDS)}"
            )
        if self.max_value_size < 1:
            raise ValueError("PLAYERDATA_MAX_VALUE_SIZE must be >= 1")
        if self.list_page_size < 1:
            raise ValueError("PLAYERDATA_LIST_PAGE_SIZE must be >= 1")
        if self.backend == "minio":
            if not self.minio_url:
                raise ValueError("MINIO_URL is required")
            if not self.minio_bucket:
                raise ValueError("MINIO_BUCKET is required")
