"""Default configuration values for playerdata.

All hardcoded defaults live here. The package is fully functional with these
defaults against the in-memory store backend.

Config hierarchy: .env → environment → these defaults
"""

from typing import Any

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULTS: dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Key-value store
    # -------------------------------------------------------------------------
    "PLAYERDATA_STORE_BACKEND": "memory",  # "memory" or "minio"
    "PLAYERDATA_MAX_VALUE_SIZE": 4_194_304,  # per-value ceiling in bytes
    "PLAYERDATA_LIST_PAGE_SIZE": 50,  # keys per listing page

    # -------------------------------------------------------------------------
    # Archetype pagination
    # -------------------------------------------------------------------------
    "PLAYERDATA_PAGE_SIZE_LIMIT": 4_194_304,  # encoded bytes per archetype page

    # -------------------------------------------------------------------------
    # Object Storage - MinIO
    # -------------------------------------------------------------------------
    "MINIO_URL": "http://localhost:9000",
    "MINIO_ACCESS_KEY": "minioadmin",
    "MINIO_SECRET_KEY": "minioadmin",
    "MINIO_BUCKET": "playerdata",
    "MINIO_SECURE": False,

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    "LOG_LEVEL": "INFO",
}


# =============================================================================
# Sensitive Keys (should be masked when displayed)
# =============================================================================

SENSITIVE_KEYS = {
    "MINIO_ACCESS_KEY",
    "MINIO_SECRET_KEY",
}


def get_default(key: str) -> Any:
    """Get the default value for a config key.

    Args:
        key: Configuration key name

    Returns:
        Default value, or None if key not found
    """
    return DEFAULTS.get(key)


def is_sensitive(key: str) -> bool:
    """Check if a config key contains sensitive data."""
    return key in SENSITIVE_KEYS
