"""Factory functions for creating profile repositories."""

from typing import Optional

from playerdata.lib.config_manager import get_config
from playerdata.services.archetypes import ArchetypeInventory
from playerdata.services.kvstore import KeyValueStoreService, create_store_service

from .repository import ProfileRepository

METADATA_STORE_NAME = "PlayerMetadata"
INVENTORY_STORE_NAME = "Inventory"


def create_profile_repository(
    service: Optional[KeyValueStoreService] = None,
    page_size_limit: Optional[int] = None,
) -> ProfileRepository:
    """Create a ProfileRepository over the PlayerMetadata and Inventory stores.

    Args:
        service: Store service (built from configuration if None)
        page_size_limit: Archetype page limit in bytes
            (PLAYERDATA_PAGE_SIZE_LIMIT if None)

    Returns:
        ProfileRepository instance

    Example:
        >>> repository = create_profile_repository()
        >>> profile = repository.from_id(7, create_if_not_found=True)
        >>> profile.update_archetype_ids(["sword"])
    """
    service = service or create_store_service()
    if page_size_limit is None:
        page_size_limit = get_config("PLAYERDATA_PAGE_SIZE_LIMIT")

    inventory = ArchetypeInventory(
        service.get_store(INVENTORY_STORE_NAME),
        page_size_limit=page_size_limit,
    )
    return ProfileRepository(service.get_store(METADATA_STORE_NAME), inventory)
