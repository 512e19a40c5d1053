"""Player profile service.

Example usage:
    >>> from playerdata.services.profiles import create_profile_repository
    >>>
    >>> repository = create_profile_repository()
    >>> profile = repository.from_id(7, create_if_not_found=True)
    >>> profile.update_archetype_ids(["sword", "shield"])
    >>> sorted(profile.get_archetype_ids())
    ['shield', 'sword']
"""

from .errors import ProfileNotFoundError
from .factory import INVENTORY_STORE_NAME, METADATA_STORE_NAME, create_profile_repository
from .models import ProfileRecord
from .profile import Profile
from .repository import ProfileRepository, now_millis

__all__ = [
    # Models
    "Profile",
    "ProfileRecord",
    # Errors
    "ProfileNotFoundError",
    # Implementations
    "ProfileRepository",
    "now_millis",
    # Factories
    "create_profile_repository",
    "METADATA_STORE_NAME",
    "INVENTORY_STORE_NAME",
]
