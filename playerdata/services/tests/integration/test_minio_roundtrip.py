"""Integration test for archetype pages on a live MinIO server.

Requires MINIO_URL (and credentials) in the environment.

Run with: uv run pytest playerdata/services/tests/integration -m integration -v
"""

import os
import uuid

import pytest
from minio.error import S3Error
from urllib3.exceptions import MaxRetryError

from playerdata.services.kvstore import KeyValueStoreConfig, KeyValueStoreService
from playerdata.services.profiles import create_profile_repository


@pytest.fixture
def minio_service():
    if "MINIO_URL" not in os.environ:
        pytest.skip("MINIO_URL not set")

    service = KeyValueStoreService(KeyValueStoreConfig(backend="minio", list_page_size=2))
    try:
        service.get_store("PlayerMetadata")
    except (S3Error, MaxRetryError, ConnectionError) as e:
        pytest.skip(f"MinIO unavailable: {e}")
    return service


@pytest.mark.integration
def test_profile_archetypes_on_minio(minio_service):
    repository = create_profile_repository(minio_service, page_size_limit=64)
    player_id = uuid.uuid4().int % 1_000_000_000
    profile = repository.from_id(player_id, create_if_not_found=True)
    archetype_ids = [f"archetype-{n:03d}" for n in range(20)]

    profile.update_archetype_ids(archetype_ids)
    stored = repository.from_id(player_id).get_archetype_ids()

    assert sorted(stored) == sorted(archetype_ids)

    profile.update_archetype_ids(["sword"])
    assert profile.get_archetype_ids() == ["sword"]

    # Clean up
    inventory_store = repository.inventory.store
    inventory_store.remove(f"{player_id}/archetypes/1")
    repository.metadata_store.remove(str(player_id))
