"""Shared pytest fixtures for services tests."""

import pytest

from playerdata.services.archetypes import ArchetypeInventory, JsonListCodec
from playerdata.services.kvstore import InMemoryKeyValueStore
from playerdata.services.profiles import ProfileRepository
from playerdata.services.tests.fakes import FailingStore, FakeMinio, TornWriteStore

# Small limits keep multi-page scenarios readable:
# a page of k two-letter IDs encodes to 5k + 1 bytes.
SMALL_PAGE_LIMIT = 12
FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture
def codec() -> JsonListCodec:
    return JsonListCodec()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """In-memory store listing two keys per page."""
    return InMemoryKeyValueStore(list_page_size=2)


@pytest.fixture
def torn_store() -> TornWriteStore:
    return TornWriteStore(list_page_size=2)


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore(list_page_size=2)


@pytest.fixture
def fake_minio() -> FakeMinio:
    minio = FakeMinio()
    minio.make_bucket("test-bucket")
    return minio


@pytest.fixture
def inventory(store) -> ArchetypeInventory:
    return ArchetypeInventory(store, page_size_limit=SMALL_PAGE_LIMIT)


@pytest.fixture
def metadata_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(metadata_store, inventory) -> ProfileRepository:
    return ProfileRepository(metadata_store, inventory, clock=lambda: FIXED_NOW_MS)


@pytest.fixture(autouse=True)
def no_retry_sleep(monkeypatch):
    """Keep retry backoff from sleeping during tests."""
    monkeypatch.setattr("playerdata.lib.retry.time.sleep", lambda _: None)
