"""Tests for profiles: records, repository, and archetype delegation."""

import json

import pytest

from playerdata.services.archetypes import page_key
from playerdata.services.kvstore import KeyValueStoreConfig, KeyValueStoreService
from playerdata.services.profiles import (
    INVENTORY_STORE_NAME,
    METADATA_STORE_NAME,
    Profile,
    ProfileNotFoundError,
    ProfileRecord,
    create_profile_repository,
)

FIXED_NOW_MS = 1_700_000_000_000


@pytest.mark.unit
class TestProfileRecord:
    def test_serializes_camel_case(self):
        record = ProfileRecord(id=7, time_first_played=1, time_last_played=2)

        assert json.loads(record.to_json_bytes()) == {
            "id": 7,
            "timeFirstPlayed": 1,
            "timeLastPlayed": 2,
        }

    def test_parses_camel_case(self):
        data = b'{"id": 7, "timeFirstPlayed": 1, "timeLastPlayed": 2}'

        assert ProfileRecord.from_json_bytes(data) == ProfileRecord(
            id=7, time_first_played=1, time_last_played=2
        )


@pytest.mark.unit
class TestProfileRepository:
    def test_missing_profile_raises(self, repository):
        with pytest.raises(ProfileNotFoundError, match="Player 7 not found.") as exc_info:
            repository.from_id(7)

        assert exc_info.value.player_id == 7

    def test_not_found_is_lookup_error(self):
        assert issubclass(ProfileNotFoundError, LookupError)

    def test_create_if_not_found(self, repository, metadata_store):
        profile = repository.from_id(7, create_if_not_found=True)

        assert profile.id == 7
        assert profile.time_first_played == FIXED_NOW_MS
        assert profile.time_last_played == FIXED_NOW_MS
        assert json.loads(metadata_store.get("7")) == {
            "id": 7,
            "timeFirstPlayed": FIXED_NOW_MS,
            "timeLastPlayed": FIXED_NOW_MS,
        }
        assert metadata_store.get_associated_ids("7") == [7]

    def test_existing_profile_is_loaded_not_recreated(self, repository, metadata_store):
        metadata_store.set("7", ProfileRecord(id=7, time_first_played=5, time_last_played=9).to_json_bytes())

        profile = repository.from_id(7, create_if_not_found=True)

        assert (profile.time_first_played, profile.time_last_played) == (5, 9)

    def test_exists(self, repository):
        assert not repository.exists(7)
        repository.from_id(7, create_if_not_found=True)

        assert repository.exists(7)

    def test_new_does_not_write(self, repository, metadata_store):
        profile = repository.new(ProfileRecord(id=3, time_first_played=1, time_last_played=1))

        assert profile.id == 3
        assert metadata_store.count() == 0


@pytest.mark.unit
class TestProfile:
    def test_archetype_round_trip(self, repository):
        profile = repository.from_id(42, create_if_not_found=True)
        profile.update_archetype_ids(["aa", "bb", "cc", "dd", "ee"])

        assert profile.get_archetype_ids() == ["aa", "bb", "ee", "dd", "cc"]

    def test_pages_keyed_by_profile_id(self, repository, store):
        profile = repository.from_id(42, create_if_not_found=True)
        profile.update_archetype_ids(["aa"])

        assert store.get(page_key(42, 1)) == b'["aa"]'

    def test_profiles_do_not_share_archetypes(self, repository):
        first = repository.from_id(1, create_if_not_found=True)
        second = repository.from_id(10, create_if_not_found=True)
        first.update_archetype_ids(["aa"])
        second.update_archetype_ids(["bb"])

        assert first.get_archetype_ids() == ["aa"]
        assert second.get_archetype_ids() == ["bb"]

    def test_delete_not_supported(self, repository):
        profile = repository.from_id(42, create_if_not_found=True)

        with pytest.raises(NotImplementedError):
            profile.delete()

    def test_to_record(self, repository):
        profile = repository.from_id(42, create_if_not_found=True)

        assert profile.to_record() == ProfileRecord(
            id=42, time_first_played=FIXED_NOW_MS, time_last_played=FIXED_NOW_MS
        )

    def test_equality_ignores_inventory(self, inventory):
        other = object()

        assert Profile(1, 2, 3, inventory) == Profile(1, 2, 3, other)
        assert "inventory" not in repr(Profile(1, 2, 3, inventory))


@pytest.mark.unit
class TestCreateProfileRepository:
    def test_wires_named_stores(self):
        service = KeyValueStoreService(KeyValueStoreConfig(backend="memory"))

        repository = create_profile_repository(service, page_size_limit=100)

        assert repository.metadata_store is service.get_store(METADATA_STORE_NAME)
        assert repository.inventory.store is service.get_store(INVENTORY_STORE_NAME)
        assert repository.inventory.paginator.size_limit == 100

    def test_page_limit_from_config(self, monkeypatch):
        monkeypatch.setenv("PLAYERDATA_PAGE_SIZE_LIMIT", "2048")
        service = KeyValueStoreService(KeyValueStoreConfig(backend="memory"))

        repository = create_profile_repository(service)

        assert repository.inventory.paginator.size_limit == 2048

    def test_end_to_end(self):
        service = KeyValueStoreService(KeyValueStoreConfig(backend="memory"))
        repository = create_profile_repository(service)

        repository.from_id(5, create_if_not_found=True).update_archetype_ids(["sword", "shield"])

        assert sorted(repository.from_id(5).get_archetype_ids()) == ["shield", "sword"]
