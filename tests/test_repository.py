"""Unit of work behaviour of CampRepository."""

from datetime import date

import pytest

from code_camp_api.app.core.db import get_connection, seed_db
from code_camp_api.app.data.entities import Camp, Speaker
from code_camp_api.app.data.repository import CampRepository


@pytest.fixture
def reader(database):
    """A second connection, to see only what has been committed."""
    conn = get_connection(database)
    try:
        yield CampRepository(conn)
    finally:
        conn.close()


@pytest.mark.asyncio
async def test_add_is_invisible_until_saved(repository, reader):
    repository.add(Camp(moniker="cc", name="Code Camp", event_date=date(2024, 6, 1)))
    assert reader.list_camps() == []
    assert await repository.save_all() is True
    stored = reader.get_camp_by_moniker("cc")
    assert stored.event_date == date(2024, 6, 1)
    assert stored.speakers is None


@pytest.mark.asyncio
async def test_save_without_changes_returns_false(repository):
    assert repository.has_changes() is False
    assert await repository.save_all() is False


@pytest.mark.asyncio
async def test_modified_entity_is_updated(repository, reader):
    repository.add(Camp(moniker="cc", name="Code Camp"))
    await repository.save_all()
    camp = repository.get_camp_by_moniker("cc")
    camp.location = "Atlanta"
    assert repository.has_changes()
    assert await repository.save_all() is True
    assert not repository.has_changes()
    assert reader.get_camp(camp.id).location == "Atlanta"


@pytest.mark.asyncio
async def test_camp_and_speaker_in_one_unit(repository, reader):
    camp = Camp(moniker="cc", name="Code Camp")
    repository.add(Speaker(name="Jane", camp=camp))
    repository.add(camp)
    assert await repository.save_all() is True
    speakers = reader.list_speakers_by_moniker("cc")
    assert [s.name for s in speakers] == ["Jane"]
    assert speakers[0].camp.id == camp.id


@pytest.mark.asyncio
async def test_speaker_without_camp_rolls_back(repository, reader):
    repository.add(Camp(moniker="cc", name="Code Camp"))
    repository.add(Speaker(name="Orphan"))
    with pytest.raises(ValueError):
        await repository.save_all()
    assert reader.list_camps() == []


def test_identity_map_returns_same_instance(repository, database):
    seed_db(database)
    camp = repository.get_camp_by_moniker("ATL2016")
    assert repository.get_camp(camp.id) is camp
    speaker = repository.list_speakers_by_moniker("ATL2016")[0]
    assert speaker.camp is camp
    assert repository.get_speaker(speaker.id) is speaker


def test_get_camp_with_speakers(repository, database):
    seed_db(database)
    camp = repository.get_camp_by_moniker("ATL2016")
    assert camp.speakers is None
    loaded = repository.get_camp_with_speakers(camp.id)
    assert len(loaded.speakers) == 2
    assert repository.get_camp_with_speakers(999) is None
    assert repository.get_speaker(999) is None


def test_ids_outside_integer_range_are_missing(repository):
    assert repository.get_camp(2 ** 63) is None
    assert repository.get_camp(-(2 ** 63) - 1) is None
    assert repository.get_speaker(2 ** 70) is None
