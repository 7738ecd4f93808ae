import pytest

from app.services.errors import ValidationError
from app.services.participant_keys import ParticipantKeyService
from tests.fakes import InMemoryParticipantKeyRepository


@pytest.fixture
def directory() -> ParticipantKeyService:
    return ParticipantKeyService(InMemoryParticipantKeyRepository())


@pytest.mark.asyncio
async def test_unknown_session_has_no_keys(directory):
    assert await directory.list_participants_with_keys("p1") == []


@pytest.mark.asyncio
async def test_second_key_overwrites_first(directory):
    await directory.set_public_key("p1", "alice", "pk-1")
    await directory.set_public_key("p1", "alice", "pk-2")

    keys = await directory.list_participants_with_keys("p1")

    assert [(k.user_id, k.public_key) for k in keys] == [("alice", "pk-2")]


@pytest.mark.asyncio
async def test_keys_are_scoped_per_session(directory):
    await directory.set_public_key("p1", "alice", "pk-a")
    await directory.set_public_key("p1", "bob", "pk-b")
    await directory.set_public_key("p2", "alice", "pk-other")

    keys = await directory.list_participants_with_keys("p1")

    assert sorted((k.user_id, k.public_key) for k in keys) == [("alice", "pk-a"), ("bob", "pk-b")]


@pytest.mark.asyncio
async def test_empty_key_is_rejected(directory):
    with pytest.raises(ValidationError):
        await directory.set_public_key("p1", "alice", "")
