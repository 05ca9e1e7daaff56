from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from access_tokens.adapters.outbound.persistence.models import AccessTokenModel
from access_tokens.adapters.outbound.persistence.repositories.token_repository import AsyncTokenRepository
from access_tokens.domain.exceptions import ResourceAlreadyExistsException
from access_tokens.domain.services.token_service import AccessTokenService

pytestmark = pytest.mark.anyio

NOW = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository() -> AsyncTokenRepository:
    return AsyncTokenRepository()


async def _create(repository, session, user_id="user123", minutes=60, created_at=NOW, token=None, scopes=("read",)):
    return await repository.create(
        session,
        token=token or AccessTokenService.generate_token(),
        user_id=user_id,
        scopes=scopes,
        created_at=created_at,
        expires_at=created_at + timedelta(minutes=minutes),
    )


async def _count(session) -> int:
    return (await session.execute(select(func.count()).select_from(AccessTokenModel))).scalar_one()


async def test_create_assigns_id_and_keeps_fields(repository, session):
    token = await _create(repository, session, scopes=("write", "read", "write"))

    assert token.id
    assert token.token.startswith("token_")
    assert token.user_id == "user123"
    assert token.scopes == ("write", "read", "write")
    assert AccessTokenService.as_utc(token.created_at) == NOW
    assert AccessTokenService.as_utc(token.expires_at) == NOW + timedelta(minutes=60)


async def test_create_assigns_distinct_ids(repository, session):
    first = await _create(repository, session)
    second = await _create(repository, session)
    assert first.id != second.id


async def test_duplicate_token_is_a_conflict(repository, session):
    await _create(repository, session, token="token_duplicate")

    with pytest.raises(ResourceAlreadyExistsException):
        await _create(repository, session, token="token_duplicate", user_id="someone-else")

    assert await _count(session) == 1


async def test_list_active_filters_by_user(repository, session):
    await _create(repository, session, user_id="alice")
    await _create(repository, session, user_id="bob")

    tokens = await repository.list_active(session, "alice", NOW)

    assert [t.user_id for t in tokens] == ["alice"]


async def test_list_active_user_id_is_exact(repository, session):
    await _create(repository, session, user_id="Alice")

    assert await repository.list_active(session, "alice", NOW) == []
    assert await repository.list_active(session, "Alic", NOW) == []


async def test_list_active_orders_newest_first(repository, session):
    for offset in (0, 2, 1):
        await _create(repository, session, user_id="alice", created_at=NOW + timedelta(seconds=offset))

    tokens = await repository.list_active(session, "alice", NOW + timedelta(seconds=5))

    created = [AccessTokenService.as_utc(t.created_at) for t in tokens]
    assert created == sorted(created, reverse=True)
    assert len(created) == 3


async def test_list_active_excludes_expired(repository, session):
    short = await _create(repository, session, user_id="alice", minutes=1)
    long = await _create(repository, session, user_id="alice", minutes=60)

    before = await repository.list_active(session, "alice", NOW + timedelta(seconds=30))
    after = await repository.list_active(session, "alice", NOW + timedelta(minutes=2))

    assert {t.id for t in before} == {short.id, long.id}
    assert [t.id for t in after] == [long.id]


async def test_list_active_excludes_token_at_exact_expiry(repository, session):
    await _create(repository, session, user_id="alice", minutes=1)

    assert await repository.list_active(session, "alice", NOW + timedelta(minutes=1)) == []


async def test_list_active_unknown_user_is_empty(repository, session):
    assert await repository.list_active(session, "nobody", NOW) == []


async def test_delete_expired_removes_only_expired(repository, session):
    await _create(repository, session, minutes=1)
    await _create(repository, session, minutes=5)
    keep = await _create(repository, session, minutes=60)

    deleted = await repository.delete_expired(session, NOW + timedelta(minutes=10))

    assert deleted == 2
    assert [t.id for t in await repository.list_active(session, "user123", NOW)] == [keep.id]


async def test_delete_expired_with_nothing_to_delete(repository, session):
    await _create(repository, session, minutes=60)

    assert await repository.delete_expired(session, NOW) == 0
    assert await _count(session) == 1
