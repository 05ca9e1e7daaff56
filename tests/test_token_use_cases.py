import logging
from datetime import timedelta

import pytest

from access_tokens.application.dtos.token_dto import CreateTokenRequest
from access_tokens.application.use_cases.token_use_cases import AsyncAccessTokenService
from access_tokens.domain.exceptions import ResourceAlreadyExistsException
from access_tokens.domain.services.token_service import AccessTokenService

pytestmark = pytest.mark.anyio


def _request(user_id="user123", scopes=("read", "write"), minutes=60) -> CreateTokenRequest:
    return CreateTokenRequest(userId=user_id, scopes=list(scopes), expiresInMinutes=minutes)


@pytest.fixture
def service(session, clock) -> AsyncAccessTokenService:
    return AsyncAccessTokenService(session, clock=clock)


async def test_create_token_uses_clock(service, clock):
    token = await service.create_token(_request(minutes=30))

    assert AccessTokenService.as_utc(token.created_at) == clock.now
    assert AccessTokenService.as_utc(token.expires_at) == clock.now + timedelta(minutes=30)
    assert token.scopes == ("read", "write")


async def test_create_token_truncates_to_milliseconds(service, clock):
    clock.now = clock.now.replace(microsecond=123456)

    token = await service.create_token(_request())

    assert AccessTokenService.as_utc(token.created_at).microsecond == 123000


async def test_created_token_is_listed_until_it_expires(service, clock):
    token = await service.create_token(_request(minutes=1))

    assert [t.id for t in await service.list_active_tokens("user123")] == [token.id]

    clock.advance(minutes=1, milliseconds=1)

    assert await service.list_active_tokens("user123") == []


async def test_list_is_newest_first(service, clock):
    first = await service.create_token(_request())
    clock.advance(seconds=1)
    second = await service.create_token(_request())

    assert [t.id for t in await service.list_active_tokens("user123")] == [second.id, first.id]


async def test_purge_expired_tokens(service, clock):
    await service.create_token(_request(minutes=1))
    await service.create_token(_request(minutes=1))
    kept = await service.create_token(_request(minutes=120))

    clock.advance(minutes=5)

    assert await service.purge_expired_tokens() == 2
    assert [t.id for t in await service.list_active_tokens("user123")] == [kept.id]


async def test_token_collision_fails_without_partial_record(service, monkeypatch):
    monkeypatch.setattr(AccessTokenService, "generate_token", staticmethod(lambda: "token_fixed"))

    await service.create_token(_request(user_id="alice"))
    with pytest.raises(ResourceAlreadyExistsException):
        await service.create_token(_request(user_id="bob"))

    assert len(await service.list_active_tokens("alice")) == 1
    assert await service.list_active_tokens("bob") == []


async def test_custom_repository_is_used(session, clock):
    calls = []

    class RecordingRepository:
        async def delete_expired(self, db, now):
            calls.append(now)
            return 7

    service = AsyncAccessTokenService(session, clock=clock, repository=RecordingRepository())

    assert await service.purge_expired_tokens() == 7
    assert calls == [clock.now]


async def test_logs_do_not_carry_user_id_or_secret(service, caplog):
    with caplog.at_level(logging.DEBUG, logger="access_tokens"):
        token = await service.create_token(_request(user_id="alice@example.com"))
        await service.list_active_tokens("alice@example.com")

    assert caplog.records
    assert "alice@example.com" not in caplog.text
    assert token.token not in caplog.text
