"""
Unit tests for the Redis-backed SessionProvider.
"""

import pytest
from fakeredis import FakeAsyncRedis

from models.principal import PrincipalDTO
from services.session import SessionProvider


class TestSessionProvider:

    @pytest.mark.asyncio
    async def test_created_session_resolves_to_principal(self, session_provider, principal, make_context):
        token = await session_provider.create_session(principal)

        resolved = await session_provider.resolve_principal(make_context(token=token))

        assert resolved == principal

    @pytest.mark.asyncio
    async def test_tokens_are_unique_per_session(self, session_provider, principal):
        first = await session_provider.create_session(principal)
        second = await session_provider.create_session(principal)

        assert first != second

    @pytest.mark.asyncio
    async def test_session_expires_after_ttl(self, session_provider, redis_client, principal):
        token = await session_provider.create_session(principal)

        ttl = await redis_client.ttl(f"session:{token}")

        assert 0 < ttl <= 3600

    @pytest.mark.asyncio
    async def test_missing_token_resolves_to_none(self, session_provider, make_context):
        assert await session_provider.resolve_principal(make_context(token=None)) is None

    @pytest.mark.asyncio
    async def test_unknown_token_resolves_to_none(self, session_provider, make_context):
        assert await session_provider.resolve_principal(make_context(token="unknown")) is None

    @pytest.mark.asyncio
    async def test_revoked_session_no_longer_resolves(self, session_provider, principal, make_context):
        token = await session_provider.create_session(principal)

        assert await session_provider.revoke(token) is True
        assert await session_provider.revoke(token) is False
        assert await session_provider.resolve_principal(make_context(token=token)) is None

    @pytest.mark.asyncio
    async def test_malformed_record_is_ignored(self, session_provider, redis_client, make_context):
        await redis_client.set("session:broken", "{not json")
        await redis_client.set("session:incomplete", '{"email": "x@example.com"}')

        assert await session_provider.resolve_principal(make_context(token="broken")) is None
        assert await session_provider.resolve_principal(make_context(token="incomplete")) is None

    @pytest.mark.asyncio
    async def test_record_with_invalid_utf8_is_ignored(self, make_context):
        # Production clients read raw bytes (no decode_responses)
        raw_client = FakeAsyncRedis()
        provider = SessionProvider(raw_client, ttl_seconds=3600)
        await raw_client.set("session:badbytes", b'{"id": 7, "bid": 42, "email": "\xff\xfe"}')

        assert await provider.resolve_principal(make_context(token="badbytes")) is None
        await raw_client.aclose()

    @pytest.mark.asyncio
    async def test_principal_without_basket_is_preserved(self, session_provider, make_context):
        token = await session_provider.create_session(PrincipalDTO(id=3))

        resolved = await session_provider.resolve_principal(make_context(token=token))

        assert resolved.id == 3
        assert resolved.bid is None
