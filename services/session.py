"""
Session registry mapping bearer tokens to authenticated principals.

Tokens are opaque random strings; the principal is stored as JSON under
"session:<token>" with a TTL, so every service instance sharing the Redis
sees the same sessions.
"""

import logging
import secrets

from pydantic import ValidationError
from redis.asyncio import Redis

from models.principal import PrincipalDTO
from models.request_context import RequestContext

logger = logging.getLogger(__name__)


class SessionProvider:
    KEY_PREFIX = "session:"

    def __init__(self, redis: Redis, ttl_seconds: int):
        """
        Args:
            redis: Redis client holding the session registry
            ttl_seconds: Lifetime of newly created sessions
        """
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    def _key(self, token: str) -> str:
        return f"{self.KEY_PREFIX}{token}"

    async def create_session(self, principal: PrincipalDTO) -> str:
        """Register a principal and return the bearer token identifying it."""
        token = secrets.token_urlsafe(32)
        await self.redis.set(self._key(token), principal.model_dump_json(), ex=self.ttl_seconds)
        logger.info(f"Session created for user {principal.id}")
        return token

    async def get(self, token: str) -> PrincipalDTO | None:
        raw = await self.redis.get(self._key(token))
        if raw is None:
            return None
        try:
            return PrincipalDTO.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError):
            logger.warning("Discarding malformed session record")
            return None

    async def resolve_principal(self, context: RequestContext) -> PrincipalDTO | None:
        """
        Resolve the authenticated caller of a request.

        Returns:
            PrincipalDTO, or None if the request carries no token or the
            token is unknown/expired
        """
        if not context.token:
            return None
        return await self.get(context.token)

    async def revoke(self, token: str) -> bool:
        """Invalidate a session. Returns True if it existed."""
        deleted = await self.redis.delete(self._key(token))
        return deleted > 0
