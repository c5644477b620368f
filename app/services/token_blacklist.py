"""
FitPulse API - Token Blacklist.

Logged-out JWTs are kept in Redis until the moment they would have expired
anyway, so a logout takes effect on every worker. Redis is optional: when it
cannot be reached the blacklist fails open and tokens stay valid until
their expiry.
"""

import logging
import time
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from settings import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "blacklist:"


class TokenBlacklist:
    """
    Revoked tokens, one Redis key per token living as long as the token.

    After ``failure_threshold`` consecutive Redis errors the blacklist stops
    calling Redis for ``cooldown_seconds`` so a dead Redis does not add a
    socket timeout to every authenticated request.

    Attributes:
        enabled: Set to False to bypass Redis entirely (tests, local runs).
    """

    def __init__(
        self,
        redis_url: str,
        failure_threshold: int = 5,
        cooldown_seconds: int = 60
    ):
        self.redis_url = redis_url
        self.failure_threshold = failure_threshold
        self.cooldown_seconds = cooldown_seconds
        self.enabled = True
        self._redis: Optional[redis.Redis] = None
        self._failures = 0
        self._paused_until = 0.0

    @staticmethod
    def key(token: str) -> str:
        return f"{KEY_PREFIX}{token}"

    def _connection(self) -> Optional[redis.Redis]:
        if not self.enabled or time.monotonic() < self._paused_until:
            return None
        if self._redis is None:
            # from_url does not connect; the first command does
            self._redis = redis.from_url(
                self.redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
        return self._redis

    def _redis_failed(self, error: RedisError) -> None:
        self._failures += 1
        logger.warning(f"Token blacklist unavailable ({self._failures}): {error}")
        if self._failures >= self.failure_threshold:
            self._paused_until = time.monotonic() + self.cooldown_seconds
            self._failures = 0
            logger.warning(f"Token blacklist paused for {self.cooldown_seconds}s")

    async def add(self, token: str, ttl_seconds: int) -> bool:
        """
        Revoke ``token`` for the next ``ttl_seconds``.

        Returns:
            bool: False when the token was already expired or Redis is down.
        """
        if ttl_seconds <= 0:
            return False
        conn = self._connection()
        if conn is None:
            logger.warning("Token not revoked: blacklist unavailable")
            return False
        try:
            await conn.set(self.key(token), "1", ex=ttl_seconds)
        except RedisError as e:
            self._redis_failed(e)
            return False
        self._failures = 0
        logger.info(f"Token revoked for {ttl_seconds}s")
        return True

    async def contains(self, token: str) -> bool:
        """Whether ``token`` was revoked. False when Redis cannot answer."""
        conn = self._connection()
        if conn is None:
            return False
        try:
            found = await conn.exists(self.key(token))
        except RedisError as e:
            self._redis_failed(e)
            return False
        self._failures = 0
        return bool(found)

    async def healthcheck(self) -> bool:
        conn = self._connection()
        if conn is None:
            return False
        try:
            await conn.ping()
        except RedisError as e:
            self._redis_failed(e)
            return False
        self._failures = 0
        return True


token_blacklist = TokenBlacklist(settings.REDIS_URL)
