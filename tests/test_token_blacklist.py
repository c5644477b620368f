"""Tests for the Redis-backed logout blacklist."""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.services.token_blacklist import TokenBlacklist


class RecordingRedis:
    def __init__(self):
        self.values = {}
        self.ttls = {}

    async def set(self, key, value, ex=None):
        self.values[key] = value
        self.ttls[key] = ex
        return True

    async def exists(self, key):
        return int(key in self.values)

    async def ping(self):
        return True


class DownRedis:
    def __init__(self):
        self.calls = 0

    async def _fail(self, *args, **kwargs):
        self.calls += 1
        raise RedisConnectionError("Connection refused")

    set = exists = ping = _fail


def _blacklist(conn, **kwargs):
    blacklist = TokenBlacklist("redis://unused:6379/0", **kwargs)
    blacklist._redis = conn
    return blacklist


@pytest.mark.asyncio
async def test_added_token_is_contained_under_prefixed_key():
    conn = RecordingRedis()
    blacklist = _blacklist(conn)

    assert await blacklist.add("abc.def.ghi", ttl_seconds=120) is True

    assert conn.values == {"blacklist:abc.def.ghi": "1"}
    assert conn.ttls["blacklist:abc.def.ghi"] == 120
    assert await blacklist.contains("abc.def.ghi") is True
    assert await blacklist.contains("other.token") is False


@pytest.mark.asyncio
async def test_expired_token_is_not_stored():
    conn = RecordingRedis()
    blacklist = _blacklist(conn)

    assert await blacklist.add("abc.def.ghi", ttl_seconds=0) is False
    assert conn.values == {}


@pytest.mark.asyncio
async def test_disabled_blacklist_never_calls_redis():
    conn = DownRedis()
    blacklist = _blacklist(conn)
    blacklist.enabled = False

    assert await blacklist.add("abc.def.ghi", ttl_seconds=60) is False
    assert await blacklist.contains("abc.def.ghi") is False
    assert await blacklist.healthcheck() is False
    assert conn.calls == 0


@pytest.mark.asyncio
async def test_redis_errors_fail_open():
    blacklist = _blacklist(DownRedis())

    assert await blacklist.contains("abc.def.ghi") is False
    assert await blacklist.add("abc.def.ghi", ttl_seconds=60) is False
    assert await blacklist.healthcheck() is False


@pytest.mark.asyncio
async def test_repeated_failures_pause_redis_calls():
    conn = DownRedis()
    blacklist = _blacklist(conn, failure_threshold=3, cooldown_seconds=60)

    for _ in range(3):
        await blacklist.contains("abc.def.ghi")
    assert conn.calls == 3

    # Paused: lookups answer without touching Redis
    assert await blacklist.contains("abc.def.ghi") is False
    assert conn.calls == 3


@pytest.mark.asyncio
async def test_success_resets_failure_count():
    conn = RecordingRedis()
    blacklist = _blacklist(conn, failure_threshold=2)
    blacklist._failures = 1

    assert await blacklist.healthcheck() is True
    assert blacklist._failures == 0
