# app/utils/locks.py
from __future__ import annotations
from typing import Optional
from redis.asyncio import Redis
import uuid, asyncio, time

from app.domain.errors import CartBusyError


class RedisLock:
    """
    Single-instance lock using SET NX EX, one per key.
    Serializes read-modify-write cycles on a user's cart.

        async with RedisLock(redis, "cart:u1"):
            ...
    """
    def __init__(self, redis: Redis, key: str, ttl: int = 10, timeout: float = 5.0, poll: float = 0.05):
        self.redis = redis
        self.key = f"lock:{key}"
        self.ttl = ttl
        self.timeout = timeout
        self.poll = poll
        self._token: Optional[str] = None

    async def acquire(self) -> bool:
        token = uuid.uuid4().hex
        ok = await self.redis.set(self.key, token, nx=True, ex=self.ttl)
        if ok:
            self._token = token
            return True
        return False

    async def release(self) -> None:
        # only delete our own token: after a TTL expiry the key may belong to someone else
        if self._token is None:
            return
        current = await self.redis.get(self.key)
        if isinstance(current, bytes):
            current = current.decode()
        if current == self._token:
            await self.redis.delete(self.key)
        self._token = None

    async def wait_acquire(self) -> None:
        """Poll until the lock is ours; CartBusyError after `timeout` seconds."""
        deadline = time.monotonic() + self.timeout
        while not await self.acquire():
            if time.monotonic() >= deadline:
                raise CartBusyError()
            await asyncio.sleep(self.poll)

    async def __aenter__(self) -> "RedisLock":
        await self.wait_acquire()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.release()
