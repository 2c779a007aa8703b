import json
from typing import List, Optional
from uuid import uuid4

from redis.asyncio import Redis

from app.domain.errors import CartUnavailableError
from app.domain.models.cart import CartLine
from app.domain.models.product import Product
from app.utils.locks import RedisLock


class CartRepo:
    """
    Per-user cart kept in Redis (or any cache backend with get/set/delete).
    Stored as a JSON list of cart lines under `cart:{user_id}`; every write
    refreshes the TTL.

    Read-modify-write operations run under a per-user `RedisLock`, so
    overlapping requests for one cart are applied one after the other.
    """

    def __init__(
        self,
        redis: Optional[Redis],
        ttl: int,
        key_prefix: str = "cart",
        lock_ttl: int = 10,
        lock_timeout: float = 5.0,
    ):
        self.cache = redis
        self.ttl = ttl
        self.prefix = key_prefix
        self.lock_ttl = lock_ttl
        self.lock_timeout = lock_timeout

    def key(self, user_id: str) -> str:
        return f"{self.prefix}:{user_id}"

    def _redis(self) -> Redis:
        if self.cache is None:
            raise CartUnavailableError()
        return self.cache

    def locked(self, user_id: str) -> RedisLock:
        """Exclusive access to one user's cart: `async with carts.locked(uid): ...`. Not reentrant."""
        return RedisLock(self._redis(), self.key(user_id), ttl=self.lock_ttl, timeout=self.lock_timeout)

    async def get(self, user_id: str) -> List[CartLine]:
        raw = await self._redis().get(self.key(user_id))
        if not raw:
            return []
        return [CartLine.model_validate(x) for x in json.loads(raw)]

    async def save(self, user_id: str, lines: List[CartLine]) -> None:
        payload = [line.model_dump(by_alias=True) for line in lines]
        await self._redis().set(self.key(user_id), json.dumps(payload), ex=self.ttl)

    async def add(self, user_id: str, product: Product, quantity: int = 1) -> List[CartLine]:
        """Increment the existing line for this product, or append a new one."""
        async with self.locked(user_id):
            lines = await self.get(user_id)
            for i, line in enumerate(lines):
                if line.product.id == product.id:
                    lines[i] = line.model_copy(update={"quantity": line.quantity + quantity})
                    break
            else:
                lines.append(CartLine(id=uuid4().hex, product=product, quantity=quantity))
            await self.save(user_id, lines)
        return lines

    async def remove(self, user_id: str, line_id: str) -> List[CartLine]:
        async with self.locked(user_id):
            lines = [line for line in await self.get(user_id) if line.id != line_id]
            await self.save(user_id, lines)
        return lines

    async def clear(self, user_id: str) -> None:
        await self._redis().delete(self.key(user_id))
