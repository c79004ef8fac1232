import inspect
import os
import pickle
from typing import Any, Awaitable, Callable, Dict, Optional, Union

import redis.asyncio as redis

from fast_translation.config import REDIS_CACHE_DB
from fast_translation.contracts.cache_store import CacheStore


def _redis_from_env() -> redis.Redis:
    return redis.Redis(
        host=os.getenv("REDIS_HOST", "localhost"),
        port=int(os.getenv("REDIS_PORT", 6379)),
        db=REDIS_CACHE_DB
    )


async def _call(callback: Union[Callable[[], Any], Callable[[], Awaitable[Any]]]) -> Any:
    if inspect.iscoroutinefunction(callback):
        return await callback()
    value = callback()
    if inspect.isawaitable(value):
        value = await value
    return value


class Cache(CacheStore):
    """Redis backed cache. Values are pickled, so any loaded lines dict round-trips."""

    def __init__(self, client: Optional[redis.Redis] = None):
        self._client = client

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = _redis_from_env()
        return self._client

    async def set(self, key: str, value: Any, expire_in_m: Optional[int] = None):
        """
        Set a value in the cache.
        :param key: The cache key.
        :param value: The value to store.
        :param expire_in_m: Expiration time in minutes (optional).
        """
        serialized_value = pickle.dumps(value)
        if expire_in_m is not None:
            await self.client.setex(key, int(round(expire_in_m * 60)), serialized_value)
        else:
            await self.client.set(key, serialized_value)

    async def get(self, key: str, default=None):
        """
        Get a value from the cache.
        :param key: The cache key.
        :param default: Default value if key doesn't exist.
        :return: The cached value or default.
        """
        value = await self.client.get(key)
        if value is None:
            return default
        return pickle.loads(value)

    async def exists(self, key: str) -> bool:
        return await self.client.exists(key) > 0

    async def remember(self, key: str, callback: Union[Callable[[], Any], Callable[[], Awaitable[Any]]], expire_in_m: Optional[int] = None):
        """
        Get an item from the cache, or store the value returned by `callback`.
        :param key: The cache key.
        :param callback: Function (sync or async) that returns the value.
        :param expire_in_m: Expiration time in minutes, `None` keeps it forever.
        :return: The cached value.
        """
        value = await self.get(key)
        if value is None:
            value = await _call(callback)
            await self.set(key, value, expire_in_m)
        return value

    async def remember_forever(self, key: str, callback: Union[Callable[[], Any], Callable[[], Awaitable[Any]]]) -> Any:
        return await self.remember(key, callback)

    async def forget(self, key: str) -> None:
        await self.client.delete(key)

    async def flush(self) -> None:
        await self.client.flushdb()


class ArrayCache(CacheStore):
    """In-process cache living as long as the instance. Handy for tests and single-process tools."""

    def __init__(self):
        self.store: Dict[str, Any] = {}

    async def remember_forever(self, key: str, callback: Union[Callable[[], Any], Callable[[], Awaitable[Any]]]) -> Any:
        if key in self.store:
            return self.store[key]
        value = await _call(callback)
        self.store[key] = value
        return value

    async def forget(self, key: str) -> None:
        self.store.pop(key, None)

    async def flush(self) -> None:
        self.store.clear()
