from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Union


class CacheStore(ABC):
    """Long-lived cache used in front of the translation database."""

    @abstractmethod
    async def remember_forever(self, key: str, callback: Union[Callable[[], Any], Callable[[], Awaitable[Any]]]) -> Any:
        """
        Return the cached value for `key`, or compute it with `callback` and store it without expiry.

        Concurrent callers may both compute; the last write wins.
        """
        pass

    @abstractmethod
    async def forget(self, key: str) -> None:
        pass

    @abstractmethod
    async def flush(self) -> None:
        pass
