from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TranslationLoader(ABC):
    """Abstract source of translation lines.

    Keep the surface minimal so custom loaders (Redis, HTTP, ...) are easy to write.
    """

    def __init__(self):
        self._hints: Dict[str, str] = {}

    @abstractmethod
    async def load(self, locale: str, group: str, namespace: Optional[str] = None) -> Dict[str, Any]:
        """
        Return the lines of one group for one locale.

        Must return an empty dict, never raise, when the source has no such group.
        """
        pass

    def add_namespace(self, namespace: str, hint: str) -> None:
        """Register where lines for a namespace live (a directory, a collection, ...)."""
        self._hints[namespace] = hint

    def namespaces(self) -> Dict[str, str]:
        return dict(self._hints)
