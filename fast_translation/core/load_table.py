from typing import Any, Dict, Iterator, Optional, Tuple

from fast_translation.utils.translation_utils import normalize_namespace

LoadKey = Tuple[Optional[str], str, str]


class LoadTable:
    """
    Lines already loaded by one translator, keyed by `(namespace, group, locale)`.

    A recorded triple is never loaded again for the lifetime of the table,
    even if the underlying source changes.
    """

    def __init__(self):
        self._lines: Dict[LoadKey, Dict[str, Any]] = {}

    @staticmethod
    def key(namespace: Optional[str], group: str, locale: str) -> LoadKey:
        return normalize_namespace(namespace), group, locale

    def is_loaded(self, namespace: Optional[str], group: str, locale: str) -> bool:
        return self.key(namespace, group, locale) in self._lines

    def record_loaded(self, namespace: Optional[str], group: str, locale: str, lines: Optional[Dict[str, Any]]) -> None:
        self._lines[self.key(namespace, group, locale)] = dict(lines or {})

    def lines(self, namespace: Optional[str], group: str, locale: str) -> Dict[str, Any]:
        return self._lines.get(self.key(namespace, group, locale), {})

    def merge(self, namespace: Optional[str], group: str, locale: str, lines: Dict[str, Any]) -> None:
        """Add lines to a triple. The triple counts as loaded afterwards."""
        self._lines.setdefault(self.key(namespace, group, locale), {}).update(lines)

    def forget(self, namespace: Optional[str], group: str, locale: str) -> None:
        self._lines.pop(self.key(namespace, group, locale), None)

    def clear(self) -> None:
        self._lines.clear()

    def __contains__(self, item: LoadKey) -> bool:
        return self.key(*item) in self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LoadKey]:
        return iter(self._lines)
