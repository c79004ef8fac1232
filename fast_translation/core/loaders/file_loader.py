import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from fast_translation.contracts.translation_loader import TranslationLoader
from fast_translation.utils.translation_utils import normalize_namespace


class FileLoader(TranslationLoader):
    """
    JSON files on disk, one file per group.

    Layout:
        <root>/<locale>/<group>.json                          default namespace
        <hint>/<locale>/<group>.json                          namespace registered via add_namespace()
        <root>/vendor/<namespace>/<locale>/<group>.json       app overrides for a namespace
    """

    def __init__(self, root: Union[str, Path, None] = None):
        super().__init__()
        self.root = Path(root or os.getenv('LOCALE_PATH', os.path.join(os.getcwd(), 'lang')))

    async def load(self, locale: str, group: str, namespace: Optional[str] = None) -> Dict[str, Any]:
        namespace = normalize_namespace(namespace)
        if namespace is None:
            return self._read(self.root / locale / f"{group}.json")
        return self._load_namespaced(locale, group, namespace)

    def _load_namespaced(self, locale: str, group: str, namespace: str) -> Dict[str, Any]:
        hint = self._hints.get(namespace)
        if hint is None:
            return {}

        lines = self._read(Path(hint) / locale / f"{group}.json")
        overrides = self._read(self.root / "vendor" / namespace / locale / f"{group}.json")
        return _merge(lines, overrides)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with path.open(encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logging.warning(f"Could not read translation file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logging.warning(f"Translation file {path} does not contain an object")
            return {}
        return data


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
