"""
Database-backed translator with file fallback.

Resolution for a key like `'messages.welcome'`:
- candidate locales: requested (or current) locale, then the fallback locale
- for each locale, load the group once per translator lifetime:
    * namespaced keys (`'courier::mail.subject'`) come straight from files
    * default-namespace keys come from the database, optionally wrapped in the
      long-lived cache, optionally falling back to files when the group is empty
- the first locale with a line wins; every miss is reported to the database
- nothing found anywhere: the key itself is returned, so gaps show up in the UI

Usage:
    translator = Translator(FileLoader('lang'), DatabaseLoader(), 'en', cache=Cache())
    await translator.get('messages.greeting', {'name': 'Ada'})
    await translator.choice('cart.items', 3)
"""

import asyncio
import logging
from collections.abc import Sized
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from fast_translation.config import TRANSLATION_CACHE_PREFIX, TranslationConfig
from fast_translation.contracts.cache_store import CacheStore
from fast_translation.contracts.translation_loader import TranslationLoader
from fast_translation.contracts.translation_store import TranslationStore
from fast_translation.core.load_table import LoadKey, LoadTable
from fast_translation.core.message_selector import MessageSelector
from fast_translation.core.missing_keys import MissingKeyRecorder
from fast_translation.utils.translation_utils import (
    get_nested,
    is_namespaced,
    locale_chain,
    make_replacements,
    parse_key,
    replace_recursive,
)

Line = Union[str, Dict[str, Any]]


class Translator:

    def __init__(
        self,
        loader: TranslationLoader,
        database: TranslationStore,
        locale: str,
        *,
        cache: CacheStore,
        config: Optional[TranslationConfig] = None,
        fallback: Optional[str] = None,
        selector: Optional[MessageSelector] = None,
        cache_prefix: str = TRANSLATION_CACHE_PREFIX,
    ):
        self.loader = loader
        self.database = database
        self.cache = cache
        self.config = config or TranslationConfig.from_env()
        self.selector = selector or MessageSelector()
        self.cache_prefix = cache_prefix
        self.missing = MissingKeyRecorder(database)
        self.loaded = LoadTable()

        self.editing = False
        self.editing_lines: Dict[str, Line] = {}

        self._parsed: Dict[str, Tuple[Optional[str], str, str]] = {}
        self._load_locks: Dict[LoadKey, asyncio.Lock] = {}

        self.set_locale(locale)
        self.fallback = fallback

    # --------------- locale ---------------
    def get_locale(self) -> str:
        return self.locale

    def set_locale(self, locale: str) -> None:
        if "/" in locale or "\\" in locale:
            raise ValueError("Invalid characters present in locale.")
        self.locale = locale

    def get_fallback(self) -> Optional[str]:
        return self.fallback

    def set_fallback(self, fallback: Optional[str]) -> None:
        self.fallback = fallback

    def parse_locale(self, locale: Optional[str] = None) -> List[str]:
        return locale_chain(locale, self.locale, self.fallback)

    # --------------- keys ---------------
    @staticmethod
    def is_namespaced(namespace: Optional[str]) -> bool:
        return is_namespaced(namespace)

    def parse_key(self, key: str) -> Tuple[Optional[str], str, str]:
        if key not in self._parsed:
            self._parsed[key] = parse_key(key)
        return self._parsed[key]

    def set_parsed_key(self, key: str, parsed: Tuple[Optional[str], str, str]) -> None:
        self._parsed[key] = parsed

    # --------------- lookup ---------------
    async def get(
        self,
        key: str,
        replace: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
        fallback: bool = True,
    ) -> Line:
        """
        Get the translation for the given key.

        Returns the key itself when no candidate locale has a line.
        """
        namespace, group, item = self.parse_key(key)
        locales = self.parse_locale(locale) if fallback else [locale or self.locale]

        line: Optional[Line] = None
        for candidate in locales:
            await self.load(namespace, group, candidate)

            line = self.get_line(namespace, group, candidate, item, replace)

            if line is None and not self.is_namespaced(namespace):
                await self.missing.record(candidate, group, key)

            if line is not None:
                break

        if line is None:
            return key

        return line

    def get_line(
        self,
        namespace: Optional[str],
        group: str,
        locale: str,
        item: str,
        replace: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Line]:
        line = get_nested(self.loaded.lines(namespace, group, locale), item)

        if isinstance(line, str):
            return make_replacements(line, replace)
        if isinstance(line, Mapping) and len(line) > 0:
            return replace_recursive(line, replace)
        return None

    async def has(self, key: str, locale: Optional[str] = None, fallback: bool = True) -> bool:
        return await self.get(key, None, locale, fallback) != key

    async def has_for_locale(self, key: str, locale: Optional[str] = None) -> bool:
        return await self.has(key, locale, False)

    async def choice(
        self,
        key: str,
        number: Union[int, float, Sized],
        replace: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> Line:
        """Get a translation variant according to an integer value."""
        locale = locale or self.locale or self.fallback
        line = await self.get(key, None, locale)

        if isinstance(number, Sized):
            number = len(number)

        # Variants are picked before replacing, so values may contain `|` or brackets
        replace = {**(replace or {}), "count": number}
        if not isinstance(line, str):
            return replace_recursive(line, replace)
        return make_replacements(self.selector.choose(line, number, locale), replace)

    async def trans(
        self,
        id: str,
        parameters: Optional[Mapping[str, Any]] = None,
        domain: str = "messages",
        locale: Optional[str] = None,
    ) -> Line:
        string = await self.get(id, parameters, locale)

        if self.editing:
            self.editing_lines[id] = string

        return string

    async def trans_choice(
        self,
        id: str,
        number: Union[int, float, Sized],
        parameters: Optional[Mapping[str, Any]] = None,
        domain: str = "messages",
        locale: Optional[str] = None,
    ) -> Line:
        return await self.choice(id, number, parameters, locale)

    # --------------- loading ---------------
    async def load(self, namespace: Optional[str], group: str, locale: str) -> None:
        if self.loaded.is_loaded(namespace, group, locale):
            return

        load_key = LoadTable.key(namespace, group, locale)
        lock = self._load_locks.setdefault(load_key, asyncio.Lock())
        try:
            async with lock:
                if self.loaded.is_loaded(namespace, group, locale):
                    return

                if not self.is_namespaced(namespace):
                    if self.config.uses_long_lived_cache:
                        lines = await self.cache.remember_forever(
                            self.cache_key(locale, group),
                            lambda: self.load_from_database(namespace, group, locale),
                        )
                    else:
                        lines = await self.load_from_database(namespace, group, locale)
                else:
                    logging.debug(f"Loading `{namespace}::{group}` ({locale}) from files")
                    lines = await self.loader.load(locale, group, namespace)

                self.loaded.record_loaded(namespace, group, locale, lines)
        finally:
            if self._load_locks.get(load_key) is lock:
                del self._load_locks[load_key]

    async def load_from_database(self, namespace: Optional[str], group: str, locale: str) -> Dict[str, Any]:
        logging.debug(f"Loading `{group}` ({locale}) from database")
        lines = await self.database.load(locale, group, namespace)
        if len(lines) == 0 and self.config.file_fallback:
            logging.debug(f"No database lines for `{group}` ({locale}), falling back to files")
            return await self.loader.load(locale, group, namespace)

        return lines

    def cache_key(self, locale: str, group: str) -> str:
        return f"{self.cache_prefix}.{locale}.{group}"

    async def forget_cached(self, locale: str, group: str) -> None:
        """Drop the long-lived cache entry and the loaded lines so the next lookup reloads."""
        await self.cache.forget(self.cache_key(locale, group))
        self.loaded.forget(None, group, locale)

    def add_lines(self, lines: Mapping[str, str], locale: str, namespace: Optional[str] = "*") -> None:
        """Add lines like `{'messages.welcome': 'Hi'}` directly, skipping every backend for their groups."""
        for key, value in lines.items():
            group, _, item = key.partition(".")
            if item:
                self.loaded.merge(namespace, group, locale, {item: value})

    def add_namespace(self, namespace: str, hint: str) -> None:
        self.loader.add_namespace(namespace, hint)
