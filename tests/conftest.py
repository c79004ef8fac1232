"""
Pytest configuration and shared fixtures for fast-translation tests.

Backends are in-memory fakes that count their calls, so no Mongo or Redis is needed.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest
from faker import Faker

from fast_translation.application import Application
from fast_translation.config import TranslationConfig
from fast_translation.contracts import CacheStore, TranslationLoader, TranslationStore
from fast_translation.core.translator import Translator

fake = Faker()


class FakeFileLoader(TranslationLoader):
    def __init__(self, lines: Optional[Dict[Tuple[Optional[str], str, str], Dict[str, Any]]] = None):
        super().__init__()
        self.lines = lines or {}
        self.calls: List[Tuple[str, str, Optional[str]]] = []

    async def load(self, locale, group, namespace=None):
        self.calls.append((locale, group, namespace))
        return dict(self.lines.get((namespace, group, locale), {}))


class FakeDatabase(TranslationStore):
    def __init__(self, lines: Optional[Dict[Tuple[str, str], Dict[str, Any]]] = None):
        super().__init__()
        self.lines = lines or {}
        self.calls: List[Tuple[str, str, Optional[str]]] = []
        self.missing: List[Tuple[str, str, str]] = []

    async def load(self, locale, group, namespace=None):
        self.calls.append((locale, group, namespace))
        return dict(self.lines.get((group, locale), {}))

    async def add_translation(self, locale, group, key):
        self.missing.append((locale, group, key))


class FakeCache(CacheStore):
    def __init__(self):
        self.store: Dict[str, Any] = {}
        self.computed: List[str] = []

    async def remember_forever(self, key, callback):
        if key not in self.store:
            self.computed.append(key)
            self.store[key] = await callback()
        return self.store[key]

    async def forget(self, key):
        self.store.pop(key, None)

    async def flush(self):
        self.store.clear()


@pytest.fixture
def sample_data():
    """Provide sample data for tests."""
    return {
        "name": fake.first_name(),
        "city": fake.city(),
    }


@pytest.fixture
def files():
    return FakeFileLoader()


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture
def debug_config():
    return TranslationConfig(debug_mode=True, minimal_mode=False, file_fallback=False)


@pytest.fixture
def make_translator(files, database, cache, debug_config):
    def factory(config: Optional[TranslationConfig] = None, locale: str = "en", fallback: Optional[str] = None):
        return Translator(
            files,
            database,
            locale,
            cache=cache,
            config=config or debug_config,
            fallback=fallback,
        )

    return factory


@pytest.fixture(autouse=True)
def reset_application():
    Application().reset()
    yield
    Application().reset()

