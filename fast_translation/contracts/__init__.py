"""Contract classes and abstract interfaces.

These are the seams the translator is composed from and are exported so
they can be imported directly from :mod:`fast_translation`.
"""

from .cache_store import CacheStore
from .translation_loader import TranslationLoader
from .translation_store import TranslationStore

__all__ = [
    "CacheStore",
    "TranslationLoader",
    "TranslationStore",
]
