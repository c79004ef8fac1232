import os
from dataclasses import dataclass
from typing import Optional

from fast_translation.exceptions import EnvInvalidException

# Redis database for the long-lived translations cache
REDIS_CACHE_DB = int(os.getenv("REDIS_CACHE_DB", 15))

# Prefix for cache keys, e.g. `translations.en.messages`
TRANSLATION_CACHE_PREFIX = os.getenv("TRANSLATION_CACHE_PREFIX", "translations")

# Mongo collection holding translation lines
TRANSLATIONS_COLLECTION = os.getenv("TRANSLATIONS_COLLECTION", "translations")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise EnvInvalidException(name, value, list(_TRUE_VALUES + _FALSE_VALUES[:-1]))


@dataclass
class TranslationConfig:
    """
    Runtime flags consulted by the translator on every load.

    - debug_mode: live editing, every default-namespace load hits the database
    - minimal_mode: use the long-lived cache even when debugging
    - file_fallback: serve file lines when a database group is empty
    """

    debug_mode: bool = False
    minimal_mode: bool = False
    file_fallback: bool = False
    locale: str = "en"
    fallback_locale: Optional[str] = "en"
    lang_path: str = os.path.join(os.getcwd(), "lang")

    @classmethod
    def from_env(cls) -> "TranslationConfig":
        return cls(
            debug_mode=env_bool("APP_DEBUG", os.getenv("ENV", "debug") == "debug"),
            minimal_mode=env_bool("TRANSLATION_DB_MINIMAL", False),
            file_fallback=env_bool("TRANSLATION_DB_FILE_FALLBACK", False),
            locale=os.getenv("LOCALE_DEFAULT", "en"),
            fallback_locale=os.getenv("LOCALE_FALLBACK", "en") or None,
            lang_path=os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang")),
        )

    @property
    def uses_long_lived_cache(self) -> bool:
        return not self.debug_mode or self.minimal_mode
