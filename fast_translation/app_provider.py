from typing import Optional

from fast_translation.application import Application
from fast_translation.config import TranslationConfig
from fast_translation.contracts.cache_store import CacheStore
from fast_translation.core.cache import Cache
from fast_translation.core.loaders import DatabaseLoader, FileLoader
from fast_translation.core.translator import Translator
from fast_translation.utils.env_utils import configure_env
from fast_translation.utils.logging import setup_logging


def boot(*,
    translator: Optional[Translator] = None,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    config: Optional[TranslationConfig] = None,
    cache: Optional[CacheStore] = None,
    namespaces: Optional[dict[str, str]] = None,
) -> Translator:
    """
    Sets up the translator.
    - Loads environment variables from dotenv files
    - Sets up logging
    - Builds the default translator (files + MongoDB + Redis) unless one is given
    - Registers namespace hints for the file loader

    Booting twice returns the translator from the first boot.
    """
    app = Application()
    if app.is_booted() and app.get_translator() is not None:
        return app.get_translator()

    app.set_boot_args(
        env_file_name=env_file_name,
        log_file_name=log_file_name,
        namespaces=namespaces,
    )

    configure_env(env_file_name)
    setup_logging(log_file_name)

    if translator is None:
        config = config or TranslationConfig.from_env()
        translator = Translator(
            FileLoader(config.lang_path),
            DatabaseLoader(config),
            config.locale,
            cache=cache or Cache(),
            config=config,
            fallback=config.fallback_locale,
        )

    for namespace, hint in (namespaces or {}).items():
        translator.add_namespace(namespace, hint)

    app.set_translator(translator)
    return translator
