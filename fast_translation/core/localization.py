"""
Laravel-style helpers over the booted translator.

Usage:
    from fast_translation import __, set_locale, trans_choice

    await __('messages.welcome')                      # Basic translation
    await __('messages.greeting', {'name': 'John'})   # With parameters
    await __('missing.key', default='Fallback')       # With default
    await trans_choice('cart.items', 3)               # Pluralised
    set_locale('es')                                  # Change locale for this context
"""

from contextvars import ContextVar
from typing import Any, Dict, Optional

from fast_translation.application import Application
from fast_translation.core.translator import Translator
from fast_translation.exceptions import TranslatorNotBootedException

# Per-request locale; None means the translator's own locale
_current_locale: ContextVar[Optional[str]] = ContextVar('locale', default=None)


def set_translator(translator: Translator) -> None:
    Application().set_translator(translator)


def get_translator() -> Translator:
    translator = Application().get_translator()
    if translator is None:
        raise TranslatorNotBootedException()
    return translator


async def __(key: str, parameters: Optional[Dict[str, Any]] = None,
             default: Optional[str] = None, locale: Optional[str] = None):
    """
    Translate `key` in the current context locale.

    `default` replaces the key when no line exists anywhere.
    """
    translation = await get_translator().trans(key, parameters, locale=locale or _current_locale.get())
    if translation == key and default is not None:
        return default
    return translation


trans = __


async def trans_choice(key: str, count: Any, parameters: Optional[Dict[str, Any]] = None,
                       locale: Optional[str] = None):
    return await get_translator().trans_choice(key, count, parameters, locale=locale or _current_locale.get())


def set_locale(locale: str) -> None:
    """Set the locale for the current context only."""
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get() or get_translator().get_locale()
