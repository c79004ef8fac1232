"""Core translator components re-exported for convenient access."""

from .cache import ArrayCache, Cache
from .load_table import LoadTable
from .loaders import DatabaseLoader, FileLoader
from .localization import __, get_locale, get_translator, set_locale, set_translator, trans, trans_choice
from .message_selector import MessageSelector
from .missing_keys import MissingKeyRecorder
from .translator import Translator

__all__ = [
    "ArrayCache",
    "Cache",
    "DatabaseLoader",
    "FileLoader",
    "LoadTable",
    "MessageSelector",
    "MissingKeyRecorder",
    "Translator",
    "__",
    "get_locale",
    "get_translator",
    "set_locale",
    "set_translator",
    "trans",
    "trans_choice",
]
