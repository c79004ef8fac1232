"""Custom exceptions for fast-translation."""

from .common_exceptions import (
    DatabaseNotInitializedException,
    EnvMissingException,
    EnvInvalidException,
)
from .translation_exceptions import (
    TranslationException,
    TranslatorNotBootedException,
)


__all__ = [
    # common
    "DatabaseNotInitializedException",
    "EnvMissingException",
    "EnvInvalidException",
    # translation
    "TranslationException",
    "TranslatorNotBootedException",
]
