from .translation_utils import (
    get_nested,
    is_namespaced,
    locale_chain,
    make_replacements,
    normalize_namespace,
    parse_key,
    undot,
)

__all__ = [
    "get_nested",
    "is_namespaced",
    "locale_chain",
    "make_replacements",
    "normalize_namespace",
    "parse_key",
    "undot",
]
