"""
Pure helpers behind the translator: key parsing, locale chains, dot notation and replacements.

None of these touch I/O, so they stay plain functions.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

NAMESPACE_SEPARATOR = "::"
DEFAULT_NAMESPACE = "*"

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def normalize_namespace(namespace: Optional[str]) -> Optional[str]:
    """`None` and `'*'` both mean the default namespace; collapse them to `None`."""
    if namespace is None or namespace == DEFAULT_NAMESPACE or namespace == "":
        return None
    return namespace


def is_namespaced(namespace: Optional[str]) -> bool:
    return normalize_namespace(namespace) is not None


def parse_key(key: str) -> Tuple[Optional[str], str, str]:
    """
    Split `'namespace::group.item'` into its parts.

    Never fails: a missing group or item comes back as an empty string.

    >>> parse_key('courier::mail.subject.welcome')
    ('courier', 'mail', 'subject.welcome')
    >>> parse_key('messages')
    (None, 'messages', '')
    """
    namespace = None
    rest = key or ""
    if NAMESPACE_SEPARATOR in rest:
        namespace, rest = rest.split(NAMESPACE_SEPARATOR, 1)

    group, _, item = rest.partition(".")
    return normalize_namespace(namespace), group, item


def locale_chain(requested: Optional[str], default: Optional[str], fallback: Optional[str]) -> List[str]:
    """Ordered candidate locales: requested (or default), then fallback. Falsy and repeated entries dropped."""
    chain: List[str] = []
    for locale in (requested or default, fallback):
        if locale and locale not in chain:
            chain.append(locale)
    return chain


def get_nested(data: Mapping[str, Any], key: str) -> Optional[Any]:
    """Navigate nested dict with dot notation. Pure function, no side effects."""
    if not key:
        return None
    if key in data:
        return data[key]
    current: Any = data
    for part in key.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            return None
    return current


def undot(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Expand flat `('a.b', value)` pairs into nested dicts.

    A plain value and a nested key on the same path collide; the later pair wins and a warning is logged.
    """
    result: Dict[str, Any] = {}
    for key, value in items:
        parts = key.split(".")
        current = result
        for part in parts[:-1]:
            child = current.get(part)
            if not isinstance(child, dict):
                if child is not None:
                    logging.warning(f"Translation `{key}` replaces the plain line at `{part}`")
                child = {}
                current[part] = child
            current = child
        if isinstance(current.get(parts[-1]), dict):
            logging.warning(f"Translation `{key}` replaces nested lines")
        current[parts[-1]] = value
    return result


def make_replacements(line: str, replace: Optional[Mapping[str, Any]]) -> str:
    """
    Substitute `{name}` tokens from `replace`.

    `{NAME}` upper-cases and `{Name}` capitalises the value of `name`.
    Tokens with no matching key are left untouched.
    """
    if not replace:
        return line

    def substitute(match: "re.Match[str]") -> str:
        token = match.group(1)
        if token in replace:
            return str(replace[token])
        lowered = token.lower()
        if lowered in replace:
            value = str(replace[lowered])
            if token.isupper():
                return value.upper()
            if token == lowered.capitalize():
                return value[:1].upper() + value[1:]
        return match.group(0)

    return _PLACEHOLDER.sub(substitute, line)


def replace_recursive(lines: Mapping[str, Any], replace: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in lines.items():
        if isinstance(value, str):
            result[key] = make_replacements(value, replace)
        elif isinstance(value, Mapping):
            result[key] = replace_recursive(value, replace)
        else:
            result[key] = value
    return result
