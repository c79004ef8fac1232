"""
Plural variant selection for lines like `'apple|apples'` or `'{0} none|[1,19] some|[20,*] many'`.

Selection order:
1. Explicit conditions: `{n}` / `{a,b}` exact values, `[a,b]` inclusive ranges (`*` is unbounded).
2. A leading zero form when the line has one more variant than the locale has plural forms
   (only for locales with more than one form, so `a|b` stays a plain pair everywhere).
3. The locale's cardinal rule.
"""

import math
import re
from typing import Callable, Dict, List, Optional, Tuple

_CONDITION = re.compile(r"^\s*([\{\[])([\d\s.,*+-]+)[\}\]](.*)", re.DOTALL)

PluralRule = Callable[[float], int]


def _one_form(n: float) -> int:
    return 0


def _one_other(n: float) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: float) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: float) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech(n: float) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _irish(n: float) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _lithuanian(n: float) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    return 1 if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20) else 2


def _slovenian(n: float) -> int:
    if n % 100 == 1:
        return 0
    if n % 100 == 2:
        return 1
    return 2 if n % 100 in (3, 4) else 3


def _macedonian(n: float) -> int:
    return 0 if n % 10 == 1 else 1


def _maltese(n: float) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < n % 100 < 11:
        return 1
    return 2 if 10 < n % 100 < 20 else 3


def _latvian(n: float) -> int:
    if n == 0:
        return 0
    return 1 if n % 10 == 1 and n % 100 != 11 else 2


def _polish(n: float) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14) else 2


def _welsh(n: float) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n in (8, 11) else 3


def _romanian(n: float) -> int:
    if n == 1:
        return 0
    return 1 if n == 0 or 0 < n % 100 < 20 else 2


def _arabic(n: float) -> int:
    if n in (0, 1, 2):
        return int(n)
    if 3 <= n % 100 <= 10:
        return 3
    return 4 if 11 <= n % 100 <= 99 else 5


_FAMILIES: List[Tuple[int, PluralRule, Tuple[str, ...]]] = [
    (1, _one_form, ("az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms", "th", "tr", "vi", "zh")),
    (2, _one_other, (
        "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et", "eu", "fa", "fi", "fo", "fur", "fy",
        "gl", "gu", "ha", "he", "hu", "is", "it", "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl", "nn",
        "no", "om", "or", "pa", "pap", "ps", "pt", "so", "sq", "sv", "sw", "ta", "te", "tk", "ur", "zu",
    )),
    (2, _zero_one_other, ("am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso", "pt_br", "ti", "wa")),
    (3, _east_slavic, ("be", "bs", "hr", "ru", "sr", "uk")),
    (3, _czech, ("cs", "sk")),
    (3, _irish, ("ga",)),
    (3, _lithuanian, ("lt",)),
    (4, _slovenian, ("sl",)),
    (2, _macedonian, ("mk",)),
    (4, _maltese, ("mt",)),
    (3, _latvian, ("lv",)),
    (3, _polish, ("pl",)),
    (4, _welsh, ("cy",)),
    (3, _romanian, ("ro",)),
    (6, _arabic, ("ar",)),
]

PLURAL_RULES: Dict[str, Tuple[int, PluralRule]] = {
    locale: (forms, rule) for forms, rule, locales in _FAMILIES for locale in locales
}


class MessageSelector:

    def __init__(self, rules: Optional[Dict[str, Tuple[int, PluralRule]]] = None, default_locale: str = "en"):
        self.rules = dict(PLURAL_RULES)
        if rules:
            self.rules.update(rules)
        self.default_locale = default_locale

    def choose(self, line: str, number: float, locale: Optional[str]) -> str:
        if "|" not in line and not _CONDITION.match(line):
            return line
        segments = line.split("|")

        value = self.extract(segments, number)
        if value is not None:
            return value.strip()

        has_conditions = any(_CONDITION.match(segment) for segment in segments)
        segments = self.strip_conditions(segments)
        forms, rule = self.rule_for(locale)

        if not has_conditions and forms > 1 and len(segments) == forms + 1:
            if number == 0:
                return segments[0].strip()
            segments = segments[1:]

        index = rule(number)
        if len(segments) == 1 or index >= len(segments) or not segments[index]:
            return segments[0].strip()
        return segments[index].strip()

    def extract(self, segments: List[str], number: float) -> Optional[str]:
        for segment in segments:
            match = _CONDITION.match(segment)
            if match and self._matches(match.group(2), match.group(1), number):
                return match.group(3)
        return None

    @staticmethod
    def _matches(condition: str, opener: str, number: float) -> bool:
        if opener == "{":
            return any(_to_number(part) == number for part in condition.split(",") if part.strip())

        bounds = condition.split(",", 1)
        if len(bounds) != 2:
            return False
        low, high = (_to_number(bound) for bound in bounds)
        if bounds[0].strip() == "*":
            low = -math.inf
        return low <= number <= high

    @staticmethod
    def strip_conditions(segments: List[str]) -> List[str]:
        return [_CONDITION.sub(r"\3", segment) for segment in segments]

    def rule_for(self, locale: Optional[str]) -> Tuple[int, PluralRule]:
        normalized = (locale or self.default_locale).replace("-", "_").lower()
        if normalized in self.rules:
            return self.rules[normalized]
        language = normalized.split("_", 1)[0]
        if language in self.rules:
            return self.rules[language]
        return self.rules.get(self.default_locale, (2, _one_other))


def _to_number(value: str) -> float:
    value = value.strip()
    if value == "*":
        return math.inf
    try:
        return float(value)
    except ValueError:
        return math.nan
