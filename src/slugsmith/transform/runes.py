"""Rune rules: per-code-point decisions for the process phase.

A rune rule looks at exactly one code point and either accepts it, naming
the text to emit in its place, or rejects it with ``REJECT``. Rules are
chained with :func:`chain`; the first accepting rule wins. A chain becomes a
whole-string transform through :func:`chain_to_string_transform`, which
drops every code point no rule accepts.
"""

from __future__ import annotations

from typing import Mapping

from ..adapters.unicode_data import UNICODE
from ..core.model import REJECT, RuneResult, RuneRule, StringTransform
from ..core.ports import UnicodeService

UMLAUTS: dict[str, str] = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "Ä": "Ae",
    "Ö": "Oe",
    "Ü": "Ue",
    "ß": "ss",
    "\u1e9e": "ss",
}


def is_valid_slug_rune(ch: str, case_sensitive: bool = False) -> bool:
    """Check slug membership: a-z, 0-9, '-' and '_'; A-Z unless *case_sensitive*.

    The case-sensitive variant only allows lowercase letters, which is what a
    lowercased pipeline can produce.
    """
    if "a" <= ch <= "z" or "0" <= ch <= "9" or ch == "-" or ch == "_":
        return True
    return not case_sensitive and "A" <= ch <= "Z"


def valid_slug_rune_rule(ch: str) -> RuneResult:
    """Keep slug-legal runes (either case) unchanged."""
    if is_valid_slug_rune(ch):
        return RuneResult(True, ch)
    return REJECT


def lower_slug_rune_rule(ch: str) -> RuneResult:
    """Keep lowercase slug-legal runes unchanged."""
    if is_valid_slug_rune(ch, case_sensitive=True):
        return RuneResult(True, ch)
    return REJECT


def keep_all_rule(ch: str) -> RuneResult:
    """Accept everything; put it last in a chain to keep unmatched runes."""
    return RuneResult(True, ch)


def dash_rule(ch: str, unicode: UnicodeService = UNICODE) -> RuneResult:
    """Map any dash or hyphen variant to '-'."""
    if unicode.is_dash_or_hyphen(ch):
        return RuneResult(True, "-")
    return REJECT


def space_rule(replacement: str, unicode: UnicodeService = UNICODE) -> RuneRule:
    """Return a rule that replaces every whitespace rune with *replacement*."""

    def rule(ch: str) -> RuneResult:
        if unicode.is_space(ch):
            return RuneResult(True, replacement)
        return REJECT

    return rule


def rule_from_map(mapping: Mapping[str, str]) -> RuneRule:
    """Return a rule accepting exactly the keys of *mapping*.

    The table is copied, so later changes to *mapping* are not seen.
    """
    table = dict(mapping)

    def rule(ch: str) -> RuneResult:
        replacement = table.get(ch)
        if replacement is None:
            return REJECT
        return RuneResult(True, replacement)

    return rule


umlaut_rule = rule_from_map(UMLAUTS)


def chain(*rules: RuneRule) -> RuneRule:
    """Combine *rules* so the first one that accepts decides."""
    rules = tuple(rules)

    def chained(ch: str) -> RuneResult:
        for rule in rules:
            result = rule(ch)
            if result.accepted:
                return result
        return REJECT

    return chained


def chain_to_string_transform(rule: RuneRule) -> StringTransform:
    """Apply *rule* to every code point; rejected code points are dropped.

    Examples:
        >>> f = chain_to_string_transform(chain(space_rule("-"), valid_slug_rune_rule))
        >>> f("!!hello world!!")
        'hello-world'
    """

    def transform(text: str) -> str:
        parts = []
        for ch in text:
            accepted, replacement = rule(ch)
            if accepted:
                parts.append(replacement)
        return "".join(parts)

    return transform
