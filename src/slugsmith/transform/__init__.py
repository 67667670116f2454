"""Rune rules and string transforms for the slug pipeline."""

from .runes import (
    chain,
    chain_to_string_transform,
    dash_rule,
    is_valid_slug_rune,
    keep_all_rule,
    lower_slug_rune_rule,
    rule_from_map,
    space_rule,
    umlaut_rule,
    valid_slug_rune_rule,
)
from .strings import (
    ConstantReplacer,
    Normalizer,
    WordReplacer,
    collapse_repeated,
    strip_invalid,
    to_lower,
    to_transform,
    trim,
    truncate,
)

__all__ = [
    "chain",
    "chain_to_string_transform",
    "dash_rule",
    "is_valid_slug_rune",
    "keep_all_rule",
    "lower_slug_rune_rule",
    "rule_from_map",
    "space_rule",
    "umlaut_rule",
    "valid_slug_rune_rule",
    "ConstantReplacer",
    "Normalizer",
    "WordReplacer",
    "collapse_repeated",
    "strip_invalid",
    "to_lower",
    "to_transform",
    "trim",
    "truncate",
]
