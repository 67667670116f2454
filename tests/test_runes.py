"""Tests for rune rules and rune chains."""

import pytest

from slugsmith.core.model import REJECT, RuneResult
from slugsmith.transform.runes import (
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


@pytest.mark.parametrize("ch,expected", [
    ("A", RuneResult(True, "A")),
    ("H", RuneResult(True, "H")),
    ("c", RuneResult(True, "c")),
    ("z", RuneResult(True, "z")),
    ("4", RuneResult(True, "4")),
    ("-", RuneResult(True, "-")),
    ("_", RuneResult(True, "_")),
    ("€", REJECT),
    ("@", REJECT),
    ("世", REJECT),
    (" ", REJECT),
])
def test_valid_slug_rune_rule(ch, expected):
    """Slug-legal runes are kept unchanged, everything else rejected."""
    assert valid_slug_rune_rule(ch) == expected


def test_lower_slug_rune_rule_rejects_uppercase():
    """The lowercase-only variant rejects A-Z."""
    assert lower_slug_rune_rule("A") == REJECT
    assert lower_slug_rune_rule("a") == RuneResult(True, "a")
    assert is_valid_slug_rune("Q") is True
    assert is_valid_slug_rune("Q", case_sensitive=True) is False
    assert is_valid_slug_rune("_", case_sensitive=True) is True


@pytest.mark.parametrize("ch,expected", [
    ("-", "-"),
    ("—", "-"),
    ("–", "-"),
    ("⸚", "-"),
    ("－", "-"),
    ("−", "-"),
    ("\u00ad", "-"),
    ("a", ""),
    ("€", ""),
])
def test_dash_rule(ch, expected):
    """Dash and hyphen variants all become '-'."""
    accepted, replacement = dash_rule(ch)
    assert replacement == expected
    assert accepted is bool(expected)


def test_space_rule():
    """Whitespace runes are replaced by the configured string."""
    with_dash = chain_to_string_transform(chain(space_rule("-"), keep_all_rule))
    with_plus = chain_to_string_transform(chain(space_rule("+++"), keep_all_rule))

    cases = [
        ("foo", "foo", "foo"),
        ("foo bar", "foo-bar", "foo+++bar"),
        ("foo\tbar\n42", "foo-bar-42", "foo+++bar+++42"),
        ("foo  bar", "foo--bar", "foo++++++bar"),
        (" foo ", "-foo-", "+++foo+++"),
    ]
    for text, expected_dash, expected_plus in cases:
        assert with_dash(text) == expected_dash
        assert with_plus(text) == expected_plus


def test_space_rule_unicode_spaces():
    """Non-breaking and ideographic spaces count as whitespace."""
    rule = space_rule("-")
    assert rule("\u00a0") == RuneResult(True, "-")
    assert rule("\u3000") == RuneResult(True, "-")
    assert rule("\u2028") == RuneResult(True, "-")
    assert rule("x") == REJECT


def test_umlaut_rule():
    """Each umlaut and sharp s is transliterated independently."""
    transform = chain_to_string_transform(chain(umlaut_rule, keep_all_rule))
    assert transform("ö ä ü Ö Ä Ü ß ẞ") == "oe ae ue Oe Ae Ue ss ss"
    assert umlaut_rule("o") == REJECT


def test_rule_from_map():
    """Map-based rules accept exactly their keys."""
    rule = rule_from_map({"€": "euro", "$": "dollar"})
    transform = chain_to_string_transform(chain(rule, keep_all_rule))
    assert transform("The USA use $ and Germany uses €") == (
        "The USA use dollar and Germany uses euro"
    )


def test_rule_from_map_copies_table():
    """Changing the source mapping afterwards has no effect."""
    table = {"x": "y"}
    rule = rule_from_map(table)
    table["z"] = "w"
    assert rule("z") == REJECT


def test_chain_first_accepting_rule_wins():
    """The first rule that accepts decides the replacement."""
    first = rule_from_map({"a": "1"})
    second = rule_from_map({"a": "2", "b": "3"})
    rule = chain(first, second)
    assert rule("a") == RuneResult(True, "1")
    assert rule("b") == RuneResult(True, "3")
    assert rule("c") == REJECT


def test_empty_chain_rejects_everything():
    """A chain with no rules accepts nothing."""
    assert chain()("a") == REJECT
    assert chain_to_string_transform(chain())("abc") == ""


def test_chain_is_a_rule():
    """Chains nest like any other rule."""
    inner = chain(rule_from_map({"a": "A"}))
    outer = chain(inner, valid_slug_rune_rule)
    assert chain_to_string_transform(outer)("ab!") == "Ab"


def test_chain_to_string_transform_drops_unmatched():
    """Runes no rule accepts are removed from the output."""
    transform = chain_to_string_transform(chain(space_rule("-"), valid_slug_rune_rule))
    assert transform("!!hello world!!") == "hello-world"

    only_valid = chain_to_string_transform(valid_slug_rune_rule)
    assert only_valid("abc!09?€§ABZ-_") == "abc09ABZ-_"


def test_chain_to_string_transform_works_on_code_points():
    """Multi-byte characters are handled as single units."""
    keep = chain_to_string_transform(keep_all_rule)
    assert keep("世界 😀") == "世界 😀"

    emoji_only = chain_to_string_transform(rule_from_map({"😀": "smile"}))
    assert emoji_only("a😀b") == "smile"


def test_rejections_carry_empty_replacement():
    """Every rejecting rule pairs False with an empty string."""
    rules = [valid_slug_rune_rule, lower_slug_rune_rule, dash_rule, umlaut_rule, space_rule("-")]
    for rule in rules:
        for ch in "€@世!":
            accepted, replacement = rule(ch)
            if not accepted:
                assert replacement == ""
