"""Structural slug validation.

:func:`derive_validator` turns a :class:`SlugConfig` into a predicate that
checks whether a string *looks like* something the configured generator
could produce. It is a syntax check only: replacement maps are ignored and
a ``True`` result does not mean the string is the slug of any input.
"""

from __future__ import annotations

from typing import Callable

from .adapters.unicode_data import UNICODE
from .config import SlugConfig
from .core.model import NormalizationForm
from .transform.runes import is_valid_slug_rune
from .transform.strings import is_valid_text

SlugPredicate = Callable[[str], bool]


def derive_validator(config: SlugConfig) -> SlugPredicate:
    """Build a validator from a snapshot of *config*.

    Checks, in order, stopping at the first failure:

    1. the text has no invalid encoding units
    2. it is at most ``max_length`` code points long (when ``max_length > 0``)
    3. it is in the configured normal form (unless the form is NONE)
    4. it neither starts nor ends with the separator
    5. every code point is a slug rune (lowercase only when lowercasing) or
       the separator itself
    6. the separator never appears twice in a row
    """
    config.validate()
    max_length = config.max_length
    separator = config.separator
    form = config.normalization_form
    lowercase_only = config.lowercase
    doubled = separator * 2

    def is_valid(text: str) -> bool:
        if not is_valid_text(text):
            return False
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        if max_length > 0 and len(text) > max_length:
            return False
        if form is not NormalizationForm.NONE and not UNICODE.is_normalized(form, text):
            return False
        if text.startswith(separator) or text.endswith(separator):
            return False
        if not all(
            ch == separator or is_valid_slug_rune(ch, case_sensitive=lowercase_only)
            for ch in text
        ):
            return False
        return doubled not in text

    return is_valid


def is_valid_slug(text: str, config: SlugConfig | None = None) -> bool:
    """Check *text* against *config* (the default configuration if omitted)."""
    return derive_validator(config or SlugConfig())(text)
