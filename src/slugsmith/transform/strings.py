"""Whole-string transforms used by the slug pipeline."""

from __future__ import annotations

import re
import threading

from ..adapters.unicode_data import UNICODE
from ..core.model import NormalizationForm, ReplaceMap, StringTransform
from ..core.ports import StringModifier, UnicodeService
from ..logging import logger

_SURROGATES = re.compile("[\ud800-\udfff]")


def to_transform(modifier: StringModifier) -> StringTransform:
    """Turn an object with a ``modify`` method into a plain transform."""
    return modifier.modify


def strip_invalid(text: str | bytes) -> str:
    """Remove invalid encoding units.

    Bytes are decoded as UTF-8, dropping malformed sequences; strings lose
    their lone surrogates.
    """
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="ignore")
    return _SURROGATES.sub("", text)


def is_valid_text(text: str | bytes) -> bool:
    """True if *text* holds no invalid encoding units."""
    if isinstance(text, (bytes, bytearray)):
        try:
            bytes(text).decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True
    return _SURROGATES.search(text) is None


class Normalizer:
    """Normalize to a Unicode normal form; ``NONE`` leaves text untouched."""

    def __init__(self, form: NormalizationForm | str, unicode: UnicodeService = UNICODE):
        self.form = NormalizationForm.parse(form)
        self.unicode = unicode

    def modify(self, text: str) -> str:
        return self.unicode.normalize(self.form, text)

    __call__ = modify


def to_lower(text: str) -> str:
    return text.lower()


class ConstantReplacer:
    """Replace every occurrence of each old string by its new string.

    Pairs are given as a flat ``old, new, old, new, ...`` list. The input is
    scanned once, left to right; inserted text is never scanned again, so
    ``foo -> bar`` and ``bar -> baz`` turn ``"foo"`` into ``"bar"``. When
    several keys match at the same position the one listed first wins.

    The pairs are frozen at construction. The matcher is compiled on first
    use, exactly once, even under concurrent first calls.

    Examples:
        >>> ConstantReplacer("foo", "bar").modify("hello foo bar")
        'hello bar bar'
    """

    def __init__(self, *old_new: str):
        if len(old_new) % 2 != 0:
            raise ValueError("ConstantReplacer needs an even number of strings (old/new pairs)")
        self._pairs: tuple[tuple[str, str], ...] = tuple(zip(old_new[0::2], old_new[1::2]))
        self._lock = threading.Lock()
        self._compiled: tuple[re.Pattern[str] | None, dict[str, str]] | None = None

    @classmethod
    def from_map(cls, mapping: ReplaceMap) -> ConstantReplacer:
        old_new: list[str] = []
        for key, value in mapping.items():
            old_new.extend((key, value))
        return cls(*old_new)

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        return self._pairs

    def _matcher(self) -> tuple[re.Pattern[str] | None, dict[str, str]]:
        compiled = self._compiled
        if compiled is not None:
            return compiled
        with self._lock:
            if self._compiled is None:
                table: dict[str, str] = {}
                for old, new in self._pairs:
                    # empty keys would match between every pair of characters
                    if old:
                        table.setdefault(old, new)
                pattern = None
                if table:
                    pattern = re.compile("|".join(re.escape(old) for old in table))
                self._compiled = (pattern, table)
                logger.debug("ConstantReplacer compiled %d pattern(s)", len(table))
            return self._compiled

    def modify(self, text: str) -> str:
        pattern, table = self._matcher()
        if pattern is None:
            return text
        return pattern.sub(lambda m: table[m.group(0)], text)

    __call__ = modify


def _split_words(text: str, separator: str) -> list[str]:
    if not separator:
        return list(text)
    return text.split(separator)


class WordReplacer:
    """Replace whole words, where words are delimited by *separator*.

    Unlike :class:`ConstantReplacer` only complete words are looked up, so
    ``"@" -> "at"`` turns ``"something@-@"`` into ``"something@-at"``.
    Leading or trailing separators produce empty words, which are looked up
    like any other word.
    """

    def __init__(self, word_map: ReplaceMap, separator: str):
        self.word_map = dict(word_map)
        self.separator = separator

    def modify(self, text: str) -> str:
        if not text:
            return text
        words = _split_words(text, self.separator)
        return self.separator.join(self.word_map.get(word, word) for word in words)

    __call__ = modify


def collapse_repeated(ch: str) -> StringTransform:
    """Return a transform that shrinks every run of *ch* to a single *ch*.

    Examples:
        >>> collapse_repeated("-")("foo--bar---hello")
        'foo-bar-hello'
    """
    if len(ch) != 1:
        raise ValueError(f"collapse_repeated expects a single character, got {ch!r}")
    run = re.compile(re.escape(ch) + "{2,}")

    def transform(text: str) -> str:
        return run.sub(ch, text)

    return transform


def trim(cutset: str) -> StringTransform:
    """Strip leading and trailing characters contained in *cutset*.

    *cutset* is a set of characters, not a prefix or suffix string.
    """

    def transform(text: str) -> str:
        return text.strip(cutset)

    return transform


def truncate(max_length: int, separator: str) -> StringTransform:
    """Truncate to at most *max_length* code points at word boundaries.

    Whole words are appended while the total length (separators included)
    stays within *max_length*; the first word that does not fit is dropped
    along with everything after it. If the first word alone reaches
    *max_length* it is cut mid-word. A negative *max_length* disables
    truncation.

    Leading or repeated separators are kept as they are, which gives odd
    but stable results; collapse and trim before truncating.

    Examples:
        >>> truncate(5, "-")("foo-bar")
        'foo'
        >>> truncate(6, "+")("thisisaverylongword+foo")
        'thisis'
        >>> truncate(5, "-")("-a--foo")
        '-a-'
    """

    def transform(text: str) -> str:
        if max_length < 0 or not text:
            return text
        words = _split_words(text, separator)
        first = words[0]
        if len(first) >= max_length:
            return first[:max_length]
        kept = [first]
        length = len(first)
        for word in words[1:]:
            next_length = length + len(separator) + len(word)
            if next_length > max_length:
                break
            kept.append(word)
            length = next_length
        return separator.join(kept)

    return transform
