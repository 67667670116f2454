from typing import Protocol

from .model import NormalizationForm


class StringModifier(Protocol):
    """
    Whole-string modification; must be free of side effects and safe to
    call from several threads at once.
    """

    def modify(self, text: str) -> str:
        pass


class UnicodeService(Protocol):
    """
    Normalization and the two character classes the rune rules need.
    """

    def normalize(self, form: NormalizationForm, text: str) -> str:
        pass

    def is_space(self, ch: str) -> bool:
        pass

    def is_dash_or_hyphen(self, ch: str) -> bool:
        pass

    def is_normalized(self, form: NormalizationForm, text: str) -> bool:
        pass
