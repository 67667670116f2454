import unicodedata

from ..core.model import NormalizationForm
from ..core.ports import UnicodeService

# White_Space code points outside the Zs/Zl/Zp categories
_SPACE_CONTROLS = frozenset("\t\n\v\f\r\x85")

# Dash or Hyphen code points outside the Pd category
_DASH_EXTRAS = frozenset("\u00ad\u2053\u207b\u208b\u2212\u30fb\uff65")


class StdlibUnicode(UnicodeService):
    """Unicode service backed by :mod:`unicodedata`."""

    def normalize(self, form: NormalizationForm, text: str) -> str:
        if form is NormalizationForm.NONE:
            return text
        return unicodedata.normalize(form.value, text)

    def is_space(self, ch: str) -> bool:
        return ch in _SPACE_CONTROLS or unicodedata.category(ch) in ("Zs", "Zl", "Zp")

    def is_dash_or_hyphen(self, ch: str) -> bool:
        return ch in _DASH_EXTRAS or unicodedata.category(ch) == "Pd"

    def is_normalized(self, form: NormalizationForm, text: str) -> bool:
        if form is NormalizationForm.NONE:
            return True
        return unicodedata.is_normalized(form.value, text)


UNICODE = StdlibUnicode()
