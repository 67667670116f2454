from __future__ import annotations

from enum import StrEnum
from typing import Callable, Mapping, NamedTuple

ReplaceMap = Mapping[str, str]
StringTransform = Callable[[str], str]


class RuneResult(NamedTuple):
    accepted: bool
    replacement: str  # always "" when accepted is False


REJECT = RuneResult(False, "")

RuneRule = Callable[[str], RuneResult]


class NormalizationForm(StrEnum):
    NONE = "none"
    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"

    @classmethod
    def parse(cls, value: "str | NormalizationForm | None") -> "NormalizationForm":
        """Accept enum members, form names in any case, or None for NONE."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        if key.lower() == "none":
            return cls.NONE
        return cls(key.upper())


class Phase(StrEnum):
    PRE_PROCESS = "pre_process"
    PROCESS = "process"
    FINALIZE = "finalize"


def merge_replace_maps(*maps: ReplaceMap) -> dict[str, str]:
    """Merge replacement maps; the first map that defines a key wins.

    Later maps may only contribute keys not present yet.

    Examples:
        >>> merge_replace_maps({"a": "b"}, {"a": "X", "b": "c"})
        {'a': 'b', 'b': 'c'}
    """
    merged: dict[str, str] = {}
    for m in maps:
        for key, value in m.items():
            merged.setdefault(key, value)
    return merged
