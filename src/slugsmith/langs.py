"""Language-specific replacement tables.

A :class:`LanguageRegistry` maps language codes to replacement maps such as
``"&" -> "and"``. Build one at start-up, register extra languages, then
hand it to whatever builds configurations. Registration is not meant to
happen while other threads read the registry.
"""

from __future__ import annotations

from pathlib import Path

from .adapters.yaml_langs import load_language_tables
from .core.model import ReplaceMap, merge_replace_maps
from .logging import logger

LANGUAGE_ENGLISH = "en"
LANGUAGE_GERMAN = "de"

ENGLISH_REPLACEMENTS: dict[str, str] = {
    "@": "at",
    "&": "and",
}

GERMAN_REPLACEMENTS: dict[str, str] = {
    "@": "at",
    "&": "und",
}


class LanguageRegistry:
    def __init__(self, tables: dict[str, ReplaceMap] | None = None):
        self._tables: dict[str, dict[str, str]] = {}
        for code, mapping in (tables or {}).items():
            self.register(code, mapping)

    def register(self, code: str, mapping: ReplaceMap) -> None:
        """Add a language, replacing any table registered under *code*."""
        self._tables[code] = dict(mapping)
        logger.debug("Registered language '%s' (%d replacements)", code, len(mapping))

    def get(self, code: str) -> dict[str, str]:
        """Replacement map for *code*; empty for unknown codes."""
        return dict(self._tables.get(code, {}))

    def merged(self, *codes: str) -> dict[str, str]:
        """Merge the maps of *codes*, earlier languages taking precedence.

        Unknown codes are skipped.
        """
        return merge_replace_maps(*(self._tables[c] for c in codes if c in self._tables))

    def codes(self) -> list[str]:
        return sorted(self._tables)

    def copy(self) -> LanguageRegistry:
        """An independent registry holding the same tables."""
        return LanguageRegistry(self._tables)

    def __contains__(self, code: object) -> bool:
        return code in self._tables

    def load_yaml(self, path: Path) -> list[str]:
        """Register every language found in a YAML file; returns their codes."""
        tables = load_language_tables(path)
        for code, mapping in tables.items():
            self.register(code, mapping)
        return list(tables)


def default_registry() -> LanguageRegistry:
    """A fresh registry holding the built-in English and German tables."""
    return LanguageRegistry(
        {
            LANGUAGE_ENGLISH: ENGLISH_REPLACEMENTS,
            LANGUAGE_GERMAN: GERMAN_REPLACEMENTS,
        }
    )


_registry = default_registry()


def add_language_map(code: str, mapping: ReplaceMap) -> None:
    """Register *mapping* in the process-wide registry; call during start-up."""
    _registry.register(code, mapping)


def get_language_map(*codes: str) -> dict[str, str]:
    """Merged replacements for *codes* from the process-wide registry."""
    return _registry.merged(*codes)


def global_registry() -> LanguageRegistry:
    return _registry
