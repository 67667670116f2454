"""Slug configuration and its compilation into a generator."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .core.generator import (
    SlugGenerator,
    default_finalizers,
    default_pre_processors,
    default_processors,
)
from .core.model import NormalizationForm, ReplaceMap, merge_replace_maps
from .errors import ConfigError
from .langs import LanguageRegistry, global_registry
from .logging import logger
from .transform.strings import ConstantReplacer

CONFIG_FILENAME = "slug.toml"


@dataclass
class SlugConfig:
    """Declarative slug settings.

    Mutate the fields directly, then call :meth:`configure` to get an
    independent, immutable :class:`SlugGenerator`. A config is not meant to
    be shared between threads while it is being changed.
    """

    max_length: int = -1  # negative: no limit
    separator: str = "-"
    form: NormalizationForm | str = NormalizationForm.NFKC
    lowercase: bool = True
    replace_maps: list[ReplaceMap] = field(default_factory=list)

    def validate(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ConfigError(
                f"separator must be a single character, got {self.separator!r}"
            )
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ConfigError(
                f"max_length must be an integer, got {self.max_length!r}"
            )
        try:
            NormalizationForm.parse(self.form)
        except ValueError:
            raise ConfigError(
                f"unknown normalization form {self.form!r} "
                f"(expected one of: {', '.join(f.value for f in NormalizationForm)})"
            ) from None

    @property
    def normalization_form(self) -> NormalizationForm:
        return NormalizationForm.parse(self.form)

    def merged_replacements(self) -> dict[str, str]:
        return merge_replace_maps(*self.replace_maps)

    def configure(self) -> SlugGenerator:
        """Compile the current settings into a new generator."""
        self.validate()
        pre = default_pre_processors(self.normalization_form, self.lowercase)

        replacements = self.merged_replacements()
        if replacements:
            replacer = ConstantReplacer.from_map(replacements)
            processors = default_processors(self.separator, replacer)
        else:
            processors = default_processors(self.separator)

        finalizers = default_finalizers(self.separator, self.max_length)

        logger.debug(
            "Compiled slug config: form=%s lowercase=%s separator=%r "
            "max_length=%d replacements=%d",
            self.normalization_form.value,
            self.lowercase,
            self.separator,
            self.max_length,
            len(replacements),
        )
        return SlugGenerator.from_phases(pre, processors, finalizers)


def compile_config(config: SlugConfig) -> SlugGenerator:
    return config.configure()


def load_config(
    config_path: Path | None = None,
    search_dir: Path | None = None,
    registry: LanguageRegistry | None = None,
) -> SlugConfig:
    """
    Load configuration from slug.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/slug.toml
    3. search_dir/slug.toml

    Args:
        config_path: Explicit path to config file
        search_dir: Directory for fallback search
        registry: Language registry used to resolve ``languages``; a copy of
            the process-wide registry when omitted

    Returns:
        SlugConfig with resolved settings (defaults when no file is found)
    """
    toml_data: dict[str, Any] = {}
    found: Path | None = None

    search_paths = []
    if config_path:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)
    if search_dir:
        search_paths.append(search_dir / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from None
            found = path
            break

    if found is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return SlugConfig()
    logger.debug("Loading slug config from %s", found)

    return config_from_dict(toml_data, registry=registry, base_dir=found.parent)


def config_from_dict(
    data: dict[str, Any],
    registry: LanguageRegistry | None = None,
    base_dir: Path | None = None,
) -> SlugConfig:
    """Build a SlugConfig from parsed TOML data."""
    slug_data = data.get("slug", {})
    if not isinstance(slug_data, dict):
        raise ConfigError("[slug] must be a table")

    config = SlugConfig()
    if "max_length" in slug_data:
        config.max_length = slug_data["max_length"]
    if "separator" in slug_data:
        config.separator = slug_data["separator"]
    if "form" in slug_data:
        config.form = slug_data["form"]
    if "lowercase" in slug_data:
        lowercase = slug_data["lowercase"]
        if not isinstance(lowercase, bool):
            raise ConfigError(f"slug.lowercase must be true or false, got {lowercase!r}")
        config.lowercase = lowercase

    replacements = data.get("replacements", {})
    if not isinstance(replacements, dict) or not all(
        isinstance(v, str) for v in replacements.values()
    ):
        raise ConfigError("[replacements] must map strings to strings")
    if replacements:
        config.replace_maps.append(dict(replacements))

    if registry is None:
        registry = global_registry().copy()

    language_file = slug_data.get("language_file")
    if language_file:
        path = Path(language_file)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        registry.load_yaml(path)

    languages = slug_data.get("languages", [])
    if isinstance(languages, str):
        languages = [languages]
    if not isinstance(languages, list):
        raise ConfigError("slug.languages must be a list of language codes")
    for code in languages:
        config.replace_maps.append(registry.get(str(code)))

    config.validate()
    return config
