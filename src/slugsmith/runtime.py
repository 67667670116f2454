"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import SlugConfig, load_config
from .core.generator import SlugGenerator
from .langs import LanguageRegistry, global_registry
from .validate import SlugPredicate, derive_validator


@dataclass
class Runtime:
    """Container for all wired components."""
    config: SlugConfig
    generator: SlugGenerator
    validator: SlugPredicate
    registry: LanguageRegistry


def build_runtime(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
    languages: list[str] | None = None,
) -> Runtime:
    """Load config, apply overrides and compile the generator once."""
    registry = global_registry().copy()
    config = load_config(config_path=config_path, registry=registry)

    # Use CLI values where given
    for name, value in (overrides or {}).items():
        if value is not None:
            setattr(config, name, value)
    for code in languages or []:
        config.replace_maps.append(registry.get(code))

    return Runtime(
        config=config,
        generator=config.configure(),
        validator=derive_validator(config),
        registry=registry,
    )
