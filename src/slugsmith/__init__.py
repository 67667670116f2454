"""slugsmith - configurable slug generation."""

from .config import SlugConfig, compile_config, load_config
from .core.generator import SlugGenerator, generate_slug, sequence
from .core.model import NormalizationForm, merge_replace_maps
from .errors import ConfigError
from .langs import LanguageRegistry, add_language_map, get_language_map
from .validate import derive_validator, is_valid_slug

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "LanguageRegistry",
    "NormalizationForm",
    "SlugConfig",
    "SlugGenerator",
    "add_language_map",
    "compile_config",
    "derive_validator",
    "generate_slug",
    "get_language_map",
    "is_valid_slug",
    "load_config",
    "merge_replace_maps",
    "sequence",
]
