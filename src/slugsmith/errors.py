"""Errors raised by slugsmith.

Slug generation and validation never raise; only building a configuration
(from code, a TOML file or a YAML language table) can fail.
"""


class ConfigError(ValueError):
    """Raised when a slug configuration is invalid or cannot be loaded."""
