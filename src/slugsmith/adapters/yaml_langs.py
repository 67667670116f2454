from pathlib import Path

import yaml

from ..errors import ConfigError


def load_language_tables(path: Path) -> dict[str, dict[str, str]]:
    """
    Read language replacement tables from YAML, e.g.

        fr:
          "&": "et"
          "@": "a"

    Values are coerced to strings; anything that is not a mapping of
    mappings is rejected.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read language file {path}: {exc}") from None
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in language file {path}: {exc}") from None

    if not isinstance(data, dict):
        raise ConfigError(f"Language file {path} must map language codes to tables")

    tables: dict[str, dict[str, str]] = {}
    for code, table in data.items():
        if not isinstance(table, dict):
            raise ConfigError(
                f"Language '{code}' in {path} must be a mapping of replacements"
            )
        tables[str(code)] = {str(k): "" if v is None else str(v) for k, v in table.items()}
    return tables


def dump_language_tables(tables: dict[str, dict[str, str]]) -> str:
    if not tables:
        return ""
    return yaml.safe_dump(tables, sort_keys=True, allow_unicode=True)
