from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

import yaml
from pydantic import ValidationError


class ConfigError(ValueError):
    pass


class ConfigReadError(ConfigError):
    """The config file exists but could not be stat'ed or read."""


class ConfigParseError(ConfigError):
    """The config file was read but its contents are malformed."""


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping from `path`.

    OS errors propagate unchanged so callers can tell a missing file apart
    from a broken one. An empty document decodes to an empty mapping.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"{path} is not valid UTF-8: {exc}") from exc
    return parse_yaml(text, source=str(path))


def parse_yaml(text: str, *, source: str = "<string>") -> dict[str, Any]:
    try:
        payload = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        # Constructors raise ValueError for impossible dates like 2024-13-45.
        raise ConfigParseError(f"invalid YAML in {source}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigParseError(f"YAML root must be a mapping: {source}")
    return {str(key): value for key, value in payload.items()}


def dump_yaml(payload: Any, stream: IO[str] | None = None) -> str | None:
    return yaml.safe_dump(payload, stream, sort_keys=False)


def format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}" if loc else f"{prefix}: {error['msg']}")
    return "; ".join(details)
