"""Environment settings for page-composer.

Every setting is an `EnvVar` member carrying its variable name, default
and type. Values resolve as override, then environment, then default.

Example:
    >>> from pagecomposer.config import EnvVar, get_environment
    >>> get_environment(EnvVar.INDENT)
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class EnvConfig:
    """Name, default and type of one setting."""

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """Settings read from PAGECOMPOSER_* variables."""

    SEMANTIC_HTML = EnvConfig(
        name="PAGECOMPOSER_SEMANTIC_HTML",
        default=False,
        var_type=bool,
        description="Emit semantic tags (header, nav, ...) instead of div",
        category="codegen",
    )
    INDENT = EnvConfig(
        name="PAGECOMPOSER_INDENT",
        default=2,
        var_type=int,
        description="Spaces per indentation level in generated markup",
        category="codegen",
    )
    CATALOG_PATH = EnvConfig(
        name="PAGECOMPOSER_CATALOG_PATH",
        default=None,  # built-in sample catalog
        var_type=Path,
        description="JSON catalog file of snippet templates",
        category="catalog",
    )
    LOG_LEVEL = EnvConfig(
        name="PAGECOMPOSER_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def _convert(raw: str, config: EnvConfig) -> Any:
    """Turn a raw variable into the configured type, or the default."""
    if config.var_type is bool:
        flag = raw.strip().lower()
        if flag in _TRUE:
            return True
        if flag in _FALSE:
            return False
        return config.default
    if config.var_type is int:
        try:
            return int(raw)
        except ValueError:
            return config.default
    if config.var_type is Path:
        return Path(raw)
    return raw


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a setting.

    Args:
        env_var: Setting to read.
        override: Returned unchanged when not None.

    Returns:
        The override, the converted variable, or the default.
    """
    if override is not None:
        return override

    config: EnvConfig = env_var.value
    raw = os.environ.get(config.name)
    if raw is None:
        return config.default
    return _convert(raw, config)


def get_semantic_default(override: bool | None = None) -> bool:
    """Whether generated markup uses semantic tags by default."""
    return bool(get_environment(EnvVar.SEMANTIC_HTML, override=override))


def get_indent_width(override: int | None = None) -> int:
    """Spaces per indentation level, never below 1."""
    return max(1, get_environment(EnvVar.INDENT, override=override))


def get_catalog_path(override: Path | str | None = None) -> Path | None:
    """Configured catalog file, or None for the built-in catalog."""
    if override is not None:
        return Path(override)
    return get_environment(EnvVar.CATALOG_PATH)


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """All settings, or only those in `category`."""
    return [var for var in EnvVar if category in (None, var.value.category)]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_semantic_default",
    "get_indent_width",
    "get_catalog_path",
    "list_environment_variables",
]
