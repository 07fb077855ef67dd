"""Command-line helpers: catalog resolution and editor script replay."""

from .lib import (
    ScriptError,
    build_command,
    load_script,
    replay_script,
    resolve_catalog,
)

__all__ = [
    "ScriptError",
    "resolve_catalog",
    "load_script",
    "build_command",
    "replay_script",
]
