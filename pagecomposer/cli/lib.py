"""Editor script replay for the command line.

A script is a JSON list of editor commands (or an object with a
``"commands"`` list). Each command uses the shape accepted by
`pagecomposer.editor.parse_command`, with one shorthand: an ``add`` step may
name a catalog item instead of embedding it:

    [
      {"op": "add", "category": "Buttons", "name": "PrimaryButton"},
      {"op": "add", "category": "Buttons", "name": "OutlineButton"},
      {"op": "toggle_multi_select", "node_id": "buttons-primarybutton-1"},
      {"op": "toggle_multi_select", "node_id": "buttons-outlinebutton-2"},
      {"op": "group", "layout_kind": "flex-row"}
    ]

Leaf ids are assigned in order as ``{category}-{name}-{n}`` and containers as
``container-{n}``, with one counter shared by both, so scripts can refer to
nodes created by earlier steps.
"""

import json
from pathlib import Path
from typing import Any

from pagecomposer.catalog import Catalog, default_catalog, load_catalog
from pagecomposer.config import get_catalog_path
from pagecomposer.core.log import get_logger
from pagecomposer.editor import Command, Editor, NotificationSink, parse_command

logger = get_logger(__name__)


class ScriptError(Exception):
    """Raised when a script file cannot be read or has the wrong shape."""


def resolve_catalog(path: Path | str | None = None) -> Catalog:
    """Load the configured catalog, or the built-in one.

    Resolution: path argument > PAGECOMPOSER_CATALOG_PATH > built-in catalog.

    Raises:
        CatalogError: If a configured catalog file cannot be loaded.
    """
    catalog_path = get_catalog_path(path)
    if catalog_path is None:
        logger.debug("Using built-in catalog")
        return default_catalog()
    return load_catalog(catalog_path)


def load_script(path: Path | str) -> list[dict[str, Any]]:
    """Read a script file.

    Raises:
        ScriptError: If the file is unreadable, not JSON or not a list of
            command objects.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ScriptError(f"Cannot read script {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ScriptError(f"Script {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("commands")
    if not isinstance(data, list) or not all(isinstance(s, dict) for s in data):
        raise ScriptError(f"Script {path} must be a list of command objects")
    return data


def build_command(step: dict[str, Any], catalog: Catalog) -> Command:
    """Turn one script step into a command.

    Raises:
        KeyError: If an ``add`` step names an unknown catalog item.
        pydantic.ValidationError: If the step is malformed.
    """
    if step.get("op") == "add" and "item" not in step and "name" in step:
        step = dict(step)
        name = step.pop("name")
        step["item"] = catalog.get_item(step.get("category", ""), name)
    return parse_command(step)


def replay_script(
    steps: list[dict[str, Any]],
    catalog: Catalog,
    notifications: NotificationSink | None = None,
) -> Editor:
    """Replay script steps against a fresh editor.

    Args:
        steps: Script steps in order.
        catalog: Catalog used to resolve ``add`` shorthands.
        notifications: Sink for editor notifications.

    Returns:
        Editor: The editor after the last step.
    """
    editor = Editor(notifications=notifications)
    for index, step in enumerate(steps, 1):
        result = editor.dispatch(build_command(step, catalog))
        if not result.changed:
            logger.info(f"Step {index} ({step.get('op')}) had no effect")
    return editor
