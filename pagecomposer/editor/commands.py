"""Command models for document mutations.

Each editor operation is a small pydantic model tagged by ``op``. Commands
are plain data: they can be built in code or validated from JSON scripts via
`COMMAND_ADAPTER`, and are applied by `pagecomposer.editor.apply_command`.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from pagecomposer.catalog import CatalogItem
from pagecomposer.schema import Alignment, LayoutKind


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)


class AddNode(_Command):
    """Append a new leaf created from a catalog item.

    Attributes:
        category: Catalog category of the item.
        item: Catalog item to instantiate.
        node_id: Explicit id; generated when omitted.
    """

    op: Literal["add"] = "add"
    category: str
    item: CatalogItem
    node_id: str | None = None


class RemoveNode(_Command):
    """Remove a top-level node."""

    op: Literal["remove"] = "remove"
    node_id: str


class ReorderNodes(_Command):
    """Move `active_id` to the position currently held by `over_id`."""

    op: Literal["reorder"] = "reorder"
    active_id: str
    over_id: str | None = None


class UpdateProps(_Command):
    """Shallow-merge a style patch into a node's style.

    Patch keys may be field names or camelCase aliases.
    """

    op: Literal["update_props"] = "update_props"
    node_id: str
    patch: dict[str, Any] = Field(default_factory=dict)


class SetAlignment(_Command):
    """Set a leaf's alignment, defaulting an unset width to 50%."""

    op: Literal["set_alignment"] = "set_alignment"
    node_id: str
    alignment: Alignment


class ToggleMultiSelect(_Command):
    op: Literal["toggle_multi_select"] = "toggle_multi_select"
    node_id: str


class GroupNodes(_Command):
    """Group the multi-selected top-level nodes into a new container.

    Attributes:
        layout_kind: Layout for the new container.
        node_id: Explicit container id; generated when omitted.
    """

    op: Literal["group"] = "group"
    layout_kind: LayoutKind
    node_id: str | None = None


class UngroupContainer(_Command):
    op: Literal["ungroup"] = "ungroup"
    node_id: str


class SelectNode(_Command):
    op: Literal["select"] = "select"
    node_id: str


class ClearSelection(_Command):
    op: Literal["clear_selection"] = "clear_selection"


Command = Annotated[
    Union[
        AddNode,
        RemoveNode,
        ReorderNodes,
        UpdateProps,
        SetAlignment,
        ToggleMultiSelect,
        GroupNodes,
        UngroupContainer,
        SelectNode,
        ClearSelection,
    ],
    Field(discriminator="op"),
]

COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)


def parse_command(data: dict[str, Any]) -> Command:
    """Validate a command from its JSON shape.

    Raises:
        pydantic.ValidationError: If the payload is malformed or ``op`` is
            unknown.
    """
    return COMMAND_ADAPTER.validate_python(data)


__all__ = [
    "AddNode",
    "RemoveNode",
    "ReorderNodes",
    "UpdateProps",
    "SetAlignment",
    "ToggleMultiSelect",
    "GroupNodes",
    "UngroupContainer",
    "SelectNode",
    "ClearSelection",
    "Command",
    "COMMAND_ADAPTER",
    "parse_command",
]
