"""Output formatting for document review.

Generates human-readable text for the canvas outline and the property
panel, used by the CLI ``tree`` command and by front-ends that want the
same labels.
"""

from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.schema import (
    CONTAINER_DEFAULTS,
    CONTAINER_ONLY_FIELDS,
    StyleProps,
    panel_value,
)
from pagecomposer.selection import SelectionState

EMPTY_CANVAS_MESSAGE = "No components yet"

# Fields the property panel shows, in panel order
LEAF_PANEL_FIELDS: tuple[str, ...] = tuple(
    name for name in StyleProps.model_fields if name not in CONTAINER_ONLY_FIELDS
)
CONTAINER_PANEL_FIELDS: tuple[str, ...] = (
    "bg_color",
    "padding_top",
    "padding_right",
    "padding_bottom",
    "padding_left",
    "gap",
    "justify",
    "align_items",
    "flex_wrap",
)


def node_title(node: LeafNode | ContainerNode) -> str:
    """Heading shown for a node: catalog name or container layout name."""
    if isinstance(node, ContainerNode):
        return node.display_name
    return node.source_type


def children_summary(node: ContainerNode) -> str:
    """Child count line for a container, e.g. "2 components inside"."""
    count = len(node.children)
    if count == 0:
        return "No components inside"
    return f"{count} component{'s' if count != 1 else ''} inside"


def selection_summary(selection: SelectionState) -> str | None:
    """Grouping banner text, shown only when a group can fire."""
    if not selection.can_group:
        return None
    return f"{len(selection.multi_selected)} components selected"


def panel_values(node: LeafNode | ContainerNode) -> dict[str, str]:
    """Values a property panel displays for a node.

    Unset and sentinel fields display their defaults; containers fall back
    to the container defaults for layout options.

    Args:
        node: Selected node.

    Returns:
        dict: Field name -> display value, in panel order.
    """
    if isinstance(node, ContainerNode):
        values = {}
        for name in CONTAINER_PANEL_FIELDS:
            value = panel_value(node.style, name)
            values[name] = value or CONTAINER_DEFAULTS.get(name, "")
        return values
    return {name: panel_value(node.style, name) for name in LEAF_PANEL_FIELDS}


def format_document_tree(
    document: Document, selection: SelectionState | None = None
) -> str:
    """Format a document as a human-readable tree.

    Example output:
        Page [2 nodes]
        ├── PrimaryButton (buttons-primarybutton-1) [Buttons, selected]
        └── Flex Row (container-3) [Container, 2 components inside]
            ├── SimpleHeader (headers-simpleheader-1) [Headers]
            └── TopNav (navigation-topnav-2) [Navigation]

    Args:
        document: Document to format.
        selection: Optional selection, marked on the matching nodes.

    Returns:
        Formatted tree string.
    """
    selection = selection or SelectionState()
    if document.is_empty:
        return f"Page [{EMPTY_CANVAS_MESSAGE}]"

    count = len(document)
    lines = [f"Page [{count} node{'s' if count != 1 else ''}]"]
    for i, node in enumerate(document.nodes):
        _format_node(node, lines, "", i == count - 1, selection)
    return "\n".join(lines)


def _format_node(
    node: LeafNode | ContainerNode,
    lines: list[str],
    prefix: str,
    is_last: bool,
    selection: SelectionState,
) -> None:
    connector = "└── " if is_last else "├── "
    child_prefix = prefix + ("    " if is_last else "│   ")

    attrs = [node.category]
    if isinstance(node, ContainerNode):
        attrs.append(children_summary(node))
    if selection.selected_id == node.id:
        attrs.append("selected")
    if selection.is_multi_selected(node.id):
        attrs.append("multi-selected")

    lines.append(f"{prefix}{connector}{node_title(node)} ({node.id}) [{', '.join(attrs)}]")

    if isinstance(node, ContainerNode):
        for i, child in enumerate(node.children):
            _format_node(
                child, lines, child_prefix, i == len(node.children) - 1, selection
            )
