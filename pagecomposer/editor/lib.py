"""Mutation API for page documents.

Every mutation is a command applied by the pure `apply_command`, which maps
an `EditorState` snapshot to a new one. Invalid input is never an error:
the command is a no-op, the original snapshot object is returned and
`CommandResult.changed` is False.

The `Editor` session owns the current snapshot, publishes each new snapshot
to subscribers and forwards notifications to a `NotificationSink`.

Example:
    >>> editor = Editor()
    >>> leaf_id = editor.add(item, "Buttons")
    >>> editor.update_props(leaf_id, {"bgColor": "#ff0000"})
    >>> print(editor.generate())
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from pagecomposer.catalog import CatalogItem
from pagecomposer.codegen import MarkupGenerator
from pagecomposer.config import get_indent_width, get_semantic_default
from pagecomposer.core.log import get_logger
from pagecomposer.document import (
    ContainerNode,
    Document,
    IdGenerator,
    LeafNode,
)
from pagecomposer.schema import CONTAINER_DEFAULTS, Alignment, LayoutKind, StyleProps
from pagecomposer.selection import SelectionState

from .commands import (
    AddNode,
    ClearSelection,
    Command,
    GroupNodes,
    RemoveNode,
    ReorderNodes,
    SelectNode,
    SetAlignment,
    ToggleMultiSelect,
    UngroupContainer,
    UpdateProps,
)
from .sinks import ClipboardSink, LoggingNotificationSink, NotificationSink

logger = get_logger(__name__)

GROUPED_MESSAGE = "Components grouped successfully!"
UNGROUPED_MESSAGE = "Container ungrouped successfully!"
COPIED_MESSAGE = "Code copied to clipboard!"
ALIGNED_WIDTH = "50%"


class EditorState(BaseModel):
    """Immutable snapshot of everything the editor owns.

    Attributes:
        document: Current document.
        selection: Current selection.
    """

    document: Document = Field(default_factory=Document)
    selection: SelectionState = Field(default_factory=SelectionState)

    model_config = ConfigDict(frozen=True)


@dataclass
class CommandResult:
    """Outcome of applying one command.

    Attributes:
        state: Resulting snapshot (the input object itself on a no-op).
        changed: Whether anything changed.
        notifications: Messages for the notification sink.
    """

    state: EditorState
    changed: bool
    notifications: list[str] = field(default_factory=list)


def _unchanged(state: EditorState, command: Command, reason: str) -> CommandResult:
    logger.debug(f"Ignoring {command.op}: {reason}")
    return CommandResult(state=state, changed=False)


def _changed(state: EditorState, *notifications: str) -> CommandResult:
    return CommandResult(state=state, changed=True, notifications=list(notifications))


def _replace_style(
    document: Document, node_id: str, style: StyleProps
) -> Document:
    """Return a document with one node's style replaced, wherever it lives."""
    nodes: list[LeafNode | ContainerNode] = []
    for node in document.nodes:
        if node.id == node_id:
            node = node.model_copy(update={"style": style})
        elif isinstance(node, ContainerNode) and any(
            child.id == node_id for child in node.children
        ):
            children = tuple(
                child.model_copy(update={"style": style})
                if child.id == node_id
                else child
                for child in node.children
            )
            node = node.model_copy(update={"children": children})
        nodes.append(node)
    return document.with_nodes(nodes)


def _add(state: EditorState, command: AddNode, ids: IdGenerator) -> CommandResult:
    document = state.document
    node_id = command.node_id
    if node_id is None:
        node_id = ids.leaf_id(command.category, command.item.name, document.all_ids())
    elif node_id in document.all_ids():
        return _unchanged(state, command, f"id {node_id} already in use")

    leaf = LeafNode(
        id=node_id,
        source_type=command.item.name,
        category=command.category,
        fragment_template=command.item.fragment_template,
    )
    document = document.with_nodes([*document.nodes, leaf])
    return _changed(state.model_copy(update={"document": document}))


def _remove(state: EditorState, command: RemoveNode) -> CommandResult:
    index = state.document.index_of(command.node_id)
    if index is None:
        return _unchanged(state, command, f"{command.node_id} is not a top-level node")

    nodes = list(state.document.nodes)
    del nodes[index]
    return _changed(
        EditorState(
            document=state.document.with_nodes(nodes),
            selection=state.selection.forget(command.node_id),
        )
    )


def _reorder(state: EditorState, command: ReorderNodes) -> CommandResult:
    if command.over_id is None or command.active_id == command.over_id:
        return _unchanged(state, command, "no distinct drop target")

    document = state.document
    old_index = document.index_of(command.active_id)
    new_index = document.index_of(command.over_id)
    if old_index is None or new_index is None:
        return _unchanged(state, command, "drag or drop target not at top level")

    nodes = list(document.nodes)
    moved = nodes.pop(old_index)
    nodes.insert(new_index, moved)
    return _changed(state.model_copy(update={"document": document.with_nodes(nodes)}))


def _merge_props(
    state: EditorState, command: Command, node_id: str, patch: dict[str, Any]
) -> CommandResult:
    node = state.document.find(node_id)
    if node is None:
        return _unchanged(state, command, f"unknown node {node_id}")

    style = node.style.merged(patch)
    if style == node.style:
        return _unchanged(state, command, "patch does not change the style")
    document = _replace_style(state.document, node_id, style)
    return _changed(state.model_copy(update={"document": document}))


def _set_alignment(state: EditorState, command: SetAlignment) -> CommandResult:
    node = state.document.find(command.node_id)
    if node is None:
        return _unchanged(state, command, f"unknown node {command.node_id}")

    patch: dict[str, Any] = {"alignment": Alignment(command.alignment).value}
    if node.style.get("width") is None:
        patch["width"] = ALIGNED_WIDTH
    return _merge_props(state, command, command.node_id, patch)


def _group(state: EditorState, command: GroupNodes, ids: IdGenerator) -> CommandResult:
    document = state.document
    picked = [
        node_id
        for node_id in state.selection.multi_selected
        if document.index_of(node_id) is not None
    ]
    if len(picked) < 2:
        return _unchanged(state, command, "fewer than two top-level nodes selected")

    picked_set = set(picked)
    selected = [node for node in document.nodes if node.id in picked_set]
    if any(isinstance(node, ContainerNode) for node in selected):
        return _unchanged(state, command, "containers cannot be nested")

    container_id = command.node_id
    if container_id is None:
        container_id = ids.container_id(document.all_ids())
    elif container_id in document.all_ids():
        return _unchanged(state, command, f"id {container_id} already in use")

    container = ContainerNode(
        id=container_id,
        layout_kind=command.layout_kind,
        children=tuple(selected),
        style=StyleProps(**CONTAINER_DEFAULTS),
    )
    # Anchor is the first id in selection order, not in document order
    anchor = document.index_of(picked[0])
    remaining = [node for node in document.nodes if node.id not in picked_set]
    remaining.insert(anchor, container)

    return _changed(
        EditorState(
            document=document.with_nodes(remaining),
            selection=state.selection.after_group(container_id),
        ),
        GROUPED_MESSAGE,
    )


def _ungroup(state: EditorState, command: UngroupContainer) -> CommandResult:
    document = state.document
    index = document.index_of(command.node_id)
    node = document.nodes[index] if index is not None else None
    if not isinstance(node, ContainerNode):
        return _unchanged(state, command, f"{command.node_id} is not a top-level container")

    nodes = list(document.nodes)
    nodes[index : index + 1] = node.children
    return _changed(
        EditorState(
            document=document.with_nodes(nodes),
            selection=state.selection.after_ungroup().forget(node.id),
        ),
        UNGROUPED_MESSAGE,
    )


def _update_selection(
    state: EditorState, command: Command, selection: SelectionState
) -> CommandResult:
    if selection == state.selection:
        return _unchanged(state, command, "selection already in this state")
    return _changed(state.model_copy(update={"selection": selection}))


def apply_command(
    state: EditorState, command: Command, ids: IdGenerator | None = None
) -> CommandResult:
    """Apply one command to a snapshot.

    Args:
        state: Current snapshot. Never modified.
        command: Command to apply.
        ids: Id source for new nodes. A fresh generator is used when omitted,
            which still yields ids unique within the document.

    Returns:
        CommandResult with the new snapshot, or the same snapshot on a no-op.
    """
    ids = ids or IdGenerator()

    if isinstance(command, AddNode):
        return _add(state, command, ids)
    if isinstance(command, RemoveNode):
        return _remove(state, command)
    if isinstance(command, ReorderNodes):
        return _reorder(state, command)
    if isinstance(command, UpdateProps):
        return _merge_props(state, command, command.node_id, command.patch)
    if isinstance(command, SetAlignment):
        return _set_alignment(state, command)
    if isinstance(command, ToggleMultiSelect):
        return _update_selection(
            state, command, state.selection.toggle(command.node_id)
        )
    if isinstance(command, GroupNodes):
        return _group(state, command, ids)
    if isinstance(command, UngroupContainer):
        return _ungroup(state, command)
    if isinstance(command, SelectNode):
        return _update_selection(
            state, command, state.selection.select(command.node_id)
        )
    if isinstance(command, ClearSelection):
        return _update_selection(state, command, state.selection.clear())
    raise TypeError(f"Unsupported command: {type(command).__name__}")


Subscriber = Callable[[EditorState], None]


class Editor:
    """Editing session over a single document.

    Holds the current snapshot and applies commands to it. After every
    command that changes something, subscribers receive the new snapshot
    and notifications are forwarded to the sink. No-op commands notify
    nobody and leave the very same snapshot object current.

    Attributes:
        notifications: Sink for user-facing messages.
        clipboard: Sink for exported markup, if any.
    """

    def __init__(
        self,
        state: EditorState | None = None,
        notifications: NotificationSink | None = None,
        clipboard: ClipboardSink | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            state: Initial snapshot. Defaults to an empty document.
            notifications: Notification sink. Defaults to logging.
            clipboard: Clipboard sink used by `copy_code`.
        """
        self._state = state or EditorState()
        self._ids = IdGenerator()
        self._subscribers: list[Subscriber] = []
        self.notifications = notifications or LoggingNotificationSink()
        self.clipboard = clipboard

    @property
    def state(self) -> EditorState:
        """Current snapshot."""
        return self._state

    @property
    def document(self) -> Document:
        return self._state.document

    @property
    def selection(self) -> SelectionState:
        return self._state.selection

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a snapshot listener.

        Returns:
            A function that removes the listener again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, command: Command) -> CommandResult:
        """Apply a command and publish the result."""
        result = apply_command(self._state, command, self._ids)
        if not result.changed:
            return result

        self._state = result.state
        for callback in list(self._subscribers):
            callback(result.state)
        for message in result.notifications:
            self.notifications.notify(message)
        return result

    # =========================================================================
    # Mutation API
    # =========================================================================

    def add(self, item: CatalogItem, category: str) -> str:
        """Append a new leaf for a catalog item.

        Returns:
            str: Id of the new leaf.
        """
        result = self.dispatch(AddNode(category=category, item=item))
        return result.state.document.nodes[-1].id

    def remove(self, node_id: str) -> bool:
        return self.dispatch(RemoveNode(node_id=node_id)).changed

    def reorder(self, active_id: str, over_id: str | None) -> bool:
        return self.dispatch(ReorderNodes(active_id=active_id, over_id=over_id)).changed

    def update_props(self, node_id: str, patch: dict[str, Any]) -> bool:
        return self.dispatch(UpdateProps(node_id=node_id, patch=patch)).changed

    def set_alignment(self, node_id: str, alignment: Alignment | str) -> bool:
        return self.dispatch(
            SetAlignment(node_id=node_id, alignment=alignment)
        ).changed

    def toggle_multi_select(self, node_id: str) -> bool:
        return self.dispatch(ToggleMultiSelect(node_id=node_id)).changed

    def group(self, layout_kind: LayoutKind | str) -> str | None:
        """Group the multi-selected nodes.

        Returns:
            Id of the new container, or None when nothing was grouped.
        """
        result = self.dispatch(GroupNodes(layout_kind=layout_kind))
        return result.state.selection.selected_id if result.changed else None

    def ungroup(self, container_id: str) -> bool:
        return self.dispatch(UngroupContainer(node_id=container_id)).changed

    def select(self, node_id: str) -> bool:
        return self.dispatch(SelectNode(node_id=node_id)).changed

    def clear_selection(self) -> bool:
        return self.dispatch(ClearSelection()).changed

    # =========================================================================
    # Queries and export
    # =========================================================================

    def find_node(self, node_id: str) -> LeafNode | ContainerNode | None:
        """Find a node for the property panel (top level, then children)."""
        return self._state.document.find(node_id)

    def generate(self, semantic: bool | None = None) -> str:
        """Generate markup for the current document.

        Args:
            semantic: Use semantic tags. Defaults to PAGECOMPOSER_SEMANTIC_HTML.
        """
        generator = MarkupGenerator(
            semantic=get_semantic_default(semantic),
            indent_width=get_indent_width(),
        )
        return generator.generate(self._state.document).markup

    def copy_code(self, semantic: bool | None = None) -> str:
        """Generate markup and hand it to the clipboard sink.

        Returns:
            str: The copied markup.

        Raises:
            RuntimeError: If the editor has no clipboard sink.
        """
        if self.clipboard is None:
            raise RuntimeError("No clipboard sink configured")
        markup = self.generate(semantic)
        self.clipboard.write(markup)
        self.notifications.notify(COPIED_MESSAGE)
        return markup


__all__ = [
    "EditorState",
    "CommandResult",
    "Editor",
    "apply_command",
    "GROUPED_MESSAGE",
    "UNGROUPED_MESSAGE",
    "COPIED_MESSAGE",
]
