"""Mutation API: commands, the pure command applier and the Editor session.

Example:
    >>> from pagecomposer.editor import Editor
    >>> editor = Editor()
    >>> leaf_id = editor.add(item, "Buttons")
"""

from .commands import (
    COMMAND_ADAPTER,
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
    parse_command,
)
from .lib import (
    COPIED_MESSAGE,
    GROUPED_MESSAGE,
    UNGROUPED_MESSAGE,
    CommandResult,
    Editor,
    EditorState,
    apply_command,
)
from .sinks import (
    ClipboardSink,
    FileClipboard,
    LoggingNotificationSink,
    MemoryClipboard,
    NotificationSink,
    RecordingNotificationSink,
)

__all__ = [
    # Session
    "Editor",
    "EditorState",
    "CommandResult",
    "apply_command",
    # Commands
    "Command",
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
    "COMMAND_ADAPTER",
    "parse_command",
    # Sinks
    "NotificationSink",
    "ClipboardSink",
    "LoggingNotificationSink",
    "RecordingNotificationSink",
    "MemoryClipboard",
    "FileClipboard",
    # Messages
    "GROUPED_MESSAGE",
    "UNGROUPED_MESSAGE",
    "COPIED_MESSAGE",
]
