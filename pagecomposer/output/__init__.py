"""Human-readable output for documents and the property panel."""

from .lib import (
    EMPTY_CANVAS_MESSAGE,
    children_summary,
    format_document_tree,
    node_title,
    panel_values,
    selection_summary,
)

__all__ = [
    "EMPTY_CANVAS_MESSAGE",
    "format_document_tree",
    "node_title",
    "children_summary",
    "selection_summary",
    "panel_values",
]
