"""page-composer: assemble pages from catalog snippets and export markup."""

from pagecomposer.catalog import Catalog, CatalogItem, default_catalog, load_catalog
from pagecomposer.codegen import MarkupGenerator, generate_markup
from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.editor import Editor, EditorState, apply_command
from pagecomposer.schema import LayoutKind, StyleProps
from pagecomposer.validation import ValidationError, is_valid, validate_document

__all__ = [
    # Document
    "Document",
    "LeafNode",
    "ContainerNode",
    "LayoutKind",
    "StyleProps",
    # Catalog
    "Catalog",
    "CatalogItem",
    "default_catalog",
    "load_catalog",
    # Editing
    "Editor",
    "EditorState",
    "apply_command",
    # Generation
    "MarkupGenerator",
    "generate_markup",
    # Validation
    "validate_document",
    "is_valid",
    "ValidationError",
]
