"""Markup generation for page documents."""

from .lib import (
    EMPTY_CONTAINER_PLACEHOLDER,
    EMPTY_DOCUMENT_PLACEHOLDER,
    PAGE_SURFACE_CLASSES,
    GenerationResult,
    GenerationWarning,
    MarkupGenerator,
    collect_declarations,
    generate_markup,
)
from .splice import inject_style, locate_opening_tag

__all__ = [
    "generate_markup",
    "MarkupGenerator",
    "GenerationResult",
    "GenerationWarning",
    "collect_declarations",
    "inject_style",
    "locate_opening_tag",
    "EMPTY_DOCUMENT_PLACEHOLDER",
    "EMPTY_CONTAINER_PLACEHOLDER",
    "PAGE_SURFACE_CLASSES",
]
