"""Style vocabulary for page-composer nodes.

Example:
    >>> from pagecomposer.schema import StyleProps, LayoutKind
    >>> props = StyleProps(paddingTop="0", bgColor="#ff0000")
    >>> props.get("padding_top") is None
    True
    >>> LayoutKind.GRID_3.utility_classes
    ('grid', 'grid-cols-3')
"""

from .lib import (
    CONTAINER_CATEGORY,
    CONTAINER_DEFAULTS,
    CONTAINER_ONLY_FIELDS,
    GENERIC_TAG,
    LAYOUT_CLASSES,
    LAYOUT_DISPLAY_NAMES,
    MAIN_TAG,
    MARGIN_FIELDS,
    PADDING_FIELDS,
    PANEL_DEFAULTS,
    SEMANTIC_TAGS,
    SENTINELS,
    AlignItems,
    Alignment,
    FlexWrap,
    Justify,
    LayoutKind,
    StyleProps,
    get_semantic_tag,
    is_sentinel,
    normalize_patch,
    panel_value,
)

__all__ = [
    # Enums
    "LayoutKind",
    "Alignment",
    "Justify",
    "AlignItems",
    "FlexWrap",
    # Style model
    "StyleProps",
    "normalize_patch",
    "is_sentinel",
    "panel_value",
    "SENTINELS",
    "PANEL_DEFAULTS",
    "CONTAINER_DEFAULTS",
    "CONTAINER_ONLY_FIELDS",
    "MARGIN_FIELDS",
    "PADDING_FIELDS",
    # Layout tables
    "LAYOUT_CLASSES",
    "LAYOUT_DISPLAY_NAMES",
    # Tags
    "CONTAINER_CATEGORY",
    "SEMANTIC_TAGS",
    "GENERIC_TAG",
    "MAIN_TAG",
    "get_semantic_tag",
]
