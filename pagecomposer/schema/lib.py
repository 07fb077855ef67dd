"""Authoritative style vocabulary for page-composer nodes.

This module is the single source of truth for everything a node can be
styled with. It provides:
- Enums for layout kinds and alignment-style properties
- The `StyleProps` model shared by leaves and containers
- Sentinel values that mean "not overridden"
- Category to semantic tag mapping used by the code generator

All style-related lookups should route through this module.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LayoutKind(str, Enum):
    """Layout applied by a container to its children.

    Maps to utility classes:
    - FLEX_ROW: Children flow left-to-right (flex flex-row)
    - FLEX_COL: Children flow top-to-bottom (flex flex-col)
    - GRID_2/3/4: Fixed column grid (grid grid-cols-N)
    """

    FLEX_ROW = "flex-row"
    FLEX_COL = "flex-col"
    GRID_2 = "grid-2"
    GRID_3 = "grid-3"
    GRID_4 = "grid-4"

    @property
    def display_name(self) -> str:
        """Human-readable name shown for containers of this kind."""
        return LAYOUT_DISPLAY_NAMES[self]

    @property
    def utility_classes(self) -> tuple[str, str]:
        """Class pair selecting this layout."""
        return LAYOUT_CLASSES[self]


class Alignment(str, Enum):
    """Horizontal placement of a leaf inside its wrapper."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Justify(str, Enum):
    """Main-axis distribution for container children (justify-content)."""

    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class AlignItems(str, Enum):
    """Cross-axis alignment for container children (align-items)."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class FlexWrap(str, Enum):
    """Wrap behavior for flex containers."""

    WRAP = "wrap"
    NOWRAP = "nowrap"


LAYOUT_DISPLAY_NAMES: dict[LayoutKind, str] = {
    LayoutKind.FLEX_ROW: "Flex Row",
    LayoutKind.FLEX_COL: "Flex Column",
    LayoutKind.GRID_2: "Grid 2 Columns",
    LayoutKind.GRID_3: "Grid 3 Columns",
    LayoutKind.GRID_4: "Grid 4 Columns",
}

LAYOUT_CLASSES: dict[LayoutKind, tuple[str, str]] = {
    LayoutKind.FLEX_ROW: ("flex", "flex-row"),
    LayoutKind.FLEX_COL: ("flex", "flex-col"),
    LayoutKind.GRID_2: ("grid", "grid-cols-2"),
    LayoutKind.GRID_3: ("grid", "grid-cols-3"),
    LayoutKind.GRID_4: ("grid", "grid-cols-4"),
}

CONTAINER_CATEGORY = "Container"

# Category -> tag used when semantic markup is requested
SEMANTIC_TAGS: dict[str, str] = {
    "Headers": "header",
    "Footers": "footer",
    "Navigation": "nav",
    "Cards": "article",
    "Data Display": "section",
    "Tables": "section",
    "Forms": "form",
    CONTAINER_CATEGORY: "section",
}

GENERIC_TAG = "div"
MAIN_TAG = "main"


def get_semantic_tag(category: str) -> str:
    """Get the semantic tag for a node category.

    Args:
        category: Catalog category (e.g. "Headers") or "Container".

    Returns:
        str: Tag name, falling back to the generic wrapper tag.
    """
    return SEMANTIC_TAGS.get(category, GENERIC_TAG)


class StyleProps(BaseModel):
    """Per-node visual overrides.

    Every field is optional. Dimension and spacing fields additionally have a
    sentinel value (see `SENTINELS`) that is treated exactly like an absent
    value. Fields accept both snake_case names and the camelCase aliases used
    by editor front-ends (``bgColor``, ``marginTop``, ...).

    Attributes:
        bg_color: Background color.
        text_color: Foreground text color.
        border_color: Border color.
        text: Replacement text content.
        width: Width ('auto' means unset).
        height: Height.
        max_width: Maximum width ('none' means unset).
        min_height: Minimum height ('auto' means unset).
        margin_top: Top margin ('0' means unset). Same for the other sides.
        padding_top: Top padding ('0' means unset). Same for the other sides.
        alignment: Horizontal placement of a leaf.
        display: Display override.
        gap: Container gap scale step ('4' is the default).
        justify: Container main-axis distribution.
        align_items: Container cross-axis alignment.
        flex_wrap: Container wrap behavior.
    """

    # Colors
    bg_color: str | None = Field(None, alias="bgColor")
    text_color: str | None = Field(None, alias="textColor")
    border_color: str | None = Field(None, alias="borderColor")
    text: str | None = None

    # Dimensions
    width: str | None = None
    height: str | None = None
    max_width: str | None = Field(None, alias="maxWidth")
    min_height: str | None = Field(None, alias="minHeight")

    # Spacing
    margin_top: str | None = Field(None, alias="marginTop")
    margin_right: str | None = Field(None, alias="marginRight")
    margin_bottom: str | None = Field(None, alias="marginBottom")
    margin_left: str | None = Field(None, alias="marginLeft")
    padding_top: str | None = Field(None, alias="paddingTop")
    padding_right: str | None = Field(None, alias="paddingRight")
    padding_bottom: str | None = Field(None, alias="paddingBottom")
    padding_left: str | None = Field(None, alias="paddingLeft")

    # Placement
    alignment: Alignment | None = None
    display: str | None = None

    # Container only
    gap: str | None = None
    justify: Justify | None = None
    align_items: AlignItems | None = Field(None, alias="alignItems")
    flex_wrap: FlexWrap | None = Field(None, alias="flexWrap")

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    def get(self, name: str) -> str | None:
        """Return the effective value of a field, or None when unset.

        Empty strings and sentinel values both count as unset.
        """
        value = getattr(self, name)
        if value is None or value == "":
            return None
        if isinstance(value, Enum):
            value = value.value
        if is_sentinel(name, value):
            return None
        return value

    def merged(self, patch: dict[str, Any]) -> "StyleProps":
        """Shallow-merge a patch into a copy of these props.

        Values are not validated; numbers and other non-string scalars are
        stored as their text form. Unknown keys are ignored.

        Args:
            patch: Mapping of field names or camelCase aliases to values.

        Returns:
            StyleProps: New props with the patch applied.
        """
        return self.model_copy(update=normalize_patch(patch))

    def to_patch(self) -> dict[str, Any]:
        """Dump the explicitly-set fields keyed by camelCase alias."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Field values that mean "not overridden"
SENTINELS: dict[str, str] = {
    "width": "auto",
    "max_width": "none",
    "min_height": "auto",
    "margin_top": "0",
    "margin_right": "0",
    "margin_bottom": "0",
    "margin_left": "0",
    "padding_top": "0",
    "padding_right": "0",
    "padding_bottom": "0",
    "padding_left": "0",
    "gap": "4",
}

# Values shown by a property panel for fields that are unset
PANEL_DEFAULTS: dict[str, str] = {
    "bg_color": "#ffffff",
    "text_color": "#000000",
    "border_color": "#e5e7eb",
    "text": "",
    "height": "auto",
    **SENTINELS,
}

CONTAINER_DEFAULTS: dict[str, str] = {
    "gap": "4",
    "justify": Justify.START.value,
    "align_items": AlignItems.START.value,
    "flex_wrap": FlexWrap.NOWRAP.value,
}

CONTAINER_ONLY_FIELDS = frozenset({"gap", "justify", "align_items", "flex_wrap"})

MARGIN_FIELDS = ("margin_top", "margin_right", "margin_bottom", "margin_left")
PADDING_FIELDS = ("padding_top", "padding_right", "padding_bottom", "padding_left")

_ALIASES: dict[str, str] = {
    info.alias: name
    for name, info in StyleProps.model_fields.items()
    if info.alias is not None
}


def normalize_patch(patch: dict[str, Any]) -> dict[str, Any]:
    """Translate camelCase aliases to field names and drop unknown keys.

    Non-string values other than enums and None are converted with `str`.

    Args:
        patch: Mapping using field names and/or aliases.

    Returns:
        dict: Mapping keyed by `StyleProps` field names only.
    """
    normalized: dict[str, Any] = {}
    for key, value in patch.items():
        name = _ALIASES.get(key, key)
        if name in StyleProps.model_fields:
            if isinstance(value, Enum):
                value = value.value
            elif value is not None and not isinstance(value, str):
                value = str(value)
            normalized[name] = value
    return normalized


def is_sentinel(name: str, value: Any) -> bool:
    """Check whether a value is the "unset" sentinel for a field."""
    return name in SENTINELS and SENTINELS[name] == value


def panel_value(props: StyleProps, name: str) -> str:
    """Value a property panel displays for a field.

    Unset fields (including sentinel values) display their panel default.
    """
    value = props.get(name)
    if value is not None:
        return value
    return PANEL_DEFAULTS.get(name, "")
