"""Unit tests for the style schema."""

import pytest

from pagecomposer.schema import (
    CONTAINER_DEFAULTS,
    AlignItems,
    Alignment,
    LayoutKind,
    StyleProps,
    get_semantic_tag,
    is_sentinel,
    normalize_patch,
    panel_value,
)


class TestLayoutKind:
    """Tests for LayoutKind enum."""

    @pytest.mark.unit
    def test_enum_values(self):
        """All layout kinds exist with their wire values."""
        assert {kind.value for kind in LayoutKind} == {
            "flex-row",
            "flex-col",
            "grid-2",
            "grid-3",
            "grid-4",
        }

    @pytest.mark.unit
    def test_utility_classes(self):
        """Each kind maps to its class pair."""
        assert LayoutKind.FLEX_ROW.utility_classes == ("flex", "flex-row")
        assert LayoutKind.FLEX_COL.utility_classes == ("flex", "flex-col")
        assert LayoutKind.GRID_4.utility_classes == ("grid", "grid-cols-4")

    @pytest.mark.unit
    def test_display_names(self):
        """Display names follow the layout."""
        assert LayoutKind.FLEX_COL.display_name == "Flex Column"
        assert LayoutKind.GRID_2.display_name == "Grid 2 Columns"


class TestStyleProps:
    """Tests for StyleProps model."""

    @pytest.mark.unit
    def test_empty_props(self):
        """Default props have nothing set."""
        props = StyleProps()
        assert props.to_patch() == {}

    @pytest.mark.unit
    def test_alias_construction(self):
        """camelCase aliases populate snake_case fields."""
        props = StyleProps(bgColor="#ff0000", marginTop="16px")
        assert props.bg_color == "#ff0000"
        assert props.margin_top == "16px"

    @pytest.mark.unit
    def test_field_name_construction(self):
        """snake_case names are accepted too."""
        props = StyleProps(align_items=AlignItems.CENTER)
        assert props.align_items == "center"

    @pytest.mark.unit
    def test_get_suppresses_sentinels(self):
        """Sentinel values read back as unset."""
        props = StyleProps(
            width="auto", maxWidth="none", minHeight="auto", paddingTop="0"
        )
        assert props.get("width") is None
        assert props.get("max_width") is None
        assert props.get("min_height") is None
        assert props.get("padding_top") is None

    @pytest.mark.unit
    def test_get_suppresses_empty_string(self):
        """Empty strings read back as unset."""
        assert StyleProps(bgColor="").get("bg_color") is None

    @pytest.mark.unit
    def test_get_returns_real_values(self):
        """Non-sentinel values pass through."""
        props = StyleProps(paddingTop="8px", alignment=Alignment.CENTER)
        assert props.get("padding_top") == "8px"
        assert props.get("alignment") == "center"

    @pytest.mark.unit
    def test_merged_is_shallow(self):
        """Merging keeps untouched fields and replaces patched ones."""
        props = StyleProps(bgColor="#fff", width="50%")
        merged = props.merged({"width": "75%", "textColor": "#000"})
        assert merged.bg_color == "#fff"
        assert merged.width == "75%"
        assert merged.text_color == "#000"
        # Original untouched
        assert props.width == "50%"

    @pytest.mark.unit
    def test_merged_does_not_validate(self):
        """Merged values are stored as given."""
        merged = StyleProps().merged({"bgColor": "not-a-color"})
        assert merged.bg_color == "not-a-color"

    @pytest.mark.unit
    def test_frozen(self):
        """Props are immutable; updates go through merged()."""
        props = StyleProps()
        with pytest.raises(ValueError):
            props.width = "10px"

    @pytest.mark.unit
    def test_to_patch_uses_aliases(self):
        """Dumped patches use camelCase keys."""
        props = StyleProps(**CONTAINER_DEFAULTS)
        assert props.to_patch() == {
            "gap": "4",
            "justify": "start",
            "alignItems": "start",
            "flexWrap": "nowrap",
        }


class TestHelpers:
    """Tests for module-level helpers."""

    @pytest.mark.unit
    def test_normalize_patch(self):
        """Aliases are translated and unknown keys dropped."""
        patch = normalize_patch(
            {"paddingLeft": "4px", "padding_right": "2px", "bogus": "x"}
        )
        assert patch == {"padding_left": "4px", "padding_right": "2px"}

    @pytest.mark.unit
    def test_normalize_patch_unwraps_enums(self):
        """Enum members are stored by value."""
        assert normalize_patch({"alignment": Alignment.RIGHT}) == {
            "alignment": "right"
        }

    @pytest.mark.unit
    def test_normalize_patch_stringifies_scalars(self):
        """Numbers from JSON patches are stored as text."""
        assert normalize_patch({"width": 100, "marginTop": 0, "height": None}) == {
            "width": "100",
            "margin_top": "0",
            "height": None,
        }

    @pytest.mark.unit
    def test_is_sentinel(self):
        """Sentinels are per field."""
        assert is_sentinel("margin_left", "0")
        assert not is_sentinel("margin_left", "0px")
        assert not is_sentinel("height", "auto")

    @pytest.mark.unit
    def test_panel_value_defaults(self):
        """Unset fields show their panel default."""
        props = StyleProps(paddingTop="0")
        assert panel_value(props, "bg_color") == "#ffffff"
        assert panel_value(props, "padding_top") == "0"
        assert panel_value(props, "max_width") == "none"
        assert panel_value(props, "gap") == "4"

    @pytest.mark.unit
    def test_panel_value_set(self):
        """Set fields show their value."""
        assert panel_value(StyleProps(textColor="#333"), "text_color") == "#333"

    @pytest.mark.unit
    def test_semantic_tags(self):
        """Known categories map to semantic tags, others fall back."""
        assert get_semantic_tag("Headers") == "header"
        assert get_semantic_tag("Footers") == "footer"
        assert get_semantic_tag("Navigation") == "nav"
        assert get_semantic_tag("Cards") == "article"
        assert get_semantic_tag("Tables") == "section"
        assert get_semantic_tag("Data Display") == "section"
        assert get_semantic_tag("Forms") == "form"
        assert get_semantic_tag("Container") == "section"
        assert get_semantic_tag("Buttons") == "div"
