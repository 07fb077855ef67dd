"""Unit tests for output formatting."""

import pytest

from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.output import (
    children_summary,
    format_document_tree,
    node_title,
    panel_values,
    selection_summary,
)
from pagecomposer.schema import StyleProps
from pagecomposer.selection import SelectionState


def _leaf(node_id: str, name: str = "PrimaryButton", **style: str) -> LeafNode:
    return LeafNode(
        id=node_id,
        source_type=name,
        category="Buttons",
        fragment_template="<button>Click</button>",
        style=StyleProps(**style),
    )


class TestFormatDocumentTree:
    """Tests for format_document_tree function."""

    @pytest.mark.unit
    def test_empty(self):
        """Empty documents show the empty canvas message."""
        assert format_document_tree(Document()) == "Page [No components yet]"

    @pytest.mark.unit
    def test_tree_connectors(self):
        """Containers nest their children with tree connectors."""
        document = Document(
            nodes=(
                _leaf("a"),
                ContainerNode(
                    id="c",
                    layout_kind="flex-row",
                    children=(_leaf("b", "Outline"), _leaf("d")),
                ),
            )
        )
        assert format_document_tree(document) == (
            "Page [2 nodes]\n"
            "├── PrimaryButton (a) [Buttons]\n"
            "└── Flex Row (c) [Container, 2 components inside]\n"
            "    ├── Outline (b) [Buttons]\n"
            "    └── PrimaryButton (d) [Buttons]"
        )

    @pytest.mark.unit
    def test_selection_markers(self):
        """Selected and multi-selected nodes are marked."""
        document = Document(nodes=(_leaf("a"), _leaf("b")))
        selection = SelectionState(selected_id="a", multi_selected=("a", "b"))
        tree = format_document_tree(document, selection)
        assert "(a) [Buttons, selected, multi-selected]" in tree
        assert "(b) [Buttons, multi-selected]" in tree

    @pytest.mark.unit
    def test_single_node_count(self):
        """Node counts are pluralized correctly."""
        assert format_document_tree(Document(nodes=(_leaf("a"),))).startswith(
            "Page [1 node]"
        )


class TestLabels:
    """Tests for titles and summaries."""

    @pytest.mark.unit
    def test_node_title(self):
        """Leaves use the catalog name, containers the layout name."""
        assert node_title(_leaf("a")) == "PrimaryButton"
        assert node_title(ContainerNode(id="c", layout_kind="grid-3")) == (
            "Grid 3 Columns"
        )

    @pytest.mark.unit
    def test_children_summary(self):
        """Child counts are pluralized."""
        one = ContainerNode(id="c", layout_kind="flex-row", children=(_leaf("a"),))
        none = ContainerNode(id="d", layout_kind="flex-row")
        assert children_summary(one) == "1 component inside"
        assert children_summary(none) == "No components inside"

    @pytest.mark.unit
    def test_selection_summary(self):
        """The grouping banner appears from two selected ids."""
        assert selection_summary(SelectionState(multi_selected=("a",))) is None
        assert (
            selection_summary(SelectionState(multi_selected=("a", "b", "c")))
            == "3 components selected"
        )


class TestPanelValues:
    """Tests for panel_values function."""

    @pytest.mark.unit
    def test_leaf_defaults(self):
        """Unset and sentinel fields show panel defaults."""
        values = panel_values(_leaf("a", paddingTop="0", bgColor="#123456"))
        assert values["bg_color"] == "#123456"
        assert values["text_color"] == "#000000"
        assert values["border_color"] == "#e5e7eb"
        assert values["padding_top"] == "0"
        assert values["width"] == "auto"
        assert values["max_width"] == "none"
        assert "gap" not in values

    @pytest.mark.unit
    def test_container_values(self):
        """Containers show layout options and no margins."""
        container = ContainerNode(
            id="c",
            layout_kind="flex-row",
            style=StyleProps(justify="between"),
        )
        values = panel_values(container)
        assert values["justify"] == "between"
        assert values["align_items"] == "start"
        assert values["flex_wrap"] == "nowrap"
        assert values["gap"] == "4"
        assert "margin_top" not in values
