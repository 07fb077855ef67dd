"""Unit tests for document models."""

import pytest
from pydantic import ValidationError

from pagecomposer.document import (
    ContainerNode,
    Document,
    IdGenerator,
    LeafNode,
    slugify,
)
from pagecomposer.schema import LayoutKind, StyleProps


def _leaf(node_id: str, category: str = "Buttons") -> LeafNode:
    return LeafNode(
        id=node_id,
        source_type="PrimaryButton",
        category=category,
        fragment_template="<button>Click</button>",
    )


class TestLeafNode:
    """Tests for LeafNode model."""

    @pytest.mark.unit
    def test_minimal_leaf(self):
        """Leaf starts with empty style."""
        leaf = _leaf("a")
        assert leaf.kind == "leaf"
        assert leaf.style == StyleProps()

    @pytest.mark.unit
    def test_leaf_has_no_children(self):
        """Leaves cannot carry children."""
        assert not hasattr(_leaf("a"), "children")

    @pytest.mark.unit
    def test_leaf_is_frozen(self):
        """Leaves are immutable."""
        leaf = _leaf("a")
        with pytest.raises(ValidationError):
            leaf.id = "b"


class TestContainerNode:
    """Tests for ContainerNode model."""

    @pytest.mark.unit
    def test_default_style(self):
        """Containers get layout defaults."""
        container = ContainerNode(id="c", layout_kind=LayoutKind.FLEX_ROW)
        assert container.category == "Container"
        assert container.style.to_patch() == {
            "gap": "4",
            "justify": "start",
            "alignItems": "start",
            "flexWrap": "nowrap",
        }

    @pytest.mark.unit
    def test_layout_kind_stored_as_value(self):
        """Layout kind serializes to its wire value."""
        container = ContainerNode(id="c", layout_kind=LayoutKind.GRID_3)
        assert container.layout_kind == "grid-3"
        assert container.display_name == "Grid 3 Columns"

    @pytest.mark.unit
    def test_children_must_be_leaves(self):
        """A container cannot hold another container."""
        inner = ContainerNode(id="inner", layout_kind=LayoutKind.FLEX_ROW)
        with pytest.raises(ValidationError):
            ContainerNode(
                id="outer",
                layout_kind=LayoutKind.FLEX_COL,
                children=[inner],
            )

    @pytest.mark.unit
    def test_invalid_layout_kind(self):
        """Unknown layout kinds are rejected."""
        with pytest.raises(ValidationError):
            ContainerNode(id="c", layout_kind="grid-9")


class TestDocument:
    """Tests for Document aggregate."""

    @pytest.fixture
    def document(self) -> Document:
        return Document(
            nodes=(
                _leaf("a"),
                ContainerNode(
                    id="c",
                    layout_kind=LayoutKind.FLEX_ROW,
                    children=(_leaf("b"), _leaf("d")),
                ),
                _leaf("e"),
            )
        )

    @pytest.mark.unit
    def test_empty(self):
        """New documents are empty."""
        assert Document().is_empty
        assert len(Document()) == 0

    @pytest.mark.unit
    def test_top_level_ids(self, document):
        """Top-level ids exclude children."""
        assert document.top_level_ids() == ["a", "c", "e"]

    @pytest.mark.unit
    def test_all_ids(self, document):
        """All ids include children."""
        assert document.all_ids() == {"a", "b", "c", "d", "e"}

    @pytest.mark.unit
    def test_index_of(self, document):
        """Index lookups are top-level only."""
        assert document.index_of("e") == 2
        assert document.index_of("b") is None
        assert document.index_of("missing") is None

    @pytest.mark.unit
    def test_find_top_level_and_child(self, document):
        """find() searches one level into containers."""
        assert document.find("a").id == "a"
        assert document.find("d").id == "d"
        assert document.find("missing") is None

    @pytest.mark.unit
    def test_get_top_level_ignores_children(self, document):
        """get_top_level() never returns a nested node."""
        assert document.get_top_level("b") is None

    @pytest.mark.unit
    def test_parent_of(self, document):
        """Children report their container."""
        assert document.parent_of("b").id == "c"
        assert document.parent_of("a") is None

    @pytest.mark.unit
    def test_with_nodes_returns_new_document(self, document):
        """with_nodes() leaves the original untouched."""
        updated = document.with_nodes([document.nodes[0]])
        assert updated.top_level_ids() == ["a"]
        assert document.top_level_ids() == ["a", "c", "e"]

    @pytest.mark.unit
    def test_json_round_trip(self, document):
        """Documents deserialize using the kind discriminator."""
        restored = Document.model_validate_json(document.model_dump_json())
        assert restored == document
        assert isinstance(restored.nodes[1], ContainerNode)


class TestIdGenerator:
    """Tests for id generation."""

    @pytest.mark.unit
    def test_slugify(self):
        """Names collapse to lowercase slugs."""
        assert slugify("Data Display") == "data-display"
        assert slugify("PrimaryButton") == "primarybutton"
        assert slugify("!!!") == "node"

    @pytest.mark.unit
    def test_leaf_ids_are_unique(self):
        """Repeated calls never repeat an id."""
        generator = IdGenerator()
        first = generator.leaf_id("Buttons", "Primary", set())
        second = generator.leaf_id("Buttons", "Primary", set())
        assert first == "buttons-primary-1"
        assert second == "buttons-primary-2"

    @pytest.mark.unit
    def test_skips_taken_ids(self):
        """Ids already in use are skipped."""
        generator = IdGenerator()
        assert generator.container_id({"container-1"}) == "container-2"
