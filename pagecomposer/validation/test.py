"""Unit tests for validation module."""

import pytest

from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.validation import is_valid, validate_document


def _leaf(node_id: str) -> LeafNode:
    return LeafNode(
        id=node_id,
        source_type="PrimaryButton",
        category="Buttons",
        fragment_template="<button>Click</button>",
    )


class TestValidateDocument:
    """Tests for validate_document function."""

    @pytest.mark.unit
    def test_valid_document(self):
        """Well-formed documents pass validation."""
        document = Document(
            nodes=(
                _leaf("a"),
                ContainerNode(id="c", layout_kind="flex-row", children=(_leaf("b"),)),
            )
        )
        assert validate_document(document) == []
        assert is_valid(document)

    @pytest.mark.unit
    def test_empty_document(self):
        """Empty documents are valid."""
        assert is_valid(Document())

    @pytest.mark.unit
    def test_duplicate_across_container(self):
        """Ids repeated inside a container are detected."""
        document = Document(
            nodes=(
                _leaf("dupe"),
                ContainerNode(
                    id="c", layout_kind="grid-2", children=(_leaf("dupe"),)
                ),
            )
        )
        errors = validate_document(document)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert "2 times" in errors[0].message

    @pytest.mark.unit
    def test_nested_container(self):
        """Containers smuggled in as children are reported."""
        inner = ContainerNode(id="inner", layout_kind="flex-col")
        outer = ContainerNode.model_construct(
            id="outer",
            kind="container",
            category="Container",
            layout_kind="flex-row",
            children=(inner,),
        )
        document = Document.model_construct(nodes=(outer,))

        errors = validate_document(document)

        assert [e.error_type for e in errors] == ["nested_container"]
        assert errors[0].node_id == "inner"
        assert not is_valid(document)
