"""Unit tests for markup generation."""

import pytest

from pagecomposer.codegen import (
    EMPTY_DOCUMENT_PLACEHOLDER,
    MarkupGenerator,
    collect_declarations,
    generate_markup,
)
from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.schema import LayoutKind, StyleProps


def _leaf(
    node_id: str,
    template: str = "<button>Click</button>",
    category: str = "Buttons",
    **style: str,
) -> LeafNode:
    return LeafNode(
        id=node_id,
        source_type="Snippet",
        category=category,
        fragment_template=template,
        style=StyleProps(**style),
    )


def _doc(*nodes) -> Document:
    return Document(nodes=tuple(nodes))


def _style_lines(markup: str, key: str) -> list[str]:
    return [line for line in markup.split("\n") if key in line]


class TestEmptyDocument:
    """Tests for the empty document case."""

    @pytest.mark.unit
    def test_placeholder(self):
        """Empty documents return the fixed placeholder."""
        assert generate_markup(Document()) == EMPTY_DOCUMENT_PLACEHOLDER
        assert generate_markup(Document(), semantic=True) == EMPTY_DOCUMENT_PLACEHOLDER


class TestLeafEmission:
    """Tests for leaf wrappers and fragment overrides."""

    @pytest.mark.unit
    def test_plain_leaf(self):
        """An unstyled leaf is wrapped in a bare div."""
        markup = generate_markup(_doc(_leaf("a")))
        assert markup == (
            '<div className="min-h-screen bg-gray-50 dark:bg-slate-800">\n'
            '  <div className="w-full space-y-0">\n'
            "    <div>\n"
            "      <button>Click</button>\n"
            "    </div>\n"
            "  </div>\n"
            "</div>"
        )

    @pytest.mark.unit
    def test_margin_on_wrapper_color_on_fragment(self):
        """Margins go to the wrapper, colors to the fragment."""
        markup = generate_markup(
            _doc(_leaf("a", bgColor="#ff0000", marginTop="16px"))
        )
        assert "    <div style={{ marginTop: '16px' }}>" in markup
        assert "<button style={{ backgroundColor: '#ff0000' }}>Click</button>" in markup

    @pytest.mark.unit
    def test_margin_never_on_fragment(self):
        """The fragment's own style never carries margins."""
        markup = generate_markup(_doc(_leaf("a", marginLeft="12px", textColor="#111")))
        button_line = _style_lines(markup, "<button")[0]
        wrapper_line = _style_lines(markup, "marginLeft")[0]
        assert "marginLeft" not in button_line
        assert wrapper_line.strip().startswith("<div")

    @pytest.mark.unit
    def test_sentinels_suppressed(self):
        """Sentinel values emit nothing."""
        markup = generate_markup(
            _doc(
                _leaf(
                    "a",
                    paddingTop="0",
                    marginTop="0",
                    width="auto",
                    maxWidth="none",
                    minHeight="auto",
                )
            )
        )
        assert "style=" not in markup

    @pytest.mark.unit
    def test_padding_emitted_once(self):
        """A real padding value is declared exactly once."""
        markup = generate_markup(_doc(_leaf("a", paddingTop="8px")))
        assert markup.count("paddingTop: '8px'") == 1

    @pytest.mark.unit
    def test_numeric_patch_values(self):
        """Numeric values are emitted as text and numeric zero is a sentinel."""
        leaf = _leaf("a").model_copy(
            update={"style": StyleProps().merged({"width": 100, "marginTop": 0})}
        )
        markup = generate_markup(_doc(leaf))
        assert "<button style={{ width: '100' }}>Click</button>" in markup
        assert "marginTop" not in markup
        assert "    <div>" in markup

    @pytest.mark.unit
    def test_fragment_override_order(self):
        """Fragment declarations follow the canonical order."""
        markup = generate_markup(
            _doc(
                _leaf(
                    "a",
                    paddingLeft="1px",
                    width="50%",
                    bgColor="#fff",
                    minHeight="10px",
                    maxWidth="200px",
                    borderColor="#ccc",
                    textColor="#000",
                    height="20px",
                )
            )
        )
        assert (
            "<button style={{ backgroundColor: '#fff', color: '#000', "
            "borderColor: '#ccc', width: '50%', height: '20px', "
            "maxWidth: '200px', minHeight: '10px', paddingLeft: '1px' }}>"
        ) in markup

    @pytest.mark.unit
    def test_existing_fragment_style_merged(self):
        """Untouched keys in the template's style are kept."""
        leaf = _leaf(
            "a",
            template="<button style={{ color: 'red', fontWeight: 700 }}>Go</button>",
            textColor="#333",
        )
        markup = generate_markup(_doc(leaf))
        assert "<button style={{ color: '#333', fontWeight: 700 }}>Go</button>" in markup

    @pytest.mark.unit
    def test_template_untouched_without_overrides(self):
        """Templates are emitted verbatim when nothing is overridden."""
        template = "<button style={{ color: 'red' }}>Go</button>"
        markup = generate_markup(_doc(_leaf("a", template=template)))
        assert template in markup

    @pytest.mark.unit
    def test_template_is_trimmed_and_indented(self):
        """Multi-line templates are trimmed and indented under the wrapper."""
        leaf = _leaf("a", template="\n<div>\n  <p>x</p>\n</div>\n")
        markup = generate_markup(_doc(leaf))
        assert "      <div>\n        <p>x</p>\n      </div>" in markup

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("alignment", "classes"),
        [
            ("left", "flex justify-start"),
            ("center", "flex justify-center"),
            ("right", "flex justify-end"),
            ("justify", "flex"),
        ],
    )
    def test_alignment_classes(self, alignment, classes):
        """Alignment maps to wrapper utility classes."""
        markup = generate_markup(_doc(_leaf("a", alignment=alignment)))
        assert f'    <div className="{classes}">' in markup

    @pytest.mark.unit
    def test_no_alignment_no_class(self):
        """Unset alignment emits no wrapper class."""
        markup = generate_markup(_doc(_leaf("a")))
        assert "    <div>" in markup

    @pytest.mark.unit
    def test_untaggable_template_warns(self):
        """Overrides on a tagless template produce a warning."""
        result = MarkupGenerator().generate(
            _doc(_leaf("a", template="Just text", bgColor="#fff"))
        )
        assert result.has_warnings
        assert result.warnings[0].node_id == "a"
        assert "      Just text" in result.markup


class TestContainerEmission:
    """Tests for container emission."""

    @pytest.mark.unit
    def test_default_container(self):
        """Default containers emit layout classes and children."""
        container = ContainerNode(
            id="c",
            layout_kind=LayoutKind.FLEX_ROW,
            children=(_leaf("a", template="<b>A</b>"), _leaf("b", template="<i>B</i>")),
        )
        markup = generate_markup(_doc(container))
        assert (
            '    <div className="w-full flex flex-row gap-4 justify-start items-start">\n'
            "      <b>A</b>\n"
            "\n"
            "      <i>B</i>\n"
            "    </div>"
        ) in markup

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("kind", "pair"),
        [
            (LayoutKind.FLEX_COL, "flex flex-col"),
            (LayoutKind.GRID_2, "grid grid-cols-2"),
            (LayoutKind.GRID_3, "grid grid-cols-3"),
            (LayoutKind.GRID_4, "grid grid-cols-4"),
        ],
    )
    def test_layout_pairs(self, kind, pair):
        """Each layout kind selects its class pair."""
        markup = generate_markup(_doc(ContainerNode(id="c", layout_kind=kind)))
        assert f'className="w-full {pair} gap-4' in markup

    @pytest.mark.unit
    def test_container_options(self):
        """Gap, justify, items and wrap follow the style."""
        container = ContainerNode(
            id="c",
            layout_kind=LayoutKind.FLEX_ROW,
            style=StyleProps(
                gap="8", justify="between", alignItems="center", flexWrap="wrap"
            ),
        )
        markup = generate_markup(_doc(container))
        assert (
            'className="w-full flex flex-row gap-8 justify-between items-center flex-wrap"'
        ) in markup

    @pytest.mark.unit
    def test_unset_gap_defaults(self):
        """A container without gap still emits gap-4."""
        container = ContainerNode(
            id="c", layout_kind=LayoutKind.GRID_2, style=StyleProps()
        )
        markup = generate_markup(_doc(container))
        assert 'className="w-full grid grid-cols-2 gap-4"' in markup

    @pytest.mark.unit
    def test_container_style_bg_and_padding_only(self):
        """Containers carry background and padding, never margins or width."""
        container = ContainerNode(
            id="c",
            layout_kind=LayoutKind.FLEX_COL,
            style=StyleProps(
                bgColor="#eee",
                paddingTop="4px",
                marginTop="9px",
                width="10px",
                textColor="#123",
            ),
        )
        markup = generate_markup(_doc(container))
        assert "style={{ backgroundColor: '#eee', paddingTop: '4px' }}" in markup
        assert "marginTop" not in markup
        assert "width:" not in markup
        assert "#123" not in markup

    @pytest.mark.unit
    def test_children_get_margins_in_fragment(self):
        """Container children carry margins inside their own style."""
        child = _leaf("a", marginTop="2px", paddingTop="3px", bgColor="#f00")
        container = ContainerNode(
            id="c", layout_kind=LayoutKind.FLEX_ROW, children=(child,)
        )
        markup = generate_markup(_doc(container))
        assert (
            "      <button style={{ backgroundColor: '#f00', paddingTop: '3px', "
            "marginTop: '2px' }}>Click</button>"
        ) in markup

    @pytest.mark.unit
    def test_empty_container_placeholder(self):
        """Empty containers emit a placeholder comment."""
        markup = generate_markup(
            _doc(ContainerNode(id="c", layout_kind=LayoutKind.FLEX_ROW))
        )
        assert "      {/* Empty container */}" in markup


class TestDocumentEmission:
    """Tests for whole-document emission."""

    @pytest.mark.unit
    def test_blank_line_between_entries(self):
        """Top-level entries are separated by a blank line."""
        markup = generate_markup(_doc(_leaf("a"), _leaf("b")))
        assert "    </div>\n\n    <div>" in markup

    @pytest.mark.unit
    def test_semantic_tags(self):
        """Semantic mode uses category tags and a main root."""
        doc = _doc(
            _leaf("h", template="<h1>T</h1>", category="Headers"),
            ContainerNode(
                id="c",
                layout_kind=LayoutKind.FLEX_ROW,
                children=(_leaf("n", category="Navigation"),),
            ),
            _leaf("x", category="Buttons"),
        )
        markup = generate_markup(doc, semantic=True)
        assert markup.startswith('<main className="min-h-screen')
        assert markup.endswith("</main>")
        assert "    <header>\n      <h1>T</h1>\n    </header>" in markup
        assert '    <section className="w-full flex flex-row' in markup
        assert "    <div>\n      <button>Click</button>\n    </div>" in markup
        # Children are never wrapped
        assert "<nav" not in markup

    @pytest.mark.unit
    def test_generic_mode_uses_div(self):
        """Without semantic mode every wrapper is a div."""
        doc = _doc(_leaf("h", template="<h1>T</h1>", category="Headers"))
        markup = generate_markup(doc)
        assert "<header>" not in markup
        assert "<main" not in markup

    @pytest.mark.unit
    def test_indent_width(self):
        """Indentation width is configurable."""
        markup = generate_markup(_doc(_leaf("a")), indent_width=4)
        assert "\n    <div className=\"w-full space-y-0\">\n        <div>\n" in markup

    @pytest.mark.unit
    def test_deterministic(self):
        """Repeated generation is byte-identical."""
        doc = _doc(
            _leaf("a", bgColor="#fff", marginTop="1px", alignment="center"),
            ContainerNode(
                id="c",
                layout_kind=LayoutKind.GRID_3,
                children=(_leaf("b"), _leaf("d", paddingLeft="2px")),
            ),
        )
        assert generate_markup(doc) == generate_markup(doc)
        assert generate_markup(doc, True) == generate_markup(doc, True)


class TestCollectDeclarations:
    """Tests for collect_declarations."""

    @pytest.mark.unit
    def test_skips_unset(self):
        """Only set fields are collected, in field order."""
        style = StyleProps(paddingRight="1px", marginTop="0", bgColor="#000")
        declarations = collect_declarations(
            style, ("bg_color", "margin_top", "padding_right")
        )
        assert declarations == {"backgroundColor": "#000", "paddingRight": "1px"}
