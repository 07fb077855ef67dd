"""Unit tests for inline style splicing, including adversarial templates."""

import pytest

from pagecomposer.codegen.splice import (
    css_to_camel,
    find_style_attribute,
    format_style_value,
    inject_style,
    locate_opening_tag,
    parse_object_declarations,
    render_style_attribute,
)


def _opening(template: str) -> str:
    tag = locate_opening_tag(template)
    assert tag is not None
    return template[: tag.end + 1]


class TestLocateOpeningTag:
    """Tests for the tag boundary rule."""

    @pytest.mark.unit
    def test_simple_tag(self):
        """The first bracket closes a plain tag."""
        assert _opening("<button>Click</button>") == "<button>"

    @pytest.mark.unit
    def test_bracket_inside_quoted_attribute(self):
        """A quoted '>' does not end the tag."""
        assert _opening('<a title="x > y">go</a>') == '<a title="x > y">'

    @pytest.mark.unit
    def test_bracket_inside_single_quotes(self):
        """Single-quoted values are skipped too."""
        assert _opening("<a title='a>b'>go</a>") == "<a title='a>b'>"

    @pytest.mark.unit
    def test_arrow_function_in_expression(self):
        """An arrow inside {...} does not end the tag."""
        template = "<button onClick={() => go()}>Go</button>"
        assert _opening(template) == "<button onClick={() => go()}>"

    @pytest.mark.unit
    def test_trailing_backslash_in_attribute(self):
        """Backslashes in quoted attribute values are literal."""
        assert _opening('<a title="C:\\">x</a>') == '<a title="C:\\">'

    @pytest.mark.unit
    def test_escaped_quote_in_expression(self):
        """Escaped quotes inside {...} strings do not close the string."""
        template = '<a title={"say \\"hi\\" >"}>x</a>'
        assert _opening(template) == '<a title={"say \\"hi\\" >"}>'

    @pytest.mark.unit
    def test_multiline_tag(self):
        """Tags spanning several lines are found."""
        template = '<div\n  className="card"\n>\n  body\n</div>'
        assert _opening(template) == '<div\n  className="card"\n>'

    @pytest.mark.unit
    def test_self_closing(self):
        """Self-closing tags are flagged."""
        tag = locate_opening_tag('<input type="email" />')
        assert tag is not None
        assert tag.self_closing

    @pytest.mark.unit
    def test_no_opening_tag(self):
        """Fragments, text and unterminated tags have no opening tag."""
        assert locate_opening_tag("<>x</>") is None
        assert locate_opening_tag("hello <b>x</b>") is None
        assert locate_opening_tag("<div className='x'") is None
        assert locate_opening_tag("{/* note */}\n<div/>") is None


class TestStyleAttribute:
    """Tests for existing style attribute detection."""

    @pytest.mark.unit
    def test_object_literal(self):
        """Object literal styles are parsed into declarations."""
        attr = find_style_attribute("<div style={{ color: 'red', padding: 4 }}")
        assert attr is not None
        assert attr.declarations == {"color": "'red'", "padding": "4"}

    @pytest.mark.unit
    def test_no_style(self):
        """Tags without a style attribute yield None."""
        assert find_style_attribute('<div className="x"') is None

    @pytest.mark.unit
    def test_ignores_prefixed_attribute(self):
        """data-style is not a style attribute."""
        assert find_style_attribute('<div data-style="x"') is None

    @pytest.mark.unit
    def test_ignores_style_inside_other_value(self):
        """style= inside another attribute's value is ignored."""
        assert find_style_attribute('<div title="style={{x}}"') is None

    @pytest.mark.unit
    def test_parse_object_declarations(self):
        """Spreads and shorthands are kept bare."""
        assert parse_object_declarations("color: 'red', ...base, padding: 4") == {
            "color": "'red'",
            "...base": None,
            "padding": "4",
        }

    @pytest.mark.unit
    def test_parse_nested_commas(self):
        """Commas inside calls do not split declarations."""
        declarations = parse_object_declarations(
            "boxShadow: shadow(1, 2), 'font-size': '12px'"
        )
        assert declarations == {
            "boxShadow": "shadow(1, 2)",
            "font-size": "'12px'",
        }

    @pytest.mark.unit
    def test_parse_escaped_quote_value(self):
        """Escaped quotes in object values do not split declarations."""
        declarations = parse_object_declarations(
            "content: 'O\\'Neil, Jr', color: 'red'"
        )
        assert declarations == {"content": "'O\\'Neil, Jr'", "color": "'red'"}

    @pytest.mark.unit
    def test_css_to_camel(self):
        """CSS names convert to object keys."""
        assert css_to_camel("padding-top") == "paddingTop"
        assert css_to_camel("color") == "color"
        assert css_to_camel("--brand") == "--brand"


class TestRendering:
    """Tests for attribute rendering."""

    @pytest.mark.unit
    def test_render(self):
        """Declarations render in order."""
        rendered = render_style_attribute({"marginTop": "'16px'", "...base": None})
        assert rendered == "style={{ marginTop: '16px', ...base }}"

    @pytest.mark.unit
    def test_render_quotes_non_identifier_keys(self):
        """Keys that are not identifiers are quoted."""
        assert render_style_attribute({"font-size": "'1px'"}) == (
            "style={{ 'font-size': '1px' }}"
        )

    @pytest.mark.unit
    def test_format_value_escapes_quotes(self):
        """Embedded quotes are escaped."""
        assert format_style_value("O'Neil") == "'O\\'Neil'"


class TestInjectStyle:
    """Tests for inject_style."""

    @pytest.mark.unit
    def test_insert_before_bracket(self):
        """A new attribute is inserted right before the bracket."""
        assert inject_style(
            "<button>Click</button>", {"backgroundColor": "#ff0000"}
        ) == "<button style={{ backgroundColor: '#ff0000' }}>Click</button>"

    @pytest.mark.unit
    def test_no_overrides_is_identity(self):
        """Nothing to override leaves the template untouched."""
        assert inject_style("<b>x</b>", {}) == "<b>x</b>"
        assert inject_style("plain", {}) == "plain"

    @pytest.mark.unit
    def test_merge_existing_style(self):
        """Overridden keys are replaced in place, others kept, new appended."""
        result = inject_style(
            "<button style={{ color: 'red', padding: 4 }}>Go</button>",
            {"color": "#333", "width": "10px"},
        )
        assert result == (
            "<button style={{ color: '#333', padding: 4, width: '10px' }}>Go</button>"
        )

    @pytest.mark.unit
    def test_self_closing_insert(self):
        """Self-closing tags keep their slash."""
        assert inject_style('<input type="email" />', {"width": "50%"}) == (
            "<input type=\"email\" style={{ width: '50%' }} />"
        )

    @pytest.mark.unit
    def test_string_style_is_converted(self):
        """CSS string styles become object styles."""
        result = inject_style(
            '<p style="padding-top: 4px; color: red">t</p>', {"color": "#000"}
        )
        assert result == "<p style={{ paddingTop: '4px', color: '#000' }}>t</p>"

    @pytest.mark.unit
    def test_expression_style_is_spread(self):
        """Non-literal styles are spread before the overrides."""
        result = inject_style("<div style={styles.box}>x</div>", {"height": "4px"})
        assert result == "<div style={{ ...styles.box, height: '4px' }}>x</div>"

    @pytest.mark.unit
    def test_style_in_other_attribute_value(self):
        """A decoy style= inside a value gets a real attribute added."""
        result = inject_style('<div title="style={{x}}">y</div>', {"color": "red"})
        assert result == "<div title=\"style={{x}}\" style={{ color: 'red' }}>y</div>"

    @pytest.mark.unit
    def test_only_opening_tag_is_touched(self):
        """Nested elements keep their own styles."""
        template = "<div>\n  <span style={{ color: 'blue' }}>x</span>\n</div>"
        result = inject_style(template, {"color": "red"})
        assert result == (
            "<div style={{ color: 'red' }}>\n"
            "  <span style={{ color: 'blue' }}>x</span>\n"
            "</div>"
        )

    @pytest.mark.unit
    def test_arrow_in_handler(self):
        """Handlers containing => do not confuse the splice point."""
        result = inject_style("<button onClick={() => go()}>Go</button>", {"color": "red"})
        assert result == (
            "<button onClick={() => go()} style={{ color: 'red' }}>Go</button>"
        )

    @pytest.mark.unit
    def test_trailing_backslash_in_attribute(self):
        """A value ending in a backslash keeps the splice on the opening tag."""
        result = inject_style('<a title="C:\\">x</a>', {"color": "red"})
        assert result == '<a title="C:\\" ' + "style={{ color: 'red' }}>x</a>"

    @pytest.mark.unit
    def test_merge_keeps_escaped_value(self):
        """Escaped quotes inside an existing style survive the merge."""
        result = inject_style(
            "<p style={{ content: 'a\\'b>' }}>x</p>", {"color": "red"}
        )
        assert result == "<p style={{ content: 'a\\'b>', color: 'red' }}>x</p>"

    @pytest.mark.unit
    def test_no_tag_returns_none(self):
        """Overrides with nowhere to go are reported as None."""
        assert inject_style("just text", {"color": "red"}) is None
