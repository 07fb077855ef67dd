"""Inline style splicing for opaque markup templates.

Templates are raw text owned by the catalog. The only structure relied on is
the opening tag of the fragment:

- The template must start with ``<`` followed by a tag name. Fragments
  (``<>``), comments and leading text have no opening tag and are never
  modified.
- The opening tag ends at the first ``>`` that is outside a quoted attribute
  value and outside a ``{...}`` expression. ``<a title="x > y">`` and
  ``<button onClick={() => go()}>`` are handled; multi-line tags are too.
- An existing ``style={{ ... }}`` attribute in the opening tag is merged with
  the overrides: untouched declarations keep their original source text and
  position, overridden ones are replaced in place, new ones are appended.
  A string attribute ``style="a-b: c"`` is converted to the object form.
  A non-literal ``style={expr}`` is kept by spreading it first.
"""

import re
from dataclasses import dataclass, field

_TAG_START = re.compile(r"<[A-Za-z][\w.:-]*")
_STYLE_ATTR = re.compile(r"(?<![\w-])style\s*=\s*")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_QUOTES = "\"'`"


@dataclass
class OpeningTag:
    """Location of a fragment's opening tag.

    Attributes:
        end: Index of the closing ``>``.
        self_closing: Whether the tag ends with ``/>``.
    """

    end: int
    self_closing: bool


@dataclass
class StyleAttribute:
    """An existing style attribute inside an opening tag.

    Attributes:
        start: Index where ``style`` begins.
        end: Index just past the attribute value.
        declarations: Ordered key -> source text. A value of None renders the
            key bare (spreads like ``...base`` and shorthand properties).
    """

    start: int
    end: int
    declarations: dict[str, str | None] = field(default_factory=dict)


def _scan_to(
    text: str, start: int, stop: str, script: bool = False
) -> int | None:
    """Index of the first `stop` char at depth 0 outside quotes, from start.

    Backslash escapes only count inside strings within `{...}` or when `script`
    is set; markup attribute values such as `title="C:\\"` have no escapes.
    """
    quote: str | None = None
    depth = 0
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\" and (script or depth > 0):
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif ch in "{([":
            depth += 1
        elif ch in "})]":
            if depth == 0 and ch == stop:
                return i
            depth = max(0, depth - 1)
        elif ch == stop and depth == 0:
            return i
        i += 1
    return None


def locate_opening_tag(template: str) -> OpeningTag | None:
    """Find the opening tag of a template.

    Args:
        template: Stripped template text.

    Returns:
        OpeningTag, or None when the template has no usable opening tag.
    """
    match = _TAG_START.match(template)
    if match is None:
        return None
    end = _scan_to(template, match.end(), ">")
    if end is None:
        return None
    return OpeningTag(end=end, self_closing=template[end - 1] == "/")


def _split_top_level(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    start = 0
    while True:
        index = _scan_to(text, start, separator, script=True)
        if index is None:
            parts.append(text[start:])
            return parts
        parts.append(text[start:index])
        start = index + 1


def _unquote(key: str) -> str:
    if len(key) >= 2 and key[0] == key[-1] and key[0] in _QUOTES:
        return key[1:-1]
    return key


def parse_object_declarations(body: str) -> dict[str, str | None]:
    """Parse the inside of a style object literal.

    Example:
        >>> parse_object_declarations("color: 'red', ...base, padding: 4")
        {'color': "'red'", '...base': None, 'padding': '4'}
    """
    declarations: dict[str, str | None] = {}
    for piece in _split_top_level(body, ","):
        piece = piece.strip()
        if not piece:
            continue
        if piece.startswith("..."):
            declarations[piece] = None
            continue
        colon = _scan_to(piece, 0, ":", script=True)
        if colon is None:
            declarations[piece] = None
            continue
        key = _unquote(piece[:colon].strip())
        declarations[key] = piece[colon + 1 :].strip()
    return declarations


def css_to_camel(name: str) -> str:
    """Convert a CSS property name to its camelCase object key."""
    if name.startswith("--"):
        return name
    head, *rest = name.split("-")
    return head + "".join(part.capitalize() for part in rest)


def parse_css_declarations(css: str) -> dict[str, str | None]:
    """Parse a CSS declaration string into object-form declarations.

    Example:
        >>> parse_css_declarations("padding-top: 4px; color: red")
        {'paddingTop': "'4px'", 'color': "'red'"}
    """
    declarations: dict[str, str | None] = {}
    for piece in css.split(";"):
        if ":" not in piece:
            continue
        name, value = piece.split(":", 1)
        name = name.strip()
        if name:
            declarations[css_to_camel(name)] = format_style_value(value.strip())
    return declarations


def find_style_attribute(opening: str) -> StyleAttribute | None:
    """Locate a style attribute inside an opening tag.

    Only attributes at the top level of the tag count; ``style=`` appearing
    inside another attribute's value is ignored.
    """
    position = 0
    while True:
        match = _STYLE_ATTR.search(opening, position)
        if match is None:
            return None
        # Reject matches that sit inside a quoted value or an expression
        if _scan_to(opening[: match.start()] + ">", 0, ">") != match.start():
            position = match.end()
            continue

        value_start = match.end()
        if value_start >= len(opening):
            return None
        opener = opening[value_start]

        if opener in "\"'":
            close = opening.find(opener, value_start + 1)
            if close == -1:
                return None
            return StyleAttribute(
                start=match.start(),
                end=close + 1,
                declarations=parse_css_declarations(
                    opening[value_start + 1 : close]
                ),
            )

        if opener == "{":
            close = _scan_to(opening, value_start + 1, "}", script=True)
            if close is None:
                return None
            expression = opening[value_start + 1 : close].strip()
            if expression.startswith("{") and expression.endswith("}"):
                declarations = parse_object_declarations(expression[1:-1])
            elif expression:
                declarations = {f"...{expression}": None}
            else:
                declarations = {}
            return StyleAttribute(
                start=match.start(), end=close + 1, declarations=declarations
            )

        position = value_start


def format_style_value(value: str) -> str:
    """Quote a raw value as a single-quoted string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _format_key(key: str) -> str:
    if key.startswith("...") or _IDENTIFIER.match(key):
        return key
    return format_style_value(key)


def render_style_attribute(declarations: dict[str, str | None]) -> str:
    """Render declarations as a ``style={{ ... }}`` attribute.

    Example:
        >>> render_style_attribute({"marginTop": "'16px'"})
        "style={{ marginTop: '16px' }}"
    """
    parts = [
        _format_key(key) if value is None else f"{_format_key(key)}: {value}"
        for key, value in declarations.items()
    ]
    return "style={{ " + ", ".join(parts) + " }}"


def inject_style(template: str, overrides: dict[str, str]) -> str | None:
    """Merge style overrides into a template's opening tag.

    Args:
        template: Stripped template text.
        overrides: Object key -> raw value (e.g. ``{"color": "#333"}``).

    Returns:
        The spliced template, the template unchanged when there is nothing to
        override, or None when overrides exist but the template has no
        opening tag to carry them.
    """
    if not overrides:
        return template

    tag = locate_opening_tag(template)
    if tag is None:
        return None

    opening = template[: tag.end]
    existing = find_style_attribute(opening)
    declarations: dict[str, str | None] = dict(existing.declarations) if existing else {}
    for key, value in overrides.items():
        declarations[key] = format_style_value(value)
    attribute = render_style_attribute(declarations)

    if existing is not None:
        return template[: existing.start] + attribute + template[existing.end :]

    insert_at = tag.end - 1 if tag.self_closing else tag.end
    head = template[:insert_at].rstrip()
    spacer = " " if tag.self_closing else ""
    return f"{head} {attribute}{spacer}{template[insert_at:]}"
