"""Markup generation for page documents.

Turns a `Document` into JSX-flavoured markup source: wrapper classes are
emitted as ``className="..."`` and inline styles as ``style={{ ... }}``.

Style precedence:
    Leaf wrapper:     margins (never merged into the fragment) + alignment
                      utility classes.
    Leaf fragment:    the fragment's own style, overridden by colors,
                      dimensions and padding from the node's style props.
    Container:        layout utility classes + background and padding.
    Container child:  fragment overrides as for leaves, plus margins merged
                      into the fragment (children have no wrapper).

Sentinel values ('0', 'auto', 'none') are never emitted.
"""

from dataclasses import dataclass, field

from pagecomposer.core.log import get_logger
from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.schema import (
    GENERIC_TAG,
    MAIN_TAG,
    MARGIN_FIELDS,
    PADDING_FIELDS,
    Alignment,
    LayoutKind,
    StyleProps,
    get_semantic_tag,
)

from .splice import format_style_value, inject_style

logger = get_logger(__name__)

EMPTY_DOCUMENT_PLACEHOLDER = (
    "// No components added yet. Add components from the library to generate code."
)
EMPTY_CONTAINER_PLACEHOLDER = "{/* Empty container */}"
PAGE_SURFACE_CLASSES = "min-h-screen bg-gray-50 dark:bg-slate-800"
PAGE_STACK_CLASSES = "w-full space-y-0"
DEFAULT_INDENT_WIDTH = 2

# StyleProps field -> style object key
STYLE_KEYS: dict[str, str] = {
    "bg_color": "backgroundColor",
    "text_color": "color",
    "border_color": "borderColor",
    "width": "width",
    "height": "height",
    "max_width": "maxWidth",
    "min_height": "minHeight",
    "margin_top": "marginTop",
    "margin_right": "marginRight",
    "margin_bottom": "marginBottom",
    "margin_left": "marginLeft",
    "padding_top": "paddingTop",
    "padding_right": "paddingRight",
    "padding_bottom": "paddingBottom",
    "padding_left": "paddingLeft",
}

FRAGMENT_FIELDS: tuple[str, ...] = (
    "bg_color",
    "text_color",
    "border_color",
    "width",
    "height",
    "max_width",
    "min_height",
    *PADDING_FIELDS,
)
CONTAINER_STYLE_FIELDS: tuple[str, ...] = ("bg_color", *PADDING_FIELDS)

ALIGNMENT_CLASSES: dict[str, tuple[str, ...]] = {
    Alignment.LEFT.value: ("flex", "justify-start"),
    Alignment.CENTER.value: ("flex", "justify-center"),
    Alignment.RIGHT.value: ("flex", "justify-end"),
    Alignment.JUSTIFY.value: ("flex",),
}


@dataclass
class GenerationWarning:
    """Warning emitted when a node's styling could not be represented.

    Attributes:
        node_id: ID of the node where the issue occurred.
        message: Human-readable explanation.
    """

    node_id: str
    message: str


@dataclass
class GenerationResult:
    """Generated markup plus any warnings.

    Attributes:
        markup: The generated markup source.
        warnings: Nodes whose overrides could not be spliced.
        semantic: Whether semantic tags were used.
    """

    markup: str
    warnings: list[GenerationWarning] = field(default_factory=list)
    semantic: bool = False

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were emitted."""
        return len(self.warnings) > 0


def collect_declarations(style: StyleProps, fields: tuple[str, ...]) -> dict[str, str]:
    """Collect set, non-sentinel fields as style object declarations.

    Args:
        style: Node style props.
        fields: Fields to consider, in emission order.

    Returns:
        Ordered mapping of style object key to raw value.
    """
    declarations: dict[str, str] = {}
    for name in fields:
        value = style.get(name)
        if value is not None:
            declarations[STYLE_KEYS[name]] = value
    return declarations


def _style_attribute(declarations: dict[str, str]) -> str:
    if not declarations:
        return ""
    body = ", ".join(
        f"{key}: {format_style_value(value)}" for key, value in declarations.items()
    )
    return f" style={{{{ {body} }}}}"


def _class_attribute(classes: list[str] | tuple[str, ...]) -> str:
    if not classes:
        return ""
    return f' className="{" ".join(classes)}"'


def _indent_block(text: str, prefix: str) -> str:
    return "\n".join(prefix + line if line.strip() else "" for line in text.split("\n"))


class MarkupGenerator:
    """Generates page markup from a document.

    Generation is a pure function of the document and the generator's
    settings: the same inputs always produce byte-identical output.

    Example:
        >>> generator = MarkupGenerator(semantic=True)
        >>> result = generator.generate(document)
        >>> print(result.markup)
    """

    def __init__(self, semantic: bool = False, indent_width: int = DEFAULT_INDENT_WIDTH):
        """Initialize generator.

        Args:
            semantic: Use category-specific tags instead of div.
            indent_width: Spaces per nesting level.
        """
        self.semantic = semantic
        self._unit = " " * max(1, indent_width)

    def generate(self, document: Document) -> GenerationResult:
        """Generate markup for a whole document.

        Args:
            document: Document snapshot to serialize.

        Returns:
            GenerationResult with markup and warnings.
        """
        if document.is_empty:
            return GenerationResult(
                markup=EMPTY_DOCUMENT_PLACEHOLDER, semantic=self.semantic
            )

        warnings: list[GenerationWarning] = []
        level = self._unit * 2
        entries = [
            self._emit_container(node, level, warnings)
            if isinstance(node, ContainerNode)
            else self._emit_leaf(node, level, warnings)
            for node in document.nodes
        ]

        root = MAIN_TAG if self.semantic else GENERIC_TAG
        markup = "\n".join(
            [
                f'<{root} className="{PAGE_SURFACE_CLASSES}">',
                f'{self._unit}<div className="{PAGE_STACK_CLASSES}">',
                "\n\n".join(entries),
                f"{self._unit}</div>",
                f"</{root}>",
            ]
        )
        for warning in warnings:
            logger.warning(f"Node {warning.node_id}: {warning.message}")
        return GenerationResult(markup=markup, warnings=warnings, semantic=self.semantic)

    def _tag_for(self, category: str) -> str:
        return get_semantic_tag(category) if self.semantic else GENERIC_TAG

    def _styled_fragment(
        self,
        node: LeafNode,
        overrides: dict[str, str],
        warnings: list[GenerationWarning],
    ) -> str:
        template = node.fragment_template.strip()
        spliced = inject_style(template, overrides)
        if spliced is None:
            warnings.append(
                GenerationWarning(
                    node_id=node.id,
                    message="template has no opening tag; style overrides dropped",
                )
            )
            return template
        return spliced

    def _emit_leaf(
        self, node: LeafNode, indent: str, warnings: list[GenerationWarning]
    ) -> str:
        tag = self._tag_for(node.category)
        alignment = node.style.get("alignment")
        wrapper_classes = ALIGNMENT_CLASSES.get(alignment, ()) if alignment else ()
        wrapper_style = collect_declarations(node.style, MARGIN_FIELDS)

        fragment = self._styled_fragment(
            node, collect_declarations(node.style, FRAGMENT_FIELDS), warnings
        )
        return "\n".join(
            [
                f"{indent}<{tag}{_class_attribute(wrapper_classes)}"
                f"{_style_attribute(wrapper_style)}>",
                _indent_block(fragment, indent + self._unit),
                f"{indent}</{tag}>",
            ]
        )

    def _container_classes(self, node: ContainerNode) -> list[str]:
        style = node.style
        classes = ["w-full", *LayoutKind(node.layout_kind).utility_classes]
        classes.append(f"gap-{style.gap or '4'}")
        justify = style.get("justify")
        if justify:
            classes.append(f"justify-{justify}")
        align_items = style.get("align_items")
        if align_items:
            classes.append(f"items-{align_items}")
        if style.get("flex_wrap") == "wrap":
            classes.append("flex-wrap")
        return classes

    def _emit_container(
        self, node: ContainerNode, indent: str, warnings: list[GenerationWarning]
    ) -> str:
        tag = self._tag_for(node.category)
        child_indent = indent + self._unit
        opening = (
            f"{indent}<{tag}{_class_attribute(self._container_classes(node))}"
            f"{_style_attribute(collect_declarations(node.style, CONTAINER_STYLE_FIELDS))}>"
        )

        if node.children:
            children = "\n\n".join(
                _indent_block(
                    self._styled_fragment(
                        child,
                        collect_declarations(
                            child.style, FRAGMENT_FIELDS + MARGIN_FIELDS
                        ),
                        warnings,
                    ),
                    child_indent,
                )
                for child in node.children
            )
        else:
            children = child_indent + EMPTY_CONTAINER_PLACEHOLDER

        return "\n".join([opening, children, f"{indent}</{tag}>"])


def generate_markup(
    document: Document,
    semantic: bool = False,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Generate markup source for a document.

    Args:
        document: Document snapshot.
        semantic: Use semantic tags (header, nav, ...) instead of div.
        indent_width: Spaces per nesting level.

    Returns:
        str: Markup text, or a placeholder comment for an empty document.
    """
    return MarkupGenerator(semantic=semantic, indent_width=indent_width).generate(
        document
    ).markup


__all__ = [
    "EMPTY_DOCUMENT_PLACEHOLDER",
    "EMPTY_CONTAINER_PLACEHOLDER",
    "PAGE_SURFACE_CLASSES",
    "GenerationResult",
    "GenerationWarning",
    "MarkupGenerator",
    "collect_declarations",
    "generate_markup",
]
