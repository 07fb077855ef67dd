"""Core document models for page composition.

A document is an ordered list of top-level nodes. Each node is either a
leaf wrapping one catalog fragment, or a container laying out a flat list of
leaves. Both variants share an id space and carry their own `StyleProps`.

All models are immutable; mutations produce new instances (see
`pagecomposer.editor`).
"""

import itertools
import re
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from pagecomposer.schema import (
    CONTAINER_CATEGORY,
    CONTAINER_DEFAULTS,
    LayoutKind,
    StyleProps,
)


class LeafNode(BaseModel):
    """A node wrapping one catalog-sourced markup fragment.

    Attributes:
        kind: Variant tag, always "leaf".
        id: Unique identifier across the whole document.
        source_type: Name of the catalog item this leaf was created from.
        category: Catalog category (drives semantic tag selection).
        fragment_template: Opaque markup text owned by the catalog.
        style: Per-node style overrides.

    Example:
        >>> leaf = LeafNode(
        ...     id="Buttons-primarybutton-1",
        ...     source_type="PrimaryButton",
        ...     category="Buttons",
        ...     fragment_template="<button>Click</button>",
        ... )
    """

    kind: Literal["leaf"] = "leaf"
    id: str = Field(..., description="Unique identifier for the node")
    source_type: str = Field(..., description="Catalog item name")
    category: str = Field(..., description="Catalog category")
    fragment_template: str = Field(..., description="Opaque markup fragment")
    style: StyleProps = Field(default_factory=StyleProps)

    model_config = ConfigDict(frozen=True)


class ContainerNode(BaseModel):
    """A node laying out a flat list of leaves.

    Attributes:
        kind: Variant tag, always "container".
        id: Unique identifier across the whole document.
        category: Always "Container".
        layout_kind: Layout applied to the children.
        children: Ordered leaf children.
        style: Per-node style overrides (container fields included).
    """

    kind: Literal["container"] = "container"
    id: str = Field(..., description="Unique identifier for the node")
    category: Literal["Container"] = CONTAINER_CATEGORY
    layout_kind: LayoutKind = Field(..., description="Layout for the children")
    children: tuple[LeafNode, ...] = Field(default_factory=tuple)
    style: StyleProps = Field(
        default_factory=lambda: StyleProps(**CONTAINER_DEFAULTS)
    )

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @property
    def display_name(self) -> str:
        """Human-readable container name (e.g. "Flex Row")."""
        return LayoutKind(self.layout_kind).display_name


Node = Annotated[Union[LeafNode, ContainerNode], Field(discriminator="kind")]


class Document(BaseModel):
    """Ordered sequence of top-level nodes.

    Attributes:
        nodes: Top-level nodes in page order.

    Example:
        >>> doc = Document()
        >>> doc.is_empty
        True
    """

    nodes: tuple[Node, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """Whether the document has no top-level nodes."""
        return not self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def top_level_ids(self) -> list[str]:
        """Ids of the top-level nodes, in order."""
        return [node.id for node in self.nodes]

    def iter_nodes(self) -> Iterator[LeafNode | ContainerNode]:
        """Iterate every node, containers before their children."""
        for node in self.nodes:
            yield node
            if isinstance(node, ContainerNode):
                yield from node.children

    def all_ids(self) -> set[str]:
        """Every id in the document, children included."""
        return {node.id for node in self.iter_nodes()}

    def index_of(self, node_id: str) -> int | None:
        """Top-level index of a node, or None if not at top level."""
        for index, node in enumerate(self.nodes):
            if node.id == node_id:
                return index
        return None

    def get_top_level(self, node_id: str) -> LeafNode | ContainerNode | None:
        """Find a node among the top-level nodes only."""
        index = self.index_of(node_id)
        return self.nodes[index] if index is not None else None

    def find(self, node_id: str) -> LeafNode | ContainerNode | None:
        """Find a node by id.

        Searches the top level first, then one level into each container.

        Args:
            node_id: Id to look up.

        Returns:
            The node, or None if no node has this id.
        """
        top = self.get_top_level(node_id)
        if top is not None:
            return top
        for node in self.nodes:
            if isinstance(node, ContainerNode):
                for child in node.children:
                    if child.id == node_id:
                        return child
        return None

    def parent_of(self, node_id: str) -> ContainerNode | None:
        """Container holding a child with this id, if any."""
        for node in self.nodes:
            if isinstance(node, ContainerNode) and any(
                child.id == node_id for child in node.children
            ):
                return node
        return None

    def with_nodes(self, nodes: list[LeafNode | ContainerNode]) -> "Document":
        """Return a new document with the given top-level nodes."""
        return self.model_copy(update={"nodes": tuple(nodes)})


# =============================================================================
# Id generation
# =============================================================================

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase a name and collapse non-alphanumerics to single dashes."""
    slug = _SLUG_PATTERN.sub("-", value.lower()).strip("-")
    return slug or "node"


class IdGenerator:
    """Monotonic id source for new nodes.

    Ids take the form ``{category}-{name}-{n}`` for leaves and
    ``container-{n}`` for containers, where ``n`` increases on every call.
    Callers pass the ids already in use so a collision with a node created
    elsewhere (e.g. a hand-built document) is skipped.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def _next(self, prefix: str, taken: set[str]) -> str:
        while True:
            candidate = f"{prefix}-{next(self._counter)}"
            if candidate not in taken:
                return candidate

    def leaf_id(self, category: str, name: str, taken: set[str]) -> str:
        """Generate a new leaf id."""
        return self._next(f"{slugify(category)}-{slugify(name)}", taken)

    def container_id(self, taken: set[str]) -> str:
        """Generate a new container id."""
        return self._next("container", taken)
