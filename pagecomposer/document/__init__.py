"""Document model: leaf and container nodes in page order."""

from .lib import (
    ContainerNode,
    Document,
    IdGenerator,
    LeafNode,
    Node,
    slugify,
)

__all__ = [
    "LeafNode",
    "ContainerNode",
    "Node",
    "Document",
    "IdGenerator",
    "slugify",
]
