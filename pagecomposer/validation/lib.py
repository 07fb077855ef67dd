"""Document validation.

Checks a document for structural issues that the models alone cannot rule
out, such as ids repeated across containers or documents assembled with
`model_construct` that bypassed validation.
"""

from dataclasses import dataclass

from pagecomposer.document import ContainerNode, Document, LeafNode


@dataclass
class ValidationError:
    """Represents a validation error in a document.

    Attributes:
        node_id: ID of the node with the error.
        message: Human-readable error description.
        error_type: Category of the error.
    """

    node_id: str
    message: str
    error_type: str


def validate_document(document: Document) -> list[ValidationError]:
    """Validate a document for structural issues.

    Performs the following checks:
        - Unique ID enforcement across top level and container children
        - Containers hold leaves only (no nested containers)

    Args:
        document: Document to validate.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).

    Example:
        >>> errors = validate_document(editor.document)
        >>> for e in errors:
        ...     print(f"{e.node_id}: {e.message}")
    """
    errors: list[ValidationError] = []

    id_counts: dict[str, int] = {}
    for node in document.iter_nodes():
        id_counts[node.id] = id_counts.get(node.id, 0) + 1

    for node_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    node_id=node_id,
                    message=f"Duplicate ID '{node_id}' appears {count} times",
                    error_type="duplicate_id",
                )
            )

    errors.extend(_check_nesting(document))
    return errors


def is_valid(document: Document) -> bool:
    """Check if a document is valid.

    Args:
        document: Document to validate.

    Returns:
        bool: True if no validation errors exist.
    """
    return not validate_document(document)


def _check_nesting(document: Document) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for node in document.nodes:
        if not isinstance(node, ContainerNode):
            continue
        for child in node.children:
            if not isinstance(child, LeafNode):
                errors.append(
                    ValidationError(
                        node_id=child.id,
                        message=f"Container '{node.id}' holds non-leaf child '{child.id}'",
                        error_type="nested_container",
                    )
                )
    return errors
