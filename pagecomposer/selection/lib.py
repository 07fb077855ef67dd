"""Selection state machine.

Two independent tracks:
- Single selection drives the property panel (`Idle` or `SingleSelected`).
- Multi-selection is an insertion-ordered set that drives grouping.

Grouping and ungrouping move the single-selection track; nothing else
couples the two.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SelectionPhase(str, Enum):
    """Phase of the single-selection track."""

    IDLE = "idle"
    SINGLE = "single"


MIN_GROUP_SIZE = 2


class SelectionState(BaseModel):
    """Immutable selection snapshot.

    Attributes:
        selected_id: Id shown in the property panel, if any.
        multi_selected: Ids ticked for grouping, in click order.
    """

    selected_id: str | None = None
    multi_selected: tuple[str, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.IDLE if self.selected_id is None else SelectionPhase.SINGLE

    @property
    def can_group(self) -> bool:
        """Whether enough ids are ticked for a group to fire."""
        return len(self.multi_selected) >= MIN_GROUP_SIZE

    def is_multi_selected(self, node_id: str) -> bool:
        return node_id in self.multi_selected

    def select(self, node_id: str) -> "SelectionState":
        """Move to SingleSelected(node_id); multi-selection is untouched."""
        return self.model_copy(update={"selected_id": node_id})

    def clear(self) -> "SelectionState":
        """Move to Idle; multi-selection is untouched."""
        return self.model_copy(update={"selected_id": None})

    def toggle(self, node_id: str) -> "SelectionState":
        """Insert the id if absent, remove it if present."""
        if node_id in self.multi_selected:
            remaining = tuple(i for i in self.multi_selected if i != node_id)
        else:
            remaining = self.multi_selected + (node_id,)
        return self.model_copy(update={"multi_selected": remaining})

    def forget(self, node_id: str) -> "SelectionState":
        """Drop every reference to a node that left the document."""
        return self.model_copy(
            update={
                "selected_id": None if self.selected_id == node_id else self.selected_id,
                "multi_selected": tuple(
                    i for i in self.multi_selected if i != node_id
                ),
            }
        )

    def after_group(self, container_id: str) -> "SelectionState":
        """Grouped: multi-selection cleared, new container selected."""
        return SelectionState(selected_id=container_id)

    def after_ungroup(self) -> "SelectionState":
        """Ungrouped: back to Idle; multi-selection is untouched."""
        return self.clear()
