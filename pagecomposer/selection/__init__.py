"""Selection state for the property panel and grouping."""

from .lib import MIN_GROUP_SIZE, SelectionPhase, SelectionState

__all__ = ["SelectionState", "SelectionPhase", "MIN_GROUP_SIZE"]
