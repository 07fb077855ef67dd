"""Unit tests for the selection state machine."""

import pytest

from pagecomposer.selection import SelectionPhase, SelectionState


class TestSingleSelection:
    """Tests for the single-selection track."""

    @pytest.mark.unit
    def test_starts_idle(self):
        """Fresh state is idle with nothing ticked."""
        state = SelectionState()
        assert state.phase == SelectionPhase.IDLE
        assert state.multi_selected == ()

    @pytest.mark.unit
    def test_select_and_clear(self):
        """select() and clear() move between phases."""
        state = SelectionState().select("a")
        assert state.phase == SelectionPhase.SINGLE
        assert state.selected_id == "a"
        assert state.clear().phase == SelectionPhase.IDLE

    @pytest.mark.unit
    def test_select_leaves_multi_selection(self):
        """Single selection is independent of multi-selection."""
        state = SelectionState().toggle("a").toggle("b").select("c")
        assert state.multi_selected == ("a", "b")
        assert state.clear().multi_selected == ("a", "b")

    @pytest.mark.unit
    def test_transforms_do_not_mutate(self):
        """Each transform returns a new snapshot."""
        state = SelectionState()
        state.select("a")
        assert state.selected_id is None


class TestMultiSelection:
    """Tests for the multi-selection track."""

    @pytest.mark.unit
    def test_toggle_is_symmetric(self):
        """Toggling twice removes the id."""
        state = SelectionState().toggle("a")
        assert state.is_multi_selected("a")
        assert not state.toggle("a").is_multi_selected("a")

    @pytest.mark.unit
    def test_preserves_click_order(self):
        """Ids stay in the order they were ticked."""
        state = SelectionState().toggle("c").toggle("a").toggle("b").toggle("a")
        assert state.multi_selected == ("c", "b")

    @pytest.mark.unit
    def test_can_group_needs_two(self):
        """Grouping needs at least two ticked ids."""
        assert not SelectionState().toggle("a").can_group
        assert SelectionState().toggle("a").toggle("b").can_group


class TestTransitions:
    """Tests for group/ungroup transitions."""

    @pytest.mark.unit
    def test_after_group(self):
        """Grouping clears ticks and selects the container."""
        state = SelectionState().toggle("a").toggle("b").after_group("container-1")
        assert state.selected_id == "container-1"
        assert state.multi_selected == ()

    @pytest.mark.unit
    def test_after_ungroup(self):
        """Ungrouping returns to idle."""
        state = SelectionState().select("container-1").after_ungroup()
        assert state.phase == SelectionPhase.IDLE

    @pytest.mark.unit
    def test_forget(self):
        """Forgetting a node drops it from both tracks."""
        state = SelectionState().select("a").toggle("a").toggle("b").forget("a")
        assert state.selected_id is None
        assert state.multi_selected == ("b",)

    @pytest.mark.unit
    def test_forget_other_keeps_selection(self):
        """Forgetting an unrelated node keeps the selection."""
        state = SelectionState().select("a").forget("b")
        assert state.selected_id == "a"
