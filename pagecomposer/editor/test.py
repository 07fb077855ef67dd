"""Unit tests for the mutation API."""

import pytest
from pydantic import ValidationError

from pagecomposer.catalog import CatalogItem
from pagecomposer.document import ContainerNode, Document, LeafNode
from pagecomposer.selection import SelectionState

from .commands import (
    AddNode,
    GroupNodes,
    ReorderNodes,
    SelectNode,
    UpdateProps,
    parse_command,
)
from .lib import (
    COPIED_MESSAGE,
    GROUPED_MESSAGE,
    UNGROUPED_MESSAGE,
    Editor,
    EditorState,
    apply_command,
)
from .sinks import FileClipboard, MemoryClipboard, RecordingNotificationSink


def _leaf(node_id: str) -> LeafNode:
    return LeafNode(
        id=node_id,
        source_type="PrimaryButton",
        category="Buttons",
        fragment_template=f"<button>{node_id}</button>",
    )


def _state(*node_ids: str, multi: tuple[str, ...] = ()) -> EditorState:
    return EditorState(
        document=Document(nodes=tuple(_leaf(i) for i in node_ids)),
        selection=SelectionState(multi_selected=multi),
    )


def _ids(state: EditorState) -> list[str]:
    return state.document.top_level_ids()


class TestAdd:
    """Tests for adding leaves."""

    @pytest.mark.unit
    def test_add_appends_leaf(self, editor, button_item):
        """A new leaf with empty style is appended."""
        leaf_id = editor.add(button_item, "Buttons")

        assert leaf_id == "buttons-primarybutton-1"
        node = editor.document.nodes[-1]
        assert isinstance(node, LeafNode)
        assert node.source_type == "PrimaryButton"
        assert node.fragment_template == "<button>Click</button>"
        assert node.style.to_patch() == {}

    @pytest.mark.unit
    def test_ids_are_unique(self, editor, button_item):
        """Adding the same item twice yields distinct ids."""
        first = editor.add(button_item, "Buttons")
        second = editor.add(button_item, "Buttons")
        assert first != second
        assert _ids(editor.state) == [first, second]

    @pytest.mark.unit
    def test_explicit_duplicate_id_is_noop(self, button_item):
        """An explicit id already in use is rejected silently."""
        state = _state("a")
        result = apply_command(
            state, AddNode(category="Buttons", item=button_item, node_id="a")
        )
        assert not result.changed
        assert result.state is state


class TestRemove:
    """Tests for removing nodes."""

    @pytest.mark.unit
    def test_remove_top_level(self):
        """Top-level nodes are removed and forgotten by the selection."""
        state = EditorState(
            document=_state("a", "b").document,
            selection=SelectionState(selected_id="a", multi_selected=("a", "b")),
        )
        result = apply_command(state, parse_command({"op": "remove", "node_id": "a"}))

        assert _ids(result.state) == ["b"]
        assert result.state.selection.selected_id is None
        assert result.state.selection.multi_selected == ("b",)

    @pytest.mark.unit
    def test_remove_keeps_other_selection(self):
        """Removing another node leaves the single selection alone."""
        state = EditorState(
            document=_state("a", "b").document,
            selection=SelectionState(selected_id="b"),
        )
        result = apply_command(state, parse_command({"op": "remove", "node_id": "a"}))
        assert result.state.selection.selected_id == "b"

    @pytest.mark.unit
    def test_remove_unknown_is_noop(self):
        """Unknown ids leave the very same snapshot."""
        state = _state("a")
        result = apply_command(state, parse_command({"op": "remove", "node_id": "zz"}))
        assert result.state is state
        assert not result.changed

    @pytest.mark.unit
    def test_remove_nested_is_noop(self):
        """Children inside a container are not removed."""
        container = ContainerNode(
            id="c", layout_kind="flex-row", children=(_leaf("a"),)
        )
        state = EditorState(document=Document(nodes=(container,)))
        result = apply_command(state, parse_command({"op": "remove", "node_id": "a"}))
        assert result.state is state


class TestReorder:
    """Tests for drag-and-drop reordering."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("active", "over", "expected"),
        [
            ("a", "c", ["b", "c", "a", "d"]),
            ("d", "b", ["a", "d", "b", "c"]),
            ("b", "c", ["a", "c", "b", "d"]),
            ("c", "a", ["c", "a", "b", "d"]),
        ],
    )
    def test_moves_to_target_index(self, active, over, expected):
        """The active node lands exactly where the target was."""
        state = _state("a", "b", "c", "d")
        target_index = _ids(state).index(over)

        result = apply_command(state, ReorderNodes(active_id=active, over_id=over))

        assert _ids(result.state) == expected
        assert _ids(result.state).index(active) == target_index
        assert sorted(_ids(result.state)) == sorted(_ids(state))

    @pytest.mark.unit
    def test_relative_order_preserved(self):
        """Nodes other than the active one keep their relative order."""
        state = _state("a", "b", "c", "d", "e")
        result = apply_command(state, ReorderNodes(active_id="b", over_id="e"))
        others = [i for i in _ids(result.state) if i != "b"]
        assert others == ["a", "c", "d", "e"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("active", "over"),
        [("a", "a"), ("a", None), ("a", "zz"), ("zz", "a")],
    )
    def test_invalid_drops_are_noops(self, active, over):
        """Missing, equal or absent targets leave the snapshot alone."""
        state = _state("a", "b")
        result = apply_command(state, ReorderNodes(active_id=active, over_id=over))
        assert result.state is state
        assert not result.changed


class TestUpdateProps:
    """Tests for style patches."""

    @pytest.mark.unit
    def test_shallow_merge(self):
        """Patches merge into existing style without touching other keys."""
        state = _state("a")
        state = apply_command(
            state, UpdateProps(node_id="a", patch={"bgColor": "#fff"})
        ).state
        state = apply_command(
            state, UpdateProps(node_id="a", patch={"marginTop": "4px"})
        ).state

        style = state.document.find("a").style
        assert style.bg_color == "#fff"
        assert style.margin_top == "4px"

    @pytest.mark.unit
    def test_updates_container_child(self):
        """Children are found one level into containers."""
        container = ContainerNode(
            id="c", layout_kind="flex-row", children=(_leaf("a"), _leaf("b"))
        )
        state = EditorState(document=Document(nodes=(container,)))
        result = apply_command(
            state, UpdateProps(node_id="b", patch={"paddingTop": "8px"})
        )

        updated = result.state.document.nodes[0]
        assert updated.children[1].style.padding_top == "8px"
        assert updated.children[0].style.padding_top is None
        assert updated.id == "c"

    @pytest.mark.unit
    def test_no_value_validation(self):
        """Values are stored as given."""
        result = apply_command(
            _state("a"), UpdateProps(node_id="a", patch={"width": "banana"})
        )
        assert result.state.document.find("a").style.width == "banana"

    @pytest.mark.unit
    def test_numeric_values_generate(self, editor, button_item):
        """Numbers in a patch never break generation."""
        leaf_id = editor.add(button_item, "Buttons")
        editor.update_props(leaf_id, {"width": 100, "marginTop": 0})

        assert editor.find_node(leaf_id).style.width == "100"
        markup = editor.generate()
        assert "width: '100'" in markup
        assert "marginTop" not in markup

    @pytest.mark.unit
    def test_numeric_patch_from_script(self):
        """Script patches with numbers validate and store text."""
        result = apply_command(
            _state("a"),
            parse_command(
                {"op": "update_props", "node_id": "a", "patch": {"paddingTop": 8}}
            ),
        )
        assert result.state.document.find("a").style.padding_top == "8"

    @pytest.mark.unit
    def test_unknown_id_is_noop(self):
        """Unknown ids are ignored."""
        state = _state("a")
        result = apply_command(state, UpdateProps(node_id="x", patch={"width": "1px"}))
        assert result.state is state


class TestSetAlignment:
    """Tests for alignment changes."""

    @pytest.mark.unit
    def test_sets_half_width_when_unset(self):
        """Aligning a leaf without width sets width to 50%."""
        result = apply_command(
            _state("a"), parse_command(
                {"op": "set_alignment", "node_id": "a", "alignment": "center"}
            )
        )
        style = result.state.document.find("a").style
        assert style.alignment == "center"
        assert style.width == "50%"

    @pytest.mark.unit
    def test_keeps_explicit_width(self):
        """An explicit width survives alignment changes."""
        state = apply_command(
            _state("a"), UpdateProps(node_id="a", patch={"width": "200px"})
        ).state
        result = apply_command(
            state,
            parse_command({"op": "set_alignment", "node_id": "a", "alignment": "right"}),
        )
        assert result.state.document.find("a").style.width == "200px"

    @pytest.mark.unit
    def test_invalid_alignment_rejected(self):
        """Unknown alignment values fail validation."""
        with pytest.raises(ValidationError):
            parse_command({"op": "set_alignment", "node_id": "a", "alignment": "up"})


class TestGroup:
    """Tests for grouping."""

    @pytest.mark.unit
    def test_group_two_leaves(self):
        """Two selected leaves become one container with default style."""
        state = _state("a", "b", multi=("a", "b"))
        result = apply_command(state, GroupNodes(layout_kind="flex-row"))

        assert len(result.state.document.nodes) == 1
        container = result.state.document.nodes[0]
        assert isinstance(container, ContainerNode)
        assert container.layout_kind == "flex-row"
        assert [child.id for child in container.children] == ["a", "b"]
        assert container.style.to_patch() == {
            "gap": "4",
            "justify": "start",
            "alignItems": "start",
            "flexWrap": "nowrap",
        }
        assert result.state.selection.selected_id == container.id
        assert result.state.selection.multi_selected == ()
        assert result.notifications == [GROUPED_MESSAGE]

    @pytest.mark.unit
    def test_children_keep_document_order(self):
        """Children follow document order, not click order."""
        state = _state("a", "b", "c", multi=("c", "a"))
        result = apply_command(state, GroupNodes(layout_kind="grid-2", node_id="g"))
        container = result.state.document.get_top_level("g")
        assert [child.id for child in container.children] == ["a", "c"]

    @pytest.mark.unit
    def test_anchor_is_first_selected_id(self):
        """The container is inserted at the first selected id's old index."""
        state = _state("a", "b", "c", "d", multi=("c", "a"))
        result = apply_command(state, GroupNodes(layout_kind="flex-col", node_id="g"))
        # "c" was at index 2; remaining is [b, d]
        assert _ids(result.state) == ["b", "d", "g"]

    @pytest.mark.unit
    def test_anchor_past_end_is_clamped(self):
        """An anchor index beyond the remaining list appends the container."""
        state = _state("a", "b", "c", multi=("c", "a"))
        result = apply_command(state, GroupNodes(layout_kind="flex-col", node_id="g"))
        assert _ids(result.state) == ["b", "g"]

    @pytest.mark.unit
    def test_anchor_in_document_order_case(self):
        """Selecting in document order anchors at the first node."""
        state = _state("a", "b", "c", "d", multi=("b", "d"))
        result = apply_command(state, GroupNodes(layout_kind="flex-row", node_id="g"))
        assert _ids(result.state) == ["a", "g", "c"]

    @pytest.mark.unit
    def test_requires_two_selected(self):
        """A single selected id does not group."""
        state = _state("a", "b", multi=("a",))
        result = apply_command(state, GroupNodes(layout_kind="flex-row"))
        assert result.state is state

    @pytest.mark.unit
    def test_stale_ids_do_not_count(self):
        """Ids no longer at top level are ignored."""
        state = _state("a", "b", multi=("a", "gone"))
        result = apply_command(state, GroupNodes(layout_kind="flex-row"))
        assert result.state is state

    @pytest.mark.unit
    def test_nesting_is_forbidden(self):
        """Selecting an existing container blocks grouping."""
        container = ContainerNode(
            id="c", layout_kind="flex-row", children=(_leaf("x"),)
        )
        state = EditorState(
            document=Document(nodes=(container, _leaf("a"))),
            selection=SelectionState(multi_selected=("c", "a")),
        )
        result = apply_command(state, GroupNodes(layout_kind="grid-3"))
        assert result.state is state
        assert not result.changed

    @pytest.mark.unit
    def test_generated_container_id_is_unique(self):
        """Generated container ids never collide with existing ids."""
        state = _state("container-1", "b", multi=("container-1", "b"))
        result = apply_command(state, GroupNodes(layout_kind="flex-row"))
        new_id = result.state.selection.selected_id
        assert new_id.startswith("container-")
        assert new_id != "container-1"


class TestUngroup:
    """Tests for ungrouping."""

    @pytest.mark.unit
    def test_children_spliced_at_container_index(self):
        """Children replace the container in stored order."""
        container = ContainerNode(
            id="c", layout_kind="flex-row", children=(_leaf("x"), _leaf("y"))
        )
        state = EditorState(
            document=Document(nodes=(_leaf("a"), container, _leaf("b"))),
            selection=SelectionState(selected_id="c"),
        )
        result = apply_command(state, parse_command({"op": "ungroup", "node_id": "c"}))

        assert _ids(result.state) == ["a", "x", "y", "b"]
        assert result.state.selection.selected_id is None
        assert result.notifications == [UNGROUPED_MESSAGE]

    @pytest.mark.unit
    def test_ungroup_leaf_is_noop(self):
        """Leaves cannot be ungrouped."""
        state = _state("a")
        result = apply_command(state, parse_command({"op": "ungroup", "node_id": "a"}))
        assert result.state is state

    @pytest.mark.unit
    def test_round_trip(self):
        """Group then ungroup restores order and node set."""
        state = _state("a", "b", "c", "d", multi=("b", "c"))
        grouped = apply_command(state, GroupNodes(layout_kind="flex-row", node_id="g"))
        restored = apply_command(
            grouped.state, parse_command({"op": "ungroup", "node_id": "g"})
        )
        assert _ids(restored.state) == ["a", "b", "c", "d"]
        assert restored.state.document.nodes == state.document.nodes


class TestCommandParsing:
    """Tests for command validation."""

    @pytest.mark.unit
    def test_unknown_op(self):
        """Unknown ops fail validation."""
        with pytest.raises(ValidationError):
            parse_command({"op": "explode"})

    @pytest.mark.unit
    def test_add_accepts_code_alias(self):
        """Catalog items in scripts may use the 'code' key."""
        command = parse_command(
            {
                "op": "add",
                "category": "Buttons",
                "item": {"name": "PrimaryButton", "code": "<button>Click</button>"},
            }
        )
        assert isinstance(command, AddNode)
        assert command.item.fragment_template == "<button>Click</button>"

    @pytest.mark.unit
    def test_invalid_layout_kind(self):
        """Layout kinds are validated."""
        with pytest.raises(ValidationError):
            parse_command({"op": "group", "layout_kind": "grid-9"})


class TestEditor:
    """Tests for the Editor session."""

    @pytest.mark.unit
    def test_scenario_add_then_style(self, editor, button_item):
        """Margins land on the wrapper and colors on the fragment."""
        leaf_id = editor.add(button_item, "Buttons")
        markup = editor.generate()
        assert "    <div>\n      <button>Click</button>\n    </div>" in markup

        editor.update_props(leaf_id, {"bgColor": "#ff0000", "marginTop": "16px"})
        markup = editor.generate()
        assert "    <div style={{ marginTop: '16px' }}>" in markup
        assert "<button style={{ backgroundColor: '#ff0000' }}>Click</button>" in markup

    @pytest.mark.unit
    def test_scenario_group(self, editor, button_item):
        """Two multi-selected leaves group into a flex row."""
        first = editor.add(button_item, "Buttons")
        second = editor.add(button_item, "Buttons")
        editor.toggle_multi_select(first)
        editor.toggle_multi_select(second)

        container_id = editor.group("flex-row")

        assert container_id is not None
        assert editor.document.top_level_ids() == [container_id]
        container = editor.find_node(container_id)
        assert [c.id for c in container.children] == [first, second]
        assert editor.selection.selected_id == container_id
        assert editor.notifications.messages == [GROUPED_MESSAGE]

    @pytest.mark.unit
    def test_subscribers_receive_snapshots(self, editor, button_item):
        """Each change publishes the new snapshot."""
        received: list[EditorState] = []
        editor.subscribe(received.append)

        editor.add(button_item, "Buttons")

        assert received == [editor.state]

    @pytest.mark.unit
    def test_noop_publishes_nothing(self, editor, button_item):
        """No-ops keep the same snapshot and notify nobody."""
        editor.add(button_item, "Buttons")
        before = editor.state
        received: list[EditorState] = []
        editor.subscribe(received.append)

        assert not editor.reorder("missing", None)
        assert not editor.remove("missing")
        assert editor.group("flex-row") is None

        assert editor.state is before
        assert received == []
        assert editor.notifications.messages == []

    @pytest.mark.unit
    def test_unsubscribe(self, editor, button_item):
        """Unsubscribed listeners are not called."""
        received: list[EditorState] = []
        unsubscribe = editor.subscribe(received.append)
        unsubscribe()
        editor.add(button_item, "Buttons")
        assert received == []

    @pytest.mark.unit
    def test_select_and_clear(self, editor, button_item):
        """Single selection is independent of multi-selection."""
        leaf_id = editor.add(button_item, "Buttons")
        editor.toggle_multi_select(leaf_id)
        editor.select(leaf_id)
        assert editor.selection.selected_id == leaf_id

        editor.clear_selection()
        assert editor.selection.selected_id is None
        assert editor.selection.multi_selected == (leaf_id,)

    @pytest.mark.unit
    def test_dispatch_returns_result(self, editor):
        """dispatch exposes the command result."""
        result = editor.dispatch(SelectNode(node_id="anything"))
        assert result.changed
        assert editor.selection.selected_id == "anything"

    @pytest.mark.unit
    def test_copy_code(self, editor, button_item):
        """Copying writes the markup verbatim and notifies."""
        editor.add(button_item, "Buttons")
        markup = editor.copy_code()

        assert editor.clipboard.text == markup
        assert markup == editor.generate()
        assert editor.notifications.messages == [COPIED_MESSAGE]

    @pytest.mark.unit
    def test_copy_code_semantic(self, editor):
        """Semantic copies use the main root tag."""
        editor.add(CatalogItem(name="Logo", code="<h1>Logo</h1>"), "Headers")
        markup = editor.copy_code(semantic=True)
        assert markup.startswith("<main")
        assert "<header>" in markup

    @pytest.mark.unit
    def test_copy_code_empty_document(self, editor):
        """An empty document copies the placeholder comment."""
        markup = editor.copy_code()
        assert markup.startswith("// No components added yet.")

    @pytest.mark.unit
    def test_copy_code_requires_clipboard(self):
        """Copying without a clipboard sink is a programmer error."""
        with pytest.raises(RuntimeError):
            Editor().copy_code()

    @pytest.mark.unit
    def test_semantic_default_from_environment(self, editor, button_item, monkeypatch):
        """PAGECOMPOSER_SEMANTIC_HTML sets the default tag mode."""
        monkeypatch.setenv("PAGECOMPOSER_SEMANTIC_HTML", "true")
        editor.add(button_item, "Buttons")
        assert editor.generate().startswith("<main")
        assert editor.generate(semantic=False).startswith("<div")


class TestSinks:
    """Tests for the bundled sinks."""

    @pytest.mark.unit
    def test_recording_sink(self):
        """Messages are kept in order."""
        sink = RecordingNotificationSink()
        sink.notify("one")
        sink.notify("two")
        assert sink.messages == ["one", "two"]

    @pytest.mark.unit
    def test_memory_clipboard(self):
        """The last write wins."""
        clipboard = MemoryClipboard()
        clipboard.write("a")
        clipboard.write("b")
        assert clipboard.text == "b"

    @pytest.mark.unit
    def test_file_clipboard(self, tmp_path):
        """File clipboards create parents and overwrite."""
        target = tmp_path / "out" / "page.jsx"
        clipboard = FileClipboard(target)
        clipboard.write("first")
        clipboard.write("second")
        assert target.read_text(encoding="utf-8") == "second"
