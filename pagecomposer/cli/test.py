"""Unit tests for script replay."""

import json

import pytest
from pydantic import ValidationError

from pagecomposer.catalog import CatalogError
from pagecomposer.cli import (
    ScriptError,
    build_command,
    load_script,
    replay_script,
    resolve_catalog,
)
from pagecomposer.document import ContainerNode
from pagecomposer.editor import GROUPED_MESSAGE, AddNode, RecordingNotificationSink

GROUP_SCRIPT = [
    {"op": "add", "category": "Buttons", "name": "PrimaryButton"},
    {"op": "add", "category": "Buttons", "name": "OutlineButton"},
    {"op": "toggle_multi_select", "node_id": "buttons-primarybutton-1"},
    {"op": "toggle_multi_select", "node_id": "buttons-outlinebutton-2"},
    {"op": "group", "layout_kind": "flex-row"},
]


class TestResolveCatalog:
    """Tests for catalog resolution."""

    @pytest.mark.unit
    def test_builtin_catalog(self):
        """Without configuration the built-in catalog is used."""
        assert "Buttons" in resolve_catalog()

    @pytest.mark.unit
    def test_environment_path(self, tmp_path, monkeypatch):
        """PAGECOMPOSER_CATALOG_PATH points at a catalog file."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"Widgets": [{"name": "W", "code": "<w/>"}]}))
        monkeypatch.setenv("PAGECOMPOSER_CATALOG_PATH", str(path))
        assert resolve_catalog().categories() == ["Widgets"]

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        """A configured but missing file is an error."""
        with pytest.raises(CatalogError):
            resolve_catalog(tmp_path / "missing.json")


class TestLoadScript:
    """Tests for load_script function."""

    @pytest.mark.unit
    def test_list_script(self, tmp_path):
        """Plain lists are accepted."""
        path = tmp_path / "script.json"
        path.write_text(json.dumps(GROUP_SCRIPT))
        assert load_script(path) == GROUP_SCRIPT

    @pytest.mark.unit
    def test_object_script(self, tmp_path):
        """Objects with a commands list are accepted."""
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"commands": GROUP_SCRIPT}))
        assert len(load_script(path)) == 5

    @pytest.mark.unit
    @pytest.mark.parametrize("content", ["{not json", '{"steps": []}', "[1, 2]"])
    def test_bad_scripts(self, tmp_path, content):
        """Malformed scripts raise ScriptError."""
        path = tmp_path / "script.json"
        path.write_text(content)
        with pytest.raises(ScriptError):
            load_script(path)

    @pytest.mark.unit
    def test_missing_script(self, tmp_path):
        """Missing files raise ScriptError."""
        with pytest.raises(ScriptError):
            load_script(tmp_path / "nope.json")


class TestBuildCommand:
    """Tests for build_command function."""

    @pytest.mark.unit
    def test_add_shorthand(self):
        """Add steps may name a catalog item."""
        catalog = resolve_catalog()
        command = build_command(
            {"op": "add", "category": "Buttons", "name": "PrimaryButton"}, catalog
        )
        assert isinstance(command, AddNode)
        assert command.item == catalog.get_item("Buttons", "PrimaryButton")

    @pytest.mark.unit
    def test_unknown_item(self):
        """Unknown catalog items raise KeyError."""
        with pytest.raises(KeyError):
            build_command(
                {"op": "add", "category": "Buttons", "name": "Nope"}, resolve_catalog()
            )

    @pytest.mark.unit
    def test_malformed_step(self):
        """Steps missing fields fail validation."""
        with pytest.raises(ValidationError):
            build_command({"op": "remove"}, resolve_catalog())


class TestReplayScript:
    """Tests for replay_script function."""

    @pytest.mark.unit
    def test_group_script(self):
        """Replaying the group script yields one flex-row container."""
        sink = RecordingNotificationSink()
        editor = replay_script(GROUP_SCRIPT, resolve_catalog(), notifications=sink)

        assert len(editor.document.nodes) == 1
        container = editor.document.nodes[0]
        assert isinstance(container, ContainerNode)
        assert [c.id for c in container.children] == [
            "buttons-primarybutton-1",
            "buttons-outlinebutton-2",
        ]
        assert container.id == "container-3"
        assert sink.messages == [GROUPED_MESSAGE]

    @pytest.mark.unit
    def test_noop_steps_continue(self):
        """Steps without effect do not stop the replay."""
        editor = replay_script(
            [
                {"op": "remove", "node_id": "missing"},
                {"op": "add", "category": "Buttons", "name": "PrimaryButton"},
            ],
            resolve_catalog(),
        )
        assert editor.document.top_level_ids() == ["buttons-primarybutton-1"]
