"""Tests for the catalog, build and tree CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parents[2]

GROUP_SCRIPT = [
    {"op": "add", "category": "Headers", "name": "SimpleHeader"},
    {"op": "add", "category": "Buttons", "name": "PrimaryButton"},
    {"op": "add", "category": "Buttons", "name": "OutlineButton"},
    {
        "op": "update_props",
        "node_id": "headers-simpleheader-1",
        "patch": {"marginTop": "16px", "bgColor": "#ff0000"},
    },
    {"op": "toggle_multi_select", "node_id": "buttons-primarybutton-2"},
    {"op": "toggle_multi_select", "node_id": "buttons-outlinebutton-3"},
    {"op": "group", "layout_kind": "flex-row"},
]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=30,
    )


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "page.json"
    path.write_text(json.dumps(GROUP_SCRIPT), encoding="utf-8")
    return path


@pytest.mark.integration
def test_catalog_lists_items():
    """catalog command should list built-in categories and items."""
    result = _run("catalog")
    assert result.returncode == 0
    assert "Buttons" in result.stdout
    assert "  - PrimaryButton" in result.stdout


@pytest.mark.integration
def test_build_prints_markup(script):
    """build command should print the generated markup."""
    result = _run("build", str(script))
    assert result.returncode == 0
    assert result.stdout.startswith('<div className="min-h-screen')
    assert "    <div style={{ marginTop: '16px' }}>" in result.stdout
    assert 'className="w-full flex flex-row gap-4 justify-start items-start"' in (
        result.stdout
    )


@pytest.mark.integration
def test_build_semantic(script):
    """build --semantic should use semantic tags."""
    result = _run("build", str(script), "--semantic")
    assert result.returncode == 0
    assert result.stdout.startswith("<main")
    assert "<header style={{ marginTop: '16px' }}>" in result.stdout
    assert "<section" in result.stdout


@pytest.mark.integration
def test_build_writes_output(script, tmp_path):
    """build --output should write the markup to a file."""
    target = tmp_path / "Page.jsx"
    result = _run("build", str(script), "--output", str(target))
    assert result.returncode == 0
    assert target.read_text(encoding="utf-8").startswith("<div")
    assert "Code copied to clipboard!" in result.stderr


@pytest.mark.integration
def test_tree_prints_outline(script):
    """tree command should print the document tree."""
    result = _run("tree", str(script))
    assert result.returncode == 0
    assert "Flex Row (container-4) [Container, 2 components inside, selected]" in (
        result.stdout
    )


@pytest.mark.integration
def test_build_missing_script_fails(tmp_path):
    """build should fail cleanly on a missing script."""
    result = _run("build", str(tmp_path / "missing.json"))
    assert result.returncode == 1
    assert "Build failed" in result.stderr


@pytest.mark.integration
def test_unknown_command():
    """Unknown commands should exit with an error."""
    result = _run("explode")
    assert result.returncode == 1
