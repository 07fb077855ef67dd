"""Root pytest configuration and fixtures.

This module provides:
- Marker registration
- Environment isolation (no PAGECOMPOSER_* variables leak into tests)
- Shared editor and catalog fixtures
"""

from __future__ import annotations

import pytest

from pagecomposer.catalog import CatalogItem
from pagecomposer.config import list_environment_variables
from pagecomposer.editor import Editor, MemoryClipboard, RecordingNotificationSink

# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
    config.addinivalue_line(
        "markers", "integration: tests that run the CLI in a subprocess"
    )


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove page-composer variables so defaults apply unless a test sets them."""
    for var in list_environment_variables():
        monkeypatch.delenv(var.value.name, raising=False)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def button_item() -> CatalogItem:
    """Catalog item for a plain button.

    Returns:
        CatalogItem named PrimaryButton with a one-line template.
    """
    return CatalogItem(name="PrimaryButton", code="<button>Click</button>")


@pytest.fixture
def editor() -> Editor:
    """Editor with recording notification and in-memory clipboard sinks.

    Returns:
        Fresh Editor over an empty document.
    """
    return Editor(
        notifications=RecordingNotificationSink(),
        clipboard=MemoryClipboard(),
    )
