"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_catalog_path,
    get_environment,
    get_indent_width,
    get_semantic_default,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("PAGECOMPOSER_INDENT", raising=False)
        assert get_environment(EnvVar.INDENT) == 2

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PAGECOMPOSER_INDENT", "8")
        assert get_environment(EnvVar.INDENT, override=4) == 4

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("PAGECOMPOSER_INDENT", "4")
        result = get_environment(EnvVar.INDENT)
        assert result == 4
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_falls_back(self, monkeypatch):
        """Unparseable integers fall back to the default."""
        monkeypatch.setenv("PAGECOMPOSER_INDENT", "wide")
        assert get_environment(EnvVar.INDENT) == 2

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("PAGECOMPOSER_SEMANTIC_HTML", value)
            assert get_environment(EnvVar.SEMANTIC_HTML) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("PAGECOMPOSER_SEMANTIC_HTML", value)
            assert get_environment(EnvVar.SEMANTIC_HTML) is False

    @pytest.mark.unit
    def test_bool_unrecognized_uses_default(self, monkeypatch):
        """Unrecognized boolean strings use the default."""
        monkeypatch.setenv("PAGECOMPOSER_SEMANTIC_HTML", "maybe")
        assert get_environment(EnvVar.SEMANTIC_HTML) is False

    @pytest.mark.unit
    def test_string_passes_through(self, monkeypatch):
        """String settings are returned as read."""
        monkeypatch.setenv("PAGECOMPOSER_LOG_LEVEL", " debug")
        assert get_environment(EnvVar.LOG_LEVEL) == " debug"

    @pytest.mark.unit
    def test_path_type(self, monkeypatch):
        """Path variables convert to Path."""
        monkeypatch.setenv("PAGECOMPOSER_CATALOG_PATH", "/tmp/catalog.json")
        assert get_environment(EnvVar.CATALOG_PATH) == Path("/tmp/catalog.json")


class TestEnvVarMetadata:
    """Tests for environment metadata."""

    @pytest.mark.unit
    def test_member_value_is_config(self):
        """Each member carries its EnvConfig."""
        info = EnvVar.LOG_LEVEL.value
        assert isinstance(info, EnvConfig)
        assert info.name == "PAGECOMPOSER_LOG_LEVEL"
        assert info.default == "INFO"

    @pytest.mark.unit
    def test_all_vars_are_prefixed(self):
        """Every variable uses the project prefix."""
        for var in EnvVar:
            assert var.value.name.startswith("PAGECOMPOSER_")

    @pytest.mark.unit
    def test_list_by_category(self):
        """Variables filter by category."""
        codegen = list_environment_variables("codegen")
        assert set(codegen) == {EnvVar.SEMANTIC_HTML, EnvVar.INDENT}
        assert list_environment_variables() == list(EnvVar)
        assert list_environment_variables("missing") == []


class TestConvenienceFunctions:
    """Tests for convenience accessors."""

    @pytest.mark.unit
    def test_semantic_default(self, monkeypatch):
        """Semantic default follows the environment."""
        monkeypatch.delenv("PAGECOMPOSER_SEMANTIC_HTML", raising=False)
        assert get_semantic_default() is False
        assert get_semantic_default(override=True) is True

    @pytest.mark.unit
    def test_indent_width_minimum(self):
        """Indent width is clamped to at least one space."""
        assert get_indent_width(override=0) == 1

    @pytest.mark.unit
    def test_catalog_path(self, monkeypatch):
        """Catalog path resolves override > env > None."""
        monkeypatch.delenv("PAGECOMPOSER_CATALOG_PATH", raising=False)
        assert get_catalog_path() is None
        assert get_catalog_path("a.json") == Path("a.json")
        monkeypatch.setenv("PAGECOMPOSER_CATALOG_PATH", "b.json")
        assert get_catalog_path() == Path("b.json")
