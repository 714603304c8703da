"""Tests for the configuration loader."""

import pytest

from bandproj._config_loader import (
    BandprojConfigurationError,
    clear_cache,
    load_config,
)
from bandproj._config_schemas import validate_config
from bandproj._defaults import CONFIGS


# ---------------------------------------------------------------------------
# TestLoadConfig
# ---------------------------------------------------------------------------


class TestLoadConfig:
    """Tests for load_config() function."""

    def setup_method(self):
        clear_cache()

    def test_load_kpath(self):
        cfg = load_config("kpath")
        assert cfg["label_separator"] == " | "

    def test_load_orbitals(self):
        cfg = load_config("orbitals")
        assert cfg["lm_decomposed"][0] == "s"
        assert len(cfg["lm_decomposed"]) == 9
        assert cfg["l_decomposed"] == ["s", "p", "d"]

    def test_yaml_matches_builtin_defaults(self):
        """Packaged YAML and _defaults stay in sync."""
        for name in CONFIGS:
            assert load_config(name) == CONFIGS[name]

    def test_missing_config_raises(self):
        with pytest.raises(FileNotFoundError, match="No config found"):
            load_config("nonexistent_config_xyz")

    def test_returns_deep_copy(self):
        """Mutating a returned config must not poison the cache."""
        cfg = load_config("orbitals")
        cfg["lm_decomposed"].append("bogus")
        assert "bogus" not in load_config("orbitals")["lm_decomposed"]


# ---------------------------------------------------------------------------
# TestFallbacks
# ---------------------------------------------------------------------------


class TestFallbacks:
    def setup_method(self):
        clear_cache()

    def test_fallback_without_yaml(self, monkeypatch):
        import bandproj._config_loader as loader

        monkeypatch.setattr(loader, "_YAML_AVAILABLE", False)
        assert load_config("kpath") == CONFIGS["kpath"]

    def test_syntax_error_fails_fast(self, monkeypatch):
        import bandproj._config_loader as loader

        class _BrokenRef:
            def __truediv__(self, other):
                return self

            def read_text(self, encoding="utf-8"):
                return "lm_decomposed: [s, p\n  bad"

        monkeypatch.setattr(loader.importlib.resources, "files", lambda pkg: _BrokenRef())
        with pytest.raises(BandprojConfigurationError, match="Failed to parse"):
            load_config("orbitals")

    def test_schema_error_wrapped(self, monkeypatch):
        import bandproj._config_loader as loader

        class _BadRef:
            def __truediv__(self, other):
                return self

            def read_text(self, encoding="utf-8"):
                return "label_separator: '   '\n"

        monkeypatch.setattr(loader.importlib.resources, "files", lambda pkg: _BadRef())
        with pytest.raises(BandprojConfigurationError, match="Schema validation failed"):
            load_config("kpath")


# ---------------------------------------------------------------------------
# TestValidateConfig
# ---------------------------------------------------------------------------


class TestValidateConfig:
    def test_unknown_config_passes_through(self):
        data = {"anything": 1}
        assert validate_config("unvalidated", data) == data

    def test_orbital_table_must_start_with_s(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            validate_config("orbitals", {"lm_decomposed": ["py", "s"], "l_decomposed": ["s"]})

    def test_orbital_table_rejects_duplicates(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            validate_config("orbitals", {"lm_decomposed": ["s", "px", "px"], "l_decomposed": ["s"]})

    def test_kpath_default_separator(self):
        assert validate_config("kpath", {}) == {"label_separator": " | "}
