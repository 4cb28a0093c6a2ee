"""
Unit tests for configuration loading and presets.

Tests the config.py module which handles YAML loading, mapping overrides,
defaults and named presets.
"""
import pytest
from pathlib import Path
from asciimath_unicode.config import (
    apply_preset,
    list_presets,
    load_config,
    load_config_from_dict,
)
from asciimath_unicode.renderer import InlineRenderer


class TestConfigDefaults:
    """Test default configuration values."""

    def test_renderer_defaults(self):
        """Default InlineRenderer has every feature on."""
        renderer = InlineRenderer()
        assert renderer.strip_brackets is True
        assert renderer.vulgar_fracs is True
        assert renderer.script_fracs is True
        assert renderer.symbols is True


class TestConfigLoading:
    """Test loading configuration from YAML files."""

    def test_load_config_none(self):
        assert load_config(None) == InlineRenderer()

    def test_load_config_missing_file(self, tmp_path):
        """Missing config file returns defaults."""
        assert load_config(tmp_path / "nope.yaml") == InlineRenderer()

    def test_load_config_empty_file(self, write_config):
        assert load_config(write_config("")) == InlineRenderer()

    def test_load_config_overrides(self, write_config):
        path = write_config("vulgar_fracs: false\nsymbols: false\n")
        renderer = load_config(path)
        assert renderer.vulgar_fracs is False
        assert renderer.symbols is False
        assert renderer.script_fracs is True

    def test_load_config_ignores_unknown_keys(self, write_config):
        path = write_config("colour: blue\nstrip_brackets: false\n")
        assert load_config(path) == InlineRenderer(strip_brackets=False)

    def test_load_config_preset(self, scripts_config):
        assert load_config(scripts_config) == InlineRenderer(vulgar_fracs=False)

    def test_fields_override_preset(self, write_config):
        path = write_config("preset: linear\nscript_fracs: true\n")
        renderer = load_config(path)
        assert renderer.vulgar_fracs is False
        assert renderer.script_fracs is True

    def test_load_config_rejects_non_mapping(self, write_config):
        with pytest.raises(ValueError):
            load_config(write_config("- a\n- b\n"))


class TestConfigFromDict:
    """Test building a renderer from a mapping."""

    def test_empty_mapping(self):
        assert load_config_from_dict({}) == InlineRenderer()

    def test_overrides(self):
        renderer = load_config_from_dict({"strip_brackets": False})
        assert renderer.strip_brackets is False

    def test_non_boolean_value(self):
        with pytest.raises(TypeError):
            load_config_from_dict({"vulgar_fracs": "no"})

    def test_skin_tone(self):
        assert load_config_from_dict({"skin_tone": "dark"}).skin_tone == "dark"

    def test_unknown_skin_tone(self):
        with pytest.raises(ValueError):
            load_config_from_dict({"skin_tone": "purple"})

    def test_non_string_skin_tone(self):
        with pytest.raises(TypeError):
            load_config_from_dict({"skin_tone": True})

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            load_config_from_dict({"preset": "fancy"})


class TestPresets:
    """Test named presets."""

    def test_list_presets(self):
        assert list_presets() == ["default", "linear", "scripts"]

    def test_default_preset_changes_nothing(self):
        renderer = InlineRenderer(symbols=False)
        assert apply_preset(renderer, "default") == renderer

    def test_scripts_preset(self):
        renderer = apply_preset(InlineRenderer(), "scripts")
        assert renderer.vulgar_fracs is False
        assert renderer.script_fracs is True

    def test_linear_preset(self):
        renderer = apply_preset(InlineRenderer(), "linear")
        assert renderer.vulgar_fracs is False
        assert renderer.script_fracs is False

    def test_preset_keeps_other_fields(self):
        renderer = apply_preset(InlineRenderer(strip_brackets=False), "linear")
        assert renderer.strip_brackets is False

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            apply_preset(InlineRenderer(), "fancy")
