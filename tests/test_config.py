"""Tests for TOML configuration loading."""

import os

import pytest

from colorterm.colors import PREDEFINED_COLORS
from colorterm.config import ConfigManager, resolve_color
from colorterm.exceptions import ConfigError

FULL_CONFIG = r'''
[colors]
enabled = true
themed = false

[theme]
colormap_enabled = false
active = "json"

[theme.files]
solarized = "themes/solarized.theme"

[themes.json.chars]
"{}" = "\u001b[38;5;34m"

[themes.json.keys]
name = "\u001b[38;5;208m"

[themes.json.values]
Alice = "sapphire"

[custom_colors]
error = "\u001b[38;5;196m"
warn = "amber"

[logger]
level = "debug"
color_full = true
include_location = true

[logger.colors]
info = "emerald"

[logger.messages]
warning = "WARN"

[output]
format = "JSON"
'''


class TestConfigManager:

    def test_defaults_without_file(self):
        config = ConfigManager()
        assert config.colors_enabled is True
        assert config.colors_themed is True
        assert config.colormap_enabled is True
        assert config.active_theme is None
        assert config.themes == {}
        assert config.custom_colors == {}
        assert config.log_level == "INFO"
        assert config.output_format == "Plain Text"

    def test_full_config(self, tmp_path):
        path = tmp_path / "colorterm.toml"
        path.write_text(FULL_CONFIG, encoding="utf-8")
        config = ConfigManager(str(path))

        assert config.colors_themed is False
        assert config.colormap_enabled is False
        assert config.active_theme == "json"
        assert config.theme_files == {"solarized": os.path.join(str(tmp_path), "themes/solarized.theme")}
        assert config.themes["json"]["chars"] == {"{}": "\x1b[38;5;34m"}
        assert config.themes["json"]["keys"] == {"name": "\x1b[38;5;208m"}
        assert config.themes["json"]["values"] == {"Alice": PREDEFINED_COLORS["sapphire"]}
        assert config.custom_colors == {"error": "\x1b[38;5;196m", "warn": PREDEFINED_COLORS["amber"]}
        assert config.log_level == "DEBUG"
        assert config.log_color_full is True
        assert config.log_include_location is True
        assert config.log_colors == {"info": PREDEFINED_COLORS["emerald"]}
        assert config.log_messages == {"warning": "WARN"}
        assert config.output_format == "JSON"

    def test_absolute_theme_path_kept(self, tmp_path):
        theme_path = str(tmp_path / "abs.theme")
        path = tmp_path / "c.toml"
        path.write_text(f'[theme.files]\nabs = "{theme_path}"\n', encoding="utf-8")
        assert ConfigManager(str(path)).theme_files == {"abs": theme_path}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager(str(tmp_path / "missing.toml"))

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[colors\nenabled = ", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            ConfigManager(str(path))

    def test_section_must_be_table(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('custom_colors = "red"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager(str(path))

    def test_unknown_color_name(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[custom_colors]\nx = "not_a_color"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="unknown color"):
            ConfigManager(str(path))


class TestResolveColor:

    def test_predefined_name(self):
        assert resolve_color("red", "x") == "\x1b[31m"

    def test_raw_code(self):
        assert resolve_color("\x1b[38;5;1m", "x") == "\x1b[38;5;1m"

    def test_non_string(self):
        with pytest.raises(ConfigError):
            resolve_color(5, "x")
