#!/usr/bin/env python3
"""
Configuration Manager

Handles TOML configuration loading for color gates, themes, custom colors,
logger styling and the output format. Without a config file every setting
keeps its default.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import os
import tomllib
from typing import Dict, Any, Optional

# Internal imports
from .colors import ESC, PREDEFINED_COLORS
from .exceptions import ConfigError

THEME_TABLES = ('chars', 'keys', 'values')

################################################################################
# HELPERS
################################################################################

def resolve_color(value: Any, where: str) -> str:
    """Accept a raw escape code or the name of a predefined color."""
    if not isinstance(value, str):
        raise ConfigError(f"{where}: color must be a string, got {type(value).__name__}")
    if value in PREDEFINED_COLORS:
        return PREDEFINED_COLORS[value]
    if value.startswith(ESC):
        return value
    raise ConfigError(f"{where}: unknown color '{value}'")

################################################################################
# CONFIGURATION MANAGER CLASS - TOML Configuration
################################################################################

class ConfigManager:
    """Configuration handler for colors, themes, logger and output settings."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Load TOML config (if a path is given) and read every section."""
        self.config_path = config_path
        self.base_dir = os.path.dirname(os.path.abspath(config_path)) if config_path else os.getcwd()
        self.config = self.load_config(config_path) if config_path else {}

        self._load_colors_config()
        self._load_theme_config()
        self._load_custom_colors_config()
        self._load_logger_config()
        self._load_output_config()

    ################################################################################
    # PUBLIC INTERFACE - Configuration Loading
    ################################################################################

    def load_config(self, path: str) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(path, "rb") as f:
                config = tomllib.load(f)
            return config
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {path}")
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Error loading configuration from {path}: {e}")

    def resolve_path(self, path: str) -> str:
        """Resolve a path relative to the config file's directory."""
        if os.path.isabs(path):
            return path
        return os.path.join(self.base_dir, path)

    ################################################################################
    # PRIVATE METHODS - Section Loaders
    ################################################################################

    def _section(self, data: Dict[str, Any], name: str, where: str = "") -> Dict[str, Any]:
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{where}{name}] must be a table")
        return section

    def _load_colors_config(self) -> None:
        """Load global gates from [colors] section."""
        colors = self._section(self.config, "colors")
        self.colors_enabled = bool(colors.get("enabled", True))
        self.colors_themed = bool(colors.get("themed", True))

    def _load_theme_config(self) -> None:
        """Load [theme], [theme.files] and [themes.<name>.*] sections."""
        theme = self._section(self.config, "theme")
        self.colormap_enabled = bool(theme.get("colormap_enabled", True))
        self.active_theme = theme.get("active", None)

        files = self._section(theme, "files", "theme.")
        self.theme_files = {name: self.resolve_path(path) for name, path in files.items()}

        self.themes: Dict[str, Dict[str, Dict[str, str]]] = {}
        for name, tables in self._section(self.config, "themes").items():
            if not isinstance(tables, dict):
                raise ConfigError(f"[themes.{name}] must be a table")
            self.themes[name] = {
                table: {
                    entry: resolve_color(code, f"themes.{name}.{table}.{entry}")
                    for entry, code in self._section(tables, table, f"themes.{name}.").items()
                }
                for table in THEME_TABLES
            }

    def _load_custom_colors_config(self) -> None:
        """Load [custom_colors] section (raw codes or predefined names)."""
        self.custom_colors = {
            name: resolve_color(value, f"custom_colors.{name}")
            for name, value in self._section(self.config, "custom_colors").items()
        }

    def _load_logger_config(self) -> None:
        """Load [logger] section with [logger.colors] and [logger.messages]."""
        logger = self._section(self.config, "logger")
        self.log_level = str(logger.get("level", "INFO")).upper()
        self.log_color_full = bool(logger.get("color_full", False))
        self.log_include_location = bool(logger.get("include_location", False))
        self.log_colors = {
            level: resolve_color(value, f"logger.colors.{level}")
            for level, value in self._section(logger, "colors", "logger.").items()
        }
        self.log_messages = {
            level: str(message)
            for level, message in self._section(logger, "messages", "logger.").items()
        }

    def _load_output_config(self) -> None:
        """Load output format name from [output] section."""
        self.output_format = self._section(self.config, "output").get("format", "Plain Text")
