#!/usr/bin/env python3
"""
ColorTerm Application Module

Composition root owning the emitter, the custom color registry, the theme
manager, the output format manager and the logger style. Nothing here is
global: every ColorTerm instance is independent.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import itertools
import logging
from typing import Optional

# Project imports
from .config import ConfigManager
from .emitter import Emitter
from .exceptions import ConfigError, FormatError, NotFoundError
from .formatter import FormatManager, string_to_format
from .logger import LoggerManager, LogStyle
from .registry import CustomColorRegistry
from .theme import ThemeManager

################################################################################
# COLORTERM CLASS - Component Wiring
################################################################################

class ColorTerm:
    """Builds and wires every component from a ConfigManager."""

    _instance_ids = itertools.count(1)

    def __init__(self, config: Optional[ConfigManager] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        """
        Initialize components with default settings.

        Args:
            config: Configuration object from config.py (default: built-in defaults)
            logger: Logger instance (default: own colored logger from LoggerManager)
        """
        self.config = config or ConfigManager()
        self.emitter = Emitter(colored=self.config.colors_enabled, themed=self.config.colors_themed)
        self.log_style = LogStyle()

        if logger is None:
            level = logging.getLevelName(self.config.log_level)
            logger = LoggerManager.get_logger(
                f"colorterm.app{next(self._instance_ids)}",
                level=level if isinstance(level, int) else logging.INFO,
                style=self.log_style,
                emitter=self.emitter,
                include_location=self.config.log_include_location,
            )
        self.logger = logger

        self.emitter.logger = logger.getChild("emitter")
        self.registry = CustomColorRegistry(self.emitter, logger=logger.getChild("registry"))
        self.themes = ThemeManager(logger=logger.getChild("theme"))
        self.formats = FormatManager(logger=logger.getChild("formatter"))
        self.initialized = False

    ################################################################################
    # PUBLIC INTERFACE - Lifecycle Management
    ################################################################################

    def initialize(self) -> 'ColorTerm':
        """
        Apply configuration to all components.

        Returns:
            ColorTerm: self, for chaining

        Raises:
            ConfigError: Unknown active theme or output format
            ThemeIOError: Theme file cannot be read
            AlreadyExistsError: Theme file name clashes with an existing theme
        """
        self._apply_logger_style()
        self._load_themes()
        self._apply_custom_colors()
        self._apply_output_format()

        self.initialized = True
        self.logger.debug("ColorTerm initialized")
        return self

    def teardown(self) -> None:
        """Return shared state to defaults."""
        self.registry.reset_custom_colors()
        self.formats.reset_format()
        self.themes.set_default()
        self.initialized = False
        self.logger.debug("ColorTerm shut down")

    ################################################################################
    # PRIVATE METHODS - Configuration Steps
    ################################################################################

    def _apply_logger_style(self) -> None:
        self.log_style.set_color_full_message(self.config.log_color_full)
        for level, code in self.config.log_colors.items():
            self.log_style.set_level_color(level, code)
        for level, message in self.config.log_messages.items():
            self.log_style.set_level_message(level, message)

    def _load_themes(self) -> None:
        for name, path in self.config.theme_files.items():
            self.themes.load(name, path)

        for name, tables in self.config.themes.items():
            if name not in self.themes.list():
                self.themes.create(name)
            self.themes.set(name)
            for characters, code in tables['chars'].items():
                self.themes.insert(characters, characters, code)
            self.themes.batch_insert(tables['keys'], is_key=True)
            self.themes.batch_insert(tables['values'], is_value=True)

        self.themes.set_default()
        if self.config.active_theme:
            try:
                self.themes.set(self.config.active_theme)
            except NotFoundError as e:
                raise ConfigError(f"Active theme is not defined: {self.config.active_theme}") from e

        if self.config.colormap_enabled:
            self.themes.enable_colormap()
        else:
            self.themes.disable_colormap()

    def _apply_custom_colors(self) -> None:
        for name, code in self.config.custom_colors.items():
            self.registry.set_custom_color(name, code)

    def _apply_output_format(self) -> None:
        try:
            self.formats.set_format(string_to_format(self.config.output_format))
        except FormatError as e:
            raise ConfigError(str(e)) from e

