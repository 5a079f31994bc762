#!/usr/bin/env python3
"""
COLORTERM

ANSI terminal colors, themes and output formatting

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

# Package metadata
__version__ = "0.1.0"
__author__ = "Manuel Ziel"
__description__ = "ANSI terminal colors, themes and output formatting"
__software_name__ = "colorterm"

# Package imports
from .colors import Colors, RGB, PREDEFINED_COLORS, LOG_COLORS, LOG_MESSAGES, RESET
from .exceptions import (
    ColorTermException, AlreadyExistsError, NotFoundError, ThemeIOError,
    ConfigError, FormatError, ValidationError,
)
from .emitter import Emitter, format_escape, FOREGROUND, BACKGROUND
from .registry import CustomColorRegistry
from .colormap import ColorMapping
from .theme import ThemeManager
from .effects import Palette, apply_gradient
from .logger import LoggerManager, LogStyle, ColoredFormatter
from .formatter import FormatManager, OutputFormat
from .config import ConfigManager
from .application import ColorTerm

__all__ = [
    'Colors',
    'RGB',
    'PREDEFINED_COLORS',
    'LOG_COLORS',
    'LOG_MESSAGES',
    'RESET',
    'ColorTermException',
    'AlreadyExistsError',
    'NotFoundError',
    'ThemeIOError',
    'ConfigError',
    'FormatError',
    'ValidationError',
    'Emitter',
    'format_escape',
    'FOREGROUND',
    'BACKGROUND',
    'CustomColorRegistry',
    'ColorMapping',
    'ThemeManager',
    'Palette',
    'apply_gradient',
    'LoggerManager',
    'LogStyle',
    'ColoredFormatter',
    'FormatManager',
    'OutputFormat',
    'ConfigManager',
    'ColorTerm',
]
