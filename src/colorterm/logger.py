#!/usr/bin/env python3
"""
Colored Logger Module

Leveled logging on top of the standard logging module. Every line carries a
colored level tag:

    [INFO] message
    [FATAL] app.py:42 message

Level colors and labels are configurable per level through LogStyle, and
the whole line can be colored instead of only the tag.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

import os
import sys
import logging
import threading
from typing import Any, Dict, Optional, TextIO

from .colors import LOG_COLORS, LOG_MESSAGES, RESET
from .emitter import Emitter

# Add TRACE log level
TRACE_LEVEL = 5  # Below DEBUG (10)
logging.addLevelName(TRACE_LEVEL, 'TRACE')

def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a trace message."""
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)

# Add trace method to Logger class
logging.Logger.trace = trace

# Short names accepted for level keys in addition to the logging names
LEVEL_ALIASES = {
    'WARN': 'WARNING',
    'FATAL': 'CRITICAL',
}

UNKNOWN_LEVEL = 'UNKNOWN'


def normalize_level_name(level: Any) -> str:
    """Map an int level, 'warn', 'fatal', ... onto a LOG_COLORS key."""
    if isinstance(level, int):
        level = logging.getLevelName(level)
    name = str(level).upper()
    name = LEVEL_ALIASES.get(name, name)
    return name if name in LOG_MESSAGES else UNKNOWN_LEVEL

################################################################################
# STYLE - Per-Level Colors and Labels
################################################################################

class LogStyle:
    """Level colors and labels shared by every ColoredFormatter using it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._colors: Dict[str, str] = {k: v for k, v in LOG_COLORS.items() if k != 'RESET'}
        self._messages: Dict[str, str] = dict(LOG_MESSAGES)
        self._color_full = False

    def set_level_color(self, level: Any, code: str) -> None:
        with self._lock:
            self._colors[normalize_level_name(level)] = code

    def set_level_message(self, level: Any, message: str) -> None:
        with self._lock:
            self._messages[normalize_level_name(level)] = message

    def set_color_full_message(self, enabled: bool = True) -> None:
        """Color the complete line instead of only the level tag."""
        with self._lock:
            self._color_full = enabled

    @property
    def color_full(self) -> bool:
        with self._lock:
            return self._color_full

    def color_for(self, level: Any) -> str:
        with self._lock:
            return self._colors.get(normalize_level_name(level), self._colors[UNKNOWN_LEVEL])

    def message_for(self, level: Any) -> str:
        with self._lock:
            return self._messages.get(normalize_level_name(level), self._messages[UNKNOWN_LEVEL])

################################################################################
# FORMATTER CLASSES - ANSI Color Formatting
################################################################################

class ColoredFormatter(logging.Formatter):
    """Formatter producing '[LABEL] message' with the label in its level color."""

    def __init__(self, style: Optional[LogStyle] = None, emitter: Optional[Emitter] = None,
                 include_location: bool = False, include_timestamp: bool = False) -> None:
        """Initialize formatter with optional source location and timestamp."""
        super().__init__('%(message)s', datefmt='%H:%M:%S')
        self.log_style = style or LogStyle()
        self.emitter = emitter or Emitter()
        self.include_location = include_location
        self.include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors. The record itself is left untouched."""
        label = self.log_style.message_for(record.levelno)
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        location = f"{record.filename}:{record.lineno} " if self.include_location else ""
        timestamp = f"{self.formatTime(record, self.datefmt)} - " if self.include_timestamp else ""

        if not self.emitter.is_enabled:
            return f"{timestamp}[{label}] {location}{message}"

        color = self.log_style.color_for(record.levelno)
        if self.log_style.color_full:
            return f"{timestamp}{color}[{label}] {location}{message}{RESET}"
        return f"{timestamp}[{color}{label}{RESET}] {location}{message}"

################################################################################
# LOGGER MANAGER
################################################################################

class LoggerManager:
    """Logger factory caching one configured logger per name."""

    _loggers: Dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    ################################################################################
    # PUBLIC CLASS METHODS - Logger Factory
    ################################################################################

    @classmethod
    def get_logger(cls, name: str, **kwargs) -> logging.Logger:
        """Get or create logger instance (thread-safe).

        Keyword Args:
            level: Log level (default from DEBUG/VERBOSE env vars)
            stream: Output sink (default: stderr)
            style: Shared LogStyle
            emitter: Emitter gating the escape codes
            include_location: Prefix messages with file:line
        """
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = cls._create_logger(name, **kwargs)
            return cls._loggers[name]

    @classmethod
    def reset(cls) -> None:
        """Drop cached loggers, detach their handlers and restore propagation."""
        with cls._lock:
            for logger in cls._loggers.values():
                for handler in logger.handlers[:]:
                    logger.removeHandler(handler)
                logger.setLevel(logging.NOTSET)
                logger.propagate = True
            cls._loggers.clear()

    ################################################################################
    # PRIVATE CLASS METHODS - Logger Configuration
    ################################################################################

    @classmethod
    def _create_logger(cls, name: str, **kwargs) -> logging.Logger:
        """Create and configure new logger instance. Level from kwargs or DEBUG/VERBOSE env vars."""
        log_level = kwargs.get('level', None)

        if log_level is None:
            debug_mode = os.getenv('DEBUG', '0') == '1'
            verbose_mode = os.getenv('VERBOSE', '0') == '1'

            if debug_mode:
                log_level = logging.DEBUG
            elif verbose_mode:
                log_level = logging.INFO
            else:
                log_level = logging.INFO

        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.propagate = False

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        cls._setup_console_handler(
            logger,
            log_level,
            stream=kwargs.get('stream') or sys.stderr,
            formatter=ColoredFormatter(
                style=kwargs.get('style'),
                emitter=kwargs.get('emitter'),
                include_location=kwargs.get('include_location', False),
            ),
        )

        return logger

    @classmethod
    def _setup_console_handler(cls, logger: logging.Logger, level: int,
                               stream: TextIO, formatter: logging.Formatter) -> None:
        """Setup console handler with ANSI colors."""
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
