#!/usr/bin/env python3
"""
Theme Manager

Owns the named collection of color mappings (always including "default"),
tracks the active theme, and persists character mappings to a simple
line-oriented text format:

    <char>:<color code>

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import logging
import sys
import threading
from typing import Callable, Dict, List, Mapping, Optional, TextIO, Tuple

# Internal imports
from .colormap import ColorMapping
from .colors import printable
from .exceptions import AlreadyExistsError, NotFoundError, ThemeIOError, ValidationError

DEFAULT_THEME = "default"
DONE_SENTINEL = "done"

################################################################################
# LINE FORMAT HELPERS
################################################################################

def parse_mapping_line(line: str) -> Optional[Tuple[str, str]]:
    """Split '<char>:<code>' into (char, code).

    The separator is the first ':' after the mapped character, so a mapping
    for ':' itself reads back as '::<code>'. Returns None if there is none.
    """
    pos = line.find(':', 1)
    if not line or pos == -1:
        return None
    return line[0], line[pos + 1:]


def format_mapping_line(character: str, code: str) -> str:
    return f"{character}:{code}\n"

################################################################################
# THEME MANAGER CLASS
################################################################################

class ThemeManager:
    """Named themes with one active theme, guarded by a lock."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        """Initialize with the always-present default theme."""
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._themes: Dict[str, ColorMapping] = {DEFAULT_THEME: ColorMapping()}
        self._current = DEFAULT_THEME
        self._color_enabled = True

    ################################################################################
    # PUBLIC INTERFACE - Theme Lifecycle
    ################################################################################

    def create(self, name: str) -> None:
        """Register a new empty theme.

        Raises:
            ValidationError: Empty name
            AlreadyExistsError: Name already registered
        """
        if not name:
            raise ValidationError("Theme name must not be empty")

        with self._lock:
            if name in self._themes:
                error_msg = f"Theme already exists: {name}"
                self.logger.error(error_msg)
                raise AlreadyExistsError(error_msg)
            self._themes[name] = ColorMapping()
        self.logger.info(f"Created theme: {name}")

    def set(self, name: str) -> None:
        """Switch the active theme.

        Raises:
            NotFoundError: Unknown theme (active theme is left unchanged)
        """
        with self._lock:
            if name not in self._themes:
                error_msg = f"Theme does not exist: {name}"
                self.logger.error(error_msg)
                raise NotFoundError(error_msg)
            self._current = name
        self.logger.info(f"Set current theme to: {name}")

    def set_default(self) -> None:
        with self._lock:
            self._current = DEFAULT_THEME
        self.logger.info("Set current theme to default")

    @property
    def current_theme(self) -> str:
        with self._lock:
            return self._current

    def list(self) -> List[str]:
        with self._lock:
            return list(self._themes)

    def get_theme(self, name: str) -> ColorMapping:
        """Return a copy of the named theme's mapping."""
        with self._lock:
            if name not in self._themes:
                raise NotFoundError(f"Theme does not exist: {name}")
            return self._themes[name].copy()

    ################################################################################
    # PUBLIC INTERFACE - Current Theme Mutation
    ################################################################################

    def insert(self, name: str, characters: str, code: str,
               is_key: bool = False, is_value: bool = False) -> None:
        with self._lock:
            self._themes[self._current].insert(name, characters, code, is_key, is_value)
        self.logger.info(f"Inserted color mapping for {name} in current theme")

    def batch_insert(self, mappings: Mapping[str, str],
                     is_key: bool = False, is_value: bool = False) -> None:
        """Insert several mappings, each name doubling as its characters."""
        for name, code in mappings.items():
            self.insert(name, name, code, is_key, is_value)

    def replace(self, characters: str, code: str) -> None:
        with self._lock:
            self._themes[self._current].replace(characters, code)
        self.logger.info("Replaced color mapping in current theme")

    def erase(self, characters: str) -> None:
        with self._lock:
            self._themes[self._current].erase(characters)
        self.logger.info("Erased color mapping from current theme")

    ################################################################################
    # PUBLIC INTERFACE - Colorizing and Inspection
    ################################################################################

    def apply(self, text: str) -> str:
        """Colorize text with the active theme (unchanged while disabled)."""
        with self._lock:
            if not self._color_enabled:
                return text
            return self._themes[self._current].apply(text)

    def inspect(self) -> Dict[str, str]:
        with self._lock:
            return self._themes[self._current].get()

    def inspect_color(self, character: str) -> Optional[str]:
        with self._lock:
            return self._themes[self._current].inspect_color(character)

    def inspect_key_color(self, key: str) -> Optional[str]:
        with self._lock:
            return self._themes[self._current].inspect_key_color(key)

    def inspect_value_color(self, value: str) -> Optional[str]:
        with self._lock:
            return self._themes[self._current].inspect_value_color(value)

    def enable_colormap(self) -> None:
        with self._lock:
            self._color_enabled = True
        self.logger.info("Enabled colormap")

    def disable_colormap(self) -> None:
        with self._lock:
            self._color_enabled = False
        self.logger.info("Disabled colormap")

    def is_enabled(self) -> bool:
        with self._lock:
            return self._color_enabled

    def list_all_theme_maps(self) -> str:
        """Human-readable dump of every theme's three tables."""
        with self._lock:
            snapshot = [(name, mapping.copy()) for name, mapping in self._themes.items()]

        lines = ["\nAll Themes and Their Mappings:\n"]
        for name, mapping in snapshot:
            lines.append(f"Theme: {name}\n")
            for character, code in mapping.get().items():
                lines.append(f"Character: {character}, Color Code: {printable(code)}\n")
            for key, code in mapping.get_key_map().items():
                lines.append(f"Key: {key}, Color Code: {printable(code)}\n")
            for value, code in mapping.get_value_map().items():
                lines.append(f"Value: {value}, Color Code: {printable(code)}\n")
            lines.append("\n")
        return ''.join(lines)

    ################################################################################
    # PUBLIC INTERFACE - Persistence
    ################################################################################

    def save(self, name: str, path: str) -> None:
        """Write the named theme's character table to a file.

        Key and value tables are not persisted.

        Raises:
            NotFoundError: Unknown theme
            ThemeIOError: File cannot be opened for writing
        """
        with self._lock:
            if name not in self._themes:
                error_msg = f"Theme does not exist: {name}"
                self.logger.error(error_msg)
                raise NotFoundError(error_msg)
            colormap = self._themes[name].get()

        try:
            with open(path, 'w', encoding='utf-8') as f:
                for character, code in colormap.items():
                    f.write(format_mapping_line(character, code))
        except OSError as e:
            error_msg = f"Failed to open file for saving theme: {path}"
            self.logger.error(error_msg)
            raise ThemeIOError(error_msg) from e

        self.logger.info(f"Saved theme {name} to file: {path}")

    def load(self, name: str, path: str) -> None:
        """Create a theme from a file written by save().

        Raises:
            ThemeIOError: File cannot be read
            AlreadyExistsError: A theme with that name is already registered
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except OSError as e:
            error_msg = f"Failed to open file for loading theme: {path}"
            self.logger.error(error_msg)
            raise ThemeIOError(error_msg) from e

        self.create(name)

        with self._lock:
            mapping = self._themes[name]
            for lineno, line in enumerate(lines, start=1):
                if not line:
                    continue
                parsed = parse_mapping_line(line)
                if parsed is None:
                    self.logger.warning(f"Skipping malformed line {lineno} in {path}: {line!r}")
                    continue
                character, code = parsed
                mapping.insert(character, character, code)

        self.logger.info(f"Loaded theme {name} from file: {path}")

    ################################################################################
    # PUBLIC INTERFACE - Interactive Editing
    ################################################################################

    def interactive_edit_theme(self, name: str,
                               input_func: Optional[Callable[[], str]] = None,
                               output: Optional[TextIO] = None) -> int:
        """Read '<char>:<code>' lines into a theme until 'done'.

        Args:
            name: Theme to edit
            input_func: Line source (default: input())
            output: Prompt sink (default: stdout)

        Returns:
            int: Number of mappings inserted

        Raises:
            NotFoundError: Unknown theme
        """
        with self._lock:
            if name not in self._themes:
                error_msg = f"Theme does not exist: {name}"
                self.logger.error(error_msg)
                raise NotFoundError(error_msg)

        read_line = input_func or input
        out = output or sys.stdout
        print(f"Editing theme: {name}", file=out)
        print("Enter color mapping (char:colorCode) or 'done' to finish:", file=out)

        inserted = 0
        while True:
            try:
                line = read_line()
            except EOFError:
                break

            line = line.rstrip("\r\n")
            if line == DONE_SENTINEL:
                break

            parsed = parse_mapping_line(line)
            if parsed is None:
                self.logger.error("Invalid format. Use char:colorCode")
                print("Invalid format. Use char:colorCode", file=sys.stderr)
                continue

            character, code = parsed
            with self._lock:
                self._themes[name].insert(character, character, code)
            inserted += 1

        return inserted
