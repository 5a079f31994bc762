#!/usr/bin/env python3
"""
Custom Color Registry

Named user colors stored as static escape strings, plus a small named RGB
palette. Function-valued colors are materialized once at registration.

The registry does no locking of its own: callers that mutate it from
several threads must serialize access themselves.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import io
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO, Union

# Internal imports
from .colors import RGB, printable
from .emitter import Emitter

ColorSource = Union[str, Callable[[TextIO], object]]

DEFAULT_PALETTE = {
    'red': RGB(255, 0, 0),
    'green': RGB(0, 255, 0),
    'blue': RGB(0, 0, 255),
    'yellow': RGB(255, 255, 0),
    'magenta': RGB(255, 0, 255),
}

################################################################################
# CUSTOM COLOR REGISTRY CLASS
################################################################################

class CustomColorRegistry:
    """Process-wide name -> escape code table, independent of themes."""

    def __init__(self, emitter: Emitter, logger: Optional[logging.Logger] = None) -> None:
        """Initialize an empty registry.

        Args:
            emitter: Emitter used for gated output and the predefined table
            logger: Error channel for lookup misses
        """
        self.emitter = emitter
        self.logger = logger or logging.getLogger(__name__)
        self._colors: Dict[str, str] = {}
        self._palette: Dict[str, RGB] = dict(DEFAULT_PALETTE)

    ################################################################################
    # PUBLIC INTERFACE - Registration
    ################################################################################

    def set_custom_color(self, name: str, color: ColorSource) -> None:
        """Store a code, or snapshot what a color function writes right now."""
        if callable(color):
            buffer = io.StringIO()
            color(buffer)
            code = buffer.getvalue()
        else:
            code = color
        self._colors[name] = code

    def set_custom_color_predefined(self, name: str, predefined_name: str) -> bool:
        """Copy a predefined color under a custom name. Returns False if unknown."""
        code = self.emitter.predefined.get(predefined_name)
        if code is None:
            error_msg = f"Predefined color '{predefined_name}' not found"
            self.logger.error(error_msg)
            return False
        self._colors[name] = code
        return True

    def remove_custom_color(self, name: str) -> None:
        self._colors.pop(name, None)

    def reset_custom_colors(self) -> None:
        self._colors.clear()

    ################################################################################
    # PUBLIC INTERFACE - Lookup and Emission
    ################################################################################

    def get_code(self, name: str) -> Optional[str]:
        return self._colors.get(name)

    def list_custom_colors(self) -> List[str]:
        return list(self._colors)

    def custom_color(self, stream: TextIO, name: str, default_code: str = "") -> bool:
        """Emit a custom color, falling back to default_code.

        Returns:
            bool: True if a code was found (stored or default), False otherwise
        """
        code = self._colors.get(name)
        if code is None:
            if not default_code:
                error_msg = f"Custom color '{name}' not found"
                self.logger.error(error_msg)
                return False
            code = default_code

        self.emitter.apply_code(stream, code)
        return True

    def get_custom_color(self, name: str) -> Callable[[TextIO], bool]:
        """Return a callable that applies the named color when invoked."""
        def apply(stream: TextIO) -> bool:
            return self.custom_color(stream, name)
        return apply

    def inspect_custom_color(self, name: str, stream: Optional[TextIO] = None) -> None:
        """Print a custom color in human-readable (escaped) form."""
        out = stream or sys.stdout
        code = self._colors.get(name)
        if code is not None:
            print(f"{name}: {printable(code)}", file=out)
        else:
            print(f"{name} not found in custom colors.", file=out)

    ################################################################################
    # PUBLIC INTERFACE - RGB Palette
    ################################################################################

    def set_palette_color(self, name: str, r: int, g: int, b: int) -> None:
        self._palette[name] = RGB(r, g, b)

    def get_palette_color(self, name: str) -> Optional[RGB]:
        return self._palette.get(name)

    def palette_color(self, stream: TextIO, name: str, background: bool = False) -> bool:
        """Emit a 24-bit palette color by name. Unknown names emit nothing."""
        color = self._palette.get(name)
        if color is None:
            return False
        if background:
            self.emitter.apply_bg_color(stream, *color)
        else:
            self.emitter.apply_color(stream, *color)
        return True
