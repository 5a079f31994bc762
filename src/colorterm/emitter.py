#!/usr/bin/env python3
"""
Escape Code Emitter

Formats ANSI SGR sequences for 8-bit palette and 24-bit RGB colors and
writes them into any character sink (stdout, stderr, io.StringIO, files).
All emission is gated by the global color/theme switches held by Emitter.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import logging
from typing import Any, Mapping, Optional, TextIO

# Internal imports
from .colors import PREDEFINED_COLORS, RESET
from .exceptions import NotFoundError, ValidationError

FOREGROUND = 38
BACKGROUND = 48

################################################################################
# PURE FORMATTING
################################################################################

def _check_channel(value: Any) -> int:
    """Validate a single channel byte (0-255)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Color channel must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValidationError(f"Color channel out of range (0-255): {value}")
    return value


def format_escape(layer: int, *channels: int) -> str:
    """Build the SGR sequence for a palette index or an RGB triple.

    Args:
        layer: FOREGROUND (38) or BACKGROUND (48)
        *channels: one palette index, or red, green and blue values

    Returns:
        ``ESC[{layer};5;{n}m`` or ``ESC[{layer};2;{r};{g};{b}m``

    Raises:
        ValidationError: Unknown layer, wrong channel count or out of range values
    """
    if layer not in (FOREGROUND, BACKGROUND):
        raise ValidationError(f"Unknown color layer: {layer}")

    values = [_check_channel(channel) for channel in channels]

    if len(values) == 1:
        return f"\033[{layer};5;{values[0]}m"
    if len(values) == 3:
        return f"\033[{layer};2;{values[0]};{values[1]};{values[2]}m"

    raise ValidationError(f"Expected 1 (palette) or 3 (RGB) channels, got {len(values)}")

################################################################################
# EMITTER CLASS - Gated Output
################################################################################

class Emitter:
    """Writes escape sequences to a sink while color and theme output are enabled."""

    def __init__(self, colored: bool = True, themed: bool = True,
                 predefined: Optional[Mapping[str, str]] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        self.colored = colored
        self.themed = themed
        self.predefined = predefined if predefined is not None else PREDEFINED_COLORS
        self.logger = logger or logging.getLogger(__name__)

    ################################################################################
    # PUBLIC INTERFACE - Global Switches
    ################################################################################

    def enable_global_color(self) -> None:
        self.colored = True

    def disable_global_color(self) -> None:
        self.colored = False

    def enable_global_theme(self) -> None:
        self.themed = True

    def disable_global_theme(self) -> None:
        self.themed = False

    @property
    def is_enabled(self) -> bool:
        """True when both color and theme output are switched on."""
        return self.colored and self.themed

    ################################################################################
    # PUBLIC INTERFACE - Emission
    ################################################################################

    def apply_code(self, stream: TextIO, code: str) -> TextIO:
        """Write a raw code to the sink (no-op while disabled)."""
        if self.is_enabled and code:
            stream.write(code)
        return stream

    def color_code(self, *channels: int, background: bool = False) -> str:
        """Return the sequence for the channels, or '' while disabled."""
        code = format_escape(BACKGROUND if background else FOREGROUND, *channels)
        return code if self.is_enabled else ''

    def apply_color(self, stream: TextIO, *channels: int) -> TextIO:
        """Emit a foreground color: one palette index or r, g, b."""
        return self.apply_code(stream, self.color_code(*channels))

    def apply_bg_color(self, stream: TextIO, *channels: int) -> TextIO:
        """Emit a background color: one palette index or r, g, b."""
        return self.apply_code(stream, self.color_code(*channels, background=True))

    def reset(self, stream: TextIO) -> TextIO:
        return self.apply_code(stream, RESET)

    def apply_predefined(self, stream: TextIO, name: str) -> TextIO:
        """Emit a predefined color by name.

        Raises:
            NotFoundError: Name is not in the predefined table
        """
        code = self.predefined.get(name)
        if code is None:
            raise NotFoundError(f"Predefined color '{name}' not found")
        return self.apply_code(stream, code)

    def apply_styles(self, stream: TextIO, *styles: str) -> TextIO:
        """Emit several predefined styles in order; unknown names are reported and skipped."""
        if not self.is_enabled:
            return stream

        for style in styles:
            try:
                self.apply_predefined(stream, style)
            except NotFoundError:
                self.logger.error(f"Style '{style}' not found")
        return stream

    def style_text(self, stream: TextIO, text: str, *styles: str) -> TextIO:
        """Write text wrapped in styles, followed by a reset and a newline."""
        self.apply_styles(stream, *styles)
        stream.write(text)
        self.reset(stream)
        stream.write("\n")
        return stream
