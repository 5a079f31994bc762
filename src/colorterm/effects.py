#!/usr/bin/env python3
"""
Text Effects

Gradients, single-color strings, color substitution, pattern highlighting
and the fixed palettes. Every effect goes through an Emitter, so nothing is
colored while color or theme output is switched off.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

from enum import Enum
from typing import TextIO

from .colors import RESET, RGB
from .emitter import FOREGROUND, Emitter, format_escape

################################################################################
# PALETTES
################################################################################

class Palette(Enum):
    """Fixed editor palettes applied as a single foreground color."""
    SOLARIZED = RGB(147, 161, 161)
    MONOKAI = RGB(248, 248, 242)

################################################################################
# GRADIENTS
################################################################################

def interpolate(start: int, end: int, ratio: float) -> int:
    return start + int((end - start) * ratio)


def _blend(start: RGB, end: RGB, ratio: float) -> RGB:
    return RGB(
        interpolate(start[0], end[0], ratio),
        interpolate(start[1], end[1], ratio),
        interpolate(start[2], end[2], ratio),
    )


def apply_gradient(emitter: Emitter, text: str, start: RGB, end: RGB) -> str:
    """Color each character along a linear RGB gradient.

    The first character gets ``start``, the last gets ``end``. A single
    character gets ``start``. Returns the text unchanged while the emitter
    is disabled.
    """
    if not emitter.is_enabled:
        return text
    if not text:
        return ""

    steps = len(text) - 1
    parts = []
    for index, ch in enumerate(text):
        ratio = index / steps if steps else 0.0
        color = _blend(start, end, ratio)
        parts.append(format_escape(FOREGROUND, *color))
        parts.append(ch)
    parts.append(RESET)
    return ''.join(parts)


def write_gradient(emitter: Emitter, stream: TextIO, text: str,
                   start: RGB, end: RGB) -> TextIO:
    stream.write(apply_gradient(emitter, text, start, end))
    return stream


def gradient_at(emitter: Emitter, start: RGB, end: RGB, intensity: float) -> str:
    """Return the foreground code at a point (0.0 - 1.0) of the gradient."""
    return emitter.color_code(*_blend(start, end, intensity))

################################################################################
# STRING EFFECTS
################################################################################

def colorize_string(emitter: Emitter, text: str, rgb: RGB) -> str:
    code = emitter.color_code(*rgb)
    if not code:
        return text
    return f"{code}{text}{RESET}"


def replace_color_all_instances(emitter: Emitter, text: str,
                                from_rgb: RGB, to_rgb: RGB) -> str:
    """Swap every 24-bit foreground sequence for one color with another."""
    if not emitter.is_enabled:
        return text
    return text.replace(format_escape(FOREGROUND, *from_rgb),
                        format_escape(FOREGROUND, *to_rgb))


def highlight_pattern(emitter: Emitter, text: str, pattern: str, rgb: RGB) -> str:
    """Wrap every literal occurrence of pattern in the given color."""
    if not pattern:
        return text
    return text.replace(pattern, colorize_string(emitter, pattern, rgb))


def apply_palette(emitter: Emitter, stream: TextIO, palette: Palette) -> TextIO:
    return emitter.apply_color(stream, *palette.value)
