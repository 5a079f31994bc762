#!/usr/bin/env python3
"""
CLI Helper Functions

Provides reusable UI components and argument parsers for the colorterm
command line tool.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import argparse
import sys
from typing import List, Optional, TextIO

# Internal imports
from .colors import Colors, RGB

################################################################################
# EXPORTS
################################################################################

__all__ = [
    'Colors',
    'STATUS_SYMBOLS',
    'set_colors_enabled', 'colors_enabled',
    'print_success', 'print_error', 'print_status', 'print_section',
    'format_table', 'parse_rgb',
]

STATUS_SYMBOLS = {
    'SUCCESS': '✓',
    'ERROR': '✗',
}

_state = {'colors': True}

def set_colors_enabled(enabled: bool) -> None:
    """Switch helper output between colored and plain (--no-color)."""
    _state['colors'] = enabled

def colors_enabled() -> bool:
    return _state['colors']

################################################################################
# UI COMPONENTS
################################################################################

def _paint(text: str, *codes: str) -> str:
    if not _state['colors'] or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.NC}"

def print_status(message: str, color: str = Colors.NC, file: Optional[TextIO] = None) -> None:
    """Print colored status message."""
    print(_paint(message, color), file=file or sys.stdout)

def print_success(message: str) -> None:
    """Print success message with symbol from STATUS_SYMBOLS."""
    print_status(f"{STATUS_SYMBOLS['SUCCESS']} {message}", Colors.GREEN)

def print_error(message: str) -> None:
    """Print error message to stderr."""
    print_status(f"{STATUS_SYMBOLS['ERROR']} {message}", Colors.RED, file=sys.stderr)

def print_section(title: str) -> None:
    """Print section header with border."""
    print()
    print(_paint(f"═══ {title} ═══", Colors.BOLD, Colors.CYAN))
    print()

################################################################################
# ARGUMENT HELPERS
################################################################################

def parse_rgb(value: str) -> RGB:
    """argparse type for 'R,G,B' with each channel in 0-255."""
    parts = value.split(',')
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected R,G,B, got '{value}'")
    try:
        channels = [int(part.strip()) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"channels must be integers: '{value}'")
    if not all(0 <= channel <= 255 for channel in channels):
        raise argparse.ArgumentTypeError(f"channels must be in 0-255: '{value}'")
    return RGB(*channels)

################################################################################
# DISPLAY HELPERS
################################################################################

def format_table(headers: list, rows: list, widths: Optional[List[int]] = None) -> str:
    """Format data as simple ASCII table."""
    if not widths:
        widths = [len(str(h)) for h in headers]
        for row in rows:
            for idx, cell in enumerate(row):
                widths[idx] = max(widths[idx], len(str(cell)))

    header_line = "  ".join(f"{str(h):<{w}}" for h, w in zip(headers, widths))
    separator = "  ".join("-" * w for w in widths)

    row_lines = []
    for row in rows:
        row_line = "  ".join(f"{str(c):<{w}}" for c, w in zip(row, widths))
        row_lines.append(row_line)

    return "\n".join([header_line, separator] + row_lines)
