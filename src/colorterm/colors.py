#!/usr/bin/env python3
"""
ANSI Color Codes - Central color definitions for terminal output
Used by: emitter.py, registry.py, logger.py, cli_helpers.py

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

from types import MappingProxyType
from typing import Mapping, NamedTuple

ESC = '\033'
RESET = '\033[0m'

################################################################################
# RGB TRIPLE
################################################################################

class RGB(NamedTuple):
    """24-bit color as red/green/blue channel values (0-255)."""
    r: int
    g: int
    b: int

################################################################################
# ANSI COLOR CODES
################################################################################

class Colors:
    """ANSI color codes for terminal output."""
    # Status colors
    RED = '\033[31m'
    GREEN = '\033[32m'
    CYAN = '\033[36m'

    # Formatting
    BOLD = '\033[1m'

    # Reset
    NC = RESET          # No Color / Reset

################################################################################
# PREDEFINED COLOR TABLE
################################################################################

_BASIC = {
    'black': '\033[30m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'blue': '\033[34m',
    'magenta': '\033[35m',
    'cyan': '\033[36m',
    'white': '\033[37m',

    'bg_black': '\033[40m',
    'bg_red': '\033[41m',
    'bg_green': '\033[42m',
    'bg_yellow': '\033[43m',
    'bg_blue': '\033[44m',
    'bg_magenta': '\033[45m',
    'bg_cyan': '\033[46m',
    'bg_white': '\033[47m',
    'reset': RESET,
}

_STYLES = {
    'bold': '\033[1m',
    'faint': '\033[2m',
    'italic': '\033[3m',
    'underline': '\033[4m',
    'blink_slow': '\033[5m',
    'blink_rapid': '\033[6m',
    'reverse': '\033[7m',
    'hidden': '\033[8m',
    'strikethrough': '\033[9m',
    'default_foreground': '\033[39m',
    'default_background': '\033[49m',
    'fullreset': '\033[0m\033[39m\033[49m',

    'primary_font': '\033[10m',
    'alternate_font_1': '\033[11m',
    'alternate_font_2': '\033[12m',
    'alternate_font_3': '\033[13m',
    'alternate_font_4': '\033[14m',
    'alternate_font_5': '\033[15m',
    'alternate_font_6': '\033[16m',
    'alternate_font_7': '\033[17m',
    'alternate_font_8': '\033[18m',
    'fraktur': '\033[20m',
    'doubly_underline': '\033[21m',
    'normal_intensity': '\033[22m',
    'no_italic': '\033[23m',
    'no_underline': '\033[24m',
    'no_blink': '\033[25m',
    'reserved_1': '\033[26m',
    'no_reverse': '\033[27m',
    'reveal': '\033[28m',
    'no_strikethrough': '\033[29m',
}

# Light (faint), bold and bright variants of the eight basic colors
_BASE_NAMES = ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white')

_VARIANTS = {}
for _index, _name in enumerate(_BASE_NAMES):
    _VARIANTS[f'light_{_name}'] = f'\033[2;3{_index}m'
    _VARIANTS[f'bold_{_name}'] = f'\033[1;3{_index}m'
    _VARIANTS[f'bright_{_name}'] = f'\033[9{_index}m'
    _VARIANTS[f'bg_light_{_name}'] = f'\033[2;4{_index}m'
    _VARIANTS[f'bg_bright_{_name}'] = f'\033[10{_index}m'

# Named 256-color palette entries (foreground; bg_ variants are derived)
_NAMED_256 = {
    'amethyst': 92,
    'amber': 214,
    'apricot': 215,
    'aqua': 51,
    'azure': 75,
    'beige': 230,
    'brown': 94,
    'charcoal': 240,
    'coral': 203,
    'crimson': 197,
    'emerald': 46,
    'gold': 220,
    'indigo': 54,
    'ivory': 230,
    'jade': 35,
    'khaki': 228,
    'lavender': 183,
    'lime': 10,
    'maroon': 88,
    'mint': 48,
    'navy': 17,
    'olive': 100,
    'onyx': 236,
    'orange': 214,
    'peach': 217,
    'pearl': 231,
    'pink': 13,
    'plum': 176,
    'purple': 93,
    'rose': 211,
    'rose_gold': 223,
    'ruby': 196,
    'salmon': 209,
    'sapphire': 21,
    'silver': 7,
    'teal': 14,
    'topaz': 178,
    'turquoise': 45,
    'violet': 177,
}

_PALETTE = {}
for _name, _index in _NAMED_256.items():
    _PALETTE[_name] = f'\033[38;5;{_index}m'
    _PALETTE[f'bg_{_name}'] = f'\033[48;5;{_index}m'
_PALETTE['bg_reset'] = '\033[49m'

PREDEFINED_COLORS: Mapping[str, str] = MappingProxyType({
    **_BASIC,
    **_STYLES,
    **_VARIANTS,
    **_PALETTE,
})

################################################################################
# LOGGING COLOR MAP
################################################################################

LOG_COLORS = {
    'TRACE': PREDEFINED_COLORS['blue'],
    'DEBUG': PREDEFINED_COLORS['cyan'],
    'INFO': PREDEFINED_COLORS['green'],
    'WARNING': PREDEFINED_COLORS['yellow'],
    'ERROR': PREDEFINED_COLORS['red'],
    'CRITICAL': PREDEFINED_COLORS['magenta'],
    'UNKNOWN': PREDEFINED_COLORS['white'],
    'RESET': RESET
}

################################################################################
# LOGGING LABELS
################################################################################

LOG_MESSAGES = {
    'TRACE': 'TRACE',
    'DEBUG': 'DEBUG',
    'INFO': 'INFO',
    'WARNING': 'WARNING',
    'ERROR': 'ERROR',
    'CRITICAL': 'FATAL',
    'UNKNOWN': 'UNKNOWN'
}

################################################################################
# HELPERS
################################################################################

def printable(code: str) -> str:
    """Render raw escape characters as visible text (ESC -> '\\033')."""
    return code.replace(ESC, '\\033')
