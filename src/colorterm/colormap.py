#!/usr/bin/env python3
"""
Color Mapping

Character, key and value color tables and the character-by-character
colorizer used by themes.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

from typing import Dict, Optional

from .colors import RESET

KEY_VALUE_SEPARATOR = ':'

################################################################################
# COLOR MAPPING CLASS
################################################################################

class ColorMapping:
    """Three independent tables: char -> code, key -> code, value -> code."""

    def __init__(self) -> None:
        self._chars: Dict[str, str] = {}
        self._keys: Dict[str, str] = {}
        self._values: Dict[str, str] = {}

    def copy(self) -> 'ColorMapping':
        clone = ColorMapping()
        clone._chars = dict(self._chars)
        clone._keys = dict(self._keys)
        clone._values = dict(self._values)
        return clone

    ################################################################################
    # PUBLIC INTERFACE - Mutation
    ################################################################################

    def insert(self, name: str, characters: str, code: str,
               is_key: bool = False, is_value: bool = False) -> None:
        """Bind a color code.

        Key and value mappings are stored under ``name``; ``characters`` is
        only used for the character table, where every character in it gets
        the same code.
        """
        if is_key:
            self._keys[name] = code
        elif is_value:
            self._values[name] = code
        else:
            for ch in characters:
                self._chars[ch] = code

    def replace(self, characters: str, code: str) -> None:
        for ch in characters:
            self._chars[ch] = code

    def erase(self, characters: str) -> None:
        for ch in characters:
            self._chars.pop(ch, None)

    ################################################################################
    # PUBLIC INTERFACE - Colorizing
    ################################################################################

    def apply(self, text: str) -> str:
        """Colorize text one character at a time.

        Everything before the first ':' is looked up in the key table,
        everything from the ':' on in the value table. Lookups are done per
        character, so only single-character keys and values can match.
        """
        parts = []
        is_key = True
        for ch in text:
            if ch == KEY_VALUE_SEPARATOR:
                is_key = False

            code = self._chars.get(ch)
            if code is not None:
                parts.append(f"{code}{ch}{RESET}")
            elif is_key:
                parts.append(self.apply_key_color(ch))
            else:
                parts.append(self.apply_value_color(ch))
        return ''.join(parts)

    def apply_key_color(self, key: str) -> str:
        code = self._keys.get(key)
        if code is not None:
            return f"{code}{key}{RESET}"
        return key

    def apply_value_color(self, value: str) -> str:
        code = self._values.get(value)
        if code is not None:
            return f"{code}{value}{RESET}"
        return value

    ################################################################################
    # PUBLIC INTERFACE - Accessors
    ################################################################################

    def get(self) -> Dict[str, str]:
        return dict(self._chars)

    def get_key_map(self) -> Dict[str, str]:
        return dict(self._keys)

    def get_value_map(self) -> Dict[str, str]:
        return dict(self._values)

    def inspect_color(self, character: str) -> Optional[str]:
        return self._chars.get(character)

    def inspect_key_color(self, key: str) -> Optional[str]:
        return self._keys.get(key)

    def inspect_value_color(self, value: str) -> Optional[str]:
        return self._values.get(value)
