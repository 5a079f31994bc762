"""
Custom Exception Classes for ColorTerm.

Exception Hierarchy:
    ColorTermException (Base)
    ├─ AlreadyExistsError   - Theme created with a name that is already registered
    ├─ NotFoundError        - Unknown theme, custom color or predefined color
    ├─ ThemeIOError         - Theme file could not be opened (also an OSError)
    ├─ ConfigError          - Configuration issues (TOML parsing, missing file)
    ├─ FormatError          - Unknown output format (also a ValueError)
    └─ ValidationError      - Input validation failures (also a ValueError)
"""


class ColorTermException(Exception):
    """Base exception for all ColorTerm errors."""
    pass


class AlreadyExistsError(ColorTermException):
    """Theme already registered under that name."""
    pass


class NotFoundError(ColorTermException):
    """Theme, custom color or predefined color not found."""
    pass


class ThemeIOError(ColorTermException, OSError):
    """Theme file could not be opened for reading or writing."""
    pass


class ConfigError(ColorTermException):
    """Configuration error (TOML parsing, missing file, invalid values)."""
    pass


class FormatError(ColorTermException, ValueError):
    """Unknown or unsupported output format."""
    pass


class ValidationError(ColorTermException, ValueError):
    """Input validation failed (channel out of range, empty theme name)."""
    pass
