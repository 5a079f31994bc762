#!/usr/bin/env python3
"""
Output Formatter

Renders strings (and lists, dicts or registered types of them) as plain
text, JSON, XML, YAML, HTML or CSV into any text sink.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import csv
import dataclasses
import io
import json
import logging
import threading
from enum import Enum
from html import escape as html_escape
from typing import Any, Callable, Dict, List, Optional, TextIO, Tuple
from xml.sax.saxutils import escape as xml_escape

# Third-party imports
import yaml

# Internal imports
from .exceptions import FormatError

FormatterFunc = Callable[[TextIO, Any], None]

################################################################################
# OUTPUT FORMAT ENUM
################################################################################

class OutputFormat(Enum):
    PLAIN_TEXT = "Plain Text"
    JSON = "JSON"
    XML = "XML"
    YAML = "YAML"
    HTML = "HTML"
    CSV = "CSV"


def format_to_string(fmt: OutputFormat) -> str:
    return fmt.value


def string_to_format(name: str) -> OutputFormat:
    """Parse a display name ('Plain Text', 'JSON', ...) or enum name ('PLAIN_TEXT').

    Raises:
        FormatError: Unknown format name
    """
    for fmt in OutputFormat:
        if name == fmt.value or name == fmt.name:
            return fmt
    raise FormatError(f"Unknown output format: {name}")

################################################################################
# STRING FORMATTERS
################################################################################

def plain_text_format(stream: TextIO, data: str) -> None:
    stream.write(f"{data}\n")


def json_format(stream: TextIO, data: str) -> None:
    stream.write(json.dumps({"output": data}, indent=1))
    stream.write("\n")


def xml_format(stream: TextIO, data: str) -> None:
    stream.write(f"<output>\n {xml_escape(data)}\n</output>\n")


def yaml_format(stream: TextIO, data: str) -> None:
    stream.write(yaml.safe_dump({"output": data}, default_flow_style=False, allow_unicode=True))


def html_format(stream: TextIO, data: str) -> None:
    stream.write(f"<html><body><p>{html_escape(data, quote=False)}</p></body></html>\n")


def csv_format(stream: TextIO, data: str) -> None:
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(["output", data])


STRING_FORMATTERS: Dict[OutputFormat, FormatterFunc] = {
    OutputFormat.PLAIN_TEXT: plain_text_format,
    OutputFormat.JSON: json_format,
    OutputFormat.XML: xml_format,
    OutputFormat.YAML: yaml_format,
    OutputFormat.HTML: html_format,
    OutputFormat.CSV: csv_format,
}

# Written for values that have no formatter in the requested format
UNSUPPORTED_PLACEHOLDERS: Dict[OutputFormat, str] = {
    OutputFormat.PLAIN_TEXT: "No custom plain text format available.",
    OutputFormat.JSON: '{"unsupported_type": "No custom JSON format available."}',
    OutputFormat.XML: "<unsupported_type>No custom XML format available.</unsupported_type>",
    OutputFormat.YAML: "unsupported_type: No custom YAML format available.\n",
    OutputFormat.HTML: "<html><body><p>No custom HTML format available.</p></body></html>",
    OutputFormat.CSV: "key,value\nNo custom CSV format available,",
}

################################################################################
# FORMAT MANAGER CLASS
################################################################################

class FormatManager:
    """Current output format plus formatters registered per value type."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._format = OutputFormat.PLAIN_TEXT
        self._formatters: Dict[Tuple[type, OutputFormat], FormatterFunc] = {}

    ################################################################################
    # PUBLIC INTERFACE - Format Selection
    ################################################################################

    def set_format(self, fmt: OutputFormat) -> None:
        with self._lock:
            self._format = fmt

    def get_format(self) -> OutputFormat:
        with self._lock:
            return self._format

    def list_formats(self) -> List[OutputFormat]:
        return list(OutputFormat)

    def reset_format(self) -> None:
        self.set_format(OutputFormat.PLAIN_TEXT)

    def register_formatter(self, data_type: type, fmt: OutputFormat, func: FormatterFunc) -> None:
        """Use func(stream, item) for items of data_type in the given format."""
        with self._lock:
            self._formatters[(data_type, fmt)] = func

    ################################################################################
    # PUBLIC INTERFACE - Rendering
    ################################################################################

    def apply_output_format(self, stream: TextIO, data: Any,
                            fmt: Optional[OutputFormat] = None) -> TextIO:
        """Write data in fmt (default: current format).

        Lists are written item by item. Dicts are written item by item, each
        preceded by a 'Key: <key>' line and followed by a blank line.
        Formatting errors are logged and the output is cut short.
        """
        fmt = fmt or self.get_format()
        try:
            if isinstance(data, list):
                for item in data:
                    self._format_item(stream, item, fmt)
            elif isinstance(data, dict):
                for key, item in data.items():
                    stream.write(f"Key: {key}\n")
                    self._format_item(stream, item, fmt)
                    stream.write("\n")
            else:
                self._format_item(stream, data, fmt)
        except (TypeError, ValueError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to format output as {fmt.value}: {e}")
        return stream

    def format_string(self, data: Any, fmt: Optional[OutputFormat] = None) -> str:
        return self.apply_output_format(io.StringIO(), data, fmt).getvalue()

    ################################################################################
    # PRIVATE METHODS - Dispatch
    ################################################################################

    def _lookup(self, data_type: type, fmt: OutputFormat) -> Optional[FormatterFunc]:
        with self._lock:
            for klass in data_type.__mro__:
                func = self._formatters.get((klass, fmt))
                if func is not None:
                    return func
        return None

    def _format_item(self, stream: TextIO, item: Any, fmt: OutputFormat) -> None:
        func = self._lookup(type(item), fmt)
        if func is not None:
            func(stream, item)
            return

        if isinstance(item, str):
            STRING_FORMATTERS[fmt](stream, item)
        elif isinstance(item, (int, float)):
            STRING_FORMATTERS[fmt](stream, str(item))
        elif fmt in (OutputFormat.JSON, OutputFormat.YAML) and self._is_structured(item):
            self._dump_structured(stream, item, fmt)
        else:
            stream.write(UNSUPPORTED_PLACEHOLDERS[fmt])

    @staticmethod
    def _is_structured(item: Any) -> bool:
        return isinstance(item, dict) or (dataclasses.is_dataclass(item) and not isinstance(item, type))

    @staticmethod
    def _dump_structured(stream: TextIO, item: Any, fmt: OutputFormat) -> None:
        payload = dataclasses.asdict(item) if dataclasses.is_dataclass(item) else item
        if fmt == OutputFormat.JSON:
            stream.write(json.dumps(payload, indent=1))
            stream.write("\n")
        else:
            stream.write(yaml.safe_dump(payload, default_flow_style=False, allow_unicode=True))
