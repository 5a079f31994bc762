"""Tests for output formats and the format manager."""

import io
from dataclasses import dataclass

import pytest
import yaml

from colorterm.exceptions import FormatError
from colorterm.formatter import (
    FormatManager, OutputFormat, format_to_string, string_to_format,
)


@dataclass
class Point:
    x: int
    y: int


class TestFormatNames:

    def test_display_names(self):
        assert format_to_string(OutputFormat.PLAIN_TEXT) == "Plain Text"
        assert format_to_string(OutputFormat.CSV) == "CSV"

    def test_parse_names(self):
        assert string_to_format("Plain Text") is OutputFormat.PLAIN_TEXT
        assert string_to_format("PLAIN_TEXT") is OutputFormat.PLAIN_TEXT
        assert string_to_format("YAML") is OutputFormat.YAML

    def test_unknown_name(self):
        with pytest.raises(FormatError):
            string_to_format("TOML")


class TestStringFormats:

    def setup_method(self):
        self.manager = FormatManager()

    def render(self, data, fmt):
        return self.manager.format_string(data, fmt)

    def test_plain_text(self):
        assert self.render("hello", OutputFormat.PLAIN_TEXT) == "hello\n"

    def test_json(self):
        assert self.render("hello", OutputFormat.JSON) == '{\n "output": "hello"\n}\n'

    def test_json_escapes_quotes(self):
        assert '"say \\"hi\\""' in self.render('say "hi"', OutputFormat.JSON)

    def test_xml(self):
        assert self.render("a < b", OutputFormat.XML) == "<output>\n a &lt; b\n</output>\n"

    def test_yaml(self):
        rendered = self.render("hello", OutputFormat.YAML)
        assert rendered == "output: hello\n"
        assert yaml.safe_load(rendered) == {"output": "hello"}

    def test_html(self):
        assert self.render("<b>", OutputFormat.HTML) == "<html><body><p>&lt;b&gt;</p></body></html>\n"

    def test_csv(self):
        assert self.render("hello", OutputFormat.CSV) == '"output","hello"\n'


class TestFormatManager:

    def setup_method(self):
        self.manager = FormatManager()

    def test_default_and_reset(self):
        assert self.manager.get_format() is OutputFormat.PLAIN_TEXT
        self.manager.set_format(OutputFormat.JSON)
        assert self.manager.get_format() is OutputFormat.JSON
        self.manager.reset_format()
        assert self.manager.get_format() is OutputFormat.PLAIN_TEXT

    def test_list_formats(self):
        assert len(self.manager.list_formats()) == 6

    def test_current_format_used_by_default(self):
        self.manager.set_format(OutputFormat.CSV)
        out = io.StringIO()
        self.manager.apply_output_format(out, "x")
        assert out.getvalue() == '"output","x"\n'

    def test_list_is_formatted_per_item(self):
        assert self.manager.format_string(["a", "b"]) == "a\nb\n"

    def test_dict_items_have_key_headers(self):
        rendered = self.manager.format_string({"k1": "a", "k2": "b"})
        assert rendered == "Key: k1\na\n\nKey: k2\nb\n\n"

    def test_registered_formatter(self):
        self.manager.register_formatter(
            Point, OutputFormat.PLAIN_TEXT, lambda s, p: s.write(f"({p.x}, {p.y})\n"))
        assert self.manager.format_string(Point(1, 2)) == "(1, 2)\n"

    def test_dataclass_json_fallback(self):
        rendered = self.manager.format_string(Point(1, 2), OutputFormat.JSON)
        assert rendered == '{\n "x": 1,\n "y": 2\n}\n'

    def test_unsupported_placeholder(self):
        rendered = self.manager.format_string(Point(1, 2), OutputFormat.XML)
        assert rendered == "<unsupported_type>No custom XML format available.</unsupported_type>"

    def test_formatter_errors_are_logged(self, caplog):
        def broken(stream, item):
            raise ValueError("boom")

        self.manager.register_formatter(Point, OutputFormat.PLAIN_TEXT, broken)
        assert self.manager.format_string(Point(0, 0)) == ""
        assert "boom" in caplog.text
