"""Tests for the custom color registry and RGB palette."""

import io

from colorterm.colors import PREDEFINED_COLORS
from colorterm.emitter import Emitter
from colorterm.registry import CustomColorRegistry

ERROR_CODE = "\x1b[38;5;196m"


class TestCustomColors:

    def setup_method(self):
        self.emitter = Emitter()
        self.registry = CustomColorRegistry(self.emitter)
        self.out = io.StringIO()

    def test_custom_color_emits_code(self):
        self.registry.set_custom_color("error", ERROR_CODE)
        assert self.registry.custom_color(self.out, "error") is True
        assert self.out.getvalue() == ERROR_CODE

    def test_missing_emits_nothing_and_reports(self, caplog):
        assert self.registry.custom_color(self.out, "missing") is False
        assert self.out.getvalue() == ""
        assert "Custom color 'missing' not found" in caplog.text

    def test_missing_uses_default_code(self):
        assert self.registry.custom_color(self.out, "missing", default_code="\x1b[1m") is True
        assert self.out.getvalue() == "\x1b[1m"

    def test_reregister_overwrites(self):
        self.registry.set_custom_color("c", "\x1b[31m")
        self.registry.set_custom_color("c", "\x1b[32m")
        assert self.registry.get_code("c") == "\x1b[32m"

    def test_callable_is_snapshotted(self):
        """A color function runs once at registration; later changes are not seen."""
        state = {"code": "\x1b[31m"}
        self.registry.set_custom_color("dyn", lambda s: s.write(state["code"]))
        state["code"] = "\x1b[32m"
        self.registry.custom_color(self.out, "dyn")
        assert self.out.getvalue() == "\x1b[31m"

    def test_callable_using_emitter(self):
        self.registry.set_custom_color("orange", lambda s: self.emitter.apply_color(s, 255, 165, 0))
        assert self.registry.get_code("orange") == "\x1b[38;2;255;165;0m"

    def test_disabled_emitter_suppresses_output(self):
        self.registry.set_custom_color("error", ERROR_CODE)
        self.emitter.disable_global_color()
        assert self.registry.custom_color(self.out, "error") is True
        assert self.out.getvalue() == ""

    def test_get_custom_color_resolves_at_call_time(self):
        apply = self.registry.get_custom_color("late")
        self.registry.set_custom_color("late", ERROR_CODE)
        apply(self.out)
        assert self.out.getvalue() == ERROR_CODE

    def test_set_from_predefined(self):
        assert self.registry.set_custom_color_predefined("warn", "amber") is True
        assert self.registry.get_code("warn") == PREDEFINED_COLORS["amber"]

    def test_set_from_unknown_predefined(self, caplog):
        assert self.registry.set_custom_color_predefined("warn", "nope") is False
        assert self.registry.get_code("warn") is None
        assert "Predefined color 'nope' not found" in caplog.text

    def test_remove_list_reset(self):
        self.registry.set_custom_color("a", "\x1b[1m")
        self.registry.set_custom_color("b", "\x1b[2m")
        self.registry.remove_custom_color("a")
        self.registry.remove_custom_color("absent")
        assert self.registry.list_custom_colors() == ["b"]
        self.registry.reset_custom_colors()
        assert self.registry.list_custom_colors() == []

    def test_inspect_custom_color(self):
        self.registry.set_custom_color("error", ERROR_CODE)
        self.registry.inspect_custom_color("error", self.out)
        self.registry.inspect_custom_color("other", self.out)
        assert self.out.getvalue() == (
            "error: \\033[38;5;196m\n"
            "other not found in custom colors.\n"
        )


class TestPalette:

    def setup_method(self):
        self.registry = CustomColorRegistry(Emitter())
        self.out = io.StringIO()

    def test_seeded_palette(self):
        assert self.registry.palette_color(self.out, "red") is True
        assert self.out.getvalue() == "\x1b[38;2;255;0;0m"

    def test_background_palette_color(self):
        self.registry.set_palette_color("orange", 255, 165, 0)
        self.registry.palette_color(self.out, "orange", background=True)
        assert self.out.getvalue() == "\x1b[48;2;255;165;0m"

    def test_unknown_palette_name(self):
        assert self.registry.palette_color(self.out, "nope") is False
        assert self.out.getvalue() == ""
