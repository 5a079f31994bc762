"""Tests for the colorterm command line interface."""

import argparse

import pytest

from colorterm import cli
from colorterm.cli_helpers import (
    colors_enabled, format_table, parse_rgb, print_error, print_section, print_success,
    set_colors_enabled,
)

GREEN = "\x1b[38;5;34m"
RESET = "\x1b[0m"


@pytest.fixture
def theme_file(tmp_path):
    path = tmp_path / "brackets.theme"
    path.write_text(f"[:{GREEN}\n]:{GREEN}\n", encoding="utf-8")
    return path


class TestCommands:

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])
        assert exc.value.code == 0
        assert "0.1.0" in capsys.readouterr().out

    def test_apply_with_theme_file(self, theme_file, capsys):
        assert cli.main(["apply", "[x]", "--theme-file", str(theme_file)]) == 0
        assert capsys.readouterr().out == f"{GREEN}[{RESET}x{GREEN}]{RESET}\n"

    def test_apply_no_color(self, theme_file, capsys):
        assert cli.main(["--no-color", "apply", "[x]", "--theme-file", str(theme_file)]) == 0
        assert capsys.readouterr().out == "[x]\n"
        assert colors_enabled()

    def test_apply_with_config(self, tmp_path, capsys):
        config = tmp_path / "c.toml"
        config.write_text('[theme]\nactive = "t"\n[themes.t.chars]\nx = "red"\n', encoding="utf-8")
        assert cli.main(["--config", str(config), "apply", "xy"]) == 0
        assert capsys.readouterr().out == f"\x1b[31mx{RESET}y\n"

    def test_missing_config_fails(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "nope.toml"), "colors"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_theme_file_fails(self, tmp_path, capsys):
        assert cli.main(["apply", "x", "--theme-file", str(tmp_path / "nope.theme")]) == 1
        assert "apply failed" in capsys.readouterr().err

    def test_show(self, theme_file, capsys):
        assert cli.main(["show", "--theme-file", str(theme_file)]) == 0
        out = capsys.readouterr().out
        assert "Theme: brackets" in out
        assert "Character: [, Color Code: \\033[38;5;34m" in out

    def test_edit_and_save(self, tmp_path, monkeypatch, capsys):
        lines = iter([f"a:{GREEN}", "done"])
        monkeypatch.setattr("builtins.input", lambda *args: next(lines))
        output = tmp_path / "mine.theme"
        assert cli.main(["edit", "mine", "--output", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == f"a:{GREEN}\n"
        assert "Saved 1 mapping(s)" in capsys.readouterr().out

    def test_format_json(self, capsys):
        assert cli.main(["format", "hello", "--format", "JSON"]) == 0
        assert capsys.readouterr().out == '{\n "output": "hello"\n}\n'

    def test_format_unknown(self, capsys):
        assert cli.main(["format", "hello", "--format", "TOML"]) == 1

    def test_gradient(self, capsys):
        assert cli.main(["gradient", "ab", "--start", "0,0,0", "--end", "255,255,255"]) == 0
        assert capsys.readouterr().out == "\x1b[38;2;0;0;0ma\x1b[38;2;255;255;255mb\x1b[0m\n"

    def test_gradient_bad_color(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["gradient", "ab", "--start", "0,0", "--end", "1,1,1"])
        assert exc.value.code == 2

    def test_colors_table(self, capsys):
        assert cli.main(["--no-color", "colors"]) == 0
        out = capsys.readouterr().out
        assert "amethyst" in out
        assert "\\033[38;5;92m" in out
        assert "\x1b" not in out

    def test_verify_8bit(self, capsys):
        assert cli.main(["verify", "8bit"]) == 0
        out = capsys.readouterr().out
        assert "\x1b[38;5;255m255" in out

    def test_verify_all_no_color(self, capsys):
        assert cli.main(["--no-color", "verify", "all"]) == 0
        out = capsys.readouterr().out
        assert "(255,255,255)" in out
        assert "amethyst" in out
        assert "\x1b" not in out

    def test_keyboard_interrupt_exit_code(self, monkeypatch):
        def interrupted(argv=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "main", interrupted)
        with pytest.raises(SystemExit) as exc:
            cli.run()
        assert exc.value.code == 130


class TestHelpers:

    def test_parse_rgb(self):
        assert parse_rgb("255, 165,0") == (255, 165, 0)

    @pytest.mark.parametrize("value", ["1,2", "a,b,c", "0,0,256"])
    def test_parse_rgb_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_rgb(value)

    def test_format_table(self):
        table = format_table(["Name", "Code"], [["red", "x"]])
        assert table.splitlines() == ["Name  Code", "----  ----", "red   x   "]

    def test_status_output(self, capsys):
        print_success("saved")
        print_error("broken")
        print_section("Palette")
        captured = capsys.readouterr()
        assert captured.out == "\x1b[32m✓ saved\x1b[0m\n\n\x1b[1m\x1b[36m═══ Palette ═══\x1b[0m\n\n"
        assert captured.err == "\x1b[31m✗ broken\x1b[0m\n"

    def test_status_output_without_colors(self, capsys):
        set_colors_enabled(False)
        try:
            print_success("saved")
            print_section("Palette")
        finally:
            set_colors_enabled(True)
        assert capsys.readouterr().out == "✓ saved\n\n═══ Palette ═══\n\n"
