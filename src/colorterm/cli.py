#!/usr/bin/env python3
"""
ColorTerm Command Line Interface

Subcommands for inspecting the predefined colors, verifying terminal color
support, applying and editing themes, formatting output and rendering
gradients.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

# Internal imports
from . import __software_name__, __version__
from .application import ColorTerm
from .cli_helpers import (
    format_table, parse_rgb, print_error, print_section, print_success, set_colors_enabled,
)
from .colors import PREDEFINED_COLORS, RESET, printable
from .config import ConfigManager
from .effects import apply_gradient
from .exceptions import ColorTermException
from .formatter import OutputFormat, string_to_format
from .logger import LoggerManager

VERIFY_TARGETS = ('8bit', '24bit', 'predefined', 'all')
RGB_STEP = 51

################################################################################
# ARGUMENT PARSING - Command-Line Interface
################################################################################

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog='colorterm',
        description='ColorTerm - ANSI colors, themes and output formatting for terminals',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s colors                                   # List predefined colors
  %(prog)s verify all                               # Show 8-bit, 24-bit and predefined colors
  %(prog)s apply '{"name": "Alice"}' --config colorterm.toml
  %(prog)s edit mytheme --output mytheme.theme      # Build a theme interactively
  %(prog)s format "hello" --format JSON
  %(prog)s gradient "Hello World" --start 255,0,0 --end 0,0,255
        """
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-c', '--config', type=str, default=None, help='Path to TOML configuration file')
    parser.add_argument('--no-color', action='store_true', help='Disable all color output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('colors', help='List predefined colors and styles')

    parser_verify = subparsers.add_parser('verify', help='Print color spectra to check terminal support')
    parser_verify.add_argument('target', choices=VERIFY_TARGETS, help='Which spectrum to print')

    parser_apply = subparsers.add_parser('apply', help='Colorize text with the active theme')
    parser_apply.add_argument('text', type=str, help='Text to colorize')
    parser_apply.add_argument('--theme-file', type=str, default=None, help='Load and activate a theme file first')

    parser_show = subparsers.add_parser('show', help='Show all themes and their mappings')
    parser_show.add_argument('--theme-file', type=str, default=None, help='Load a theme file first')

    parser_edit = subparsers.add_parser('edit', help='Edit a theme interactively')
    parser_edit.add_argument('name', type=str, help='Theme name (created if missing)')
    parser_edit.add_argument('--output', type=str, default=None, help='Save the theme to this file')

    format_names = [fmt.value for fmt in OutputFormat]
    parser_format = subparsers.add_parser('format', help='Print text in an output format')
    parser_format.add_argument('text', type=str, help='Text to format')
    parser_format.add_argument('--format', type=str, default=None,
                               help=f"Output format: {', '.join(format_names)} (default: from config)")

    parser_gradient = subparsers.add_parser('gradient', help='Print text with a color gradient')
    parser_gradient.add_argument('text', type=str, help='Text to render')
    parser_gradient.add_argument('--start', type=parse_rgb, required=True, help='Start color as R,G,B')
    parser_gradient.add_argument('--end', type=parse_rgb, required=True, help='End color as R,G,B')

    return parser

################################################################################
# VERIFICATION OUTPUT
################################################################################

def verify_8bit(app: ColorTerm, out: TextIO) -> None:
    """Print all 256 palette entries, 16 per row."""
    for index in range(256):
        app.emitter.apply_color(out, index)
        out.write(f"{index:3d} ")
        if (index + 1) % 16 == 0:
            out.write("\n")
    app.emitter.reset(out)
    out.write("\n")


def verify_24bit(app: ColorTerm, out: TextIO) -> None:
    """Print a coarse RGB cube (steps of 51 per channel)."""
    for r in range(0, 256, RGB_STEP):
        for g in range(0, 256, RGB_STEP):
            for b in range(0, 256, RGB_STEP):
                app.emitter.apply_color(out, r, g, b)
                out.write(f"({r:3d},{g:3d},{b:3d}) ")
                app.emitter.reset(out)
                out.write(" ")
            out.write("\n")
        out.write("\n")
    app.emitter.reset(out)
    out.write("\n")


def verify_predefined(app: ColorTerm, out: TextIO) -> None:
    """Print every predefined color or style name in its own color."""
    for name in PREDEFINED_COLORS:
        app.emitter.apply_predefined(out, name)
        out.write(name)
        app.emitter.reset(out)
        out.write("\n")

################################################################################
# CLI COMMAND HANDLERS - Subcommand Processing
################################################################################

def _load_theme_file(app: ColorTerm, path: str) -> str:
    name = os.path.splitext(os.path.basename(path))[0]
    app.themes.load(name, path)
    return name


def handle_command(args: argparse.Namespace, app: ColorTerm, logger: logging.Logger) -> int:
    """Dispatch a subcommand. Returns: Exit code (0=success)."""
    out = sys.stdout

    if args.command == 'colors':
        rows = []
        for name, code in PREDEFINED_COLORS.items():
            sample = f"{code}sample{RESET}" if app.emitter.is_enabled else "sample"
            rows.append([name, printable(code), sample])
        print(format_table(['Name', 'Code', 'Sample'], rows))
        return 0

    elif args.command == 'verify':
        if args.target in ('8bit', 'all'):
            print_section("8-bit Spectrum")
            verify_8bit(app, out)
        if args.target in ('24bit', 'all'):
            print_section("24-bit Spectrum")
            verify_24bit(app, out)
        if args.target in ('predefined', 'all'):
            print_section("Predefined Colors")
            verify_predefined(app, out)
        return 0

    elif args.command == 'apply':
        if args.theme_file:
            app.themes.set(_load_theme_file(app, args.theme_file))
        print(app.themes.apply(args.text))
        return 0

    elif args.command == 'show':
        if args.theme_file:
            _load_theme_file(app, args.theme_file)
        out.write(app.themes.list_all_theme_maps())
        return 0

    elif args.command == 'edit':
        if args.name not in app.themes.list():
            app.themes.create(args.name)
        count = app.themes.interactive_edit_theme(args.name)
        if args.output:
            app.themes.save(args.name, args.output)
            print_success(f"Saved {count} mapping(s) of theme '{args.name}' to {args.output}")
        else:
            out.write(app.themes.list_all_theme_maps())
        return 0

    elif args.command == 'format':
        fmt = string_to_format(args.format) if args.format else None
        app.formats.apply_output_format(out, args.text, fmt)
        return 0

    elif args.command == 'gradient':
        print(apply_gradient(app.emitter, args.text, args.start, args.end))
        return 0

    logger.error(f"Unknown command: {args.command}")
    return 1

################################################################################
# MAIN APPLICATION - Entry Point and Initialization
################################################################################

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Load config, build ColorTerm, run subcommand. Returns: Exit code (0=success)."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConfigManager(args.config)
    except ColorTermException as e:
        print_error(str(e))
        return 1

    app = ColorTerm(config)
    logger = app.logger

    try:
        app.initialize()
        if args.no_color:
            app.emitter.disable_global_color()
            app.themes.disable_colormap()
            set_colors_enabled(False)
        return handle_command(args, app, logger)
    except (ColorTermException, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        app.teardown()
        set_colors_enabled(True)


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger = LoggerManager.get_logger(__software_name__)
        logger.warning("Interrupted by user")
        sys.exit(130)
