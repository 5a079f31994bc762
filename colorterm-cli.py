#!/usr/bin/env python3
"""
ColorTerm - ANSI Colors, Themes and Output Formatting

Runs the colorterm command line tool from a source checkout without
installing the package.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import sys
import os

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from colorterm.cli import run

################################################################################
# ENTRY POINT - Script Execution Handler
################################################################################

if __name__ == "__main__":
    run()
