"""
Lox Scanner Command-Line Interface
==================================

This package provides the command-line tools for the scanner:

- **loxscan**: scan a Lox script (or an interactive prompt) and print
  its tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["loxscan"]
