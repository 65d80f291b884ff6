"""
Cradle Command-Line Interface
=============================

This package provides the command-line tool for the translator:

- **cradle**: Translate an assignment or a program read from a file or
  standard input into pseudo-assembly

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["cradle"]
