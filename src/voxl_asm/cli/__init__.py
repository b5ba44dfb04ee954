"""
VOXL Assembler Command-Line Interface
=====================================

This package provides command-line tools for the VOXL assembler front end:

- **vxlex**: tokenize a source file and print its tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["vxlex"]
