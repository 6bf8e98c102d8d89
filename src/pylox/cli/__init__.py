"""
pylox Command-Line Interface
============================

- **loxscan**: tokenize a Lox source file and list the tokens

Implemented as a Click application.
"""

__all__ = ["loxscan"]
