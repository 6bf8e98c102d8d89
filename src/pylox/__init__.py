"""
pylox - Lexical Front-End for the Lox Scripting Language
=========================================================

This package turns Lox source text into tokens and provides the
expression tree model a Lox parser builds.

Main Components
---------------
- **scanner**: single-pass tokenizer that reports every lexical error
  of a file at once
- **tokens**: token types, token literal payloads and the Token record
- **ast**: expression nodes and a prefix-notation printer
- **cli**: the ``loxscan`` command

Quick Start
-----------
    >>> from pylox import scan
    >>> [t.type.name for t in scan("1 + 2")]
    ['NUMBER', 'PLUS', 'NUMBER', 'EOF']

Or from the shell:
    $ loxscan program.lox
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pylox.errors import (
    LoxError,
    SourceLocation,
    LexicalError,
    UnrecognizedCharacterError,
    UnterminatedStringError,
    NumberParseError,
    ScanError,
    LiteralConversionError,
    ErrorCollector,
)
from pylox.tokens import (
    TokenType,
    Token,
    KEYWORDS,
    IntValue,
    FloatValue,
    StringValue,
    IdentifierValue,
)
from pylox.scanner import Scanner, ScannerOptions, scan
from pylox.ast import (
    Expr,
    Binary,
    Grouping,
    Literal,
    Unary,
    NumberValue,
    TextValue,
    Constant,
    ASTVisitor,
    ASTPrinter,
    literal_from_token,
    print_expr,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "LoxError",
    "SourceLocation",
    "LexicalError",
    "UnrecognizedCharacterError",
    "UnterminatedStringError",
    "NumberParseError",
    "ScanError",
    "LiteralConversionError",
    "ErrorCollector",
    # Tokens
    "TokenType",
    "Token",
    "KEYWORDS",
    "IntValue",
    "FloatValue",
    "StringValue",
    "IdentifierValue",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "scan",
    # Expressions
    "Expr",
    "Binary",
    "Grouping",
    "Literal",
    "Unary",
    "NumberValue",
    "TextValue",
    "Constant",
    "ASTVisitor",
    "ASTPrinter",
    "literal_from_token",
    "print_expr",
]
