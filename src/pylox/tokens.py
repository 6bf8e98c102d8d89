"""
Lox Tokens
==========

Token types, literal payloads and the Token record produced by the
scanner.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; * /
- One or two character operators: ! != = == < <= > >=
- Literals: identifiers, strings, numbers
- Keywords: and, class, else, false, fun, for, if, nil, or, print,
  return, super, this, true, var, while
- EOF: end of input marker

Keywords are reserved in the enumeration and in KEYWORDS, but the
scanner does not classify identifiers yet, so it never produces them.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the Lox language."""

    # === Single-character tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or two character tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


# =============================================================================
# Token Literal Values
# =============================================================================
# Raw values parsed out of the source text. These are distinct from the
# expression literals in pylox.ast, which a parser builds from them.

@dataclass(frozen=True)
class IntValue:
    value: int


@dataclass(frozen=True)
class FloatValue:
    value: float


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class IdentifierValue:
    name: str


TokenLiteral = Union[IntValue, FloatValue, StringValue, IdentifierValue]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from Lox source.

    Attributes:
        type: The TokenType classification
        lexeme: The exact source text of the token
        literal: Parsed literal payload for NUMBER and STRING tokens
        line: Line of the token's first character (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: Optional[TokenLiteral]
    line: int

    def __str__(self) -> str:
        """Diagnostic form: type, lexeme and literal."""
        return f"{self.type.name} {self.lexeme} {self.literal!r}"

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"
