"""
Lox Scanner (Tokenizer)
=======================

This module converts Lox source text into a flat list of tokens.

The scanner makes a single left-to-right pass over the source with at
most two characters of lookahead. It never stops at the first lexical
error: every error is recorded and the pass continues with the next
character, so one run reports every problem in the file. If anything
went wrong, a ScanError carrying all of the messages is raised instead
of returning tokens.

Lexical Rules
-------------
- Punctuation: ( ) { } , . - + ; * /
- Operators: ! != = == < <= > >= (longest match, at most two chars)
- Comments: // up to the end of the line
- Whitespace: space, tab, carriage return; newline advances the line
- Strings: "double quoted", may span lines, no escape sequences
- Numbers: 123 or 123.45; a dot with no digit after it ends the number
  and is discarded

Identifiers and keywords are not recognised yet; letters are reported
as unrecognized characters.

Example Usage
-------------
>>> from pylox.scanner import scan
>>> for token in scan('(1 + 2.5) // sum'):
...     print(token)
LEFT_PAREN ( None
NUMBER 1 FloatValue(value=1.0)
PLUS + None
NUMBER 2.5 FloatValue(value=2.5)
RIGHT_PAREN ) None
EOF  None
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pylox.errors import (
    ErrorCollector,
    LexicalError,
    NumberParseError,
    SourceLocation,
    UnrecognizedCharacterError,
    UnterminatedStringError,
)
from pylox.tokens import FloatValue, StringValue, Token, TokenLiteral, TokenType

logger = logging.getLogger(__name__)


# Characters that map directly to a token type
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
#   char: (without '=', with '=')
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = " \t\r"
DIGITS = "0123456789"


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit (False for the empty string)."""
    return char != "" and char in DIGITS


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Name reported in error locations
        max_errors: Maximum number of errors kept for the report. The
                    scan always runs to the end of the source; errors
                    beyond the limit are only counted. None means no limit.
    """
    filename: str = "<input>"
    max_errors: Optional[int] = None


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    Usage:
        scanner = Scanner(source_text)
        tokens = scanner.scan_tokens()

    Each call to scan_tokens() scans the whole source from the beginning,
    so repeated calls return equal token lists.

    Attributes:
        source: The source code being tokenized
        options: Scanner configuration
    """

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        self.source = source
        self.options = options or ScannerOptions()
        self._reset()

    def _reset(self) -> None:
        self.tokens: list[Token] = []
        self._collector = ErrorCollector(max_errors=self.options.max_errors)

        # Start of the lexeme being scanned, and the scan cursor
        self._start = 0
        self._current = 0

        self._line = 1
        self._start_line = 1

    @property
    def errors(self) -> list[LexicalError]:
        """Errors recorded by the most recent scan."""
        return list(self._collector.errors)

    def scan_tokens(self) -> list[Token]:
        """
        Scan the entire source.

        Returns:
            Every token in source order, followed by one EOF token

        Raises:
            ScanError: If any lexical error occurred anywhere in the source
        """
        self._reset()
        logger.debug(f"Scanning {self.options.filename} ({len(self.source)} chars)")

        while not self._at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self._line))

        logger.debug(
            f"Scanned {self.options.filename}: {len(self.tokens)} tokens, "
            f"{self._collector.error_count()} errors"
        )
        self._collector.raise_if_errors()
        return list(self.tokens)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _peek(self) -> str:
        """Current character without consuming it, "" at end of input."""
        if self._at_end():
            return ""
        return self.source[self._current]

    def _peek_next(self) -> str:
        """Character after the current one, "" past end of input."""
        if self._current + 1 >= len(self.source):
            return ""
        return self.source[self._current + 1]

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals expected."""
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _advance(self) -> str:
        """Consume and return the current character. Caller checks _at_end()."""
        char = self.source[self._current]
        self._current += 1
        if char == "\n":
            self._line += 1
        return char

    # =========================================================================
    # Token Creation and Errors
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: Optional[TokenLiteral] = None) -> None:
        lexeme = self.source[self._start:self._current]
        self.tokens.append(Token(token_type, lexeme, literal, self._start_line))

    def _start_location(self) -> SourceLocation:
        """Location of the first character of the current lexeme."""
        # The lexeme may have crossed newlines; count back from its start.
        line_start = self.source.rfind("\n", 0, self._start) + 1
        return SourceLocation(
            self.options.filename,
            self._start_line,
            self._start - line_start + 1,
        )

    def _error(self, error: LexicalError) -> None:
        logger.debug(f"{error.location}: {error.message}")
        self._collector.add(error)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Scan one lexeme starting at self._start."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE or char == "\n":
            # Newlines were counted by _advance()
            pass
        elif char == '"':
            self._scan_string()
        elif is_digit(char):
            self._scan_number()
        else:
            self._error(UnrecognizedCharacterError(char, self._start_location()))

    def _skip_comment(self) -> None:
        """Skip to the end of the line, leaving the newline in place."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _scan_string(self) -> None:
        """
        Scan a string literal after its opening quote.

        Strings may contain newlines. There are no escape sequences, so
        the first '"' always closes the string.
        """
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            self._error(UnterminatedStringError(self._start_location()))
            return

        self._advance()  # closing "

        text = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, StringValue(text))

    def _scan_number(self) -> None:
        """
        Scan a number literal after its first digit.

        The fractional part is only taken when the dot is followed by a
        digit. A dot directly after the integer digits without one ends
        the number and is dropped: "321." scans as the number 321.
        """
        while is_digit(self._peek()):
            self._advance()

        trailing_dot = False
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # .
            while is_digit(self._peek()):
                self._advance()
        elif self._peek() == ".":
            trailing_dot = True

        text = self.source[self._start:self._current]
        try:
            value = float(text)
        except ValueError:
            self._error(NumberParseError(text, self._start_location()))
        else:
            self._add_token(TokenType.NUMBER, FloatValue(value))

        if trailing_dot:
            self._advance()


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(source: str, filename: str = "<input>", max_errors: Optional[int] = None) -> list[Token]:
    """
    Scan Lox source into tokens.

    Args:
        source: The source text
        filename: Name used in error locations
        max_errors: Limit on errors kept in the report (None for no limit)

    Returns:
        The token list, ending with a single EOF token

    Raises:
        ScanError: If any lexical error was found
    """
    options = ScannerOptions(filename=filename, max_errors=max_errors)
    return Scanner(source, options).scan_tokens()
