"""
pylox Error Hierarchy
=====================

This module defines the exception hierarchy for the Lox front-end.
All exceptions inherit from LoxError, allowing callers to catch every
front-end error with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
├── LexicalError - a single problem found while scanning
│   ├── UnrecognizedCharacterError - character matched by no token rule
│   ├── UnterminatedStringError - end of input inside a string literal
│   └── NumberParseError - number lexeme could not be converted
├── ScanError - every lexical error found in one scanning pass
└── LiteralConversionError - token has no expression literal equivalent

Error Message Format
--------------------
Lexical errors keep the short, fixed message texts callers match on:

    Unrecognized char at line 3: @
    Unterminated string
    Could not parse number: 12x

The location (filename, line, column) is carried on the exception as a
SourceLocation instead of being folded into the text. A ScanError joins
the messages of all collected errors with newlines.
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all pylox errors.

        try:
            tokens = scan(source)
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LoxError):
    """
    A failure to classify some span of source text into a token.

    Lexical errors are never raised out of the scanner one at a time.
    The scanner records them and keeps going; the complete set is
    reported through a single ScanError at the end of the pass.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
    """

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        self.message = message
        self.location = location
        super().__init__(message)

    @property
    def line(self) -> Optional[int]:
        """Line number of the error, if known."""
        return self.location.line if self.location else None

    def describe(self) -> str:
        """Format the error with its location prefix."""
        if self.location:
            return f"{self.location}: error: {self.message}"
        return f"error: {self.message}"


class UnrecognizedCharacterError(LexicalError):
    """
    Character not matched by any token rule.

    The offending character produces no token; scanning resumes at
    the next character.
    """

    def __init__(self, char: str, location: SourceLocation):
        self.char = char
        super().__init__(
            f"Unrecognized char at line {location.line}: {char}",
            location=location,
        )


class UnterminatedStringError(LexicalError):
    """
    End of input reached inside a string literal.

    Example:
        print "hello;    // no closing quote before end of file
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("Unterminated string", location=location)


class NumberParseError(LexicalError):
    """Number lexeme that could not be converted to a float."""

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(f"Could not parse number: {text}", location=location)


# =============================================================================
# Aggregate Scan Error
# =============================================================================

class ScanError(LoxError):
    """
    All lexical errors found during one scanning pass.

    The message is the newline-joined list of the individual error
    messages, in source order. A caller that only cares about the first
    problem can look at ``errors[0]`` or the first line of ``str(e)``.

    Attributes:
        errors: The individual LexicalError objects
        dropped: Number of errors counted but not kept (see max_errors)
        report: Located report with a summary line, from ErrorCollector
    """

    def __init__(
        self,
        errors: List[LexicalError],
        dropped: int = 0,
        report: Optional[str] = None,
    ):
        self.errors = list(errors)
        self.dropped = dropped
        self.report = report
        super().__init__("\n".join(e.message for e in self.errors))

    def __len__(self) -> int:
        return len(self.errors) + self.dropped


class LiteralConversionError(LoxError):
    """Token that cannot be turned into an expression literal."""
    pass


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner uses this to continue after encountering an error,
    collecting every error before reporting them together.

    Example:
        collector = ErrorCollector()
        collector.add(UnterminatedStringError())
        collector.raise_if_errors()   # raises ScanError
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to keep, None for no limit.
                Errors past the limit are still counted.
        """
        self.errors: List[LexicalError] = []
        self.max_errors = max_errors
        self.dropped = 0

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            self.dropped += 1
            return
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0 or self.dropped > 0

    def error_count(self) -> int:
        """Return the number of errors seen, kept or not."""
        return len(self.errors) + self.dropped

    def report(self) -> str:
        """Format all errors with locations, plus a summary line."""
        lines = [error.describe() for error in self.errors]
        if self.dropped:
            lines.append(f"... {self.dropped} more not shown")
        count = self.error_count()
        lines.append(f"{count} {'error' if count == 1 else 'errors'}")
        return "\n".join(lines)

    def raise_if_errors(self) -> None:
        """Raise a ScanError if any errors were collected."""
        if self.has_errors():
            raise ScanError(self.errors, dropped=self.dropped, report=self.report())
