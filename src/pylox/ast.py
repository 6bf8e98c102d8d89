"""
Lox Expression Trees
====================

This module defines the expression node types a Lox parser builds, and
a printer that renders any tree as a fully parenthesized prefix string.

Node Hierarchy
--------------
Expr (base)
├── Binary - left operator right
├── Grouping - parenthesized expression
├── Literal - number, text, true, false or nil
└── Unary - operator right

Literal Values
--------------
Expression literals are a separate family from the literal payloads on
tokens (pylox.tokens). Token literals hold whatever the scanner parsed
out of the text; expression literals are language values. A parser
turns one into the other with literal_from_token().

Printed Form
------------
>>> minus = Token(TokenType.MINUS, "-", None, 1)
>>> star = Token(TokenType.STAR, "*", None, 1)
>>> tree = Binary(
...     Unary(minus, Literal(NumberValue(123))),
...     star,
...     Grouping(Literal(NumberValue(45.67))),
... )
>>> print(tree)
(* (- 123) (group 45.67))
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

import click

from pylox.errors import LiteralConversionError
from pylox.tokens import FloatValue, StringValue, Token, TokenType


# =============================================================================
# Expression Literal Values
# =============================================================================

def format_number(value: float) -> str:
    """
    Canonical text for a Lox number.

    Integral values print without a fractional part and nothing uses
    exponent notation: 123.0 -> "123", 45.67 -> "45.67",
    1e-07 -> "0.0000001".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class NumberValue:
    value: float

    def __str__(self) -> str:
        return format_number(float(self.value))


@dataclass(frozen=True)
class TextValue:
    value: str

    def __str__(self) -> str:
        return self.value


class Constant(Enum):
    """The valueless literals: true, false and nil."""
    TRUE = "true"
    FALSE = "false"
    NIL = "nil"

    def __str__(self) -> str:
        return self.value


LiteralValue = Union[NumberValue, TextValue, Constant]


# Keyword token types that denote a Constant
CONSTANT_TOKENS: dict[TokenType, Constant] = {
    TokenType.TRUE: Constant.TRUE,
    TokenType.FALSE: Constant.FALSE,
    TokenType.NIL: Constant.NIL,
}


def literal_from_token(token: Token) -> LiteralValue:
    """
    Convert a literal token into an expression literal.

    NUMBER tokens become NumberValue, STRING tokens TextValue, and the
    true/false/nil keywords their Constant.

    Raises:
        LiteralConversionError: If the token does not denote a literal
    """
    if token.type in CONSTANT_TOKENS:
        return CONSTANT_TOKENS[token.type]
    if token.type == TokenType.NUMBER and isinstance(token.literal, FloatValue):
        return NumberValue(token.literal.value)
    if token.type == TokenType.STRING and isinstance(token.literal, StringValue):
        return TextValue(token.literal.value)
    raise LiteralConversionError(
        f"{token.type.name} token {token.lexeme!r} at line {token.line} is not a literal"
    )


# =============================================================================
# Expression Nodes
# =============================================================================

class Expr:
    """Base class for all expression nodes."""

    def __str__(self) -> str:
        return ASTPrinter().print(self)


@dataclass(frozen=True)
class Binary(Expr):
    """
    Binary operation (left op right).

    Attributes:
        left: Left operand
        operator: The operator token
        right: Right operand
    """
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value."""
    value: LiteralValue


@dataclass(frozen=True)
class Unary(Expr):
    """
    Prefix operation (op right).

    Attributes:
        operator: The operator token
        right: The operand
    """
    operator: Token
    right: Expr


# =============================================================================
# AST Visitor Pattern
# =============================================================================

class ASTVisitor:
    """
    Base class for expression visitors.

    Usage:
        class MyVisitor(ASTVisitor):
            def visit_Binary(self, node):
                ...

        MyVisitor().visit(tree)
    """

    def visit(self, node: Expr) -> Any:
        """Visit a node by dispatching to visit_<ClassName>."""
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Expr) -> None:
        """Visit all child expressions of the node."""
        for field_value in node.__dict__.values():
            if isinstance(field_value, Expr):
                self.visit(field_value)


# =============================================================================
# AST Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Renders an expression tree as a parenthesized prefix string.

    Usage:
        printer = ASTPrinter()
        text = printer.print(tree)
    """

    def print(self, node: Expr) -> str:
        """Return the printed form of the tree."""
        return self.visit(node)

    def visit_Binary(self, node: Binary) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_Grouping(self, node: Grouping) -> str:
        return self._parenthesize("group", node.expression)

    def visit_Literal(self, node: Literal) -> str:
        return str(node.value)

    def visit_Unary(self, node: Unary) -> str:
        return self._parenthesize(node.operator.lexeme, node.right)

    def generic_visit(self, node: Expr) -> str:
        raise TypeError(f"cannot print {type(node).__name__}")

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.visit(expr) for expr in exprs]
        return f"({' '.join(parts)})"


def print_expr(node: Expr) -> None:
    """Write the printed form of an expression to standard output."""
    click.echo(ASTPrinter().print(node))
