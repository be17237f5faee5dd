"""Syntax tree nodes and the machine word type."""

from __future__ import annotations

from dataclasses import dataclass, field

from blang.tokens import TokenType

WORD_BITS = 64
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1


def to_word(value: int) -> int:
    """Wrap an integer to a signed 64-bit machine word."""
    value &= (1 << WORD_BITS) - 1
    if value > WORD_MAX:
        value -= 1 << WORD_BITS
    return value


@dataclass
class Program:
    """The whole program: a sequence of statements."""

    statements: list = field(default_factory=list)


@dataclass
class ExpressionStatement:
    """An expression evaluated for its effect."""

    expression: object


@dataclass
class PrintStatement:
    """A statement that prints the value of an expression."""

    expression: object


@dataclass
class VariableDeclaration:
    """An `auto` declaration of a variable."""

    name: str


@dataclass
class Assignment:
    """Assignment of a value to a named variable."""

    name: str
    value: object


@dataclass
class Binary:
    """A binary operation."""

    left: object
    op: TokenType
    right: object


@dataclass
class Unary:
    """A prefix unary operation."""

    op: TokenType
    right: object


@dataclass
class Literal:
    """A word literal."""

    value: int


@dataclass
class Variable:
    """A reference to a variable by name."""

    name: str