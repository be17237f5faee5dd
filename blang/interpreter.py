"""Tree-walking evaluator for parsed programs."""

from __future__ import annotations

import sys
from typing import TextIO

from blang.nodes import (
    Assignment,
    Binary,
    ExpressionStatement,
    Literal,
    PrintStatement,
    Program,
    Unary,
    Variable,
    VariableDeclaration,
    to_word,
)
from blang.tokens import TokenType


class InterpretError(Exception):
    """Raised when a program cannot be evaluated."""


def _quotient(left: int, right: int) -> int:
    if right == 0:
        raise InterpretError("division by zero")
    magnitude = abs(left) // abs(right)
    return magnitude if (left < 0) == (right < 0) else -magnitude


def _divide(left: int, right: int) -> int:
    return to_word(_quotient(left, right))


def _remainder(left: int, right: int) -> int:
    return to_word(left - right * _quotient(left, right))


_BINARY = {
    TokenType.SLASH: _divide,
    TokenType.ASTERISK: lambda a, b: to_word(a * b),
    TokenType.PERCENT: _remainder,
    TokenType.PLUS: lambda a, b: to_word(a + b),
    TokenType.MINUS: lambda a, b: to_word(a - b),
    TokenType.EQUAL_EQUAL: lambda a, b: int(a == b),
    TokenType.NOT_EQUAL: lambda a, b: int(a != b),
    TokenType.GREATER: lambda a, b: int(a > b),
    TokenType.GREATER_EQUAL: lambda a, b: int(a >= b),
    TokenType.LESS: lambda a, b: int(a < b),
    TokenType.LESS_EQUAL: lambda a, b: int(a <= b),
}

_UNARY = {
    TokenType.MINUS: lambda a: to_word(-a),
    TokenType.NOT: lambda a: int(a == 0),
}


def interpret(node, out: TextIO | None = None) -> int:
    """Evaluate *node* and return its word value.

    A program evaluates to 0; a print statement writes its line to *out*
    (standard output by default) and evaluates to the number of characters
    written.
    """
    if out is None:
        out = sys.stdout
    return _evaluate(node, out)


def _evaluate(node, out: TextIO) -> int:
    match node:
        case Program(statements=statements):
            for statement in statements:
                _evaluate(statement, out)
            return 0
        case ExpressionStatement(expression=expression):
            return _evaluate(expression, out)
        case PrintStatement(expression=expression):
            text = f"Printed: {_evaluate(expression, out)}\n"
            out.write(text)
            return len(text)
        case Binary(left=left, op=op, right=right):
            operation = _BINARY.get(op)
            if operation is None:
                raise InterpretError(f"invalid token in binary operation: {int(op)}")
            return operation(_evaluate(left, out), _evaluate(right, out))
        case Unary(op=op, right=right):
            operation = _UNARY.get(op)
            if operation is None:
                raise InterpretError(f"invalid token in unary operation: {int(op)}")
            return operation(_evaluate(right, out))
        case Literal(value=value):
            return value
        case VariableDeclaration() | Assignment() | Variable():
            raise InterpretError(f"variables are not supported: {type(node).__name__}")
        case _:
            raise InterpretError(f"unknown AST node to interpret: {node!r}")