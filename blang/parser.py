"""Recursive-descent parser from tokens to a syntax tree."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from blang.nodes import (
    WORD_MAX,
    WORD_MIN,
    Assignment,
    Binary,
    ExpressionStatement,
    Literal,
    PrintStatement,
    Program,
    Unary,
    Variable,
    VariableDeclaration,
)
from blang.tokens import Token, TokenType

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")

_EQUALITY = (TokenType.EQUAL_EQUAL, TokenType.NOT_EQUAL)
_COMPARISON = (
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
)
_TERM = (TokenType.PLUS, TokenType.MINUS)
_FACTOR = (TokenType.SLASH, TokenType.ASTERISK, TokenType.PERCENT)
_UNARY = (TokenType.MINUS, TokenType.NOT)


class ParseError(Exception):
    """Raised when the token stream is not a valid program."""

    def __init__(self, message: str, file_path: str | None = None, line: int | None = None):
        self.message = message
        self.file_path = file_path
        self.line = line
        if file_path is not None and line is not None:
            text = f"{file_path}:{line}: error: {message}"
        else:
            text = f"error: {message}"
        super().__init__(text)


def _parse_word(text: str) -> int:
    """Read a leading decimal integer, saturating at the word limits."""
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return 0
    return max(WORD_MIN, min(WORD_MAX, int(match.group(1))))


class Parser:
    """Parses a sequence of tokens, ending with EOF, into a Program."""

    def __init__(self, tokens: Iterable[Token], file_path: str = "<input>"):
        self._tokens = list(tokens)
        self._file_path = file_path
        self._index = 0

    def parse(self) -> Program:
        """Parse the whole token stream."""
        self._index = 0
        statements = []
        while self._peek().type != TokenType.EOF:
            statements.append(self._declaration())
        return Program(statements)

    def _peek(self) -> Token:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        line = self._tokens[-1].line if self._tokens else 1
        return Token(TokenType.EOF, "", line)

    def _advance(self) -> Token:
        token = self._peek()
        self._index += 1
        return token

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._file_path, self._peek().line)

    def _expect(self, kind: TokenType, message: str) -> Token:
        if self._peek().type != kind:
            raise self._error(message)
        return self._advance()

    def _declaration(self):
        if self._peek().type == TokenType.AUTO:
            self._advance()
            name = self._expect(
                TokenType.IDENTIFIER, "expected identifier name after `auto`"
            ).text
            self._expect(TokenType.SEMICOLON, "expected ';' after expression")
            return VariableDeclaration(name)
        return self._statement()

    def _statement(self):
        if self._peek().type == TokenType.PRINT:
            self._advance()
            expression = self._expression()
            self._expect(TokenType.SEMICOLON, "expected ';' after expression")
            return PrintStatement(expression)
        expression = self._expression()
        self._expect(TokenType.SEMICOLON, "expected ';' after expression")
        return ExpressionStatement(expression)

    def _expression(self):
        return self._assignment()

    def _assignment(self):
        expression = self._equality()
        if self._peek().type == TokenType.EQUAL:
            self._advance()
            value = self._assignment()
            if isinstance(expression, Variable):
                return Assignment(expression.name, value)
            raise ParseError("invalid assignment target")
        return expression

    def _binary(self, operand, operators):
        left = operand()
        while self._peek().type in operators:
            op = self._advance().type
            left = Binary(left, op, operand())
        return left

    def _equality(self):
        return self._binary(self._comparison, _EQUALITY)

    def _comparison(self):
        return self._binary(self._term, _COMPARISON)

    def _term(self):
        return self._binary(self._factor, _TERM)

    def _factor(self):
        return self._binary(self._unary, _FACTOR)

    def _unary(self):
        op = self._peek().type
        if op in _UNARY:
            self._advance()
            return Unary(op, self._primary())
        return self._primary()

    def _primary(self):
        token = self._peek()
        if token.type == TokenType.WORD_LITERAL:
            self._advance()
            return Literal(_parse_word(token.text))
        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            inside = self._expression()
            self._expect(TokenType.RIGHT_PAREN, "expected closing parenthesis")
            return inside
        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return Variable(token.text)
        raise self._error(f"invalid token: '{token.text}'")


def parse(tokens: Iterable[Token], file_path: str = "<input>") -> Program:
    """Parse *tokens* into a Program."""
    return Parser(tokens, file_path).parse()


def _lines(node, indent: int) -> Iterator[str]:
    pad = "  " * indent
    match node:
        case Program(statements=statements):
            yield f"{pad}Program:"
            for statement in statements:
                yield from _lines(statement, indent + 1)
        case ExpressionStatement(expression=expression):
            yield f"{pad}ExpressionStatement:"
            yield from _lines(expression, indent + 1)
        case PrintStatement(expression=expression):
            yield f"{pad}PrintStatement:"
            yield from _lines(expression, indent + 1)
        case VariableDeclaration(name=name):
            yield f"{pad}VariableDeclaration: {name}"
        case Assignment(name=name, value=value):
            yield f"{pad}Assignment: {name}"
            yield from _lines(value, indent + 1)
        case Binary(left=left, op=op, right=right):
            yield f"{pad}Binary: '{op.symbol()}'"
            yield from _lines(left, indent + 1)
            yield from _lines(right, indent + 1)
        case Unary(op=op, right=right):
            yield f"{pad}Unary: '{op.symbol()}'"
            yield from _lines(right, indent + 1)
        case Literal(value=value):
            yield f"{pad}Literal: {value}"
        case Variable(name=name):
            yield f"{pad}Variable: {name}"
        case _:
            raise TypeError(f"unknown AST node: {node!r}")


def format_ast(node, indent: int = 0) -> str:
    """Render a syntax tree as indented text, one node per line."""
    return "".join(f"{line}\n" for line in _lines(node, indent))