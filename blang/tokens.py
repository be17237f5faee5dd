"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.IntEnum):
    """Every kind of token the language knows, in lexer order."""

    EOF = 0

    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    LEFT_BRACKET = enum.auto()
    RIGHT_BRACKET = enum.auto()
    COMMA = enum.auto()
    DOT = enum.auto()
    QUESTION_MARK = enum.auto()
    SEMICOLON = enum.auto()
    COLON = enum.auto()

    SLASH = enum.auto()
    ASTERISK = enum.auto()
    PERCENT = enum.auto()
    PLUS = enum.auto()
    INCREMENT = enum.auto()
    MINUS = enum.auto()
    DECREMENT = enum.auto()
    NOT = enum.auto()
    NOT_EQUAL = enum.auto()
    EQUAL = enum.auto()
    EQUAL_EQUAL = enum.auto()
    GREATER = enum.auto()
    GREATER_EQUAL = enum.auto()
    LESS = enum.auto()
    LESS_EQUAL = enum.auto()
    BIT_AND = enum.auto()
    AND = enum.auto()
    BIT_OR = enum.auto()
    OR = enum.auto()

    IDENTIFIER = enum.auto()
    STRING_LITERAL = enum.auto()
    WORD_LITERAL = enum.auto()

    AUTO = enum.auto()
    EXTRN = enum.auto()
    IF = enum.auto()
    ELSE = enum.auto()
    SWITCH = enum.auto()
    CASE = enum.auto()
    GOTO = enum.auto()
    WHILE = enum.auto()
    RETURN = enum.auto()
    PRINT = enum.auto()

    ERROR = enum.auto()

    def symbol(self) -> str:
        """Return the operator text of this token kind.

        Raises ValueError for kinds that are not operators.
        """
        try:
            return _OPERATOR_SYMBOLS[self]
        except KeyError:
            raise ValueError(f"{self.name} has no operator symbol") from None


_OPERATOR_SYMBOLS = {
    TokenType.SLASH: "/",
    TokenType.ASTERISK: "*",
    TokenType.PERCENT: "%",
    TokenType.PLUS: "+",
    TokenType.INCREMENT: "++",
    TokenType.MINUS: "-",
    TokenType.DECREMENT: "--",
    TokenType.NOT: "!",
    TokenType.NOT_EQUAL: "!=",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.BIT_AND: "&",
    TokenType.AND: "&&",
    TokenType.BIT_OR: "|",
    TokenType.OR: "||",
}


@dataclass(frozen=True)
class Token:
    """A token: its kind, the source text it covers and its line."""

    type: TokenType
    text: str
    line: int = 1