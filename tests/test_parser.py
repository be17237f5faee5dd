import pytest

from blang.nodes import (
    WORD_MAX,
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
from blang.parser import ParseError, Parser, format_ast, parse
from blang.tokens import Token, TokenType

_KEYWORDS = {"auto": TokenType.AUTO, "print": TokenType.PRINT}
_PUNCTUATION = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}


def _operators():
    table = dict(_PUNCTUATION)
    for kind in TokenType:
        try:
            table[kind.symbol()] = kind
        except ValueError:
            pass
    return table


def lex(source, line=1):
    """Split on whitespace and classify each piece as one token."""
    operators = _operators()
    tokens = []
    for piece in source.split():
        if piece.isdigit():
            kind = TokenType.WORD_LITERAL
        elif piece in _KEYWORDS:
            kind = _KEYWORDS[piece]
        elif piece.isidentifier():
            kind = TokenType.IDENTIFIER
        else:
            kind = operators[piece]
        tokens.append(Token(kind, piece, line))
    tokens.append(Token(TokenType.EOF, "", line))
    return tokens


def single(source):
    program = parse(lex(source), "test.b")
    assert len(program.statements) == 1
    return program.statements[0]


def test_empty_program():
    assert parse(lex("")) == Program([])


def test_precedence_of_factor_over_term():
    statement = single("1 + 2 * 3 ;")
    assert statement == ExpressionStatement(
        Binary(Literal(1), TokenType.PLUS, Binary(Literal(2), TokenType.ASTERISK, Literal(3)))
    )


def test_binary_is_left_associative():
    statement = single("1 - 2 - 3 ;")
    assert statement.expression == Binary(
        Binary(Literal(1), TokenType.MINUS, Literal(2)), TokenType.MINUS, Literal(3)
    )


def test_comparison_binds_tighter_than_equality():
    statement = single("a < b == c ;")
    assert statement.expression == Binary(
        Binary(Variable("a"), TokenType.LESS, Variable("b")),
        TokenType.EQUAL_EQUAL,
        Variable("c"),
    )


def test_parentheses_group():
    statement = single("( 1 + 2 ) * 3 ;")
    assert statement.expression == Binary(
        Binary(Literal(1), TokenType.PLUS, Literal(2)), TokenType.ASTERISK, Literal(3)
    )


def test_assignment_is_right_associative():
    statement = single("a = b = 7 ;")
    assert statement.expression == Assignment("a", Assignment("b", Literal(7)))


def test_invalid_assignment_target():
    with pytest.raises(ParseError) as info:
        parse(lex("1 = 2 ;"), "test.b")
    assert str(info.value) == "error: invalid assignment target"


def test_declaration_and_print():
    program = parse(lex("auto x ; print - x ;"), "test.b")
    assert program.statements == [
        VariableDeclaration("x"),
        PrintStatement(Unary(TokenType.MINUS, Variable("x"))),
    ]


def test_unary_not():
    assert single("! 0 ;").expression == Unary(TokenType.NOT, Literal(0))


def test_unary_does_not_nest():
    with pytest.raises(ParseError) as info:
        parse(lex("- - 5 ;"), "test.b")
    assert info.value.message == "invalid token: '-'"


def test_missing_semicolon_reports_file_and_line():
    tokens = [
        Token(TokenType.WORD_LITERAL, "1", 2),
        Token(TokenType.EOF, "", 3),
    ]
    with pytest.raises(ParseError) as info:
        parse(tokens, "test.b")
    assert str(info.value) == "test.b:3: error: expected ';' after expression"
    assert info.value.line == 3
    assert info.value.file_path == "test.b"


def test_auto_requires_identifier():
    with pytest.raises(ParseError) as info:
        parse(lex("auto 1 ;"), "test.b")
    assert info.value.message == "expected identifier name after `auto`"


def test_auto_requires_semicolon():
    with pytest.raises(ParseError) as info:
        parse(lex("auto x"), "test.b")
    assert info.value.message == "expected ';' after expression"


def test_missing_closing_parenthesis():
    with pytest.raises(ParseError) as info:
        parse(lex("( 1 + 2 ;"), "test.b")
    assert info.value.message == "expected closing parenthesis"


def test_literal_saturates_at_word_maximum():
    statement = single("99999999999999999999999 ;")
    assert statement.expression == Literal(WORD_MAX)


def test_tokens_without_eof_end_cleanly():
    tokens = lex("x ;")[:-1]
    assert Parser(tokens, "test.b").parse() == Program([ExpressionStatement(Variable("x"))])


def test_parser_can_parse_twice():
    parser = Parser(lex("a ;"), "test.b")
    expected = Program([ExpressionStatement(Variable("a"))])
    first = parser.parse()
    second = parser.parse()
    assert first == expected
    assert second == expected


def test_format_ast_layout():
    program = parse(lex("print 1 + 2 ;"), "test.b")
    assert format_ast(program) == (
        "Program:\n"
        "  PrintStatement:\n"
        "    Binary: '+'\n"
        "      Literal: 1\n"
        "      Literal: 2\n"
    )


def test_format_ast_indent_prefix():
    text = format_ast(Variable("v"), 2)
    assert text == "    Variable: v\n"


def test_format_ast_covers_every_statement():
    program = parse(lex("auto v ; v = - 3 ;"), "test.b")
    lines = format_ast(program).splitlines()
    assert lines[1] == "  VariableDeclaration: v"
    assert lines[3] == "    Assignment: v"
    assert lines[4] == "      Unary: '-'"
    assert len(lines) == 6


def test_format_ast_rejects_unknown_node():
    with pytest.raises(TypeError):
        format_ast(object())