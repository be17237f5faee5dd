# blang

`blang` parses and evaluates a small B-like language. It handles integer
expressions, `auto` declarations and a `print` statement.

## Modules

- `blang.tokens` defines `TokenType`, an `IntEnum` of every token kind, and
  `Token(type, text, line=1)`, a frozen dataclass for one token.
  `TokenType.symbol()` returns the operator text of a kind, such as `"+"` or
  `"<="`. It raises `ValueError` for kinds that are not operators.
- `blang.nodes` holds the syntax tree dataclasses: `Program`,
  `ExpressionStatement`, `PrintStatement`, `VariableDeclaration`,
  `Assignment`, `Binary`, `Unary`, `Literal` and `Variable`.
  `to_word(value)` wraps an integer to a signed 64-bit word.
- `blang.sources` provides `read_file(path)`, which returns a file's contents
  as text. The contents are decoded as UTF-8, and bytes that are not valid
  UTF-8 are kept as surrogate escapes. If the file cannot be opened,
  `read_file` raises `SourceError`.
- `blang.parser` turns a sequence of tokens into a `Program`. Call
  `parse(tokens, file_path="<input>")` or `Parser(tokens, file_path).parse()`.
  - The token sequence is expected to end with an `EOF` token. Running off
    the end counts as `EOF`.
  - A syntax error raises `ParseError`. Its `message`, `file_path` and `line`
    attributes describe the error, and its text reads
    `<file>:<line>: error: <message>`.
  - An invalid assignment target raises `ParseError` without a location.
  - Word literals larger than a 64-bit word saturate at the word limits.
  - `format_ast(node, indent=0)` renders a tree as indented text, one node
    per line.
- `blang.interpreter` evaluates a tree with `interpret(node, out=None)`.
  - A `Program` runs its statements in order and evaluates to `0`.
  - Each `print` statement writes `Printed: <value>` and a newline to `out`,
    which is standard output by default. The statement evaluates to the
    number of characters written.
  - An unknown operator, an unknown node or division by zero raises
    `InterpretError`.

## Example

```python
import io

from blang.interpreter import interpret
from blang.parser import format_ast, parse
from blang.tokens import Token, TokenType as T

tokens = [
    Token(T.PRINT, "print"),
    Token(T.WORD_LITERAL, "1"),
    Token(T.PLUS, "+"),
    Token(T.WORD_LITERAL, "2"),
    Token(T.ASTERISK, "*"),
    Token(T.WORD_LITERAL, "3"),
    Token(T.SEMICOLON, ";"),
    Token(T.EOF, ""),
]
program = parse(tokens, "example.b")
print(format_ast(program), end="")

out = io.StringIO()
interpret(program, out)
assert out.getvalue() == "Printed: 7\n"
```

## Operators

Expressions follow this precedence, from lowest to highest:

1. assignment `=` (right associative, and the target must be a name)
2. equality `==`, `!=`
3. comparison `>`, `>=`, `<`, `<=`
4. terms `+`, `-`
5. factors `*`, `/`, `%`
6. unary `-`, `!` (applied to a primary expression)

Comparisons and `!` produce `1` or `0`. Arithmetic works on signed 64-bit
words, so results wrap. Division and remainder truncate toward zero.

## What it does not do

- There is no lexer. You must build the list of `Token` values yourself
  before calling `parse`.
- There is no command-line program.
- Variables are parsed but not evaluated. Interpreting a
  `VariableDeclaration`, `Assignment` or `Variable` raises `InterpretError`.

## Installing

Install the package with your usual Python package installer. It has no
runtime dependencies. The `test` extra pulls in pytest for the test suite.