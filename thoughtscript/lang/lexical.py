"""Lexical analysis for the ThoughtScript language: turns source text into a flat list of Tokens, always terminated by
an EOF token.

The token grammar can be loosely defined as follows:

```
<newline>    ::= "\n"                                   ; kept as a NEWLINE token, statements are line based
<comment>    ::= "#" <char>*                            ; runs to end of line, no token
<string>     ::= '"' <char>* '"' | "'" <char>* "'"      ; \n \t \r \\ \" \' escapes, other escapes pass through
<number>     ::= <digit> (<digit> | ".")*               ; at most one ".", float if present
<identifier> ::= (<letter> | "_") (<letter> | <digit> | "_")*   ; reserved words are matched case-sensitively
<operator>   ::= "==" | "!=" | "<=" | ">=" | "+" | "-" | "*" | "/" | "<" | ">" | "=" | "!"
<punctuator> ::= ":" | "," | "." | "(" | ")" | "[" | "]" | "{" | "}"
```

Spaces, tabs and other non-newline whitespace are discarded. An unterminated string stops at end of input and is
recorded as a warning rather than an error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from thoughtscript.lang.error import LexicalError, ThoughtException


class TokenType(Enum):
    # Reserved words
    THINK = "think"
    EXPRESS = "express"
    CONSIDER = "consider"
    IF = "if"
    OTHERWISE = "otherwise"
    REMEMBER = "remember"
    SHOW = "show"
    AS = "as"
    FROM = "from"
    TO = "to"
    IS = "is"
    NOT = "not"
    AND = "and"
    OR = "or"
    IN = "in"
    DEFINE = "define"
    INTENTION = "intention"
    WITH = "with"
    RETURN = "return"
    BREAK = "break"
    CONTINUE = "continue"
    MEMORIES = "memories"
    EVEN = "even"
    ODD = "odd"
    WHILE = "while"
    FOR = "for"
    EACH = "each"

    # Literals
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"

    # Operators
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUALS = "=="
    NOT_EQUALS = "!="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    ASSIGN = "="

    # Punctuation
    COLON = ":"
    COMMA = ","
    DOT = "."
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"

    NEWLINE = "newline"
    EOF = "end of input"


RESERVED_WORDS = (
    "think", "express", "consider", "if", "otherwise", "remember", "show", "as", "from", "to", "is", "not", "and",
    "or", "in", "true", "false", "null", "define", "intention", "with", "return", "break", "continue", "memories",
    "even", "odd", "while", "for", "each",
)
KEYWORDS = {word: TokenType(word) for word in RESERVED_WORDS}

TWO_CHAR_OPS = {
    "==": TokenType.EQUALS,
    "!=": TokenType.NOT_EQUALS,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
}

SINGLE_CHAR_OPS = {
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "=": TokenType.ASSIGN,
    "!": TokenType.NOT,
}

ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"', "'": "'"}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[str, int, float, None]
    line: int
    column: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


def is_digit(char):
    return char.isascii() and char.isdigit()


def is_identifier_start(char):
    return char.isascii() and (char.isalpha() or char == "_")


def is_identifier_char(char):
    return char.isascii() and (char.isalnum() or char == "_")


class Lexer:
    """Single-pass scanner over a source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.length = len(source)
        self.warnings: List[ThoughtException] = []

    def peek(self, offset: int = 0) -> Optional[str]:
        """Look ahead without consuming, None past end of input."""
        idx = self.pos + offset
        return self.source[idx] if idx < self.length else None

    def advance(self) -> str:
        """Consume and return current character."""
        char = self.source[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def skip_whitespace(self):
        """Skip whitespace except newlines, which are significant."""
        while self.peek() is not None and self.peek().isspace() and self.peek() != "\n":
            self.advance()

    def skip_comment(self):
        while self.peek() is not None and self.peek() != "\n":
            self.advance()

    def read_string(self) -> Token:
        line, column = self.line, self.column
        quote = self.advance()
        chars = []

        while self.peek() is not None and self.peek() != quote:
            char = self.advance()
            if char == "\\":
                if self.peek() is None:
                    break
                escaped = self.advance()
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)

        if self.peek() == quote:
            self.advance()
        else:
            self.warnings.append(ThoughtException("unterminated string literal", line=line, column=column))

        return Token(TokenType.STRING, "".join(chars), line, column)

    def read_number(self) -> Token:
        line, column = self.line, self.column
        start = self.pos
        has_dot = False

        while self.peek() is not None and (is_digit(self.peek()) or self.peek() == "."):
            if self.peek() == ".":
                if has_dot:
                    break
                has_dot = True
            self.advance()

        text = self.source[start:self.pos]
        return Token(TokenType.NUMBER, float(text) if has_dot else int(text), line, column)

    def read_identifier(self) -> Token:
        line, column = self.line, self.column
        start = self.pos

        while self.peek() is not None and is_identifier_char(self.peek()):
            self.advance()

        text = self.source[start:self.pos]
        return Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, column)

    def next_token(self) -> Token:
        """Scans and returns the next token, skipping whitespace and comments."""
        self.skip_whitespace()
        while self.peek() == "#":
            self.skip_comment()
            self.skip_whitespace()

        line, column = self.line, self.column
        char = self.peek()

        if char is None:
            return Token(TokenType.EOF, None, line, column)

        if char == "\n":
            self.advance()
            return Token(TokenType.NEWLINE, "\n", line, column)

        if char in "\"'":
            return self.read_string()

        if is_digit(char):
            return self.read_number()

        if is_identifier_start(char):
            return self.read_identifier()

        two_chars = char + (self.peek(1) or "")
        if two_chars in TWO_CHAR_OPS:
            self.advance()
            self.advance()
            return Token(TWO_CHAR_OPS[two_chars], two_chars, line, column)

        if char in SINGLE_CHAR_OPS:
            self.advance()
            return Token(SINGLE_CHAR_OPS[char], char, line, column)

        raise LexicalError("unexpected character '{}'", char, line=line, column=column)

    def tokenize(self) -> List[Token]:
        """Tokenizes entire source into a list ending with EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type is TokenType.EOF:
                return tokens


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize source code."""
    return Lexer(source).tokenize()
