"""ThoughtScript: a small interpreted language where programs think, express, consider and remember.

Basic program flow:
    1. Lexer (lang/lexical.py): source text to a flat list of tokens, NEWLINE tokens included
    2. Parser (lang/parser.py): recursive descent over the tokens to a grammar.Program tree
    3. Interpreter (lang/interpreter.py): walks the tree against a chain of Environments, collecting output lines
"""

__version__ = "1.0.0"

from thoughtscript.lang.error import (
    ArityError, DivisionByZeroError, LexicalError, ParseError, RecursionDepthError, ThoughtException,
    UndefinedNameError, ValueTypeError,
)
from thoughtscript.lang.interpreter import Interpreter
from thoughtscript.lang.lexical import KEYWORDS, Lexer, Token, TokenType, tokenize
from thoughtscript.lang.parser import Parser, parse
from thoughtscript.lang.builtins import BUILTINS


language = {
    "name": "ThoughtScript",
    "description": "A Dynamic Programming Language for Thought-Based Computing",
    "version": __version__,
    "keywords": sorted(KEYWORDS),
    "builtins": [builtin.name for builtin in BUILTINS],
}


class ThoughtScript:
    """Front door to the interpreter. Keeps one Interpreter (and its memories) between runs."""

    def __init__(self, echo=True):
        self.echo = echo
        self.interpreter = Interpreter(echo=echo)

    def run(self, source):
        return self.interpreter.interpret(source)

    def tokenize(self, source):
        return tokenize(source)

    def parse(self, source):
        return parse(source)

    def get_output(self):
        return self.interpreter.get_output()

    def clear_output(self):
        self.interpreter.clear_output()

    def reset(self):
        """Replaces the interpreter, forgetting all variables and memories."""
        self.interpreter = Interpreter(echo=self.echo)


def create_interpreter(echo=True):
    return ThoughtScript(echo=echo)


def execute(source, echo=True):
    """Runs source in a fresh interpreter and returns its value."""
    return ThoughtScript(echo=echo).run(source)


__all__ = [
    "ThoughtScript", "create_interpreter", "execute", "language",
    "Interpreter", "Lexer", "Token", "TokenType", "tokenize", "Parser", "parse",
    "ThoughtException", "LexicalError", "ParseError", "UndefinedNameError", "ValueTypeError", "ArityError",
    "DivisionByZeroError", "RecursionDepthError",
]
