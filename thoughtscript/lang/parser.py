"""Recursive-descent parser for ThoughtScript. See grammar.py for the statement grammar.

Expressions use precedence climbing, lowest to highest:

```
<or>         ::= <and> ("or" <and>)*
<and>        ::= <equality> ("and" <equality>)*
<equality>   ::= <comparison> (("==" | "!=" | "is") <comparison>)*
<comparison> ::= <term> (("<" | ">" | "<=" | ">=") <term>)*
<term>       ::= <factor> (("+" | "-") <factor>)*
<factor>     ::= <unary> (("*" | "/") <unary>)*
<unary>      ::= ("-" | "not" | "!") <unary> | <primary>
<primary>    ::= <literal> | "memories" | "even" | "odd" | "(" <or> ")"
               | <identifier> ["(" [<or> ("," <or>)*] ")"]
```

Blocks are delimited by indentation: a block holds the statements after its ":" whose lines are indented deeper than
the line holding the block's header, and it ends at the first statement that is not.
"""

from typing import Dict, List

from thoughtscript.lang import grammar
from thoughtscript.lang.error import ParseError
from thoughtscript.lang.lexical import Token, TokenType, tokenize


EQUALITY_OPS = (TokenType.EQUALS, TokenType.NOT_EQUALS, TokenType.IS)
COMPARISON_OPS = (TokenType.LESS, TokenType.GREATER, TokenType.LESS_EQUAL, TokenType.GREATER_EQUAL)
TERM_OPS = (TokenType.PLUS, TokenType.MINUS)
FACTOR_OPS = (TokenType.MULTIPLY, TokenType.DIVIDE)
UNARY_OPS = (TokenType.MINUS, TokenType.NOT)

LITERALS = {
    TokenType.TRUE: (True, "boolean"),
    TokenType.FALSE: (False, "boolean"),
    TokenType.NULL: (None, "null"),
    TokenType.EVEN: ("even", "string"),
    TokenType.ODD: ("odd", "string"),
}


class Parser:
    """Builds a grammar.Program from a token list with one token of lookahead."""

    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ParseError("token list must end with an {} token", TokenType.EOF.name, diagnosis=False)

        self.tokens = tokens
        self.pos = 0

        self.indents: Dict[int, int] = {}  # line: column of the first token on that line
        for token in tokens:
            if token.type is not TokenType.NEWLINE:
                self.indents.setdefault(token.line, token.column)

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    @property
    def previous(self) -> Token:
        return self.tokens[max(self.pos - 1, 0)]

    def check(self, *types) -> bool:
        return self.current.type in types

    def advance(self) -> Token:
        token = self.current
        if token.type is not TokenType.EOF:
            self.pos += 1
        return token

    def error(self, expected, token=None):
        token = token or self.current
        error = ParseError("expected {}, got {}", (expected, token.type.name), line=token.line, column=token.column)
        error.expected = expected
        error.actual = token.type.name
        raise error

    def expect(self, token_type: TokenType) -> Token:
        if not self.check(token_type):
            self.error(token_type.name)
        return self.advance()

    def skip_newlines(self):
        while self.check(TokenType.NEWLINE):
            self.advance()

    def indent_of(self, token: Token) -> int:
        """Column of the first token on token's line."""
        return self.indents.get(token.line, token.column)

    def end_statement(self):
        """A statement ends at a newline, at end of input, or where a block ended on a previous line."""
        if self.check(TokenType.NEWLINE, TokenType.EOF):
            return
        if self.current.line > self.previous.line:
            return
        self.error(TokenType.NEWLINE.name)

    # Statements

    def parse(self) -> grammar.Program:
        start = self.current
        statements = []

        self.skip_newlines()
        while not self.check(TokenType.EOF):
            statements.append(self.parse_statement())
            self.end_statement()
            self.skip_newlines()

        return grammar.Program(start.line, start.column, statements)

    def parse_statement(self) -> grammar.Node:
        dispatch = {
            TokenType.THINK: self.parse_think,
            TokenType.EXPRESS: self.parse_express,
            TokenType.CONSIDER: self.parse_consider,
            TokenType.IF: self.parse_if,
            TokenType.REMEMBER: self.parse_remember,
            TokenType.SHOW: self.parse_show,
            TokenType.DEFINE: self.parse_intention,
        }
        parse = dispatch.get(self.current.type, self.parse_expression)
        return parse()

    def parse_block(self, header: Token) -> grammar.Block:
        """Parses the block following a ':' (already consumed) of the statement starting at header."""
        if not self.check(TokenType.NEWLINE, TokenType.EOF):
            statement = self.parse_statement()  # inline block
            return grammar.Block(statement.line, statement.column, [statement])

        opener = self.indent_of(header)
        self.skip_newlines()
        if self.check(TokenType.EOF) or self.current.column <= opener:
            self.error("indented block")

        start = self.current
        statements = []
        while True:
            statements.append(self.parse_statement())
            self.end_statement()
            self.skip_newlines()
            if self.check(TokenType.EOF) or self.current.column <= opener:
                return grammar.Block(start.line, start.column, statements)

    def parse_think(self) -> grammar.Think:
        keyword = self.expect(TokenType.THINK)
        expression = self.parse_expression()

        variable = None
        if self.check(TokenType.AS):
            self.advance()
            variable = self.expect(TokenType.IDENTIFIER).value

        return grammar.Think(keyword.line, keyword.column, expression, variable)

    def parse_express(self) -> grammar.Express:
        keyword = self.expect(TokenType.EXPRESS)
        return grammar.Express(keyword.line, keyword.column, self.parse_expression())

    def parse_consider(self) -> grammar.Consider:
        keyword = self.expect(TokenType.CONSIDER)
        variable = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.FROM)
        start = self.parse_expression()
        self.expect(TokenType.TO)
        end = self.parse_expression()
        self.expect(TokenType.COLON)

        body = self.parse_block(keyword)
        return grammar.Consider(keyword.line, keyword.column, variable, start, end, body)

    def parse_if(self) -> grammar.If:
        keyword = self.expect(TokenType.IF)
        condition = self.parse_expression()
        self.expect(TokenType.COLON)
        then_body = self.parse_block(keyword)

        else_body = None
        if self._owns_otherwise(keyword):
            otherwise = self.advance()
            self.expect(TokenType.COLON)
            else_body = self.parse_block(otherwise)

        return grammar.If(keyword.line, keyword.column, condition, then_body, else_body)

    def _owns_otherwise(self, keyword: Token) -> bool:
        """Whether the next 'otherwise' belongs to the 'if' at keyword: same line, or same indentation."""
        pos = self.pos
        self.skip_newlines()

        if self.check(TokenType.OTHERWISE):
            token = self.current
            if token.line == keyword.line or token.column == self.indent_of(keyword):
                return True

        self.pos = pos
        return False

    def parse_remember(self) -> grammar.Remember:
        keyword = self.expect(TokenType.REMEMBER)
        value = self.parse_expression()
        self.expect(TokenType.AS)
        key = self.parse_expression()
        return grammar.Remember(keyword.line, keyword.column, value, key)

    def parse_show(self) -> grammar.Show:
        keyword = self.expect(TokenType.SHOW)
        return grammar.Show(keyword.line, keyword.column, self.parse_expression())

    def parse_intention(self) -> grammar.Intention:
        keyword = self.expect(TokenType.DEFINE)
        self.expect(TokenType.INTENTION)
        name = self.expect(TokenType.IDENTIFIER).value

        params = []
        if self.check(TokenType.WITH):
            self.advance()
            params.append(self.expect(TokenType.IDENTIFIER).value)
            while self.check(TokenType.COMMA):
                self.advance()
                params.append(self.expect(TokenType.IDENTIFIER).value)

        self.expect(TokenType.COLON)
        body = self.parse_block(keyword)
        return grammar.Intention(keyword.line, keyword.column, name, params, body)

    # Expressions

    def _binary(self, operand, *operators) -> grammar.Node:
        """Left-associative chain of operand separated by any of operators."""
        expr = operand()
        while self.check(*operators):
            operator = self.advance()
            right = operand()
            expr = grammar.BinaryOp(expr.line, expr.column, expr, operator.value, right)
        return expr

    def parse_expression(self) -> grammar.Node:
        return self.parse_or()

    def parse_or(self):
        return self._binary(self.parse_and, TokenType.OR)

    def parse_and(self):
        return self._binary(self.parse_equality, TokenType.AND)

    def parse_equality(self):
        return self._binary(self.parse_comparison, *EQUALITY_OPS)

    def parse_comparison(self):
        return self._binary(self.parse_term, *COMPARISON_OPS)

    def parse_term(self):
        return self._binary(self.parse_factor, *TERM_OPS)

    def parse_factor(self):
        return self._binary(self.parse_unary, *FACTOR_OPS)

    def parse_unary(self) -> grammar.Node:
        if self.check(*UNARY_OPS):
            operator = self.advance()
            operand = self.parse_unary()
            symbol = "-" if operator.type is TokenType.MINUS else "not"
            return grammar.UnaryOp(operator.line, operator.column, symbol, operand)
        return self.parse_primary()

    def parse_primary(self) -> grammar.Node:
        token = self.current

        if token.type is TokenType.NUMBER:
            self.advance()
            return grammar.Literal(token.line, token.column, token.value, "number")

        if token.type is TokenType.STRING:
            self.advance()
            return grammar.Literal(token.line, token.column, token.value, "string")

        if token.type in LITERALS:
            self.advance()
            value, kind = LITERALS[token.type]
            return grammar.Literal(token.line, token.column, value, kind)

        if token.type is TokenType.MEMORIES:
            self.advance()
            return grammar.Identifier(token.line, token.column, "memories")

        if token.type is TokenType.LPAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenType.RPAREN)
            return expr

        if token.type is TokenType.IDENTIFIER:
            self.advance()
            if self.check(TokenType.LPAREN):
                return self.parse_call(token)
            return grammar.Identifier(token.line, token.column, token.value)

        self.error("expression")

    def parse_call(self, name: Token) -> grammar.Call:
        self.expect(TokenType.LPAREN)

        args = []
        if not self.check(TokenType.RPAREN):
            args.append(self.parse_expression())
            while self.check(TokenType.COMMA):
                self.advance()
                args.append(self.parse_expression())

        self.expect(TokenType.RPAREN)
        return grammar.Call(name.line, name.column, name.value, args)


def parse(source: str) -> grammar.Program:
    """Convenience function to tokenize and parse source code."""
    return Parser(tokenize(source)).parse()
