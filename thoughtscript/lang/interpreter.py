"""Tree-walking interpreter for ThoughtScript.

interpret(source) runs the whole pipeline: Lexer -> Parser -> evaluation of the Program against the interpreter's
global Environment. Every node produces a value; statements produce the value of their expression, their executed
block, or null. Lines written by express/show are collected in an output buffer (and echoed to stdout unless echo is
off). Globals and memories persist between interpret calls on the same Interpreter; create a new one to reset.

Each intention call nests several Python frames, so building an Interpreter raises Python's recursion limit to
RECURSION_LIMIT. Recursion deeper than that is reported as a RecursionDepthError.

An Interpreter runs one program at a time and is not safe to share between threads without external locking.
"""

import sys

from thoughtscript.lang import grammar, values
from thoughtscript.lang.builtins import BUILTINS
from thoughtscript.lang.environment import Environment
from thoughtscript.lang.error import RecursionDepthError, ThoughtException, UndefinedNameError, ValueTypeError
from thoughtscript.lang.lexical import Lexer
from thoughtscript.lang.numerical import is_number
from thoughtscript.lang.parser import Parser
from thoughtscript.lang.values import ThoughtCallable, ThoughtFunction


MEMORIES = "memories"
RECURSION_LIMIT = 4000  # Python frames; one intention call takes about 8

ARITHMETIC = {
    "+": values.plus,
    "-": values.subtract,
    "*": values.multiply,
    "/": values.divide,
}
COMPARISONS = ("<", ">", "<=", ">=")


class Interpreter:

    def __init__(self, echo=True):
        self.echo = echo
        self.globals = Environment()
        self.environment = self.globals
        self.output = []
        self.warnings = []

        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)

        for builtin in BUILTINS:
            self.globals.define(builtin.name, builtin)

        self._dispatch = {
            grammar.Program: self.execute_program,
            grammar.Think: self.execute_think,
            grammar.Express: self.execute_express,
            grammar.Consider: self.execute_consider,
            grammar.If: self.execute_if,
            grammar.Remember: self.execute_remember,
            grammar.Show: self.execute_show,
            grammar.BinaryOp: self.execute_binary_op,
            grammar.UnaryOp: self.execute_unary_op,
            grammar.Literal: self.execute_literal,
            grammar.Identifier: self.execute_identifier,
            grammar.Call: self.execute_call,
            grammar.Intention: self.execute_intention,
            grammar.Block: self.execute_block,
        }

    def interpret(self, source):
        """Parses and runs source, returning the value of its last statement. Resets the output buffer first."""
        self.output = []

        lexer = Lexer(source)
        tokens = lexer.tokenize()
        self.warnings = lexer.warnings

        program = Parser(tokens).parse()
        return self.execute(program)

    def get_output(self):
        return self.output

    def clear_output(self):
        """Empties the output buffer. Variables and memories are kept."""
        self.output = []

    def emit(self, line):
        self.output.append(line)
        if self.echo:
            print(line)

    def execute(self, node):
        """Evaluates node. Errors raised without a position get the position of the innermost node being evaluated."""
        try:
            return self._dispatch[type(node)](node)
        except ThoughtException as error:
            if error.line is None:
                error.line, error.column = node.line, node.column
            raise

    def execute_program(self, node):
        result = None
        for statement in node.statements:
            result = self.execute(statement)
        return result

    def execute_block(self, node, environment=None):
        """Runs node's statements in environment, or in a new child scope if none is given (which is closed after)."""
        previous = self.environment
        scope = environment if environment is not None else Environment(previous)
        self.environment = scope

        result = None
        try:
            for statement in node.statements:
                result = self.execute(statement)
        finally:
            self.environment = previous

        if environment is None:
            scope.close()
        return result

    def execute_think(self, node):
        value = self.execute(node.expression)
        if node.variable is not None:
            self.environment.define(node.variable, value)
        return value

    def execute_express(self, node):
        value = self.execute(node.expression)
        self.emit(values.to_display(value))
        return value

    def execute_consider(self, node):
        """Counts the loop variable up from start to end inclusive. All iterations share one scope."""
        start = self.execute(node.start)
        end = self.execute(node.end)

        if not (is_number(start) and is_number(end)):
            kinds = (values.type_name(start), values.type_name(end))
            raise ValueTypeError("'consider' bounds must be numbers, got {} and {}", kinds)

        scope = Environment(self.environment)
        counter = start
        while counter <= end:
            scope.define(node.variable, counter)
            self.execute_block(node.body, scope)
            counter += 1

        scope.close()
        return None

    def execute_if(self, node):
        if values.is_truthy(self.execute(node.condition)):
            return self.execute_block(node.then_body)
        if node.else_body is not None:
            return self.execute_block(node.else_body)
        return None

    def execute_remember(self, node):
        value = self.execute(node.value)
        key = values.to_display(self.execute(node.key))
        self.environment.remember(key, value)
        return value

    def execute_show(self, node):
        target = self.execute(node.target)

        if isinstance(node.target, grammar.Identifier) and node.target.name == MEMORIES:
            self.emit(format_memories(target))
            return [[key, value] for key, value in target.items()]

        self.emit(values.to_display(target))
        return target

    def execute_binary_op(self, node):
        left = self.execute(node.left)
        right = self.execute(node.right)  # both sides always run: and/or do not short-circuit
        operator = node.operator

        if operator in ARITHMETIC:
            return ARITHMETIC[operator](left, right)
        if operator in COMPARISONS:
            return values.compare(operator, left, right)
        if operator in ("==", "is"):
            return values.is_equal(left, right)
        if operator == "!=":
            return not values.is_equal(left, right)
        if operator == "and":
            return values.is_truthy(left) and values.is_truthy(right)
        if operator == "or":
            return values.is_truthy(left) or values.is_truthy(right)

        raise ThoughtException("unknown binary operator '{}'", operator, internal=True)

    def execute_unary_op(self, node):
        operand = self.execute(node.operand)

        if node.operator == "-":
            return values.negate(operand)
        if node.operator == "not":
            return not values.is_truthy(operand)

        raise ThoughtException("unknown unary operator '{}'", node.operator, internal=True)

    def execute_literal(self, node):
        return node.value

    def execute_identifier(self, node):
        if node.name == MEMORIES:
            return self.environment.all_memories()
        return self.environment.lookup(node.name)

    def execute_call(self, node):
        function = self.environment.lookup(node.name)
        args = [self.execute(arg) for arg in node.args]

        if not isinstance(function, ThoughtCallable):
            raise UndefinedNameError("'{}' is not a function", node.name)

        try:
            return function.invoke(self, args)
        except RecursionError:
            msg = "maximum recursion depth exceeded calling '{}'"
            raise RecursionDepthError(msg, node.name, line=node.line, column=node.column) from None

    def execute_intention(self, node):
        function = ThoughtFunction(node.name, node.params, node.body, self.environment)
        self.environment.define(node.name, function)
        return function


def format_memories(memories):
    """Multi-line listing of memories, as shown by 'show memories'."""
    if not memories:
        return "No memories stored"

    lines = [f"{key}: {values.to_display(value)}" for key, value in memories.items()]
    return "Memories:\n" + "\n".join(lines)
