"""Runtime values of ThoughtScript and the operations defined on them.

Values are plain Python objects: None (null), bool, int/float (number), str, list (array), dict (the merged memory
map) and ThoughtCallable (builtin or user-defined function). Operators check the kind of their operands rather than
relying on Python's coercions.
"""

import json
import math
from abc import ABC, abstractmethod

from thoughtscript.lang import numerical
from thoughtscript.lang.environment import Environment
from thoughtscript.lang.error import ArityError, ValueTypeError


class ThoughtCallable(ABC):
    """Anything that can be called from ThoughtScript. Builtins and intentions share this single calling convention."""
    kind = "function"

    def __init__(self, name, params):
        self.name = name
        self.params = list(params)

    def invoke(self, interpreter, args):
        """Checks arity and calls self with args."""
        if len(args) != len(self.params):
            msg = "'{}' expects {} argument(s), got {}"
            raise ArityError(msg, (self.name, len(self.params), len(args)))
        return self.call(interpreter, args)

    @abstractmethod
    def call(self, interpreter, args):
        """Calls self with args. Arity has already been checked."""

    def __repr__(self):
        return f"<{self.kind} {self.name}>"


class ThoughtFunction(ThoughtCallable):
    """User-defined function ("intention"). Closes over the environment it was defined in."""
    kind = "intention"

    def __init__(self, name, params, body, closure):
        super().__init__(name, params)
        self.body = body
        self.closure = closure

    def call(self, interpreter, args):
        frame = Environment(self.closure)
        for param, arg in zip(self.params, args):
            frame.define(param, arg)

        result = interpreter.execute_block(self.body, frame)
        frame.close()
        return result


class Builtin(ThoughtCallable):
    """Function implemented in Python."""
    kind = "builtin"

    def __init__(self, name, params, function):
        super().__init__(name, params)
        self.function = function

    def call(self, interpreter, args):
        return self.function(*args)


def type_name(value):
    """Canonical ThoughtScript type name of value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if numerical.is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, ThoughtCallable):
        return "function"
    return "object"


def to_display(value):
    """Converts value to the string shown by express/show."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if numerical.is_number(value):
        return numerical.number_to_string(value)
    if isinstance(value, list):
        return "[" + ", ".join(to_display(item) for item in value) + "]"
    if isinstance(value, dict):
        return to_json(value)
    return str(value)


def to_json(value):
    """JSON text of value with numbers written as to_display writes them. Non-finite numbers become null and functions
    their display string.
    """
    if isinstance(value, dict):
        items = (f"{json.dumps(str(key), ensure_ascii=False)}:{to_json(item)}" for key, item in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, list):
        return "[" + ",".join(to_json(item) for item in value) + "]"
    if numerical.is_number(value):
        text = numerical.number_to_string(value)
        return "null" if text in ("NaN", "Infinity", "-Infinity") else text
    if value is None or isinstance(value, (bool, str)):
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(to_display(value), ensure_ascii=False)


def is_truthy(value):
    """null, false, 0, NaN and "" are false; everything else is true."""
    if value is None or value is False:
        return False
    if numerical.is_number(value):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def is_equal(left, right):
    """Strict equality: numbers compare by value, anything else must be the same kind and the same value."""
    if left is None or right is None:
        return left is right
    if numerical.is_number(left) and numerical.is_number(right):
        return left == right
    return type_name(left) == type_name(right) and left == right


def require_numbers(operator, *operands):
    if not all(numerical.is_number(operand) for operand in operands):
        kinds = " and ".join(type_name(operand) for operand in operands)
        raise ValueTypeError("'{}' requires numbers, got {}", (operator, kinds))


def plus(left, right):
    """Adds two numbers, or concatenates the display forms when either side is a string."""
    if isinstance(left, str) or isinstance(right, str):
        return to_display(left) + to_display(right)
    require_numbers("+", left, right)
    return left + right


def subtract(left, right):
    require_numbers("-", left, right)
    return left - right


def multiply(left, right):
    require_numbers("*", left, right)
    return left * right


def divide(left, right):
    require_numbers("/", left, right)
    return numerical.divide(left, right)


def negate(operand):
    require_numbers("-", operand)
    return -operand


def compare(operator, left, right):
    """Ordering comparison of two numbers or two strings."""
    both_numbers = numerical.is_number(left) and numerical.is_number(right)
    both_strings = isinstance(left, str) and isinstance(right, str)
    if not (both_numbers or both_strings):
        kinds = (operator, type_name(left), type_name(right))
        raise ValueTypeError("cannot compare with '{}': {} and {}", kinds)

    if operator == "<":
        return left < right
    if operator == ">":
        return left > right
    if operator == "<=":
        return left <= right
    return left >= right
