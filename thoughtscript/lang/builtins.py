"""Builtin functions, defined in the global scope of every Interpreter. The table is fixed."""

from thoughtscript.lang import numerical, values
from thoughtscript.lang.error import ValueTypeError
from thoughtscript.lang.values import Builtin


def length(value):
    if isinstance(value, (str, list)):
        return len(value)
    raise ValueTypeError("'length' can only be called on strings or arrays, got {}", values.type_name(value))


def _require_number(name, value):
    if not numerical.is_number(value):
        raise ValueTypeError("'{}' requires a number, got {}", (name, values.type_name(value)))


def _require_string(name, value):
    if not isinstance(value, str):
        raise ValueTypeError("'{}' requires a string, got {}", (name, values.type_name(value)))


def is_even(number):
    _require_number("isEven", number)
    return numerical.is_even(number)


def is_odd(number):
    _require_number("isOdd", number)
    return not numerical.is_even(number)


def uppercase(text):
    _require_string("uppercase", text)
    return text.upper()


def lowercase(text):
    _require_string("lowercase", text)
    return text.lower()


BUILTINS = (
    Builtin("add", ("a", "b"), values.plus),
    Builtin("subtract", ("a", "b"), values.subtract),
    Builtin("multiply", ("a", "b"), values.multiply),
    Builtin("divide", ("a", "b"), values.divide),
    Builtin("length", ("value",), length),
    Builtin("type", ("value",), values.type_name),
    Builtin("isEven", ("number",), is_even),
    Builtin("isOdd", ("number",), is_odd),
    Builtin("uppercase", ("text",), uppercase),
    Builtin("lowercase", ("text",), lowercase),
)
