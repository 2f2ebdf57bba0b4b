"""Numbers in ThoughtScript. The language has a single number type backed by Python ints and floats; booleans are
not numbers even though Python treats them as ints. Numbers are printed the way a double prints: integral values
without a fractional part, 'NaN', 'Infinity', and exponents without zero padding.
"""

import math

from thoughtscript.lang.error import DivisionByZeroError


def is_number(value):
    """Whether value is a ThoughtScript number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_to_string(number):
    """Returns the display form of number. Integral values below 1e21 print without a fraction; otherwise the shortest
    round-tripping digits are laid out positionally for decimal exponents -7 < e < 21, and in exponent form outside.
    """
    if isinstance(number, int):
        if abs(number) < 10 ** 21:
            return str(number)
        try:
            number = float(number)
        except OverflowError:
            number = math.inf if number > 0 else -math.inf

    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    digits, point = shortest_digits(abs(number))
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def shortest_digits(number):
    """Splits a positive finite float into the shortest digit string that round-trips it and the position of the
    decimal point, so that number == 0.<digits> * 10 ** point.
    """
    mantissa, __, exponent = repr(number).partition("e")
    whole, __, fraction = mantissa.partition(".")

    text = whole + fraction
    leading = len(text) - len(text.lstrip("0"))
    point = len(whole) + int(exponent or 0) - leading
    return text.strip("0"), point


def divide(left, right):
    """Exact division of two numbers; two ints that divide evenly give an int. Dividing by zero is an error, not
    infinity.
    """
    if right == 0:
        raise DivisionByZeroError("division by zero")

    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


def is_even(number):
    return number % 2 == 0
