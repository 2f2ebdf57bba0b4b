"""Error handling for the ThoughtScript language. Only ThoughtExceptions should be encountered during running: if
another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class ThoughtException(Exception):
    """Templates an error/warning message so that it can be used to throw a ThoughtScript error/warning. The message's
    '{}' slots are filled with exprs, which are highlighted when displayed. str() of the exception is never colored.
    """
    kind = "error"

    def __init__(self, msg, exprs=None, line=None, column=None, diagnosis=True, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        super().__init__(msg.format(*exprs))

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.line = line
        self.column = column

        self.diagnosis = diagnosis
        self.internal = internal

    @property
    def position(self):
        """'line:column' of the error, or '' if unknown."""
        if self.line is None:
            return ""
        return f"{self.line}:{self.column}"


class LexicalError(ThoughtException):
    """Character that cannot start any token."""
    kind = "lexical"


class ParseError(ThoughtException):
    """Expected token kind not found."""
    kind = "syntax"


class UndefinedNameError(ThoughtException):
    """Unbound variable, or called name that is not callable."""
    kind = "name"


class ValueTypeError(ThoughtException):
    """Operand of the wrong type."""
    kind = "type"


class ArityError(ThoughtException):
    kind = "arity"


class DivisionByZeroError(ThoughtException):
    kind = "arithmetic"


class RecursionDepthError(ThoughtException):
    """Intentions nested deeper than the interpreter can follow."""
    kind = "recursion"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report ThoughtScript errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.path = None
        self.source = ""

    def register_source(self, path, source):
        """Registers the source being run, used for positions and diagnoses."""
        self.path = path
        self.source = source

    def source_line(self, line):
        """Returns line number line of the registered source, or None."""
        lines = self.source.splitlines()
        if line is None or not 0 < line <= len(lines):
            return None
        return lines[line - 1]

    def diagnose(self, error, warning=False):
        """Returns the offending source line with the error column highlighted and marked with a caret."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        line = self.source_line(error.line)
        if line is None:
            return None

        start = max((error.column or 1) - 1, 0)
        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:start + 1], color, attrs=["bold"])
        diagnosis += line[start + 1:] + "\n"

        diagnosis += "  " + "".join(char if char == "\t" else " " for char in line[:start])
        diagnosis += colored("^", color, attrs=["bold"])

        return diagnosis

    def _location(self, error):
        location = self.path or "<in>"
        if error.position:
            location += f":{error.position}"
        return colored(f"{location}: ", attrs=["bold"])

    def warn(self, warning):
        """Prints runtime warning message. warning must be a ThoughtException."""
        msg = self._location(warning)
        msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + warning.msg
        print(msg)

        if not warning.internal and warning.diagnosis:
            diagnosis = self.diagnose(warning, warning=True)
            if diagnosis:
                print(diagnosis)

    def throw(self, error):
        """Throws error, which must be a ThoughtException. Exits if this handler is fatal."""
        msg = self._location(error)

        if error.internal:
            msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        msg += colored(f"{error.kind}: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(msg, file=sys.stderr)

        if not error.internal and error.diagnosis:
            diagnosis = self.diagnose(error)
            if diagnosis:
                print(diagnosis, file=sys.stderr)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(ThoughtException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(ThoughtException("maximum recursion depth exceeded", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, ThoughtException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(ThoughtException("unknown error: '{}: {}'", (exc_type.__name__, exc_val), internal=True))
            do_exit = True

        return not do_exit
