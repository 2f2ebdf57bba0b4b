import contextlib
import io
import unittest

from thoughtscript.lang.error import (
    ArityError, DivisionByZeroError, ErrorHandler, LexicalError, ParseError, RecursionDepthError, ThoughtException,
    UndefinedNameError, ValueTypeError,
)


class ThoughtExceptionTestCase(unittest.TestCase):

    def test_message(self):
        error = ThoughtException("undefined variable '{}'", "foo", line=3, column=7)
        self.assertEqual("undefined variable 'foo'", str(error))
        self.assertIn("foo", error.msg)
        self.assertEqual("3:7", error.position)

        error = ThoughtException("'{}' expects {} argument(s)", ("greet", 2))
        self.assertEqual("'greet' expects 2 argument(s)", str(error))
        self.assertEqual("", error.position)

    def test_kinds(self):
        cases = {
            LexicalError: "lexical",
            ParseError: "syntax",
            UndefinedNameError: "name",
            ValueTypeError: "type",
            ArityError: "arity",
            DivisionByZeroError: "arithmetic",
            RecursionDepthError: "recursion",
        }
        for error, kind in cases.items():
            self.assertEqual(kind, error.kind, error)
            self.assertTrue(issubclass(error, ThoughtException), error)


class ErrorHandlerTestCase(unittest.TestCase):

    def setUp(self):
        self.handler = ErrorHandler(fatal=False)
        self.handler.register_source("test.ts", "think 1 as x\nexpress missing\n")

    def test_reports_and_continues(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.handler:
                raise UndefinedNameError("undefined variable '{}'", "missing", line=2, column=9)

        report = stderr.getvalue()
        self.assertIn("test.ts", report)
        self.assertIn("2:9", report)
        self.assertIn("name", report)
        self.assertIn("missing", report)
        self.assertIn("^", report)

    def test_fatal(self):
        handler = ErrorHandler()
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                with handler:
                    raise DivisionByZeroError("division by zero")
        self.assertEqual(1, context.exception.code)

    def test_internal_errors_propagate(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(KeyError):
                with self.handler:
                    raise KeyError("boom")
        self.assertIn("[internal]", stderr.getvalue())

    def test_recursion(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.handler:
                raise RecursionError()
        self.assertIn("maximum recursion depth exceeded", stderr.getvalue())

    def test_diagnose(self):
        error = UndefinedNameError("undefined variable '{}'", "missing", line=2, column=9)
        diagnosis = self.handler.diagnose(error)
        first, second = diagnosis.split("\n")
        self.assertTrue(first.startswith("  express "))
        self.assertIn("issing", first)
        self.assertTrue(second.startswith("  " + " " * 8))
        self.assertIn("^", second)

        self.assertIsNone(self.handler.diagnose(ThoughtException("no position")))
        self.assertIsNone(self.handler.diagnose(ThoughtException("past the end", line=10, column=1)))

    def test_warn(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            self.handler.warn(ThoughtException("unterminated string literal", line=1, column=1))
        self.assertIn("warning", stdout.getvalue())
        self.assertIn("unterminated string literal", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
