import contextlib
import io
import os
import tempfile
import unittest

from thoughtscript import __version__
from thoughtscript.main import main


class MainTestCase(unittest.TestCase):

    def write(self, source):
        file = tempfile.NamedTemporaryFile("w", suffix=".ts", delete=False, encoding="utf-8")
        with file:
            file.write(source)
        self.addCleanup(os.remove, file.name)
        return file.name

    def run_main(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            main(list(argv))
        return stdout.getvalue(), stderr.getvalue()

    def test_run_file(self):
        path = self.write("consider i from 1 to 3:\n    express i * i\n")
        stdout, stderr = self.run_main(path)
        self.assertEqual("1\n4\n9\n", stdout)
        self.assertEqual("", stderr)

    def test_tokens(self):
        path = self.write("think 1 as x\n")
        stdout, __ = self.run_main(path, "--tokens")
        lines = stdout.splitlines()
        self.assertEqual("Token(THINK, 'think', 1:1)", lines[0])
        self.assertEqual("Token(NUMBER, 1, 1:7)", lines[1])
        self.assertTrue(lines[-1].startswith("Token(EOF"))

    def test_ast(self):
        path = self.write("express 1 + 2\n")
        stdout, __ = self.run_main(path, "--ast")
        self.assertTrue(stdout.startswith("Program(statements=["))
        self.assertIn("BinaryOp(", stdout)
        self.assertIn("operator='+'", stdout)

    def test_failing_file(self):
        path = self.write('express "before"\nexpress 1 / 0\nexpress "after"\n')
        with self.assertRaises(SystemExit) as context:
            self.run_main(path)
        self.assertEqual(1, context.exception.code)

    def test_missing_file(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main("/no/such/program.ts")
        self.assertEqual(1, context.exception.code)

    def test_version(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            with self.assertRaises(SystemExit) as context:
                main(["--version"])
        self.assertEqual(0, context.exception.code)
        self.assertIn(__version__, stdout.getvalue())

    def test_tokens_need_a_file(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                main(["--tokens"])
        self.assertEqual(2, context.exception.code)


if __name__ == '__main__':
    unittest.main()
