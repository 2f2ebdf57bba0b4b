import os
import unittest

import thoughtscript
from thoughtscript import ThoughtScript, execute, language
from thoughtscript.lang import grammar
from thoughtscript.lang.lexical import TokenType

EXAMPLES = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "examples")


def read_example(name):
    with open(os.path.join(EXAMPLES, name), "r", encoding="utf-8") as file:
        return file.read()


class ThoughtScriptTestCase(unittest.TestCase):

    def setUp(self):
        self.ts = ThoughtScript(echo=False)

    def test_run(self):
        self.assertEqual(7, self.ts.run("think 3 + 4 as x"))
        self.assertEqual(14, self.ts.run("x * 2"))
        self.assertEqual([], self.ts.get_output())

        self.ts.run('express "hi"')
        self.assertEqual(["hi"], self.ts.get_output())
        self.ts.clear_output()
        self.assertEqual([], self.ts.get_output())

    def test_reset(self):
        self.ts.run("think 1 as x")
        self.ts.reset()
        self.assertRaises(thoughtscript.UndefinedNameError, self.ts.run, "x")

    def test_tokenize_and_parse(self):
        tokens = self.ts.tokenize("express 1")
        self.assertEqual([TokenType.EXPRESS, TokenType.NUMBER, TokenType.EOF], [token.type for token in tokens])

        program = self.ts.parse("express 1")
        self.assertIsInstance(program, grammar.Program)
        self.assertIsInstance(program.statements[0], grammar.Express)

    def test_execute(self):
        self.assertEqual(5, execute("divide(15, 3)", echo=False))
        self.assertEqual("ab", execute('"a" + "b"', echo=False))
        self.assertIsNot(thoughtscript.create_interpreter(echo=False).interpreter, self.ts.interpreter)

    def test_language(self):
        self.assertEqual("ThoughtScript", language["name"])
        self.assertEqual(thoughtscript.__version__, language["version"])
        self.assertIn("think", language["keywords"])
        self.assertIn("memories", language["keywords"])
        self.assertEqual(
            ["add", "subtract", "multiply", "divide", "length", "type", "isEven", "isOdd", "uppercase", "lowercase"],
            language["builtins"]
        )

    def test_basics_example(self):
        self.ts.run(read_example("basics.ts"))
        self.assertEqual([
            "Name: Ada",
            "Next year Ada will be 37",
            "Shouting: ADA",
            "Half of age: 18",
            "Type of age: number",
            "Ada is an adult",
            "Tim is a minor",
        ], self.ts.get_output())

    def test_memories_example(self):
        self.ts.run(read_example("memories.ts"))
        self.assertEqual([
            "1 is odd",
            "3 is odd",
            "5 is odd",
            "Memories:\nfavorite drink: tea\neven 2: 2\neven 4: 4\neven 6: 6",
        ], self.ts.get_output())


if __name__ == '__main__':
    unittest.main()
