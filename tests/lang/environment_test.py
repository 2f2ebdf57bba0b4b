import unittest

from thoughtscript.lang.environment import Environment
from thoughtscript.lang.error import UndefinedNameError


class EnvironmentTestCase(unittest.TestCase):

    def setUp(self):
        self.root = Environment()
        self.child = Environment(self.root)

    def test_lookup_walks_parents(self):
        self.root.define("x", 1)
        self.assertEqual(1, self.child.lookup("x"))
        self.assertEqual(1, Environment(self.child).lookup("x"))

    def test_define_shadows(self):
        self.root.define("x", 1)
        self.child.define("x", 2)
        self.assertEqual(2, self.child.lookup("x"))
        self.assertEqual(1, self.root.lookup("x"))

        self.child.define("x", 3)
        self.assertEqual(3, self.child.lookup("x"))

    def test_unbound(self):
        self.root.define("y", None)
        self.assertIsNone(self.child.lookup("y"))
        self.assertRaises(UndefinedNameError, self.child.lookup, "x")
        self.assertRaises(UndefinedNameError, self.root.lookup, "memories")

    def test_memories_merge(self):
        self.root.remember("a", 1)
        self.root.remember("b", 2)
        self.child.remember("b", 3)
        self.child.remember("c", 4)

        self.assertEqual({"a": 1, "b": 3, "c": 4}, self.child.all_memories())
        self.assertEqual({"a": 1, "b": 2}, self.root.all_memories())
        self.assertEqual(["a", "b", "c"], list(self.child.all_memories()))

    def test_memories_are_not_variables(self):
        self.root.remember("x", 1)
        self.assertRaises(UndefinedNameError, self.root.lookup, "x")

    def test_close(self):
        self.root.remember("k", "outer")
        grandchild = Environment(self.child)
        grandchild.remember("k", "deepest")
        self.child.remember("k", "inner")

        grandchild.close()
        self.assertEqual({"k": "deepest"}, self.child.recollections)
        self.assertEqual({"k": "inner"}, self.child.memories)

        self.child.close()
        self.assertEqual({"k": "outer"}, self.root.memories)
        self.assertEqual({"k": "deepest"}, self.root.all_memories())

        self.root.close()
        self.assertEqual({"k": "deepest"}, self.root.all_memories())

    def test_remember_replaces_recollection(self):
        self.child.remember("k", "inner")
        self.child.close()
        self.assertEqual({"k": "inner"}, self.root.all_memories())

        self.root.remember("k", "outer")
        self.assertEqual({}, self.root.recollections)
        self.assertEqual({"k": "outer"}, self.root.all_memories())


if __name__ == '__main__':
    unittest.main()
