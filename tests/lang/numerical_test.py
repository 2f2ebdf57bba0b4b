import unittest

from thoughtscript.lang.error import DivisionByZeroError
from thoughtscript.lang.numerical import divide, is_even, is_number, number_to_string


class NumericalTestCase(unittest.TestCase):

    def test_is_number(self):
        should_fail = [True, False, None, "1", [1]]
        for case in should_fail:
            self.assertFalse(is_number(case), case)

        should_pass = [0, -4, 2.5, float("nan"), 10 ** 30]
        for case in should_pass:
            self.assertTrue(is_number(case), case)

    def test_number_to_string(self):
        should_pass = [
            (5, "5"),
            (-3, "-3"),
            (5.0, "5"),
            (-0.5, "-0.5"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (1e21, "1e+21"),
            (1.5e-7, "1.5e-7"),
            (1e-7, "1e-7"),
            (0.000001, "0.000001"),
            (0.00012, "0.00012"),
            (-0.0, "0"),
            (100.5, "100.5"),
            (1.2345678901234568e+20, "123456789012345680000"),
            (10 ** 21, "1e+21"),
            (10 ** 25, "1e+25"),
            (-10 ** 25, "-1e+25"),
            (10 ** 400, "Infinity"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
        ]  # pairs, since 5 and 5.0 are the same dict key
        for case, result in should_pass:
            self.assertEqual(result, number_to_string(case), case)

    def test_divide(self):
        self.assertRaises(DivisionByZeroError, divide, 1, 0)
        self.assertRaises(DivisionByZeroError, divide, 1.5, 0.0)

        should_pass = {(15, 3): 5, (7, 2): 3.5, (1, 4): 0.25, (-9, 3): -3, (4.5, 1.5): 3.0}
        for (left, right), result in should_pass.items():
            self.assertEqual(result, divide(left, right), (left, right))
        self.assertIsInstance(divide(15, 3), int)

    def test_is_even(self):
        self.assertTrue(is_even(4))
        self.assertTrue(is_even(-2))
        self.assertTrue(is_even(0))
        self.assertFalse(is_even(3))
        self.assertFalse(is_even(2.5))


if __name__ == '__main__':
    unittest.main()
