import unittest
from srp6a.arith import mod_exp, mod_add, safe_compare, is_zero_mod
from srp6a.groups import RFC5054_2048

class ModExp(unittest.TestCase):
    def test_simple_values(self):
        for x, y, N, result in [(0, 0, 1, 1),
                                (1, 0, 1, 1),
                                (2, 0, 1, 1),
                                (2, 1, 2, 0),
                                (4, 1, 2, 0),
                                (2, 2, 2, 0),
                                (3, 4, 5, 1),
                                (4, 13, 497, 445),
                                ]:
            self.assertEqual(mod_exp(x, y, N), result, (x, y, N))

    def test_zero_exponent(self):
        for x in [0, 1, 2, 12345, 2**300]:
            for N in [1, 2, 7, 2**127 - 1]:
                self.assertEqual(mod_exp(x, 0, N), 1)

    def test_matches_builtin(self):
        N = RFC5054_2048.N
        for x, y in [(2, 2**256 + 1), (N - 1, 3), (N + 5, 2**100),
                     (-7, 11), (3, N - 1)]:
            self.assertEqual(mod_exp(x, y, N), pow(x, y, N))

    def test_bad_arguments(self):
        self.assertRaises(ValueError, mod_exp, 2, -1, 7)
        self.assertRaises(ValueError, mod_exp, 2, 3, 0)
        self.assertRaises(ValueError, mod_exp, 2, 3, -7)

class ModAdd(unittest.TestCase):
    def test_add(self):
        self.assertEqual(mod_add(3, 4, 5), 2)
        self.assertEqual(mod_add(0, 0, 5), 0)
        self.assertEqual(mod_add(13, 24, 5), 2)
        self.assertEqual(mod_add(-1, 0, 5), 4)
        self.assertEqual(mod_add(-6, -7, 5), 2)
        N = RFC5054_2048.N
        self.assertEqual(mod_add(N * 3 + 1, N - 1, N), 0)
        self.assertRaises(ValueError, mod_add, 1, 1, 0)

class SafeCompare(unittest.TestCase):
    def test_compare(self):
        self.assertTrue(safe_compare(0, 0))
        self.assertTrue(safe_compare(2**2048 + 1, 2**2048 + 1))
        self.assertFalse(safe_compare(0, 1))
        self.assertFalse(safe_compare(0x10, 0x01))
        # differing lengths are compared at a common width
        self.assertFalse(safe_compare(0xf, 0xff))
        self.assertFalse(safe_compare(2**2048, 0))

    def test_zero_mod(self):
        N = RFC5054_2048.N
        self.assertTrue(is_zero_mod(0, N))
        self.assertTrue(is_zero_mod(N, N))
        self.assertTrue(is_zero_mod(5 * N, N))
        self.assertFalse(is_zero_mod(1, N))
        self.assertFalse(is_zero_mod(N + 1, N))

if __name__ == '__main__':
    unittest.main()
