import unittest

from polynomials.terms import Term

class TestTerms(unittest.TestCase):

    def test_fields(self):
        t = Term(3, 2)
        self.assertEqual(t.multiplier, 3.0)
        self.assertEqual(t.power, 2)
        self.assertIsInstance(t.multiplier, float)

    def test_default_power(self):
        self.assertEqual(Term(7), Term(7, 0))

    def test_equality(self):
        assert Term(1, 2) == Term(1.0, 2)
        assert Term(1, 2) != Term(2, 2)
        assert Term(1, 2) != Term(1, 3)
        assert hash(Term(1, 2)) == hash(Term(1.0, 2))

    def test_sorting(self):
        terms = sorted([Term(1, 0), Term(2, 3), Term(3, 1)])
        self.assertEqual([t.power for t in terms], [3, 1, 0])
        self.assertLess(Term(1, 3), Term(1, 2))
        self.assertGreater(Term(5, 0), Term(-5, 4))

    def test_immutable(self):
        t = Term(1, 2)
        with self.assertRaises(AttributeError):
            t.multiplier = 4
        with self.assertRaises(AttributeError):
            t.power = 0

    def test_bad_power(self):
        with self.assertRaises(ValueError):
            Term(1, -1)
        with self.assertRaises(ValueError):
            Term(1, 1.5)
        with self.assertRaises(TypeError):
            Term("1", 2)

    def test_signed_rendering(self):
        self.assertEqual(str(Term(-3, 2)), "-3x^2")
        self.assertEqual(str(Term(1, 1)), "x")
        self.assertEqual(str(Term(-1, 1)), "-x")
        self.assertEqual(str(Term(-1, 0)), "-1")
        self.assertEqual(str(Term(2.5, 0)), "2.5")
        self.assertEqual(str(Term(0.5, 7)), "0.5x^7")

    def test_unsigned_rendering(self):
        self.assertEqual(Term(-3, 2).unsigned_str(), "3x^2")
        self.assertEqual(Term(-1, 1).unsigned_str(), "x")
        self.assertEqual(Term(-1, 0).unsigned_str(), "1")
        self.assertEqual(Term(4, 0).unsigned_str(), "4")

    def test_multiplication(self):
        self.assertEqual(Term(2, 1) * Term(3, 2), Term(6, 3))
        self.assertEqual(Term(2, 1) * 4, Term(8, 1))
        self.assertEqual(4 * Term(2, 1), Term(8, 1))
        self.assertEqual(-Term(2, 1), Term(-2, 1))

    def test_unpacking(self):
        c, p = Term(4, 3)
        self.assertEqual((c, p), (4.0, 3))
