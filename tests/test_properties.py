import operator
import random
import unittest

from rationals.rational import Rational

from examples import rand_int, rand_uint, rand_rational, is_simplest, close_enough


N = 1000


class TestRandomized(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(20160214)

    def _check_operation(self, op, dop, is_eq):
        for _ in range(N):
            a, b = rand_rational(self.rng), rand_rational(self.rng)
            self.assertTrue(is_simplest(a))
            self.assertTrue(is_simplest(b))
            if close_enough(a, b.double):
                continue
            self.assertTrue(is_eq(op(a, b), dop(a.double, b.double)), '{}, {}'.format(a, b))

    def test_double_equiv(self):
        for _ in range(N):
            a, c = rand_int(self.rng), rand_uint(self.rng)
            ac = Rational(a, c)
            self.assertTrue(is_simplest(ac))
            expected = float(a) / float(c)
            self.assertAlmostEqual(ac.double, expected, delta=0.0001 * max(1.0, abs(expected)))

    def test_uniqueness(self):
        for _ in range(N):
            r = rand_rational(self.rng)
            k = self.rng.randint(1, 2**20) * self.rng.choice([1, -1])
            scaled = Rational(r.numerator * k, r.denominator * k)
            self.assertEqual((scaled.numerator, scaled.denominator), (r.numerator, r.denominator))

    def test_addition(self):
        self._check_operation(operator.add, operator.add, close_enough)

    def test_subtraction(self):
        self._check_operation(operator.sub, operator.sub, close_enough)

    def test_multiplication(self):
        self._check_operation(operator.mul, operator.mul, close_enough)

    def test_division(self):
        self._check_operation(operator.truediv, operator.truediv, close_enough)

    def test_compare(self):
        self._check_operation(operator.lt, operator.lt, operator.eq)

    def test_eq(self):
        self._check_operation(operator.eq, operator.eq, operator.eq)

    def test_commutativity(self):
        for _ in range(N):
            a, b = rand_rational(self.rng), rand_rational(self.rng)
            self.assertEqual(a + b, b + a)
            self.assertEqual(a * b, b * a)

    def test_associativity(self):
        for _ in range(N):
            a, b, c = rand_rational(self.rng), rand_rational(self.rng), rand_rational(self.rng)
            self.assertEqual((a + b) + c, a + (b + c))
            self.assertEqual((a * b) * c, a * (b * c))

    def test_reciprocal(self):
        for _ in range(N):
            r = rand_rational(self.rng)
            self.assertEqual(r.reciprocal, 1 / r)
            self.assertTrue(is_simplest(r.reciprocal))

    def test_order(self):
        for _ in range(N):
            a, b, c = sorted(rand_rational(self.rng) for _ in range(3))
            self.assertTrue(a <= b <= c)
            self.assertTrue(a <= c)
            if a < b:
                self.assertFalse(b < a)
            self.assertEqual(a < b, a.as_fraction() < b.as_fraction())
