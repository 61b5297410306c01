"""
Integer helpers and the fixed-width budget for Rational.

Numerator is stored in the signed, denominator in the unsigned INT_BITS range.
Intermediate products are plain python ints, so only final results are checked.
"""

INT_BITS = 64
INT_MIN = -2**(INT_BITS - 1)
INT_MAX = 2**(INT_BITS - 1) - 1
UINT_MAX = 2**INT_BITS - 1


def gcd(x: int, y: int) -> int:
    """Greatest common divisor of non-negative integers, Euclid's algorithm; gcd(0, 0) = 0."""
    if x < 0 or y < 0:
        raise ValueError("gcd arguments must be non-negative!")
    a, b = x, y
    while b != 0:
        a, b = b, a % b
    return a


def check_numerator(n: int) -> int:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError("numerator {} does not fit {}-bit signed range".format(n, INT_BITS))
    return n


def check_denominator(d: int) -> int:
    # zero is handled by callers, it is not an overflow
    if d > UINT_MAX:
        raise OverflowError("denominator {} does not fit {}-bit unsigned range".format(d, INT_BITS))
    return d
