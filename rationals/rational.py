import numbers

from quicktions import Fraction  # type: ignore

from .utils import INT_BITS, INT_MIN, gcd, check_numerator, check_denominator


class Rational:
    """
    Exact rational number in canonical form.

    Invariants: denominator > 0, gcd(|numerator|, denominator) == 1, the sign is kept in numerator.
    So a value has exactly one representation and equality is comparison of fields.
    Numerator fits signed INT_BITS integer, denominator fits unsigned one (see utils).

    Immutable and hashable.
    """

    __slots__ = ('_n', '_d')

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """
        Create reduced fraction numerator/denominator.

        Negative denominator is allowed, its sign is moved to numerator.
        Arguments may be arbitrary ints, but reduced parts must fit the widths (or OverflowError).
        """
        if not (isinstance(numerator, int) and isinstance(denominator, int)):
            raise TypeError("Rational parts must be integers, got {!r}, {!r}".format(numerator, denominator))
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        elif denominator == 0:
            raise ZeroDivisionError("Division by zero!")

        unum = abs(numerator)
        g = gcd(unum, denominator)
        n = unum // g
        object.__setattr__(self, '_n', check_numerator(-n if numerator < 0 else n))
        object.__setattr__(self, '_d', check_denominator(denominator // g))

    @classmethod
    def _make(cls, n, d):
        # parts are known to be canonical and in range
        obj = object.__new__(cls)
        object.__setattr__(obj, '_n', n)
        object.__setattr__(obj, '_d', d)
        return obj

    @classmethod
    def from_parts(cls, numerator: int, denominator: int) -> 'Rational':
        """Signed numerator, unsigned denominator."""
        if isinstance(denominator, int) and denominator < 0:
            raise ValueError("Denominator must be non-negative, got {}".format(denominator))
        return cls(numerator, denominator)

    @classmethod
    def from_int(cls, n: int) -> 'Rational':
        return cls(n, 1)

    @classmethod
    def convert(cls, x) -> 'Rational':
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls(x, 1)
        elif isinstance(x, (Fraction, numbers.Rational)):
            return cls(int(x.numerator), int(x.denominator))
        else:
            raise TypeError("Can't convert {!r} to Rational".format(x))

    @classmethod
    def parse(cls, fraction_str: str) -> 'Rational':
        """Inverse of str(): '3/4', '-3 / 4' or '5'."""
        if '/' in fraction_str:
            n, d = fraction_str.split('/')
        else:
            n, d = fraction_str, 1
        return cls(int(n), int(d))

    @classmethod
    def _coerce(cls, other):
        # None means unsupported type; binary operators then return NotImplemented
        if isinstance(other, cls):
            return other
        if isinstance(other, (int, Fraction, numbers.Rational)):
            return cls.convert(other)
        return None

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    # comparison

    def _compare(self, other):
        # sign of (self - other) computed exactly; None for foreign types
        if isinstance(other, Rational):
            on, od = other._n, other._d
        elif isinstance(other, (int, Fraction, numbers.Rational)):
            on, od = int(other.numerator), int(other.denominator)
        else:
            return None
        sn = self._n
        if (sn < 0) != (on < 0):
            return -1 if sn < 0 else 1
        # same sign: cross products are python ints and can't overflow
        lhs = sn * od
        rhs = on * self._d
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other):
        if isinstance(other, Rational):
            return self._n == other._n and self._d == other._d
        if isinstance(other, (int, Fraction, numbers.Rational)):
            return self._n == other.numerator and self._d == other.denominator
        return NotImplemented

    def __lt__(self, other):
        c = self._compare(other)
        return NotImplemented if c is None else c < 0

    def __le__(self, other):
        c = self._compare(other)
        return NotImplemented if c is None else c <= 0

    def __gt__(self, other):
        c = self._compare(other)
        return NotImplemented if c is None else c > 0

    def __ge__(self, other):
        c = self._compare(other)
        return NotImplemented if c is None else c >= 0

    def __hash__(self):
        # equal ints and Fractions must hash equally
        return hash(Fraction(self._n, self._d))

    # arithmetic

    def __neg__(self):
        if self._n == INT_MIN:
            raise OverflowError("Can't negate {}: numerator out of range".format(self))
        return Rational._make(-self._n, self._d)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self._n < 0 else self

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # common denominator is lcm(d1, d2); constructor finishes the reduction
        g = gcd(self._d, other._d)
        return Rational(self._n * (other._d // g) + other._n * (self._d // g), (self._d // g) * other._d)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._sub(self)

    def _sub(self, other):
        # same as self + (-other), but -other may overflow while the difference fits
        g = gcd(self._d, other._d)
        return Rational(self._n * (other._d // g) - other._n * (self._d // g), (self._d // g) * other._d)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._n * other._n, self._d * other._d)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._div(self)

    def _div(self, other):
        if other._n == 0:
            raise ZeroDivisionError("Division by zero!")
        # negative divisor numerator becomes negative denominator, the constructor moves the sign up
        return Rational(self._n * other._d, self._d * other._n)

    def __pow__(self, power):
        if not isinstance(power, int):
            return NotImplemented
        if power < 0:
            return self.reciprocal ** (-power)
        if power > INT_BITS and (abs(self._n) > 1 or self._d > 1):
            raise OverflowError("{} ** {} is out of range".format(self, power))
        return Rational(self._n ** power, self._d ** power)

    @property
    def reciprocal(self) -> 'Rational':
        """
        1/self, with the sign kept in numerator.

        >>> rat(3, 4).reciprocal
        Rational(4, 3)
        """
        if self._n == 0:
            raise ZeroDivisionError("Division by zero!")
        if self._n < 0:
            return Rational._make(check_numerator(-self._d), -self._n)
        return Rational._make(check_numerator(self._d), self._n)

    # stride support

    def distance_to(self, other) -> 'Rational':
        return Rational.convert(other) - self

    def advanced_by(self, n) -> 'Rational':
        return self + Rational.convert(n)

    def stride(self, *, by, to=None, through=None):
        """Progression from self by step `by`, either up to `to` (exclusive) or `through` (inclusive)."""
        from .stride import RationalStride
        if (to is None) == (through is None):
            raise TypeError("Exactly one of 'to' and 'through' must be given")
        if to is not None:
            return RationalStride(self, to, by)
        return RationalStride(self, through, by, inclusive=True)

    # conversions

    def as_fraction(self) -> Fraction:
        return Fraction(self._n, self._d)

    @property
    def double(self) -> float:
        """Float approximation, lossy."""
        return float(self)

    def __float__(self):
        return self._n / self._d

    def __bool__(self):
        return self._n != 0

    def __int__(self):
        # truncation towards zero, like int(float)
        q = abs(self._n) // self._d
        return -q if self._n < 0 else q

    __trunc__ = __int__

    def __floor__(self):
        return self._n // self._d

    def __ceil__(self):
        return -(-self._n // self._d)

    def __str__(self):
        if self._d == 1:
            return str(self._n)
        else:
            return '{}/{}'.format(self._n, self._d)

    def __repr__(self):
        return 'Rational({}, {})'.format(self._n, self._d)

    def __reduce__(self):
        return (Rational, (self._n, self._d))


def rat(numerator: int, denominator: int) -> Rational:
    """Reduced fraction numerator/denominator, e.g. rat(6, 8) == rat(3, 4)."""
    return Rational(numerator, denominator)
