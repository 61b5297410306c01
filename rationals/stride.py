import logging
import math
from typing import Iterator

from .rational import Rational

logger = logging.getLogger(__name__)


class RationalStride:
    """
    Arithmetic progression start, start + step, start + 2*step, ... bounded by end.

    Lazy and restartable: each iteration starts again from start.
    With inclusive=False values stay strictly before end (like range), otherwise end itself may be produced.
    If step points away from end, the progression is empty.
    """

    def __init__(self, start, end, step, inclusive: bool = False) -> None:
        self.start = Rational.convert(start)
        self.end = Rational.convert(end)
        self.step = Rational.convert(step)
        if not self.step:
            raise ValueError("Stride step must be non-zero!")
        self.inclusive = bool(inclusive)
        self._count = self._get_count()
        logger.debug('stride %s -> %s by %s (inclusive=%s): %d values',
                     self.start, self.end, self.step, self.inclusive, self._count)

    def _get_count(self) -> int:
        # number of k >= 0 with start + k*step before (or at) end; exact, no width limits
        span = (self.end.as_fraction() - self.start.as_fraction()) / self.step.as_fraction()
        if span < 0:
            return 0
        if self.inclusive:
            return math.floor(span) + 1
        return math.ceil(span)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Rational]:
        # advance only between yielded values: the value after the last one may not fit the widths
        value = self.start
        for idx in range(self._count):
            if idx:
                value = value.advanced_by(self.step)
            yield value

    def __contains__(self, x) -> bool:
        try:
            x = Rational.convert(x)
        except (TypeError, OverflowError):
            return False
        k = (x.as_fraction() - self.start.as_fraction()) / self.step.as_fraction()
        return k.denominator == 1 and 0 <= k < self._count

    def __repr__(self):
        return 'RationalStride({}, {}, {}, inclusive={})'.format(self.start, self.end, self.step, self.inclusive)


def stride_to(start, end, step) -> RationalStride:
    """Values from start by step, stopping strictly before end."""
    return RationalStride(start, end, step)


def stride_through(start, end, step) -> RationalStride:
    """Values from start by step, up to and including end if it is hit exactly."""
    return RationalStride(start, end, step, inclusive=True)
