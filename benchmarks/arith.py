#!/usr/bin/env python3
"""
Benchmark: harmonic sums with Rational and quicktions.Fraction.

Sums 1/1 + ... + 1/N repeatedly; N=40 is near the limit of 64-bit parts.
"""

import logging
import sys
import time
sys.path.append('.')

from quicktions import Fraction  # type: ignore

from rationals.rational import Rational
from rationals.stride import stride_to

logging.basicConfig(level=logging.INFO)

N = 40
REPEAT = 2000


def harmonic(cls, n):
    total = cls(0)
    for k in range(1, n + 1):
        total += cls(1, k)
    return total


if __name__ == "__main__":
    for cls in [Rational, Fraction]:
        start = time.perf_counter()
        for _ in range(REPEAT):
            res = harmonic(cls, N)
        logging.info('%s: H_%d = %s, %.3fs', cls.__name__, N, res, time.perf_counter() - start)

    start = time.perf_counter()
    count = sum(1 for _ in stride_to(0, 100, Rational(1, 1000)))
    logging.info('stride: %d values, %.3fs', count, time.perf_counter() - start)
