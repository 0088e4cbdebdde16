#!/usr/bin/env python3
"""
Benchmark: harmonic sums and continued fraction convergents,
Rational vs quicktions.Fraction; results are cross-checked.

Example:
    ./benchmarks/arithmetic.py --count 500 -v
    ./benchmarks/arithmetic.py --repr int64 --count 20

Fixed-width representations report overflow instead of timings when --count is too large.
"""

import argparse
import logging
import sys
import time
sys.path.append('.')

import numpy
from quicktions import Fraction

from rationals.rational import Rational, reciprocal_of


DEFAULT_COUNT = 200
# harmonic sums overflow int16 at about ten terms
DEFAULT_FIXED_WIDTH_COUNT = 8

REPRESENTATIONS = {
    'int': int,
    'int16': numpy.int16,
    'int32': numpy.int32,
    'int64': numpy.int64,
}


def harmonic_sum(count, one):
    total = one - one
    for k in range(1, count + 1):
        total += one / k
    return total


def golden_convergent(count, one):
    # 1 + 1/(1 + 1/(1 + ...)), ratio of consecutive Fibonacci numbers
    x = one
    for _ in range(count):
        x = one + one / x
    return x


def run_task(func, count, repeat, one):
    start = time.perf_counter()
    for _ in range(repeat):
        result = func(count, one)
    return result, time.perf_counter() - start


def run_benchmark(rational_type, count, repeat):
    """
    Run all tasks, print timings and return {task name: status}.

    Status is 'ok', or 'overflow' if a fixed-width representation wrapped around;
    a mismatch with unbounded int is a bug and raises RuntimeError.
    """
    fixed_width = not rational_type.representation.is_unbounded
    tasks = [('harmonic', harmonic_sum), ('golden', golden_convergent)]
    statuses = {}
    for name, func in tasks:
        logging.info('task %s, count=%d, repeat=%d', name, count, repeat)
        expected, fraction_time = run_task(func, count, repeat, Fraction(1))

        try:
            # wrapped products are detected below by comparison with Fraction
            with numpy.errstate(over='ignore'):
                result, rational_time = run_task(func, count, repeat, rational_type(1))
        except (ArithmeticError, ValueError) as exc:
            if not fixed_width:
                raise
            # wrap-around may hit the representation minimum or a zero denominator
            logging.debug('%s failed: %r', name, exc)
            result = None

        if result is None or result.as_fraction() != expected:
            if not fixed_width:
                raise RuntimeError('{}: {!r} differs from {!r}'.format(name, result, expected))
            print('{}: overflow in {}, try smaller --count'.format(name, rational_type.representation.name))
            statuses[name] = 'overflow'
            continue
        logging.debug('%s result: %r', name, result)

        print('{}: {:.4f}s (Fraction: {:.4f}s), float value {:.10f}'.format(
            name, rational_time, fraction_time, float(result),
        ))
        # check that the value survives a round through its reciprocal
        assert reciprocal_of(reciprocal_of(result)) == result
        statuses[name] = 'ok'
    return statuses


if __name__ == "__main__":
    argparser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    argparser.add_argument('--repr', type=str, choices=list(REPRESENTATIONS), default='int', help='integral representation')
    argparser.add_argument('--count', type=int, help='terms in each task (default: {} for int, {} for fixed width)'.format(
        DEFAULT_COUNT, DEFAULT_FIXED_WIDTH_COUNT,
    ))
    argparser.add_argument('--repeat', type=int, default=10)
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')
    args = argparser.parse_args()

    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose == 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)  # call after loglevel is set!

    rational_type = Rational[REPRESENTATIONS[args.repr]]
    count = args.count
    if count is None:
        count = DEFAULT_COUNT if rational_type.representation.is_unbounded else DEFAULT_FIXED_WIDTH_COUNT
    run_benchmark(rational_type, count, args.repeat)
