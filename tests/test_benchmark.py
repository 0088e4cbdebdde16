import contextlib
import importlib.util
import io
import pathlib
import unittest

import numpy

from rationals.rational import Rational


def load_benchmark():
    path = pathlib.Path(__file__).resolve().parent.parent / 'benchmarks' / 'arithmetic.py'
    spec = importlib.util.spec_from_file_location('arithmetic_benchmark', path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBenchmark(unittest.TestCase):

    def setUp(self):
        self.benchmark = load_benchmark()

    def run_quietly(self, rational_type, count):
        with contextlib.redirect_stdout(io.StringIO()) as out:
            statuses = self.benchmark.run_benchmark(rational_type, count, repeat=1)
        return statuses, out.getvalue()

    def test_unbounded(self):
        statuses, _ = self.run_quietly(Rational, 30)
        self.assertEqual(statuses, {'harmonic': 'ok', 'golden': 'ok'})

    def test_fixed_width_default_count(self):
        count = self.benchmark.DEFAULT_FIXED_WIDTH_COUNT
        for int_type in [numpy.int16, numpy.int32, numpy.int64]:
            statuses, _ = self.run_quietly(Rational[int_type], count)
            self.assertEqual(statuses, {'harmonic': 'ok', 'golden': 'ok'})

    def test_fixed_width_overflow_reported(self):
        # the exact harmonic sum of 30 terms has a 13-digit denominator
        statuses, output = self.run_quietly(Rational[numpy.int16], 30)
        self.assertEqual(statuses['harmonic'], 'overflow')
        self.assertIn('overflow in int16', output)
