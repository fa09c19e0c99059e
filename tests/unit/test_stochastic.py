"""
Unit tests for stochastic oscillators.

Tests FastStochastic, SlowStochastic and FullStochastic.
"""

import random
import unittest
from types import SimpleNamespace

import pytest

from tastream.exceptions import ConfigError
from tastream.indicators.outputs import StochasticOutput
from tastream.indicators.stochastic import (
    FLAT_RANGE_VALUE,
    FastStochastic,
    FullStochastic,
    SlowStochastic,
)
from tastream.quote import DataItem


def hlc(high, low, close):
    return SimpleNamespace(high=high, low=low, close=close)


@pytest.mark.unit
class TestFastStochastic(unittest.TestCase):
    """Test FastStochastic."""

    def test_scalars(self):
        """Test scalar input, used as high, low and close."""
        stoch = FastStochastic(3)
        self.assertEqual([stoch.update(x) for x in (0.0, 200.0, 100.0, 120.0, 115.0)],
                         [50.0, 100.0, 50.0, 20.0, 75.0])

    def test_quotes(self):
        """Test %K against the high/low range of the last three quotes."""
        test_data = [
            # high, low, close, expected
            (20.0, 20.0, 20.0, 50.0),  # min = 20, max = 20
            (30.0, 10.0, 25.0, 75.0),  # min = 10, max = 30
            (40.0, 20.0, 16.0, 20.0),  # min = 10, max = 40
            (35.0, 15.0, 19.0, 30.0),  # min = 10, max = 40
            (30.0, 20.0, 25.0, 40.0),  # min = 15, max = 40
            (35.0, 25.0, 30.0, 75.0),  # min = 15, max = 35
        ]
        stoch = FastStochastic(3)
        for high, low, close, expected in test_data:
            self.assertAlmostEqual(stoch.update(hlc(high, low, close)), expected)

    def test_flat_window(self):
        """Test that a zero range yields the flat-range value."""
        self.assertEqual(FLAT_RANGE_VALUE, 50.0)
        stoch = FastStochastic(4)
        for _ in range(10):
            self.assertEqual(stoch.update(DataItem(open=7, high=7, low=7, close=7, volume=1)), 50.0)

    def test_reset(self):
        """Test that reset forgets the old range."""
        stoch = FastStochastic(10)
        self.assertEqual([stoch.update(x) for x in (10.0, 210.0, 10.0, 60.0)], [50.0, 100.0, 0.0, 25.0])
        stoch.reset()
        self.assertEqual([stoch.update(x) for x in (10.0, 20.0, 12.5)], [50.0, 100.0, 25.0])

    def test_bounded(self):
        """Test %K stays within [0, 100] for valid quotes."""
        rng = random.Random(9)
        stoch = FastStochastic(5)
        for _ in range(300):
            low = rng.uniform(50, 100)
            high = low + rng.uniform(0, 10)
            close = rng.uniform(low, high)
            value = stoch.update(hlc(high, low, close))
            self.assertGreaterEqual(value, 0.0)
            self.assertLessEqual(value, 100.0)

    def test_zero_period_rejected(self):
        """Test that FastStochastic(0) cannot be constructed."""
        with self.assertRaises(ConfigError):
            FastStochastic(0)

    def test_display(self):
        """Test display name."""
        self.assertEqual(str(FastStochastic(21)), 'FAST_STOCH(21)')


@pytest.mark.unit
class TestSlowStochastic(unittest.TestCase):
    """Test SlowStochastic."""

    def test_ema_smoothing(self):
        """Test that fast %K is smoothed with an EMA (alpha = 2/3 for period 2)."""
        stoch = SlowStochastic(3, 2)
        outputs = [stoch.update(x) for x in (0.0, 200.0, 100.0)]
        self.assertEqual(outputs[0], 50.0)
        self.assertAlmostEqual(outputs[1], 250.0 / 3)
        self.assertAlmostEqual(outputs[2], 100.0 / 3 + 250.0 / 9)

    def test_invalid_periods(self):
        """Test that zero periods are rejected."""
        with self.assertRaises(ConfigError):
            SlowStochastic(0, 3)
        with self.assertRaises(ConfigError):
            SlowStochastic(14, 0)

    def test_display(self):
        """Test display name."""
        self.assertEqual(str(SlowStochastic()), 'SLOW_STOCH(14, 3)')


@pytest.mark.unit
class TestFullStochastic(unittest.TestCase):
    """Test FullStochastic."""

    def test_sma_smoothing(self):
        """Test slow %K and %D with SMA(2) smoothing."""
        stoch = FullStochastic(3, 2, 2)
        outputs = [stoch.update(x) for x in (0.0, 200.0, 100.0, 120.0)]
        # fast %K: 50, 100, 50, 20
        self.assertEqual(outputs, [
            StochasticOutput(k=50.0, d=50.0),
            StochasticOutput(k=75.0, d=62.5),
            StochasticOutput(k=75.0, d=75.0),
            StochasticOutput(k=35.0, d=55.0),
        ])

    def test_unsmoothed_k_matches_fast(self):
        """Test that k_smoothing=1 reproduces fast %K."""
        full = FullStochastic(5, 1, 3)
        fast = FastStochastic(5)
        rng = random.Random(4)
        for _ in range(100):
            x = rng.uniform(0, 10)
            self.assertEqual(full.update(x).k, fast.update(x))
