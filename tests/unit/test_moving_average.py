"""
Unit tests for moving averages.

Tests SimpleMovingAverage, ExponentialMovingAverage and WilderMovingAverage.
"""

import unittest
import pytest

from tastream.exceptions import ConfigError
from tastream.indicators.moving_average import (
    ExponentialMovingAverage,
    SimpleMovingAverage,
    WilderMovingAverage,
)
from tastream.quote import DataItem


@pytest.mark.unit
class TestSimpleMovingAverage(unittest.TestCase):
    """Test SimpleMovingAverage."""

    def test_warm_up_divides_by_count(self):
        """Test that outputs during warm-up average the inputs seen so far."""
        sma = SimpleMovingAverage(3)
        self.assertEqual([sma.update(x) for x in (2, 4, 6)], [2.0, 3.0, 4.0])

    def test_window_slides(self):
        """Test that the oldest input leaves the window once it is full."""
        sma = SimpleMovingAverage(3)
        for x in (2, 4, 6):
            sma.update(x)
        self.assertEqual(sma.update(8), 6.0)
        self.assertEqual(sma.update(-1), 13 / 3)

    def test_period_one_is_pass_through(self):
        """Test that SMA(1) returns each input unchanged."""
        sma = SimpleMovingAverage(1)
        for x in (0.1, 0.2, 0.7, 3.5, -2.0, 100.25):
            self.assertEqual(sma.update(x), x)

    def test_accepts_quotes(self):
        """Test that quotes contribute their close."""
        sma = SimpleMovingAverage(2)
        sma.update(DataItem(open=9, high=10, low=8, close=9, volume=1))
        self.assertEqual(sma.update(DataItem(open=11, high=12, low=10, close=11, volume=1)), 10.0)

    def test_invalid_period(self):
        """Test that non-positive or non-integer periods are rejected."""
        for period in (0, -3, 2.5, True, '5', None):
            with self.assertRaises(ConfigError):
                SimpleMovingAverage(period)

    def test_reset(self):
        """Test that reset forgets every input."""
        sma = SimpleMovingAverage(3)
        sma.update(100)
        sma.update(200)
        sma.reset()
        self.assertEqual(sma.update(5), 5.0)


@pytest.mark.unit
class TestExponentialMovingAverage(unittest.TestCase):
    """Test ExponentialMovingAverage."""

    def test_smoothing_constant(self):
        """Test that alpha is 2 / (period + 1)."""
        self.assertEqual(ExponentialMovingAverage(3).alpha, 0.5)
        self.assertEqual(ExponentialMovingAverage(9).alpha, 0.2)
        self.assertEqual(ExponentialMovingAverage(1).alpha, 1.0)

    def test_seeded_with_first_input(self):
        """Test known sequence for EMA(3)."""
        ema = ExponentialMovingAverage(3)
        self.assertEqual([ema.update(x) for x in (2.0, 5.0, 1.0, 6.25)], [2.0, 3.5, 2.25, 4.25])

    def test_value_before_and_after_update(self):
        """Test that value is None until the first update."""
        ema = ExponentialMovingAverage(5)
        self.assertIsNone(ema.value)
        ema.update(7.0)
        self.assertEqual(ema.value, 7.0)

    def test_zero_period_rejected(self):
        """Test that EMA(0) cannot be constructed."""
        with self.assertRaises(ConfigError):
            ExponentialMovingAverage(0)

    def test_reset(self):
        """Test that reset clears the seed."""
        ema = ExponentialMovingAverage(3)
        ema.update(10.0)
        ema.update(20.0)
        ema.reset()
        self.assertIsNone(ema.value)
        self.assertEqual(ema.update(4.0), 4.0)


@pytest.mark.unit
class TestWilderMovingAverage(unittest.TestCase):
    """Test WilderMovingAverage."""

    def test_smoothing_constant(self):
        """Test that alpha is 1 / period."""
        self.assertEqual(WilderMovingAverage(4).alpha, 0.25)
        self.assertEqual(WilderMovingAverage().period, 14)

    def test_known_values(self):
        """Test a short sequence by hand."""
        wilder = WilderMovingAverage(4)
        self.assertEqual(wilder.update(4.0), 4.0)
        self.assertEqual(wilder.update(8.0), 5.0)
        self.assertEqual(wilder.update(1.0), 4.0)

    def test_display(self):
        """Test display name."""
        self.assertEqual(str(WilderMovingAverage(14)), 'WILDER(14)')
