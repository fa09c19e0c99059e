"""
Volatility indicators: true range, ATR, standard deviation and envelopes.

Quick Start:
    from tastream.indicators.volatility import AverageTrueRange, BollingerBands
    from tastream.quote import DataItem

    atr = AverageTrueRange(14)
    atr.update(DataItem(open=10, high=11, low=9, close=10.5, volume=0))  # 2.0

    bb = BollingerBands(period=20, multiplier=2.0)
    upper, middle, lower = bb.update(101.5)
"""

import math
from collections import deque
from typing import Any, Dict, Optional

from tastream.indicators.base import (
    Indicator,
    check_ddof,
    check_period,
    check_positive,
    close_of,
    high_of,
    is_scalar,
    low_of,
)
from tastream.indicators.moving_average import (
    ExponentialMovingAverage,
    SimpleMovingAverage,
    WilderMovingAverage,
)
from tastream.indicators.outputs import BandsOutput


class TrueRange(Indicator):
    """
    True range of a quote relative to the previous close.

    For quotes: ``max(high - low, |high - prev_close|, |low - prev_close|)``,
    or ``high - low`` for the very first quote.

    For scalars: the absolute distance from the previous value (0 for the
    first one).
    """

    name = 'TRUE_RANGE'

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._prev_close: Optional[float] = None

    def update(self, data: Any) -> float:
        if is_scalar(data):
            value = float(data)
            distance = 0.0 if self._prev_close is None else abs(value - self._prev_close)
            self._prev_close = value
            return distance

        high, low, close = high_of(data), low_of(data), close_of(data)
        if self._prev_close is None:
            true_range = high - low
        else:
            true_range = max(
                high - low,
                abs(high - self._prev_close),
                abs(low - self._prev_close),
            )
        self._prev_close = close
        return true_range


class AverageTrueRange(Indicator):
    """
    Average True Range: Wilder-smoothed (alpha = 1/period) true range.

    Seeded with the first true range, so the first output is that range.

    Args:
        period: Smoothing period (>= 1). Default 14.
    """

    name = 'ATR'

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._true_range = TrueRange()
        self._average = WilderMovingAverage(self.period)

    def update(self, data: Any) -> float:
        return self._average.update(self._true_range.update(data))

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class StandardDeviation(Indicator):
    """
    Standard deviation of the last ``period`` inputs.

    Computed from the window buffer on every update (O(period)), which avoids
    the drift of running sum-of-squares formulas. Returns 0 while the window
    holds ``ddof`` values or fewer.

    Args:
        period: Window length (>= 1). Default 14.
        ddof: 1 for the sample deviation (default), 0 for population.
    """

    name = 'SD'

    def __init__(self, period: int = 14, ddof: int = 1):
        self.period = check_period('period', period)
        self.ddof = check_ddof(ddof)
        self.reset()

    def reset(self) -> None:
        self._window: deque = deque(maxlen=self.period)

    def update(self, data: Any) -> float:
        self._window.append(close_of(data))
        count = len(self._window)
        if count <= self.ddof:
            return 0.0
        mean = sum(self._window) / count
        squares = sum((x - mean) ** 2 for x in self._window)
        return math.sqrt(squares / (count - self.ddof))

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period, 'ddof': self.ddof}


class BollingerBands(Indicator):
    """
    Bollinger Bands: SMA middle band +/- ``multiplier`` standard deviations.

    The middle band is produced by an internal SimpleMovingAverage, so it is
    exactly what a separate SMA of the same period would return, warm-up
    included.

    Args:
        period: Window length (>= 1). Default 20.
        multiplier: Band width in standard deviations (> 0). Default 2.0.
        ddof: Degrees of freedom for the deviation, 1 = sample (default).
    """

    name = 'BB'
    output_type = BandsOutput

    def __init__(self, period: int = 20, multiplier: float = 2.0, ddof: int = 1):
        self.period = check_period('period', period)
        self.multiplier = check_positive('multiplier', multiplier)
        self.ddof = check_ddof(ddof)
        self.reset()

    def reset(self) -> None:
        self._middle = SimpleMovingAverage(self.period)
        self._deviation = StandardDeviation(self.period, self.ddof)

    def update(self, data: Any) -> BandsOutput:
        value = close_of(data)
        middle = self._middle.update(value)
        width = self.multiplier * self._deviation.update(value)
        return BandsOutput(upper=middle + width, middle=middle, lower=middle - width)

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period, 'multiplier': self.multiplier, 'ddof': self.ddof}


class KeltnerChannel(Indicator):
    """
    Keltner Channel: EMA of the typical price +/- ``multiplier`` ATRs.

    Quotes contribute their typical price (high + low + close) / 3 to the
    middle band; scalars are used as-is.

    Args:
        period: Period for both the EMA and the ATR (>= 1). Default 10.
        multiplier: ATR multiple for the band width (> 0). Default 2.0.
    """

    name = 'KC'
    output_type = BandsOutput

    def __init__(self, period: int = 10, multiplier: float = 2.0):
        self.period = check_period('period', period)
        self.multiplier = check_positive('multiplier', multiplier)
        self.reset()

    def reset(self) -> None:
        self._middle = ExponentialMovingAverage(self.period)
        self._atr = AverageTrueRange(self.period)

    def update(self, data: Any) -> BandsOutput:
        if is_scalar(data):
            typical = float(data)
        else:
            typical = (high_of(data) + low_of(data) + close_of(data)) / 3.0
        middle = self._middle.update(typical)
        width = self.multiplier * self._atr.update(data)
        return BandsOutput(upper=middle + width, middle=middle, lower=middle - width)

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period, 'multiplier': self.multiplier}
