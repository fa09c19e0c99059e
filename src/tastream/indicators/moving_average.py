"""
Moving averages: simple, exponential and Wilder smoothing.

These are the primitives most other indicators are built from.

Quick Start:
    from tastream.indicators.moving_average import SimpleMovingAverage, ExponentialMovingAverage

    sma = SimpleMovingAverage(3)
    [sma.update(x) for x in (2, 4, 6)]         # [2.0, 3.0, 4.0]

    ema = ExponentialMovingAverage(3)          # alpha = 2 / (3 + 1) = 0.5
    [ema.update(x) for x in (2, 5, 1, 6.25)]   # [2.0, 3.5, 2.25, 4.25]
"""

import math
from collections import deque
from typing import Any, Dict, Optional

from tastream.indicators.base import Indicator, check_period, close_of


class SimpleMovingAverage(Indicator):
    """
    Arithmetic mean of the last ``period`` inputs.

    During warm-up (fewer than ``period`` inputs seen) the mean is taken over
    the inputs received so far. A period of 1 passes inputs through.

    The running sum is recomputed exactly from the window every ``period``
    evictions, which bounds floating-point drift on long streams.

    Args:
        period: Window length (>= 1). Default 9.
    """

    name = 'SMA'

    def __init__(self, period: int = 9):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._window: deque = deque()
        self._sum = 0.0
        self._evictions = 0

    def update(self, data: Any) -> float:
        value = close_of(data)
        self._window.append(value)
        self._sum += value
        if len(self._window) > self.period:
            self._sum -= self._window.popleft()
            self._evictions += 1
            if self._evictions % self.period == 0:
                self._sum = math.fsum(self._window)
        return self._sum / len(self._window)

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class ExponentialMovingAverage(Indicator):
    """
    Exponential moving average with smoothing constant alpha = 2 / (period + 1).

    The first input seeds the average, so there is no warm-up gap:
    ``current = alpha * input + (1 - alpha) * current`` from the second
    input onwards.

    Args:
        period: Smoothing period (>= 1). Default 9.
    """

    name = 'EMA'

    def __init__(self, period: int = 9):
        self.period = check_period('period', period)
        self.alpha = self._smoothing_constant(self.period)
        self.reset()

    @staticmethod
    def _smoothing_constant(period: int) -> float:
        return 2.0 / (period + 1)

    def reset(self) -> None:
        self._current: Optional[float] = None

    @property
    def value(self) -> Optional[float]:
        """Current average, None before the first update."""
        return self._current

    def update(self, data: Any) -> float:
        value = close_of(data)
        if self._current is None:
            self._current = value
        else:
            self._current = self.alpha * value + (1.0 - self.alpha) * self._current
        return self._current

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class WilderMovingAverage(ExponentialMovingAverage):
    """
    Wilder's smoothing (a.k.a. RMA/SMMA): an EMA with alpha = 1 / period.

    Used by AverageTrueRange and RelativeStrengthIndex.

    Args:
        period: Smoothing period (>= 1). Default 14.
    """

    name = 'WILDER'

    def __init__(self, period: int = 14):
        super().__init__(period)

    @staticmethod
    def _smoothing_constant(period: int) -> float:
        return 1.0 / period
