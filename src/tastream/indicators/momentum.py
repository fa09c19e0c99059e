"""
Momentum indicators: RSI, rate of change, efficiency ratio and MACD.

All accept scalars or quotes (the close is used).
"""

from collections import deque
from typing import Any, Dict, Optional

from tastream.exceptions import ConfigError
from tastream.indicators.base import Indicator, check_period, close_of
from tastream.indicators.moving_average import ExponentialMovingAverage, WilderMovingAverage
from tastream.indicators.outputs import MacdOutput


class RelativeStrengthIndex(Indicator):
    """
    Relative Strength Index with Wilder smoothing of gains and losses.

    The first input has no predecessor and counts as a zero change. Output:
    - 50 while both smoothed gain and loss are 0 (nothing has moved yet)
    - 100 when the smoothed loss is 0 but the smoothed gain is positive
    - 100 - 100 / (1 + gain / loss) otherwise

    The result always lies in [0, 100].

    Args:
        period: Smoothing period (>= 1). Default 14.
    """

    name = 'RSI'

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._avg_gain = WilderMovingAverage(self.period)
        self._avg_loss = WilderMovingAverage(self.period)
        self._prev: Optional[float] = None

    def update(self, data: Any) -> float:
        value = close_of(data)
        delta = 0.0 if self._prev is None else value - self._prev
        self._prev = value

        gain = self._avg_gain.update(max(delta, 0.0))
        loss = self._avg_loss.update(max(-delta, 0.0))

        if loss == 0.0:
            return 100.0 if gain > 0.0 else 50.0
        return 100.0 - 100.0 / (1.0 + gain / loss)

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class RateOfChange(Indicator):
    """
    Rate of Change: percent change against the value ``period`` inputs ago.

    Until ``period`` earlier inputs exist the first input is the reference,
    so the very first output is 0. A zero reference yields 0.

    Example:
        roc = RateOfChange(3)
        [round(roc.update(x), 3) for x in (10.0, 10.4, 10.57, 10.8, 10.9)]
        # [0.0, 4.0, 5.7, 8.0, 4.808]

    Args:
        period: Look-back length (>= 1). Default 9.
    """

    name = 'ROC'

    def __init__(self, period: int = 9):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._prices: deque = deque(maxlen=self.period + 1)

    def update(self, data: Any) -> float:
        value = close_of(data)
        self._prices.append(value)
        reference = self._prices[0]
        if reference == 0.0:
            return 0.0
        return (value - reference) / reference * 100.0

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class EfficiencyRatio(Indicator):
    """
    Kaufman's Efficiency Ratio over the last ``period`` changes.

    ER = |net change| / sum of absolute changes, taken over the last
    ``period + 1`` inputs. A path of length 0 (first input, or a flat window)
    yields 1.0.

    Args:
        period: Number of changes in the window (>= 1). Default 14.
    """

    name = 'ER'

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._prices: deque = deque(maxlen=self.period + 1)
        self._changes: deque = deque(maxlen=self.period)

    def update(self, data: Any) -> float:
        value = close_of(data)
        if self._prices:
            self._changes.append(abs(value - self._prices[-1]))
        self._prices.append(value)

        path = sum(self._changes)
        if path == 0.0:
            return 1.0
        return abs(value - self._prices[0]) / path

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class MovingAverageConvergenceDivergence(Indicator):
    """
    MACD: fast EMA minus slow EMA, with an EMA signal line of that difference.

    Returns MacdOutput(macd, signal, histogram) where histogram is exactly
    macd - signal.

    Args:
        fast_period: Fast EMA period. Default 12.
        slow_period: Slow EMA period, must exceed fast_period. Default 26.
        signal_period: Signal EMA period. Default 9.

    Raises:
        ConfigError: If a period is < 1 or fast_period >= slow_period
    """

    name = 'MACD'
    output_type = MacdOutput

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        self.fast_period = check_period('fast_period', fast_period)
        self.slow_period = check_period('slow_period', slow_period)
        self.signal_period = check_period('signal_period', signal_period)
        if self.fast_period >= self.slow_period:
            raise ConfigError(
                f"'fast_period' ({self.fast_period}) must be less than 'slow_period' ({self.slow_period})"
            )
        self.reset()

    def reset(self) -> None:
        self._fast = ExponentialMovingAverage(self.fast_period)
        self._slow = ExponentialMovingAverage(self.slow_period)
        self._signal = ExponentialMovingAverage(self.signal_period)

    def update(self, data: Any) -> MacdOutput:
        value = close_of(data)
        macd = self._fast.update(value) - self._slow.update(value)
        signal = self._signal.update(macd)
        return MacdOutput(macd=macd, signal=signal, histogram=macd - signal)

    def _params(self) -> Dict[str, Any]:
        return {
            'fast_period': self.fast_period,
            'slow_period': self.slow_period,
            'signal_period': self.signal_period,
        }
