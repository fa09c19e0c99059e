"""
Stochastic oscillators (fast, slow and full).

Fast %K compares the close with the high/low range of the last ``period``
quotes. When that range is zero (a flat market, or a single scalar input)
%K is defined as 50.

Quick Start:
    from tastream.indicators.stochastic import FastStochastic

    stoch = FastStochastic(5)
    [stoch.update(x) for x in (20.0, 30.0, 40.0, 35.0, 15.0)]
    # [50.0, 100.0, 100.0, 75.0, 0.0]
"""

from typing import Any, Dict

from tastream.indicators.base import Indicator, check_period, close_of, high_of, low_of
from tastream.indicators.extrema import Maximum, Minimum
from tastream.indicators.moving_average import ExponentialMovingAverage, SimpleMovingAverage
from tastream.indicators.outputs import StochasticOutput

# %K when the look-back range is zero
FLAT_RANGE_VALUE = 50.0


class FastStochastic(Indicator):
    """
    Fast stochastic %K.

    Accepts quotes (high, low, close) or scalars, which serve as all three.

    Args:
        period: Look-back length (>= 1). Default 14.
    """

    name = 'FAST_STOCH'

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        self._lowest = Minimum(self.period)
        self._highest = Maximum(self.period)

    def update(self, data: Any) -> float:
        highest = self._highest.update(high_of(data))
        lowest = self._lowest.update(low_of(data))
        if highest == lowest:
            return FLAT_RANGE_VALUE
        return (close_of(data) - lowest) / (highest - lowest) * 100.0

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class SlowStochastic(Indicator):
    """
    Slow stochastic: fast %K smoothed with an EMA.

    Args:
        stochastic_period: Fast %K look-back (>= 1). Default 14.
        ema_period: EMA smoothing period (>= 1). Default 3.
    """

    name = 'SLOW_STOCH'

    def __init__(self, stochastic_period: int = 14, ema_period: int = 3):
        self.stochastic_period = check_period('stochastic_period', stochastic_period)
        self.ema_period = check_period('ema_period', ema_period)
        self.reset()

    def reset(self) -> None:
        self._fast = FastStochastic(self.stochastic_period)
        self._smoothing = ExponentialMovingAverage(self.ema_period)

    def update(self, data: Any) -> float:
        return self._smoothing.update(self._fast.update(data))

    def _params(self) -> Dict[str, Any]:
        return {'stochastic_period': self.stochastic_period, 'ema_period': self.ema_period}


class FullStochastic(Indicator):
    """
    Full stochastic: SMA-smoothed %K plus an SMA %D signal line.

    slow %K = SMA(fast %K, k_smoothing), %D = SMA(slow %K, d_period).
    With k_smoothing=1 this is the classic fast %K/%D pair.

    Args:
        k_period: Fast %K look-back (>= 1). Default 14.
        k_smoothing: SMA length applied to fast %K (>= 1). Default 3.
        d_period: SMA length of the %D line (>= 1). Default 3.
    """

    name = 'FULL_STOCH'
    output_type = StochasticOutput

    def __init__(self, k_period: int = 14, k_smoothing: int = 3, d_period: int = 3):
        self.k_period = check_period('k_period', k_period)
        self.k_smoothing = check_period('k_smoothing', k_smoothing)
        self.d_period = check_period('d_period', d_period)
        self.reset()

    def reset(self) -> None:
        self._fast = FastStochastic(self.k_period)
        self._k = SimpleMovingAverage(self.k_smoothing)
        self._d = SimpleMovingAverage(self.d_period)

    def update(self, data: Any) -> StochasticOutput:
        k = self._k.update(self._fast.update(data))
        return StochasticOutput(k=k, d=self._d.update(k))

    def _params(self) -> Dict[str, Any]:
        return {'k_period': self.k_period, 'k_smoothing': self.k_smoothing, 'd_period': self.d_period}
