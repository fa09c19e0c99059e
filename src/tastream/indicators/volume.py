"""
Volume-based indicators: Money Flow Index and On-Balance Volume.

Both require quotes carrying a volume; scalar inputs raise TypeError.
"""

from collections import deque
from typing import Any, Dict, Optional

from tastream.indicators.base import (
    Indicator,
    check_period,
    close_of,
    high_of,
    low_of,
    volume_of,
)


class MoneyFlowIndex(Indicator):
    """
    Money Flow Index: a volume-weighted RSI over typical prices.

    Each quote's raw money flow (typical price * volume) counts as positive
    when the typical price rose versus the previous quote, negative when it
    fell, and neither on the first quote or when unchanged. Over the last
    ``period`` quotes:
    - 50 when both positive and negative flow sums are 0
    - 100 when only the negative flow sum is 0
    - 100 - 100 / (1 + positive / negative) otherwise

    Args:
        period: Window length (>= 1). Default 14.
    """

    name = 'MFI'

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        # (positive, negative) flow per quote
        self._flows: deque = deque(maxlen=self.period)
        self._prev_typical: Optional[float] = None

    def update(self, data: Any) -> float:
        volume = volume_of(data)
        typical = (high_of(data) + low_of(data) + close_of(data)) / 3.0
        money_flow = typical * volume

        if self._prev_typical is None or typical == self._prev_typical:
            flow = (0.0, 0.0)
        elif typical > self._prev_typical:
            flow = (money_flow, 0.0)
        else:
            flow = (0.0, money_flow)
        self._prev_typical = typical
        self._flows.append(flow)

        positive = sum(p for p, _ in self._flows)
        negative = sum(n for _, n in self._flows)
        if negative == 0.0:
            return 100.0 if positive > 0.0 else 50.0
        return 100.0 - 100.0 / (1.0 + positive / negative)

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class OnBalanceVolume(Indicator):
    """
    On-Balance Volume: running total of volume signed by the close's direction.

    Adds the volume when the close is above the previous close, subtracts it
    when below, leaves the total unchanged when flat. The first quote has no
    previous close and yields 0.
    """

    name = 'OBV'

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._total = 0.0
        self._prev_close: Optional[float] = None

    def update(self, data: Any) -> float:
        volume = volume_of(data)
        close = close_of(data)
        if self._prev_close is not None:
            if close > self._prev_close:
                self._total += volume
            elif close < self._prev_close:
                self._total -= volume
        self._prev_close = close
        return self._total
