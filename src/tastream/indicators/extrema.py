"""
Rolling minimum and maximum over a fixed window.

Both keep a monotonic deque of (sequence number, value) pairs, so each
update costs O(1) amortised instead of rescanning the window.
"""

from abc import abstractmethod
from collections import deque
from typing import Any, Dict

from tastream.indicators.base import Indicator, check_period, high_of, low_of


class _RollingExtremum(Indicator):

    def __init__(self, period: int = 14):
        self.period = check_period('period', period)
        self.reset()

    def reset(self) -> None:
        # Candidates for the extremum; values are monotonic front to back
        self._candidates: deque = deque()
        self._seen = 0

    @abstractmethod
    def _dominates(self, new: float, old: float) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _read(self, data: Any) -> float:
        raise NotImplementedError

    def update(self, data: Any) -> float:
        value = self._read(data)
        while self._candidates and self._dominates(value, self._candidates[-1][1]):
            self._candidates.pop()
        self._candidates.append((self._seen, value))
        # Evict the front once it has slid out of the window
        if self._candidates[0][0] <= self._seen - self.period:
            self._candidates.popleft()
        self._seen += 1
        return self._candidates[0][1]

    def _params(self) -> Dict[str, Any]:
        return {'period': self.period}


class Minimum(_RollingExtremum):
    """
    Lowest value over the last ``period`` inputs.

    Reads a quote's ``low`` or a scalar.

    Example:
        m = Minimum(3)
        [m.update(x) for x in (4.0, 1.2, 5.0, 3.0, 4.0)]  # [4.0, 1.2, 1.2, 1.2, 3.0]
    """

    name = 'MIN'

    def _dominates(self, new: float, old: float) -> bool:
        return new <= old

    def _read(self, data: Any) -> float:
        return low_of(data)


class Maximum(_RollingExtremum):
    """
    Highest value over the last ``period`` inputs.

    Reads a quote's ``high`` or a scalar.
    """

    name = 'MAX'

    def _dominates(self, new: float, old: float) -> bool:
        return new >= old

    def _read(self, data: Any) -> float:
        return high_of(data)
