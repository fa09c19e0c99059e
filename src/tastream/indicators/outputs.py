"""
Output records for multi-value indicators.

All records are immutable and unpack like tuples:

    macd, signal, histogram = MovingAverageConvergenceDivergence().update(10.0)
"""

from dataclasses import astuple, asdict, dataclass
from typing import Dict, Iterator


class _Unpackable:
    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class MacdOutput(_Unpackable):
    """MACD line, signal line and histogram (macd - signal)."""
    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class BandsOutput(_Unpackable):
    """Upper, middle and lower band of an envelope indicator."""
    upper: float
    middle: float
    lower: float


@dataclass(frozen=True)
class StochasticOutput(_Unpackable):
    """Smoothed %K and its %D signal line."""
    k: float
    d: float
