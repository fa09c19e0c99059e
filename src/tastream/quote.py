"""
Quote types consumed by indicators.

Indicators never require a concrete quote class. Each one reads only the
fields it needs, described here as capability protocols, so any object
exposing e.g. ``high``, ``low`` and ``close`` attributes can be fed to an
indicator that needs those three.

Quick Start:
    from tastream.quote import DataItem

    item = DataItem(open=10.0, high=12.0, low=9.5, close=11.0, volume=1500.0)
    item.typical_price  # 10.833...

Common Patterns:
    # Pattern 1: Build from a pandas row or a plain mapping
    item = DataItem.from_mapping({'open': 1, 'high': 2, 'low': 1, 'close': 2, 'volume': 10})

    # Pattern 2: Use your own record type
    @dataclass
    class Tick:
        high: float
        low: float
        close: float

    isinstance(Tick(2, 1, 1.5), HasHighLowClose)  # True
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from tastream.exceptions import InvalidDataItemError


@runtime_checkable
class HasOpen(Protocol):
    open: float


@runtime_checkable
class HasHigh(Protocol):
    high: float


@runtime_checkable
class HasLow(Protocol):
    low: float


@runtime_checkable
class HasClose(Protocol):
    close: float


@runtime_checkable
class HasVolume(Protocol):
    volume: float


@runtime_checkable
class HasHighLowClose(Protocol):
    high: float
    low: float
    close: float


@runtime_checkable
class HasHighLowCloseVolume(Protocol):
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class DataItem:
    """
    A single OHLCV observation.

    Implements every capability protocol in this module. Instances are
    immutable and validated on construction.

    Attributes:
        open, high, low, close: Prices for the period
        volume: Traded volume (>= 0)

    Raises:
        InvalidDataItemError: If a field is not finite, open/close fall
            outside [low, high], or volume is negative
    """
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        # validation-only (no mutation; dataclass is frozen)
        for field_name in ('open', 'high', 'low', 'close', 'volume'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidDataItemError(f"DataItem.{field_name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidDataItemError(f"DataItem.{field_name} must be finite, got {value!r}")
        if self.low > self.high:
            raise InvalidDataItemError(f"DataItem.low ({self.low}) must not exceed high ({self.high})")
        if not self.low <= self.open <= self.high:
            raise InvalidDataItemError(f"DataItem.open ({self.open}) must lie within [low, high]")
        if not self.low <= self.close <= self.high:
            raise InvalidDataItemError(f"DataItem.close ({self.close}) must lie within [low, high]")
        if self.volume < 0:
            raise InvalidDataItemError(f"DataItem.volume must be >= 0, got {self.volume}")

    @property
    def typical_price(self) -> float:
        return (self.high + self.low + self.close) / 3.0

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "DataItem":
        """
        Build a DataItem from a mapping with lowercase OHLCV keys.

        Works with dicts and pandas rows alike. Values are coerced to float.

        Raises:
            KeyError: If one of open/high/low/close/volume is missing
            InvalidDataItemError: If the values are inconsistent
        """
        return cls(
            open=float(row['open']),
            high=float(row['high']),
            low=float(row['low']),
            close=float(row['close']),
            volume=float(row['volume']),
        )
