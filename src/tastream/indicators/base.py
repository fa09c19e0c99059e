"""
Base classes and interfaces for streaming indicators.

This module defines the abstract interface that all indicators implement,
plus the small helpers they share for reading inputs and validating
construction parameters.

Quick Start:
    from tastream.indicators import SimpleMovingAverage

    sma = SimpleMovingAverage(3)
    sma.update(2.0)   # 2.0
    sma.update(4.0)   # 3.0
    sma.reset()       # back to the freshly constructed state

Common Patterns:
    # Pattern 1: Feeding quotes instead of scalars
    from tastream.quote import DataItem
    sma.update(DataItem(open=1, high=2, low=1, close=2, volume=100))  # uses close

    # Pattern 2: Snapshot an indicator mid-stream
    snapshot = sma.copy()
    sma.update(10.0)
    snapshot == sma  # False, the copy is independent

Extending:
    To create a new indicator:
    1. Inherit from Indicator and set the ``name`` class attribute
    2. Validate parameters in __init__ (check_period/check_positive) BEFORE
       touching any state, then call self.reset()
    3. Build all mutable state inside reset()
    4. Implement update() and _params()
"""

import copy
import math
import numbers
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Dict, Optional, Type

from tastream.exceptions import ConfigError


class Indicator(ABC):
    """
    Abstract base class for all streaming indicators.

    Every indicator is a self-contained state machine:
    - update(input) folds one observation into the state and returns the
      current value, in O(1) or O(window) time
    - reset() restores the exact post-construction state

    Subclasses build their state in reset(), which __init__ calls once all
    parameters are validated. A fresh instance and a reset one are therefore
    indistinguishable.
    """

    # Display prefix, e.g. 'SMA' renders as 'SMA(20)'
    name: str = ""

    # Record type returned by update() for multi-value indicators, None for floats
    output_type: Optional[Type] = None

    @abstractmethod
    def update(self, data: Any) -> Any:
        """
        Feed one observation and return the indicator's current value.

        Args:
            data: A real number or a quote-like object, depending on the indicator

        Returns:
            float, or a small output record for multi-value indicators
        """
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Restore the state the indicator had right after construction."""
        raise NotImplementedError

    def _params(self) -> Dict[str, Any]:
        """Construction parameters in declaration order."""
        return OrderedDict()

    def copy(self) -> "Indicator":
        """Return an independent copy, including current state."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        values = ', '.join(str(v) for v in self._params().values())
        return f"{self.name}({values})"

    def __repr__(self) -> str:
        values = ', '.join(f"{k}={v!r}" for k, v in self._params().items())
        return f"{type(self).__name__}({values})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    # Indicators are mutable
    __hash__ = None


def is_scalar(data: Any) -> bool:
    """True for a bare real number (bools excluded)."""
    return isinstance(data, numbers.Real) and not isinstance(data, bool)


def _field(data: Any, field_name: str) -> float:
    if is_scalar(data):
        return float(data)
    try:
        return float(getattr(data, field_name))
    except AttributeError:
        raise TypeError(
            f"Expected a number or an object with a '{field_name}' attribute, got {type(data).__name__}"
        ) from None


def close_of(data: Any) -> float:
    """Close price of a quote, or the value itself for a scalar."""
    return _field(data, 'close')


def high_of(data: Any) -> float:
    """High price of a quote, or the value itself for a scalar."""
    return _field(data, 'high')


def low_of(data: Any) -> float:
    """Low price of a quote, or the value itself for a scalar."""
    return _field(data, 'low')


def volume_of(data: Any) -> float:
    """
    Volume of a quote.

    Unlike the price accessors there is no scalar fallback: a bare number
    carries no volume.

    Raises:
        TypeError: If data has no 'volume' attribute
    """
    try:
        return float(getattr(data, 'volume'))
    except AttributeError:
        raise TypeError(
            f"Expected an object with a 'volume' attribute, got {type(data).__name__}"
        ) from None


def check_period(name: str, value: Any) -> int:
    """
    Validate a window/period parameter.

    Args:
        name: Parameter name, used in the error message
        value: Candidate value

    Returns:
        The value as int

    Raises:
        ConfigError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}")
    if value < 1:
        raise ConfigError(f"'{name}' must be >= 1, got {value}")
    return int(value)


def check_positive(name: str, value: Any) -> float:
    """
    Validate a strictly positive, finite real parameter (e.g. a band multiplier).

    Raises:
        ConfigError: If value is not a finite number > 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"'{name}' must be a finite number > 0, got {value}")
    return float(value)


def check_ddof(value: Any) -> int:
    """Validate a delta-degrees-of-freedom parameter (0 = population, 1 = sample)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigError(f"'ddof' must be an integer, got {value!r}")
    if value not in (0, 1):
        raise ConfigError(f"'ddof' must be 0 or 1, got {value}")
    return int(value)
