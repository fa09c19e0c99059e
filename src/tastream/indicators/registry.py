"""
Indicator lookup by type name.

The table is a read-only mapping built at import time; nothing here holds
mutable process-wide state.

Quick Start:
    from tastream.indicators.registry import create_indicator, list_indicators

    list_indicators()                        # ['ATR', 'BB', 'EMA', ...]
    rsi = create_indicator('RSI', {'period': 14})
"""

import inspect
import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type

from tastream.exceptions import ConfigError
from tastream.indicators.base import Indicator
from tastream.indicators.extrema import Maximum, Minimum
from tastream.indicators.momentum import (
    EfficiencyRatio,
    MovingAverageConvergenceDivergence,
    RateOfChange,
    RelativeStrengthIndex,
)
from tastream.indicators.moving_average import (
    ExponentialMovingAverage,
    SimpleMovingAverage,
    WilderMovingAverage,
)
from tastream.indicators.stochastic import FastStochastic, FullStochastic, SlowStochastic
from tastream.indicators.volatility import (
    AverageTrueRange,
    BollingerBands,
    KeltnerChannel,
    StandardDeviation,
    TrueRange,
)
from tastream.indicators.volume import MoneyFlowIndex, OnBalanceVolume

logger = logging.getLogger(__name__)


INDICATORS: Mapping[str, Type[Indicator]] = MappingProxyType({
    cls.name: cls
    for cls in (
        SimpleMovingAverage,
        ExponentialMovingAverage,
        WilderMovingAverage,
        Minimum,
        Maximum,
        TrueRange,
        AverageTrueRange,
        StandardDeviation,
        BollingerBands,
        KeltnerChannel,
        RelativeStrengthIndex,
        RateOfChange,
        EfficiencyRatio,
        MovingAverageConvergenceDivergence,
        FastStochastic,
        SlowStochastic,
        FullStochastic,
        MoneyFlowIndex,
        OnBalanceVolume,
    )
})


def get_indicator_class(indicator_type: str) -> Optional[Type[Indicator]]:
    """
    Get an indicator class by type name (case-insensitive).

    Args:
        indicator_type: Display name such as 'SMA' or 'fast_stoch'

    Returns:
        Indicator class or None if not found
    """
    if not isinstance(indicator_type, str):
        return None
    return INDICATORS.get(indicator_type.upper())


def list_indicators() -> List[str]:
    """
    List all known indicator type names.

    Returns:
        Sorted list of names
    """
    return sorted(INDICATORS)


def parameter_names(indicator_class: Type[Indicator]) -> List[str]:
    """Names of the keyword parameters an indicator class accepts."""
    signature = inspect.signature(indicator_class.__init__)
    return [name for name in signature.parameters if name != 'self']


def create_indicator(indicator_type: str, params: Optional[Dict[str, Any]] = None) -> Indicator:
    """
    Construct an indicator from its type name and parameters.

    Args:
        indicator_type: Display name such as 'SMA', 'MACD', 'BB'
        params: Keyword arguments for the constructor (defaults apply to
            anything omitted)

    Returns:
        A freshly constructed indicator

    Raises:
        ConfigError: If the type is unknown, a parameter name is not
            accepted, or a parameter value is invalid

    Example:
        macd = create_indicator('MACD', {'fast_period': 5, 'slow_period': 35})
    """
    indicator_class = get_indicator_class(indicator_type)
    if indicator_class is None:
        raise ConfigError(
            f"Unknown indicator type: {indicator_type!r}. Available: {', '.join(list_indicators())}"
        )

    params = params or {}
    bad_keys = [key for key in params if not isinstance(key, str)]
    if bad_keys:
        raise ConfigError(
            f"Parameter names for {indicator_class.name} must be strings, got {', '.join(map(repr, bad_keys))}"
        )
    unknown = sorted(set(params) - set(parameter_names(indicator_class)))
    if unknown:
        raise ConfigError(
            f"Unknown parameter(s) for {indicator_class.name}: {', '.join(map(str, unknown))}"
        )

    indicator = indicator_class(**params)
    logger.debug(f"Created indicator {indicator!s} from type {indicator_type!r}")
    return indicator
