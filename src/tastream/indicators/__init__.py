"""
Streaming indicator implementations.

Every indicator follows the same contract (see base.Indicator): construct
with validated parameters, call update() once per observation, reset() to
start over.

Quick Start:
    from tastream.indicators import RelativeStrengthIndex, create_indicator

    rsi = RelativeStrengthIndex(14)
    for close in closes:
        value = rsi.update(close)

    bb = create_indicator('BB', {'period': 20, 'multiplier': 2.0})
"""

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
from tastream.indicators.outputs import BandsOutput, MacdOutput, StochasticOutput
from tastream.indicators.registry import (
    INDICATORS,
    create_indicator,
    get_indicator_class,
    list_indicators,
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

# Short aliases
SMA = SimpleMovingAverage
EMA = ExponentialMovingAverage
ATR = AverageTrueRange
RSI = RelativeStrengthIndex
MACD = MovingAverageConvergenceDivergence

__all__ = [
    'Indicator',
    'SimpleMovingAverage',
    'ExponentialMovingAverage',
    'WilderMovingAverage',
    'Minimum',
    'Maximum',
    'TrueRange',
    'AverageTrueRange',
    'StandardDeviation',
    'BollingerBands',
    'KeltnerChannel',
    'RelativeStrengthIndex',
    'RateOfChange',
    'EfficiencyRatio',
    'MovingAverageConvergenceDivergence',
    'FastStochastic',
    'SlowStochastic',
    'FullStochastic',
    'MoneyFlowIndex',
    'OnBalanceVolume',
    'MacdOutput',
    'BandsOutput',
    'StochasticOutput',
    'INDICATORS',
    'create_indicator',
    'get_indicator_class',
    'list_indicators',
    'SMA',
    'EMA',
    'ATR',
    'RSI',
    'MACD',
]
