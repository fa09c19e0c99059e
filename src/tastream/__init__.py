"""
tastream: streaming technical-analysis indicators.

Each indicator is a small state machine that takes one observation at a
time (a price or an OHLCV quote) and returns its current value, without
re-reading history.

Quick Start:
    from tastream import DataItem, ExponentialMovingAverage, MovingAverageConvergenceDivergence

    ema = ExponentialMovingAverage(3)
    [ema.update(x) for x in (2.0, 5.0, 1.0, 6.25)]   # [2.0, 3.5, 2.25, 4.25]

    macd = MovingAverageConvergenceDivergence(12, 26, 9)
    out = macd.update(DataItem(open=10, high=11, low=9, close=10.5, volume=100))
    out.histogram == out.macd - out.signal           # True
"""

from tastream.exceptions import ConfigError, IndicatorError, InvalidDataItemError
from tastream.indicators import (
    ATR,
    EMA,
    INDICATORS,
    MACD,
    RSI,
    SMA,
    AverageTrueRange,
    BandsOutput,
    BollingerBands,
    EfficiencyRatio,
    ExponentialMovingAverage,
    FastStochastic,
    FullStochastic,
    Indicator,
    KeltnerChannel,
    MacdOutput,
    Maximum,
    Minimum,
    MoneyFlowIndex,
    MovingAverageConvergenceDivergence,
    OnBalanceVolume,
    RateOfChange,
    RelativeStrengthIndex,
    SimpleMovingAverage,
    SlowStochastic,
    StandardDeviation,
    StochasticOutput,
    TrueRange,
    WilderMovingAverage,
    create_indicator,
    get_indicator_class,
    list_indicators,
)
from tastream.quote import (
    DataItem,
    HasClose,
    HasHigh,
    HasHighLowClose,
    HasHighLowCloseVolume,
    HasLow,
    HasOpen,
    HasVolume,
)

__version__ = '0.1.0'

__all__ = [
    'ConfigError',
    'IndicatorError',
    'InvalidDataItemError',
    'DataItem',
    'HasOpen',
    'HasHigh',
    'HasLow',
    'HasClose',
    'HasVolume',
    'HasHighLowClose',
    'HasHighLowCloseVolume',
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
