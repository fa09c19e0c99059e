"""
Replay OHLCV DataFrames through streaming indicators.

The streaming contract is unchanged: every row becomes one DataItem passed
to update(), in index order. This is a convenience for callers whose data
already sits in pandas, e.g. to inspect an indicator over a history.

Quick Start:
    import pandas as pd
    from tastream.feed import replay
    from tastream.indicators import RelativeStrengthIndex, BollingerBands

    df = pd.read_csv('btc_1h.csv', index_col=0, parse_dates=True)
    rsi = replay(RelativeStrengthIndex(14), df)     # pd.Series named 'RSI(14)'
    bands = replay(BollingerBands(20), df)          # DataFrame: upper, middle, lower
"""

import dataclasses
import logging
from typing import Iterator, Union

import numpy as np
import pandas as pd

from tastream.indicators.base import Indicator
from tastream.quote import DataItem

logger = logging.getLogger(__name__)

OHLCV_COLUMNS = ['open', 'high', 'low', 'close', 'volume']


def iter_quotes(df: pd.DataFrame) -> Iterator[DataItem]:
    """
    Yield one DataItem per DataFrame row.

    Args:
        df: DataFrame with lowercase open/high/low/close/volume columns

    Raises:
        KeyError: If required DataFrame columns are missing
        InvalidDataItemError: If a row is inconsistent (e.g. low > high)
    """
    missing = [column for column in OHLCV_COLUMNS if column not in df.columns]
    if missing:
        raise KeyError(f"DataFrame is missing required columns: {missing}")

    values = df[OHLCV_COLUMNS].to_numpy(dtype=np.float64)
    for open_, high, low, close, volume in values:
        yield DataItem(
            open=float(open_),
            high=float(high),
            low=float(low),
            close=float(close),
            volume=float(volume),
        )


def replay(indicator: Indicator, df: pd.DataFrame, reset: bool = True) -> Union[pd.Series, pd.DataFrame]:
    """
    Feed every row of ``df`` to ``indicator`` and collect the outputs.

    Args:
        indicator: Any streaming indicator
        df: OHLCV DataFrame (see iter_quotes)
        reset: Reset the indicator first so the replay starts from a clean state

    Returns:
        pd.Series named after the indicator for scalar outputs, or a
        DataFrame with one column per output field (e.g. macd/signal/histogram),
        indexed like ``df``
    """
    if reset:
        indicator.reset()

    outputs = [indicator.update(quote) for quote in iter_quotes(df)]
    logger.debug(f"Replayed {len(outputs)} rows through {indicator}")

    if indicator.output_type is not None:
        columns = [field.name for field in dataclasses.fields(indicator.output_type)]
        return pd.DataFrame(
            [output.as_dict() for output in outputs],
            index=df.index,
            columns=columns,
            dtype=np.float64,
        )
    return pd.Series(outputs, index=df.index, name=str(indicator), dtype=np.float64)
