"""
Shared pytest fixtures for all tests.

Provides reusable fixtures for:
- OHLCV data generation
- Temporary indicator configuration files
"""

import os
import shutil
import tempfile
from datetime import datetime
from typing import Optional

import numpy as np
import pandas as pd
import pytest
import yaml


def make_ohlcv_data(
    num_candles: int = 500,
    start_date: Optional[datetime] = None,
    frequency: str = '1h',
    base_price: float = 50000.0,
    volatility: float = 0.02,
    seed: int = 42,
) -> pd.DataFrame:
    """
    Create realistic OHLCV data with datetime index.

    Uses trend + random-walk noise and keeps OHLC relationships valid
    (low <= open/close <= high), so every row converts to a DataItem.
    """
    if start_date is None:
        start_date = datetime(2020, 1, 1, 0, 0, 0)

    dates = pd.date_range(start=start_date, periods=num_candles, freq=frequency)
    rng = np.random.default_rng(seed)

    n = num_candles
    trend = np.linspace(0, base_price * 0.4, n)
    noise = rng.standard_normal(n).cumsum() * base_price * volatility * 0.1
    closes = base_price + trend + noise

    opens = np.roll(closes, 1)
    opens[0] = base_price

    high_spreads = np.abs(rng.standard_normal(n) * base_price * volatility * 0.5)
    low_spreads = np.abs(rng.standard_normal(n) * base_price * volatility * 0.5)
    highs = np.maximum(opens, closes) + high_spreads
    lows = np.minimum(opens, closes) - low_spreads

    volumes = rng.integers(1000000, 10000000, n)

    return pd.DataFrame({
        'open': opens,
        'high': highs,
        'low': lows,
        'close': closes,
        'volume': volumes
    }, index=dates)


@pytest.fixture
def sample_ohlcv_data():
    """
    Factory fixture for OHLCV DataFrames.

    Default: 500 candles, hourly frequency.
    """
    return make_ohlcv_data


@pytest.fixture
def temp_config_dir():
    """Create temporary directory holding a valid indicators.yaml."""
    temp_dir = tempfile.mkdtemp()
    config_path = os.path.join(temp_dir, 'indicators.yaml')

    config = {
        'indicators': [
            {'indicator_type': 'SMA', 'params': {'period': 20}, 'column_name': 'sma_20'},
            {'indicator_type': 'RSI', 'params': {'period': 14}, 'column_name': 'rsi_14'},
            {'indicator_type': 'MACD', 'params': {'fast_period': 12, 'slow_period': 26, 'signal_period': 9}},
            {'indicator_type': 'BB', 'params': {'period': 20, 'multiplier': 2.0}, 'column_name': 'bands'},
            {'indicator_type': 'OBV', 'column_name': 'obv'},
        ]
    }
    with open(config_path, 'w') as f:
        yaml.dump(config, f)

    yield temp_dir, config_path

    # Cleanup
    shutil.rmtree(temp_dir)
