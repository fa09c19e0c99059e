"""
A named group of indicators fed from the same quote stream.

Quick Start:
    from tastream.config import IndicatorSet

    indicators = IndicatorSet.from_yaml('indicators.yaml')
    for quote in quotes:
        values = indicators.update(quote)   # {'sma_20': 101.2, 'macd': MacdOutput(...), ...}
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Union

from tastream.config.indicator_spec import IndicatorSpec
from tastream.config.loader import IndicatorConfigLoader
from tastream.config.validator import IndicatorConfigValidator
from tastream.indicators.base import Indicator
from tastream.indicators.registry import create_indicator

logger = logging.getLogger(__name__)


class IndicatorSet:
    """
    Ordered collection of indicators keyed by column name.

    Each indicator keeps its own state; the set only fans one input out to
    all of them.
    """

    def __init__(self, indicators: Dict[str, Indicator]):
        self._indicators: Dict[str, Indicator] = dict(indicators)

    @classmethod
    def from_specs(cls, specs: Iterable[IndicatorSpec]) -> "IndicatorSet":
        """
        Build every indicator described by ``specs``.

        Raises:
            ConfigError: Listing every invalid spec
        """
        specs = list(specs)
        config = {
            'indicators': [
                {'indicator_type': s.indicator_type, 'params': s.params, 'column_name': s.column_name}
                for s in specs
            ]
        }
        IndicatorConfigValidator().validate(config).raise_if_invalid('indicator specs')

        indicators = {spec.column_name: create_indicator(spec.indicator_type, spec.params) for spec in specs}
        logger.debug(f"Built indicator set: {', '.join(f'{k}={v}' for k, v in indicators.items())}")
        return cls(indicators)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "IndicatorSet":
        """Load specs from a YAML file and build them."""
        return cls.from_specs(IndicatorConfigLoader(config_path).load_specs())

    @property
    def column_names(self) -> List[str]:
        return list(self._indicators)

    def update(self, data: Any) -> Dict[str, Any]:
        """Feed one observation to every indicator; returns outputs by column name."""
        return {column: indicator.update(data) for column, indicator in self._indicators.items()}

    def reset(self) -> None:
        for indicator in self._indicators.values():
            indicator.reset()

    def __getitem__(self, column_name: str) -> Indicator:
        return self._indicators[column_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._indicators)

    def __len__(self) -> int:
        return len(self._indicators)
