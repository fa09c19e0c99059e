"""
Configuration package.

Builds indicators from YAML configuration files.

Main entry point:
    from tastream.config import IndicatorSet

    indicators = IndicatorSet.from_yaml('indicators.yaml')
"""

from tastream.config.indicator_set import IndicatorSet
from tastream.config.indicator_spec import IndicatorSpec
from tastream.config.loader import IndicatorConfigLoader
from tastream.config.validator import IndicatorConfigValidator, ValidationResult
from tastream.exceptions import ConfigError

__all__ = [
    'ConfigError',
    'IndicatorSet',
    'IndicatorSpec',
    'IndicatorConfigLoader',
    'IndicatorConfigValidator',
    'ValidationResult',
]
