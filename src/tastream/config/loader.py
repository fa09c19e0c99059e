"""
Configuration loader module.

Responsible for loading indicator configurations from YAML files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from tastream.config.indicator_spec import IndicatorSpec
from tastream.exceptions import ConfigError

logger = logging.getLogger(__name__)


class IndicatorConfigLoader:
    """
    Loads an indicator configuration file, optionally merged with overrides.

    Expected layout:

        indicators:
          - indicator_type: SMA
            params: {period: 20}
            column_name: sma_20
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path of the YAML configuration file
        """
        self.config_path = Path(config_path)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Load the configuration file.

        Args:
            overrides: Optional dictionary deep-merged over the file content

        Returns:
            Configuration dictionary

        Raises:
            ConfigError: If the file is missing or cannot be parsed
        """
        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        config = self._load_yaml(self.config_path)
        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a mapping at top level")

        if overrides:
            config = self.merge_configs(config, overrides)

        logger.info(f"Loaded indicator configuration from {self.config_path}")
        return config

    def load_specs(self, overrides: Optional[Dict[str, Any]] = None) -> List[IndicatorSpec]:
        """
        Load, validate and convert the 'indicators' section to IndicatorSpec objects.

        Raises:
            ConfigError: If the file is missing, unparsable or fails validation
        """
        from tastream.config.validator import IndicatorConfigValidator

        config = self.load(overrides)
        result = IndicatorConfigValidator().validate(config)
        result.raise_if_invalid(str(self.config_path))
        return [IndicatorSpec.from_dict(entry) for entry in config.get('indicators') or []]

    @staticmethod
    def merge_configs(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return ``base`` with ``overrides`` applied on top.

        Mappings present on both sides merge key by key; anything else in
        ``overrides``, including an 'indicators' list, replaces the base value
        wholesale. Neither input is modified.
        """
        merged = dict(base)
        for key, override in overrides.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(override, dict):
                override = IndicatorConfigLoader.merge_configs(current, override)
            merged[key] = override
        return merged

    def _load_yaml(self, file_path: Path) -> Any:
        """Parse ``file_path``; an empty document reads as an empty mapping."""
        try:
            text = file_path.read_text()
        except OSError as e:
            raise ConfigError(f"Cannot read indicator configuration {file_path}: {e}") from e
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed YAML in {file_path}: {e}") from e
        return {} if document is None else document
