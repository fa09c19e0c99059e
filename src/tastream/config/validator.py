"""
Configuration validator module.

Validates indicator configuration structure, types, ranges, and logical constraints.
"""

import logging
import numbers
from typing import Any, Dict, List, Set

from tastream.exceptions import ConfigError
from tastream.indicators.registry import create_indicator, get_indicator_class, parameter_names

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def is_valid(self) -> bool:
        """Check if validation passed."""
        return len(self.errors) == 0

    def add_error(self, message: str):
        """Add a validation error."""
        self.errors.append(message)

    def add_warning(self, message: str):
        """Add a validation warning."""
        self.warnings.append(message)

    def raise_if_invalid(self, source: str = 'configuration'):
        """
        Log warnings and raise if any errors were collected.

        Raises:
            ConfigError: Listing every error found in ``source``
        """
        for warning in self.warnings:
            logger.warning(f"{source}: {warning}")
        if self.errors:
            details = '\n  - '.join(self.errors)
            raise ConfigError(f"Invalid indicator configuration in {source}:\n  - {details}")


class IndicatorConfigValidator:
    """
    Validates the 'indicators' section of a configuration.
    """

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate entire configuration.

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()

        if not isinstance(config, dict):
            result.add_error("Configuration must be a dictionary")
            return result

        if 'indicators' not in config:
            result.add_error("Missing 'indicators' configuration section")
            return result

        entries = config['indicators']
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            result.add_error("'indicators' must be a list")
            return result
        if not entries:
            result.add_warning("'indicators' is empty, nothing will be computed")

        seen_columns: Set[str] = set()
        for index, entry in enumerate(entries):
            self.validate_entry(index, entry, result, seen_columns)

        return result

    def validate_entry(self, index: int, entry: Any, result: ValidationResult, seen_columns: Set[str]):
        """Validate one indicator entry."""
        where = f"indicators[{index}]"
        if not isinstance(entry, dict):
            result.add_error(f"'{where}' must be a dictionary")
            return

        errors_before = len(result.errors)

        # Validate indicator type
        indicator_type = entry.get('indicator_type')
        indicator_class = None
        if indicator_type is None:
            result.add_error(f"Missing '{where}.indicator_type' field")
        elif not isinstance(indicator_type, str):
            result.add_error(f"'{where}.indicator_type' must be a string")
        else:
            indicator_class = get_indicator_class(indicator_type)
            if indicator_class is None:
                result.add_error(f"'{where}.indicator_type' has unknown value '{indicator_type}'")

        # Validate column name
        column_name = entry.get('column_name')
        if column_name is None and isinstance(indicator_type, str):
            column_name = indicator_type.lower()
        if column_name is not None:
            if not isinstance(column_name, str) or not column_name:
                result.add_error(f"'{where}.column_name' must be a non-empty string")
            elif column_name in seen_columns:
                result.add_error(f"Duplicate column_name '{column_name}' at '{where}'")
            else:
                seen_columns.add(column_name)

        # Validate params
        params = entry.get('params') or {}
        if not isinstance(params, dict):
            result.add_error(f"'{where}.params' must be a dictionary")
            return

        for key, value in params.items():
            if not isinstance(key, str):
                result.add_error(f"'{where}.params' keys must be strings, got {key!r}")
                continue
            if 'period' in key:
                if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                    result.add_error(f"'{where}.params.{key}' must be an integer")
                elif value < 1:
                    result.add_error(f"'{where}.params.{key}' must be >= 1")

        if indicator_class is not None:
            accepted = parameter_names(indicator_class)
            for key in params:
                if isinstance(key, str) and key not in accepted:
                    result.add_error(
                        f"'{where}.params.{key}' is not a parameter of {indicator_class.name} "
                        f"(accepted: {', '.join(accepted) or 'none'})"
                    )

        # Cross-parameter constraints are enforced by the constructors themselves
        if indicator_class is not None and len(result.errors) == errors_before:
            try:
                create_indicator(indicator_type, params)
            except ConfigError as e:
                result.add_error(f"'{where}': {e}")
