"""
Specification of one indicator in a configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class IndicatorSpec:
    """
    Specification for an indicator instance.

    Attributes:
        indicator_type: Registered indicator name (e.g., 'SMA', 'RSI', 'MACD')
        params: Keyword parameters for the indicator constructor
        column_name: Name under which the indicator's output is reported
    """
    indicator_type: str
    params: Dict[str, Any] = field(default_factory=dict)
    column_name: str = ''

    def __post_init__(self):
        """Validate specification."""
        if not isinstance(self.indicator_type, str) or not self.indicator_type:
            raise ValueError("indicator_type must be a non-empty string")
        if self.params is None:
            self.params = {}
        if not isinstance(self.params, dict):
            raise ValueError("params must be a dictionary")
        if not self.column_name:
            self.column_name = self.indicator_type.lower()
        if not isinstance(self.column_name, str):
            raise ValueError("column_name must be a non-empty string")

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "IndicatorSpec":
        """Build a spec from one entry of the 'indicators' configuration list."""
        return cls(
            indicator_type=entry.get('indicator_type'),
            params=entry.get('params') or {},
            column_name=entry.get('column_name') or '',
        )
