"""
Utility functions and helpers.
"""

from .data_utils import (
    safe_string_conversion,
    records_from_dataframe,
)

__all__ = [
    'safe_string_conversion',
    'records_from_dataframe',
]
