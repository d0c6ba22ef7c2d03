"""
Data utility functions for type conversions and null handling.

This module provides helpers for cleaning record fields that may arrive
from pandas (NaN, numpy scalars) or from hand-written literals.
"""

import pandas as pd
from typing import Any, Dict, List


def safe_string_conversion(value: Any) -> str:
    """
    Safely convert a value to string, handling nulls and cleaning whitespace.
    
    Args:
        value: Value to convert to string
        
    Returns:
        Cleaned string value or empty string if null
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    
    return str(value).strip()


def records_from_dataframe(df: pd.DataFrame) -> List[Dict[str, str]]:
    """
    Convert a DataFrame with ``code`` and ``name`` columns into record dicts.
    
    Codes read by pandas as integers (e.g. ``110000``) are kept as their
    decimal string and string codes are passed through unchanged; extra
    columns are ignored.
    
    Args:
        df: DataFrame holding one division per row
        
    Returns:
        List of ``{'code': ..., 'name': ...}`` dictionaries in row order
    """
    subset = df[['code', 'name']]
    return [
        {'code': code if isinstance(code, str) else safe_string_conversion(code),
         'name': safe_string_conversion(name)}
        for code, name in subset.itertuples(index=False, name=None)
    ]
