"""
GB2260 Tree - hierarchical views of China's administrative division codes.

This package parses six-digit GB/T 2260 division codes, classifies records
as province, prefecture or county, and assembles flat record lists into
province -> prefecture -> county trees.
"""

__version__ = "1.0.0"
__author__ = "Data Analytics Team"

from .models import ADDataItem, ADCodeParsed, ADCodeNode, PartitionResult
from .hierarchy import (
    AdministrativeLevel,
    DEFAULT_PREFECTURE_NAMES,
    FALLBACK_PREFECTURE_NAME,
    parse_ad_code,
    is_province,
    is_prefecture,
    is_county,
    process_gb2260,
    format_gb2260_standard,
    format_gb2260_well_formed,
    TreeBuilder,
)
from .data import DATA_OF_202011

__all__ = [
    'ADDataItem',
    'ADCodeParsed',
    'ADCodeNode',
    'PartitionResult',
    'AdministrativeLevel',
    'DEFAULT_PREFECTURE_NAMES',
    'FALLBACK_PREFECTURE_NAME',
    'parse_ad_code',
    'is_province',
    'is_prefecture',
    'is_county',
    'process_gb2260',
    'format_gb2260_standard',
    'format_gb2260_well_formed',
    'TreeBuilder',
    'DATA_OF_202011',
]
