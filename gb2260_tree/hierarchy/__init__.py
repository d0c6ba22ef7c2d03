"""
Hierarchy module for the GB2260 tree application.

This module provides components for parsing division codes, classifying
them by administrative level, partitioning record lists and assembling
province -> prefecture -> county trees.
"""

from gb2260_tree.hierarchy.hierarchy_config import (
    AdministrativeLevel,
    DEFAULT_PREFECTURE_NAMES,
    FALLBACK_PREFECTURE_NAME,
    default_prefecture_name
)
from gb2260_tree.hierarchy.code_parser import (
    parse_ad_code,
    is_province,
    is_prefecture,
    is_county
)
from gb2260_tree.hierarchy.partitioner import process_gb2260
from gb2260_tree.hierarchy.tree_builder import (
    TreeBuilder,
    format_gb2260_standard,
    format_gb2260_well_formed
)

__all__ = [
    'AdministrativeLevel',
    'DEFAULT_PREFECTURE_NAMES',
    'FALLBACK_PREFECTURE_NAME',
    'default_prefecture_name',
    'parse_ad_code',
    'is_province',
    'is_prefecture',
    'is_county',
    'process_gb2260',
    'TreeBuilder',
    'format_gb2260_standard',
    'format_gb2260_well_formed'
]
