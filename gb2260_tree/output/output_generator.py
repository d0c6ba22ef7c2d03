"""
Output conversion for the GB2260 tree application.

This module converts assembled trees into plain Python structures, JSON text
and flat pandas DataFrames. Nothing here touches the filesystem; callers
decide where the result goes.
"""

import json
from collections import Counter
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from ..exceptions import OutputGenerationError
from ..hierarchy.hierarchy_config import AdministrativeLevel
from ..models import ADCodeNode


FLAT_COLUMNS = [
    'code', 'name', 'level', 'depth', 'parent_code',
    'province_code', 'prefecture_code', 'county_code'
]


def _check_nodes(nodes: Sequence[Any], output_type: str):
    for node in nodes:
        if not isinstance(node, ADCodeNode):
            raise OutputGenerationError(
                f"Expected ADCodeNode, got {type(node).__name__}",
                output_type=output_type,
                offending_value=node
            )


def _walk(nodes: Sequence[ADCodeNode], depth: int = 1,
          parent_code: Optional[str] = None) -> Iterator[Tuple[int, Optional[str], ADCodeNode]]:
    for node in nodes:
        yield depth, parent_code, node
        if node.children:
            yield from _walk(node.children, depth + 1, node.code)


def tree_to_dicts(nodes: Sequence[ADCodeNode]) -> List[Dict[str, Any]]:
    """
    Convert top-level nodes into nested dictionaries.
    
    Args:
        nodes: Province nodes as returned by the tree builders
        
    Returns:
        List of dictionaries, one per province
        
    Raises:
        OutputGenerationError: If an entry is not an ADCodeNode
    """
    _check_nodes(nodes, 'dict')
    return [node.to_dict() for node in nodes]


def tree_to_json(nodes: Sequence[ADCodeNode], indent: Optional[int] = 2) -> str:
    """
    Serialize a tree to JSON, keeping Chinese names readable.
    
    Args:
        nodes: Province nodes as returned by the tree builders
        indent: JSON indentation; None for compact output
        
    Returns:
        JSON document as a string
    """
    _check_nodes(nodes, 'json')
    return json.dumps(tree_to_dicts(nodes), ensure_ascii=False, indent=indent)


def flatten_tree(nodes: Sequence[ADCodeNode]) -> pd.DataFrame:
    """
    Flatten a tree into one DataFrame row per node, in pre-order.
    
    Args:
        nodes: Province nodes as returned by the tree builders
        
    Returns:
        DataFrame with the columns listed in FLAT_COLUMNS
        
    Raises:
        OutputGenerationError: If an entry is not an ADCodeNode
    """
    _check_nodes(nodes, 'dataframe')
    
    rows = []
    for depth, parent_code, node in _walk(nodes):
        rows.append({
            'code': node.code,
            'name': node.name,
            'level': node.level,
            'depth': depth,
            'parent_code': parent_code,
            'province_code': node.province_code,
            'prefecture_code': node.prefecture_code,
            'county_code': node.county_code
        })
    
    return pd.DataFrame(rows, columns=FLAT_COLUMNS)


def summarize_tree(nodes: Sequence[ADCodeNode]) -> Dict[str, Any]:
    """
    Count the nodes of a tree by level and by depth.
    
    Returns:
        Dictionary with 'total', 'by_level' and 'by_depth' entries
        
    Example:
        {'total': 3, 'by_level': {'province': 1, 'prefecture': 1, 'county': 1},
         'by_depth': {1: 1, 2: 1, 3: 1}}
    """
    _check_nodes(nodes, 'summary')
    
    by_level = Counter()
    by_depth = Counter()
    for root in nodes:
        for depth, node in root.iter_nodes():
            by_level[node.level] += 1
            by_depth[depth] += 1
    
    return {
        'total': sum(by_level.values()),
        'by_level': {level: by_level.get(level, 0) for level in AdministrativeLevel.ALL_LEVELS},
        'by_depth': dict(sorted(by_depth.items()))
    }
