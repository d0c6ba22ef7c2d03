"""
Output conversion components.
"""

from .output_generator import tree_to_dicts, tree_to_json, flatten_tree, summarize_tree

__all__ = ['tree_to_dicts', 'tree_to_json', 'flatten_tree', 'summarize_tree']
