"""Hierarchical tree assembled from scanned file records."""

from .tree_builder import build_tree, count_items, flatten_tree
from .tree_node import ROOT_PATH, TreeNode

__all__ = ["ROOT_PATH", "TreeNode", "build_tree", "count_items", "flatten_tree"]
