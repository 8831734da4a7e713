"""
AVL tree: an ordered, duplicate-free container that stays height-balanced on
every insertion, with stack-based iteration and teardown.
"""

from .node import Node
from .snapshot import NodeSnapshot, TreeSnapshot
from .tree import AVLTree, InOrderIterator, NodeIterator

__all__ = [
    "AVLTree",
    "InOrderIterator",
    "Node",
    "NodeIterator",
    "NodeSnapshot",
    "TreeSnapshot",
]
