"""
Immutable structural snapshots of an AVL tree.

A snapshot records, for every node, its value, cached height, balance factor
and the values of its children. It is all a renderer needs to rebuild the
parent/child edges, and it stays valid after the tree it came from changes.
"""

from typing import Any, Iterator, List, NamedTuple, Optional, Tuple

from .node import Node


class NodeSnapshot(NamedTuple):
    value: Any
    height: int
    balance: int
    left: Optional[Any]
    right: Optional[Any]


Edge = Tuple[Any, Any, str]


class TreeSnapshot:
    """
    Nodes are kept in pre-order, so equal shapes give equal snapshots.

    Children are linked by position in that order, never by value, so any
    orderable value works, hashable or not.
    """

    def __init__(self, nodes: Tuple[NodeSnapshot, ...] = ()) -> None:
        self._nodes: Tuple[NodeSnapshot, ...] = tuple(nodes)
        self._links: List[List[Optional[int]]] = self._link(self._nodes)

    @staticmethod
    def _link(nodes: Tuple[NodeSnapshot, ...]) -> List[List[Optional[int]]]:
        """
        [left, right] child positions for every node.

        In pre-order the next node always fills the first open child slot of
        the deepest node that still has one.
        """
        links: List[List[Optional[int]]] = [[None, None] for _ in nodes]
        open_slots: List[int] = []
        for i, node in enumerate(nodes):
            if open_slots:
                parent = open_slots[-1]
                if nodes[parent].left is not None and links[parent][0] is None:
                    links[parent][0] = i
                else:
                    links[parent][1] = i
                if nodes[parent].right is None or links[parent][1] is not None:
                    open_slots.pop()
            if node.left is not None or node.right is not None:
                open_slots.append(i)
        return links

    @classmethod
    def from_root(cls, root: Optional[Node]) -> 'TreeSnapshot':
        nodes: List[NodeSnapshot] = []
        stack: List[Node] = [] if root is None else [root]
        while stack:
            node = stack.pop()
            nodes.append(NodeSnapshot(
                value=node.value,
                height=node.height,
                balance=node.balance_factor(),
                left=None if node.left is None else node.left.value,
                right=None if node.right is None else node.right.value,
            ))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return cls(tuple(nodes))

    @property
    def root(self) -> Optional[Any]:
        if not self._nodes:
            return None
        return self._nodes[0].value

    @property
    def height(self) -> int:
        if not self._nodes:
            return 0
        return self._nodes[0].height

    def edges(self) -> List[Edge]:
        result: List[Edge] = []
        for node in self._nodes:
            if node.left is not None:
                result.append((node.value, node.left, "left"))
            if node.right is not None:
                result.append((node.value, node.right, "right"))
        return result

    def edge_positions(self) -> List[Tuple[int, int]]:
        """(parent, child) pre-order positions, in the same order as edges()."""
        result: List[Tuple[int, int]] = []
        for i, (left, right) in enumerate(self._links):
            if left is not None:
                result.append((i, left))
            if right is not None:
                result.append((i, right))
        return result

    def depths(self) -> List[int]:
        """Depth of every node, root at 0, in pre-order."""
        result = [0] * len(self._nodes)
        for i, (left, right) in enumerate(self._links):
            for child in (left, right):
                if child is not None:
                    result[child] = result[i] + 1
        return result

    def ranks(self) -> List[int]:
        """In-order rank of every node, in pre-order."""
        result = [0] * len(self._nodes)
        rank = 0
        pending: List[int] = []
        cursor: Optional[int] = 0 if self._nodes else None
        while pending or cursor is not None:
            while cursor is not None:
                pending.append(cursor)
                cursor = self._links[cursor][0]
            cursor = pending.pop()
            result[cursor] = rank
            rank += 1
            cursor = self._links[cursor][1]
        return result

    def values(self) -> List[Any]:
        """Stored values in ascending order."""
        result: List[Any] = [None] * len(self._nodes)
        for node, rank in zip(self._nodes, self.ranks()):
            result[rank] = node.value
        return result

    def _find(self, value: Any) -> Optional[int]:
        i: Optional[int] = 0 if self._nodes else None
        while i is not None:
            node = self._nodes[i]
            if value < node.value:
                i = self._links[i][0]
            elif value > node.value:
                i = self._links[i][1]
            else:
                return i
        return None

    def __getitem__(self, value: Any) -> NodeSnapshot:
        i = self._find(value)
        if i is None:
            raise KeyError(value)
        return self._nodes[i]

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeSnapshot]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeSnapshot):
            return NotImplemented
        return self._nodes == other._nodes

    def __repr__(self) -> str:
        return f"TreeSnapshot(root={self.root!r}, size={len(self)}, height={self.height})"
