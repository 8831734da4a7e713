from typing import TypeVar, Generic, Iterable, List, Optional

from .node import Node
from .snapshot import TreeSnapshot

T = TypeVar('T')


class NodeIterator(Generic[T]):
    """
    Lazy in-order walk over the nodes of an AVLTree.

    Keeps a stack of ancestors whose right subtree has not been visited yet and
    a cursor into the subtree still to visit, so the walk never recurses no
    matter how deep the tree is.
    """

    def __init__(self, tree: 'AVLTree[T]') -> None:
        self._tree: Optional[AVLTree[T]] = tree
        self._version: int = tree._version
        self._pending: List[Node[T]] = []
        self._cursor: Optional[Node[T]] = tree._root

    def __iter__(self) -> 'NodeIterator[T]':
        return self

    def __next__(self) -> Node[T]:
        if self._tree is None:
            raise StopIteration
        if self._tree._version != self._version:
            raise RuntimeError("AVLTree mutated during iteration")

        cursor = self._cursor
        while cursor is not None and cursor.left is not None:
            self._pending.append(cursor)
            cursor = cursor.left

        if cursor is None:
            if not self._pending:
                self._tree = None
                raise StopIteration
            cursor = self._pending.pop()

        self._cursor = cursor.right
        return cursor


class InOrderIterator(Generic[T]):
    """Yields the stored values in ascending order."""

    def __init__(self, tree: 'AVLTree[T]') -> None:
        self._nodes: NodeIterator[T] = NodeIterator(tree)

    def __iter__(self) -> 'InOrderIterator[T]':
        return self

    def __next__(self) -> T:
        return next(self._nodes).value


class AVLTree(Generic[T]):
    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self._version: int = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> 'AVLTree[T]':
        tree: AVLTree[T] = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: T) -> bool:
        """
        Insert value, keeping the tree balanced.

        Returns False without touching the tree if an equal value is already
        stored. The descent records every visited node; after the new leaf is
        attached that path is walked deepest first, fixing heights and
        rotating where a node leans by two.
        """
        path: List[Node[T]] = []
        went_left = False
        node = self._root
        while node is not None:
            path.append(node)
            if value < node.value:
                went_left = True
                node = node.left
            elif value > node.value:
                went_left = False
                node = node.right
            else:
                return False

        leaf = Node(value)
        if not path:
            self._root = leaf
        elif went_left:
            path[-1].left = leaf
        else:
            path[-1].right = leaf

        for ancestor in reversed(path):
            ancestor.update_height()
            ancestor.rebalance()

        self._size += 1
        self._version += 1
        return True

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        if self._root is None:
            return 0
        return self._root.height

    def clear(self) -> None:
        """
        Release every node.

        Nodes are collected with an explicit work stack and only then unlinked,
        so clearing a tree of any depth never recurses.
        """
        released: List[Node[T]] = []
        stack: List[Node[T]] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            released.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

        for node in released:
            node.left = None
            node.right = None

        self._root = None
        self._size = 0
        self._version += 1

    def nodes(self) -> NodeIterator[T]:
        return NodeIterator(self)

    def in_order(self) -> List[T]:
        return list(self)

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def copy(self) -> 'AVLTree[T]':
        """Clone with the exact same shape, independent of this tree."""
        clone: AVLTree[T] = AVLTree()
        if self._root is None:
            return clone

        clone._root = Node(self._root.value)
        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            target.height = source.height
            if source.left is not None:
                target.left = Node(source.left.value)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = Node(source.right.value)
                stack.append((source.right, target.right))

        clone._size = self._size
        return clone

    def is_balanced(self) -> bool:
        """True if every node has a correct height cache and leans by at most one."""
        for node in self.nodes():
            if node.height != 1 + max(node.left_height(), node.right_height()):
                return False
            if abs(node.balance_factor()) > 1:
                return False
        return True

    def snapshot(self) -> TreeSnapshot:
        return TreeSnapshot.from_root(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> InOrderIterator[T]:
        return InOrderIterator(self)

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
