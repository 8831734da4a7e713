from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class Node(Generic[T]):
    """
    A single AVL node: a value, two owned child links and the cached height
    of the subtree rooted here.

    Rotations never re-parent a node. They swap values between the node and
    one child and relink the grandchildren, so the node at a given position
    (the tree root in particular) stays the same object.
    """

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        self.height: int = 1

    def left_height(self) -> int:
        if self.left is None:
            return 0
        return self.left.height

    def right_height(self) -> int:
        if self.right is None:
            return 0
        return self.right.height

    def update_height(self) -> None:
        # Children first: only valid once both subtrees are up to date.
        self.height = 1 + max(self.left_height(), self.right_height())

    def balance_factor(self) -> int:
        return self.left_height() - self.right_height()

    def rotate_right(self) -> bool:
        """
        Lift the left child into this position.

            N(n)                N(l)
           /    \\             /    \\
         L(l)    C    ->     A     L(n)
        /    \\                    /    \\
       A      B                  B      C

        Returns False and leaves the subtree untouched if there is no left child.
        """
        pivot = self.left
        if pivot is None:
            return False

        self.value, pivot.value = pivot.value, self.value
        self.left = pivot.left
        pivot.left = pivot.right
        pivot.right = self.right
        self.right = pivot

        pivot.update_height()
        self.update_height()
        return True

    def rotate_left(self) -> bool:
        """Mirror of rotate_right; requires a right child."""
        pivot = self.right
        if pivot is None:
            return False

        self.value, pivot.value = pivot.value, self.value
        self.right = pivot.right
        pivot.right = pivot.left
        pivot.left = self.left
        self.left = pivot

        pivot.update_height()
        self.update_height()
        return True

    def rebalance(self) -> bool:
        """
        Restore the AVL condition at this node, assuming both subtrees are
        already balanced and the height cache is current.

        Handles the four classic cases (left-left, left-right, right-right,
        right-left). Returns True if any rotation was performed.
        """
        balance = self.balance_factor()

        if balance == -2:
            assert self.right is not None
            if self.right.balance_factor() == 1:
                self.right.rotate_right()
            return self.rotate_left()

        if balance == 2:
            assert self.left is not None
            if self.left.balance_factor() == -1:
                self.left.rotate_left()
            return self.rotate_right()

        return False

    def __repr__(self) -> str:
        return f"Node({self.value!r}, height={self.height})"
