from __future__ import annotations

import logging
from typing import TypeVar, Optional, Tuple

from .base import Tree, TreeNode

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def height(node: Optional[AVLNode]) -> int:
    """Height of a subtree; an absent subtree has height 0."""
    if node is None:
        return 0
    return node.height


class AVLTree(Tree):
    """Height-balanced binary search tree.

    Every node keeps the height of its subtree. After each structural change
    the heights are recomputed on the way back up and any node whose child
    heights differ by more than one is restored with a single or double
    rotation.
    """

    def __init__(self):
        super().__init__(AVLNode)

    def put(self, key: K, value: V):
        """Insert `key`, or overwrite its value if it is already present."""
        if self._root is None:
            self._root = self._node_cls(key, value)
            self._len = 1
            return

        created_new, self._root = self._root._insert_node(key, value)
        if created_new:
            self._len += 1

    def remove(self, key: K):
        """Remove `key` if present. Removing a missing key does nothing."""
        if self._root is None:
            return

        removed, self._root = self._root._delete_node(key)
        if removed:
            self._len -= 1
            logger.debug("removed key %s, %d keys left", key, self._len)


class AVLNode(TreeNode):
    def __init__(self, key: K, value: V):
        super().__init__(key, value)
        self.height: int = 1

    def _update_height(self):
        self.height = max(height(self._left), height(self._right)) + 1

    def _balance_factor(self) -> int:
        return height(self._left) - height(self._right)

    def _rotate_left(self) -> AVLNode[K, V]:
        pivot: AVLNode[K, V] = self._right
        self._right = pivot._left
        pivot._left = self

        self._update_height()
        pivot._update_height()
        return pivot

    def _rotate_right(self) -> AVLNode[K, V]:
        pivot: AVLNode[K, V] = self._left
        self._left = pivot._right
        pivot._right = self

        self._update_height()
        pivot._update_height()
        return pivot

    def _rebalance(self) -> AVLNode[K, V]:
        """Restore the height constraint at this node.

        Returns the root of the (possibly rotated) subtree.
        """
        bf = self._balance_factor()

        if bf > 1:
            if self._left._balance_factor() >= 0:
                logger.debug("LL rotation at key %s", self.key)
                return self._rotate_right()

            logger.debug("LR rotation at key %s", self.key)
            self._left = self._left._rotate_left()
            return self._rotate_right()
        elif bf < -1:
            if self._right._balance_factor() <= 0:
                logger.debug("RR rotation at key %s", self.key)
                return self._rotate_left()

            logger.debug("RL rotation at key %s", self.key)
            self._right = self._right._rotate_right()
            return self._rotate_left()

        return self

    def _insert_node(self, key: K, value: V) -> Tuple[bool, AVLNode[K, V]]:
        if key == self.key:
            self.value = value
            return (False, self)

        if key < self.key:
            if self._left is not None:
                created_new, self._left = self._left._insert_node(key, value)
            else:
                self._left = self.__class__(key, value)
                created_new = True
        else:
            if self._right is not None:
                created_new, self._right = self._right._insert_node(key, value)
            else:
                self._right = self.__class__(key, value)
                created_new = True

        if not created_new:
            return (False, self)

        self._update_height()
        return (True, self._rebalance())

    def _delete_node(self, key: K) -> Tuple[bool, Optional[AVLNode[K, V]]]:
        if key < self.key:
            if self._left is None:
                return (False, self)
            removed, self._left = self._left._delete_node(key)
        elif key > self.key:
            if self._right is None:
                return (False, self)
            removed, self._right = self._right._delete_node(key)
        else:
            return (True, self._splice_out())

        if not removed:
            return (False, self)

        self._update_height()
        return (True, self._rebalance())

    def _splice_out(self) -> Optional[AVLNode[K, V]]:
        """Detach this node and return the subtree that takes its place."""
        if self._left is None:
            replacement = self._right
        elif self._right is None:
            replacement = self._left
        else:
            # Two children: the in-order successor takes this node's place.
            successor: AVLNode[K, V] = self._right._leftmost()
            _, successor._right = self._right._delete_node(successor.key)
            successor._left = self._left

            successor._update_height()
            replacement = successor._rebalance()

        self._left = None
        self._right = None
        return replacement

    def _print_node(self) -> str:
        return "{}: {:2d}".format(self.key, self.height)
