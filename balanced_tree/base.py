from __future__ import annotations

from typing import Generic, TypeVar, Optional, Type

K = TypeVar("K")
V = TypeVar("V")


class TreeNode(Generic[K, V]):
    def __init__(self, key: K, value: V):
        self.key: K = key
        self.value: V = value

        self_cls = self.__class__

        self._left: Optional[self_cls[K, V]] = None
        self._right: Optional[self_cls[K, V]] = None

    @property
    def left(self) -> Optional[TreeNode[K, V]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[K, V]]:
        return self._right

    def _leftmost(self) -> TreeNode[K, V]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _copy_data(self, other: TreeNode[K, V]):
        self.key = other.key
        self.value = other.value

    def _exchange_data(self, other: TreeNode[K, V]):
        self.key, other.key = other.key, self.key
        self.value, other.value = other.value, self.value

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self._left is not None:
            ret = self._left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._right is not None:
            ret += self._right._print_recursive(level + 1)

        return ret

    # methods for subclasses to override:

    def _print_node(self) -> str:
        return str(self.key)


class Tree(Generic[K, V]):
    """Common state for the balanced trees: a root reference and a key count.

    Subclasses implement `put` and `remove`.
    """

    def __init__(self, node_class: Type[TreeNode] = TreeNode):
        self._node_cls = node_class
        self._root: Optional[TreeNode[K, V]] = None
        self._len: int = 0

    def put(self, key: K, value: V):
        raise NotImplementedError()

    def remove(self, key: K):
        raise NotImplementedError()

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def __len__(self) -> int:
        return self._len
