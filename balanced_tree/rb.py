from __future__ import annotations

import enum
import logging
from typing import TypeVar, Optional

from .base import Tree, TreeNode

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    RED = "R"
    BLACK = "B"


def is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.color is Color.RED


def is_black(node: Optional[RBNode]) -> bool:
    """Absent children count as black."""
    return node is None or node.color is Color.BLACK


class RBTree(Tree):
    """Red-black binary search tree.

    Nodes carry a color and a back-reference to their parent. Inserts repair
    red-red violations bottom-up; deletes of black nodes propagate a
    "double black" deficit upwards until a rotation or recolor absorbs it.
    """

    def __init__(self):
        super().__init__(RBNode)

    def _find_node(self, key: K) -> Optional[RBNode[K, V]]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node._left
            elif key > node.key:
                node = node._right
            else:
                return node
        return None

    def put(self, key: K, value: V):
        """Insert `key`, or overwrite its value if it is already present."""
        node = self._root
        parent = None
        while node is not None:
            parent = node
            if key < node.key:
                node = node._left
            elif key > node.key:
                node = node._right
            else:
                node.value = value
                return

        inserted = self._node_cls(key, value, self, parent)
        if parent is None:
            self._root = inserted
        elif key < parent.key:
            parent._set_left_child(inserted)
        else:
            parent._set_right_child(inserted)
        self._len += 1

        inserted._repair_insert()

    def remove(self, key: K):
        """Remove `key` if present. Removing a missing key does nothing."""
        deleted = self._find_node(key)
        if deleted is None:
            return

        deleted._delete_node()
        self._len -= 1
        logger.debug("removed key %s, %d keys left", key, self._len)


class RBNode(TreeNode):
    def __init__(
        self,
        key: K,
        value: V,
        tree: RBTree[K, V],
        parent: Optional[RBNode[K, V]] = None,
    ):
        super().__init__(key, value)
        self.color: Color = Color.RED
        self._parent: Optional[RBNode[K, V]] = parent
        self._tree: Optional[RBTree[K, V]] = tree

    @property
    def parent(self) -> Optional[RBNode[K, V]]:
        return self._parent

    def _set_left_child(self, child: Optional[RBNode[K, V]]):
        self._left = child
        if child is not None:
            child._parent = self

    def _set_right_child(self, child: Optional[RBNode[K, V]]):
        self._right = child
        if child is not None:
            child._parent = self

    def _is_left_child(self) -> bool:
        return (self._parent is not None) and (self._parent._left is self)

    def _sibling(self) -> Optional[RBNode[K, V]]:
        parent = self._parent
        if parent is None:
            return None
        elif parent._left is self:
            return parent._right
        else:
            return parent._left

    def _uncle(self) -> Optional[RBNode[K, V]]:
        if self._parent is None:
            return None
        return self._parent._sibling()

    def _rotate(self):
        """Rotate this node above its parent.

        A left child produces a right rotation, a right child a left rotation.
        The inner grandchild is reparented first, then the rotated pair, then
        the link from above (or the tree root).
        """
        parent: RBNode[K, V] = self._parent
        gp: Optional[RBNode[K, V]] = parent._parent
        parent_was_left = parent._is_left_child()

        if self._is_left_child():
            # Right rotation:
            parent._set_left_child(self._right)
            self._set_right_child(parent)
        else:
            # Left rotation:
            parent._set_right_child(self._left)
            self._set_left_child(parent)

        if gp is not None:
            if parent_was_left:
                gp._set_left_child(self)
            else:
                gp._set_right_child(self)
        else:
            self._parent = None
            self._tree._root = self

    def _unlink(self, replace_with: Optional[RBNode[K, V]] = None):
        if self._parent is not None:
            if self._is_left_child():
                self._parent._set_left_child(replace_with)
            else:
                self._parent._set_right_child(replace_with)
        else:
            # this was the root node:
            if replace_with is not None:
                replace_with._parent = None
            self._tree._root = replace_with

        self._tree = None
        self._parent = None
        self._left = None
        self._right = None

    def _find_replacement(self) -> Optional[RBNode[K, V]]:
        if self._left is None:
            return self._right
        if self._right is None:
            return self._left
        return self._right._leftmost()

    def _delete_node(self):
        replacement = self._find_replacement()

        if replacement is None:
            if self._parent is not None and is_black(self):
                # The fixup needs this node's position, so run it before
                # detaching.
                self._repair_delete()
            self._unlink()
            return

        if self._left is None or self._right is None:
            if self._parent is None:
                # Keep the root object: pull the lone child up into it.
                self._copy_data(replacement)
                replacement._unlink()
                return

            was_black = is_black(self)
            self._unlink(replacement)
            if was_black and is_black(replacement):
                replacement._repair_delete()
            else:
                replacement.color = Color.BLACK
            return

        self._exchange_data(replacement)
        replacement._delete_node()

    def _repair_insert(self):
        if self._parent is None:
            self.color = Color.BLACK
            return

        parent: RBNode[K, V] = self._parent
        if is_black(parent):
            return

        # A red parent is never the root, so the grandparent exists.
        uncle = self._uncle()
        grandparent: RBNode[K, V] = parent._parent
        if is_red(uncle):
            logger.debug("red uncle at key %s, recoloring", self.key)
            parent.color = Color.BLACK
            uncle.color = Color.BLACK
            grandparent.color = Color.RED
            return grandparent._repair_insert()

        if self._is_left_child() != parent._is_left_child():
            # LR / RL: straighten the inner edge first.
            self._rotate()
            parent = self

        logger.debug("insert rotation at key %s", grandparent.key)
        parent._rotate()
        parent.color = Color.BLACK
        grandparent.color = Color.RED

    def _repair_delete(self):
        parent: Optional[RBNode[K, V]] = self._parent
        if parent is None:
            return

        sibling = self._sibling()

        if is_red(sibling):
            logger.debug("red sibling at key %s, rotating", parent.key)
            sibling._rotate()
            parent.color = Color.RED
            sibling.color = Color.BLACK
            return self._repair_delete()

        if sibling is None:
            return parent._repair_delete()

        if is_black(sibling._left) and is_black(sibling._right):
            sibling.color = Color.RED
            if is_red(parent):
                parent.color = Color.BLACK
            else:
                parent._repair_delete()
            return

        logger.debug("delete rotation at key %s", parent.key)
        if sibling._is_left_child():
            if is_red(sibling._left):
                # LL
                sibling._left.color = Color.BLACK
                sibling.color = parent.color
                sibling._rotate()
            else:
                # LR
                nephew: RBNode[K, V] = sibling._right
                nephew.color = parent.color
                nephew._rotate()
                nephew._rotate()
        else:
            if is_red(sibling._right):
                # RR
                sibling._right.color = Color.BLACK
                sibling.color = parent.color
                sibling._rotate()
            else:
                # RL
                nephew: RBNode[K, V] = sibling._left
                nephew.color = parent.color
                nephew._rotate()
                nephew._rotate()
        parent.color = Color.BLACK

    def _print_node(self) -> str:
        return "{} ({})".format(self.key, self.color.value)
