from . import base
from . import avl
from . import rb

from .base import Tree, TreeNode
from .avl import AVLTree, AVLNode
from .rb import RBTree, RBNode, Color

HeightBalancedTree = AVLTree
ColorBalancedTree = RBTree

__all__ = [
    "Tree",
    "TreeNode",
    "AVLTree",
    "AVLNode",
    "RBTree",
    "RBNode",
    "Color",
    "HeightBalancedTree",
    "ColorBalancedTree",
]
