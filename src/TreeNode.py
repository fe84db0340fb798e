from __future__ import annotations
from typing import Optional

from Huffman_Formats import PLACEHOLDER_SYMBOL

"""Узел дерева Хаффмана.

Лист хранит символ алфавита и его вес. Внутренний узел хранит PLACEHOLDER_SYMBOL,
сумму весов детей и ровно двух детей. Каждый узел принадлежит одному родителю.
"""

class TreeNode:
    __slots__ = ("symbol", "freq", "left", "right")

    def __init__(self, symbol: int, freq: float,
                 left: Optional["TreeNode"] = None, right: Optional["TreeNode"] = None):
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    @classmethod
    def merge(cls, left: "TreeNode", right: "TreeNode") -> "TreeNode":
        """Внутренний узел над двумя поддеревьями."""
        return cls(PLACEHOLDER_SYMBOL, left.freq + right.freq, left, right)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"TreeNode(symbol={self.symbol}, freq={self.freq})"
        return f"TreeNode(freq={self.freq}, left={self.left!r}, right={self.right!r})"
