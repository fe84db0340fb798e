from __future__ import annotations
from typing import List, Optional, Sequence

from Huffman_Formats import AllocationError, EmptyHeapError
from TreeNode import TreeNode

"""Минимальная двоичная куча узлов дерева Хаффмана.

Куча упорядочена по возрастанию freq. При равных частотах порядок определяется
позицией в массиве, а не символом: дерево детерминировано при одинаковом порядке
входных данных.

Атрибуты:
    size (int): Логическое количество элементов.
    capacity (int): Граница хранилища, задаётся при создании.
    array (List[TreeNode | None]): Массив позиций кучи.

API:
    MinHeap(capacity) / MinHeap.build_from_arrays(symbols, weights, n)
    insert(node), extract_min(), is_singleton()
"""

class MinHeap:
# -------------------------------------------------------------------------------------------------

    def __init__(self, capacity: int):
        """Создаёт пустую кучу с хранилищем на capacity узлов.

        Raises:
            AllocationError: Если хранилище такого размера получить нельзя.
        """
        if capacity < 0:
            raise AllocationError(f"heap capacity must be >= 0, got {capacity}")

        self.size: int = 0
        self.capacity: int = capacity
        self.array: List[Optional[TreeNode]] = [None] * capacity

    @classmethod
    def build_from_arrays(cls, symbols: Sequence[int], weights: Sequence[float], n: int) -> "MinHeap":
        """Массовое построение: n листьев из параллельных массивов и heapify снизу вверх за O(n).

        Args:
            symbols (Sequence[int]): Символы алфавита.
            weights (Sequence[float]): Веса символов (тот же порядок).
            n (int): Количество пар.

        Returns:
            MinHeap: Куча размера n.
        """
        heap = cls(n)
        for i in range(n):
            heap.array[i] = TreeNode(symbols[i], weights[i])
        heap.size = n

        # от последнего внутреннего узла к корню
        for i in range((n - 2) // 2, -1, -1):
            heap._heapify(i)

        return heap

# -------------------------------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size

    def is_singleton(self) -> bool:
        return self.size == 1

    def insert(self, node: TreeNode) -> None:
        """Добавляет узел в позицию size и поднимает его, пока он строго меньше родителя."""
        if self.size >= self.capacity:
            raise AllocationError(f"heap is full (capacity {self.capacity})")

        i = self.size
        self.size += 1
        self.array[i] = node

        while i and self.array[i].freq < self.array[(i - 1) // 2].freq:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent

    def extract_min(self) -> TreeNode:
        """Извлекает узел с минимальной частотой.

        Последний элемент переносится в корень, после чего порядок восстанавливается сверху вниз.

        Raises:
            EmptyHeapError: Если куча пуста.
        """
        if self.size < 1:
            raise EmptyHeapError("extract_min from an empty heap")

        top = self.array[0]
        self.array[0] = self.array[self.size - 1]
        self.array[self.size - 1] = None
        self.size -= 1
        if self.size:
            self._heapify(0)

        return top

# -------------------------------------------------------------------------------------------------

    def _swap(self, a: int, b: int) -> None:
        self.array[a], self.array[b] = self.array[b], self.array[a]

    def _heapify(self, idx: int) -> None:
        """Просеивание вниз. При равенстве детей побеждает левый."""
        smallest = idx
        left = 2 * idx + 1
        right = 2 * idx + 2

        if left < self.size and self.array[left].freq < self.array[smallest].freq:
            smallest = left

        if right < self.size and self.array[right].freq < self.array[smallest].freq:
            smallest = right

        if smallest != idx:
            self._swap(smallest, idx)
            self._heapify(smallest)

# -------------------------------------------------------------------------------------------------

def heap_is_valid(heap: MinHeap) -> bool:
    """Проверяет свойство кучи: freq[i] <= freq[2i+1] и freq[i] <= freq[2i+2]."""
    for i in range(heap.size):
        for child in (2 * i + 1, 2 * i + 2):
            if child < heap.size and heap.array[child].freq < heap.array[i].freq:
                return False
    return True
