from __future__ import annotations
from typing import BinaryIO, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from Huffman_Formats import *
from MinHeap import MinHeap
from TreeNode import TreeNode
from utils import iter_file_bytes

"""Кодек Хаффмана по фиксированной таблице вероятностей.

Поддерживает:
    - построение дерева Хаффмана жадным слиянием через MinHeap
    - получение кода символа обходом дерева от корня к листу
    - потоковое кодирование байтов в текстовую строку из '0'/'1'
    - потоковое декодирование строки битов обратно в байты

Дерево строится заново при каждом pack/unpack из одной и той же таблицы,
поэтому кодирование и декодирование симметричны. Таблица кодов не кэшируется.

API:
    - build_huffman_tree(symbols, weights) -> TreeNode
    - code_for(root, target) / iter_codes(root)
    - Huffman(probabilities): класс с методами pack/unpack и encode_file/decode_file.
"""

Bits = List[int]

# -------------------------------------------------------------------------------------------------

def build_huffman_tree(symbols: Sequence[int], weights: Sequence[float]) -> TreeNode:
    """Строит классическое дерево Хаффмана.

    Пока в куче больше одного узла: извлекаются два минимальных (первый станет левым
    ребёнком, второй правым), их сумма возвращается в кучу. Оставшийся узел - корень.

    Args:
        symbols (Sequence[int]): Символы алфавита.
        weights (Sequence[float]): Веса символов, weights[i] для symbols[i].

    Returns:
        TreeNode: Корень дерева. Для алфавита из одного символа корень сам является листом.

    Raises:
        EmptyHeapError: Если алфавит пуст.
    """
    if len(symbols) != len(weights):
        raise ValueError(f"symbols/weights length mismatch: {len(symbols)} != {len(weights)}")

    heap = MinHeap.build_from_arrays(symbols, weights, len(symbols))
    if not len(heap):
        raise EmptyHeapError("cannot build a tree over an empty alphabet")

    while not heap.is_singleton():
        left = heap.extract_min()
        right = heap.extract_min()
        heap.insert(TreeNode.merge(left, right))

    return heap.extract_min()

def code_for(root: TreeNode, target: int) -> Optional[Bits]:
    """Путь от корня до листа target: 0 - влево, 1 - вправо.

    Returns:
        Optional[List[int]]: Биты пути. Пустой список, если корень сам лист target.
                             None, если такого листа в дереве нет.
    """
    path: Bits = []

    def dfs(node: TreeNode) -> bool:
        '''Обход в глубину, левое поддерево раньше правого'''
        if node.is_leaf():                  # базовый случай
            return node.symbol == target
        for bit, child in ((0, node.left), (1, node.right)):
            if child is None:
                continue
            path.append(bit)
            if dfs(child):
                return True
            path.pop()
        return False

    return path if dfs(root) else None

def iter_codes(root: TreeNode) -> Iterator[Tuple[int, Bits]]:
    """Полная таблица: (символ, путь) для каждого листа, слева направо."""
    stack: List[Tuple[TreeNode, Bits]] = [(root, [])]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            yield node.symbol, path
            continue
        # правый кладётся первым, чтобы левый был снят раньше
        if node.right is not None:
            stack.append((node.right, path + [1]))
        if node.left is not None:
            stack.append((node.left, path + [0]))

def bits_to_str(bits: Bits) -> str:
    return "".join("1" if b else "0" for b in bits)

# -------------------------------------------------------------------------------------------------

class Huffman:
# -------------------------------------------------------------------------------------------------

    def __init__(self, probabilities: Sequence[float], alphabet_size: int = ASCII_SIZE):
        """Запоминает таблицу вероятностей. Дерево строится в каждом вызове pack/unpack.

        Args:
            probabilities (Sequence[float]): Не менее alphabet_size весов, индекс = символ.
            alphabet_size (int): Размер алфавита.
        """
        self.alphabet_size = validate_alphabet_size(alphabet_size)

        if len(probabilities) < alphabet_size:
            raise FormatError(f"expected {alphabet_size} probabilities, got {len(probabilities)}")

        self.symbols: List[int] = list(range(alphabet_size))
        self.probabilities: List[float] = list(probabilities[:alphabet_size])
        self.root: Optional[TreeNode] = None
        self._consumed: int = 0

    def build_tree(self) -> TreeNode:
        self.root = build_huffman_tree(self.symbols, self.probabilities)
        return self.root

# -------------------------------------------------------------------------------------------------

    def pack(self, data: bytes) -> str:
        """Кодирует байты в строку из '0'/'1' без разделителей между кодами.

        Байты, для которых в дереве нет листа (>= alphabet_size), не порождают битов.
        """
        root = self.build_tree()
        return "".join(self._encode_symbols(root, data))

    def unpack(self, bits: Union[str, bytes]) -> bytes:
        """Декодирует строку из '0'/'1'. Прочие символы и хвост незавершённого пути отбрасываются."""
        root = self.build_tree()
        stream = map(ord, bits) if isinstance(bits, str) else bits
        return bytes(self._decode_bits(root, stream))

    def encode_file(self, src: BinaryIO, dst: BinaryIO) -> Tuple[int, int]:
        """Потоковое кодирование файла.

        Returns:
            tuple:
            - int: Прочитано байт.
            - int: Записано битов (символов '0'/'1').
        """
        root = self.build_tree()
        written = 0
        out: List[str] = []
        pending = 0

        for code in self._encode_symbols(root, self._counting(iter_file_bytes(src))):
            out.append(code)
            pending += len(code)
            if pending >= CHUNK_SIZE:
                dst.write("".join(out).encode("ascii"))
                written += pending
                out, pending = [], 0

        if out:
            dst.write("".join(out).encode("ascii"))
            written += pending

        return self._consumed, written

    def decode_file(self, src: BinaryIO, dst: BinaryIO) -> Tuple[int, int]:
        """Потоковое декодирование файла.

        Returns:
            tuple:
            - int: Прочитано символов.
            - int: Записано байт.
        """
        root = self.build_tree()
        written = 0
        out = bytearray()

        for symbol in self._decode_bits(root, self._counting(iter_file_bytes(src))):
            out.append(symbol)
            if len(out) >= CHUNK_SIZE:
                dst.write(out)
                written += len(out)
                out.clear()

        if out:
            dst.write(out)
            written += len(out)

        return self._consumed, written

    def code_listing(self) -> List[str]:
        """Диагностический листинг: строка на символ, по возрастанию значения.

        Печатаемые символы (32..126) получают путь, остальные - NO_CODE.
        """
        root = self.build_tree()
        lines = []
        for sym in self.symbols:
            path = code_for(root, sym) if is_printable(sym) else None
            lines.append(NO_CODE if path is None else bits_to_str(path))
        return lines

# -------------------------------------------------------------------------------------------------

    def _counting(self, stream: Iterable[int]) -> Iterator[int]:
        self._consumed = 0
        for value in stream:
            self._consumed += 1
            yield value

    @staticmethod
    def _encode_symbols(root: TreeNode, data: Iterable[int]) -> Iterator[str]:
        """Байт -> код символа, каждый раз новым обходом дерева."""
        degenerate = root.is_leaf()

        for b in data:
            path = code_for(root, b)
            if path is None:
                continue
            # у единственного листа путь пустой, пишем один бит на вхождение
            yield "0" if degenerate else bits_to_str(path)

    @staticmethod
    def _step(node: TreeNode, bit: int) -> Optional[TreeNode]:
        """Функция переходов автомата. None - перехода нет."""
        if bit == BIT_ZERO:
            return node.left
        if bit == BIT_ONE:
            return node.right
        return None

    @classmethod
    def _decode_bits(cls, root: TreeNode, bits: Iterable[int]) -> Iterator[int]:
        """Автомат декодирования: состояние - текущий узел, после листа - сброс в корень."""
        if root.is_leaf():
            for bit in bits:
                if bit == BIT_ZERO:
                    yield root.symbol
            return

        cur = root
        for bit in bits:
            nxt = cls._step(cur, bit)
            if nxt is None:
                continue

            cur = nxt
            if cur.is_leaf():
                yield cur.symbol
                cur = root
