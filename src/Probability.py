from __future__ import annotations
from typing import Iterable, List

from Huffman_Formats import *
from utils import iter_file_bytes, open_input, write_lines

"""Таблица вероятностей символов.

Подсчёт частот по файлу-образцу, запись таблицы в текстовом виде
(по строке на символ, PROB_PRECISION знаков после точки) и обратный разбор.
"""

def count_frequencies(data: Iterable[int], alphabet_size: int = ASCII_SIZE) -> tuple[List[int], int]:
    """Считает частоты символов одним линейным проходом.

    В общий счётчик попадает каждый байт, а в таблицу - только байты меньше alphabet_size.

    Returns:
        tuple:
        - List[int]: Частоты, индекс = символ.
        - int: Общее количество байт.
    """
    freqs = [0] * alphabet_size
    total = 0
    for b in data:
        total += 1
        if b < alphabet_size:
            freqs[b] += 1
    return freqs, total

def to_probabilities(freqs: List[int], total: int) -> List[float]:
    """Нормирует частоты на общее количество байт.

    Raises:
        EmptyInputError: Если total == 0.
    """
    if total == 0:
        raise EmptyInputError("Input file is empty.")
    return [f / total for f in freqs]

def format_probabilities(probabilities: Iterable[float]) -> List[str]:
    return [f"{p:.{PROB_PRECISION}f}" for p in probabilities]

def parse_probabilities(text: str, alphabet_size: int = ASCII_SIZE) -> List[float]:
    """Разбирает таблицу вероятностей.

    Значения разделены пробельными символами, используются первые alphabet_size,
    остальные игнорируются. Сумма не проверяется.

    Args:
        text (str): Содержимое файла.
        alphabet_size (int): Сколько значений требуется.

    Returns:
        List[float]: Вероятности, индекс = символ.

    Raises:
        FormatError: Если значений меньше alphabet_size или значение не число.
    """
    tokens = text.split()
    if len(tokens) < alphabet_size:
        raise FormatError(
            f"Error reading probability from file: expected {alphabet_size} values, got {len(tokens)}"
        )

    probabilities = []
    for i, token in enumerate(tokens[:alphabet_size]):
        try:
            probabilities.append(float(token))
        except ValueError as e:
            raise FormatError(f"Error reading probability from file: line {i + 1}: {token!r}") from e
    return probabilities

# -------------------------------------------------------------------------------------------------

def read_probabilities(path: str, alphabet_size: int = ASCII_SIZE) -> List[float]:
    with open_input(path) as f:
        raw = f.read()
    return parse_probabilities(raw.decode("ascii", errors="replace"), alphabet_size)

def compute_probabilities(sample_path: str, prob_path: str, alphabet_size: int = ASCII_SIZE) -> int:
    """Считает вероятности по файлу-образцу и записывает таблицу в prob_path.

    Returns:
        int: Количество байт в образце.

    Raises:
        EmptyInputError: Если образец пуст (prob_path при этом не создаётся).
    """
    with open_input(sample_path) as f:
        freqs, total = count_frequencies(iter_file_bytes(f), alphabet_size)

    probabilities = to_probabilities(freqs, total)
    write_lines(prob_path, format_probabilities(probabilities))
    return total
