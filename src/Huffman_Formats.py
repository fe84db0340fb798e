# Huffman_Formats.py
"""
Huffman formats module
Константы алфавита, текстовых форматов файлов и иерархия ошибок

Файлы:
    probfile        alphabet_size строк вида "0.25000000"   (строка i -> символ i)
    codes.txt       alphabet_size строк: путь из '0'/'1' или "No code"
    *.enc           поток ASCII '0'/'1' без разделителей, заголовка и хвоста
    *.new           сырые байты, по одному на каждый достигнутый лист

Примечания:
- Печатаемый диапазон (32..126) влияет только на листинг кодов, но не на кодирование.
- Внутренние узлы дерева хранят PLACEHOLDER_SYMBOL, а не реальный символ алфавита.
"""
# =================================================================================================================

from __future__ import annotations

# =================================================================================================================

# alphabet
ASCII_SIZE              = 128   # размер алфавита по умолчанию
MAX_ALPHABET_SIZE       = 256   # весь диапазон байта
PLACEHOLDER_SYMBOL      = -1    # символ внутреннего узла

# listing
PRINTABLE_FIRST         = 32
PRINTABLE_LAST          = 126
NO_CODE                 = "No code"
CODES_FILE              = "codes.txt"

# probability file
PROB_PRECISION          = 8

# encoded stream
BIT_ZERO                = ord("0")
BIT_ONE                 = ord("1")

# io
CHUNK_SIZE              = 2 << 15

# =================================================================================================================

class HuffmanError(Exception):
    """Базовая ошибка кодека. Перехватывается только в main()."""

class ResourceError(HuffmanError):
    """Файл не удалось открыть на чтение/запись."""

class FormatError(HuffmanError):
    """Файл вероятностей содержит меньше alphabet_size чисел."""

class EmptyInputError(HuffmanError):
    """Файл-образец для подсчёта вероятностей пуст."""

class UsageError(HuffmanError):
    """Неверные аргументы командной строки."""

class AllocationError(HuffmanError):
    """Не удалось выделить место в куче."""

class EmptyHeapError(HuffmanError):
    """Извлечение из пустой кучи."""

# =================================================================================================================

def is_printable(symbol: int) -> bool:
    return PRINTABLE_FIRST <= symbol <= PRINTABLE_LAST

def validate_alphabet_size(size: int) -> int:
    """Проверяет размер алфавита, переданный через конфигурацию.

    Raises:
        UsageError: Если size вне диапазона 1..MAX_ALPHABET_SIZE.
    """
    if not 1 <= size <= MAX_ALPHABET_SIZE:
        raise UsageError(f"alphabet size must be in 1..{MAX_ALPHABET_SIZE}, got {size}")
    return size
