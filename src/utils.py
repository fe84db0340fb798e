from __future__ import annotations
from contextlib import contextmanager
from typing import BinaryIO, Iterator, List

from Huffman_Formats import CHUNK_SIZE, ResourceError

@contextmanager
def open_input(path: str) -> Iterator[BinaryIO]:
    """Открывает файл на чтение в бинарном режиме.

    Args:
        path (str): Путь к файлу.

    Raises:
        ResourceError: Если файл не удалось открыть.

    Пример:
        with open_input("probfile.txt") as f:
            raw = f.read()
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise ResourceError(f"Error opening input file {path}: {e.strerror or e}") from e
    with f:
        yield f

@contextmanager
def open_output(path: str) -> Iterator[BinaryIO]:
    """Открывает файл на запись в бинарном режиме. Аналог open_input.

    Raises:
        ResourceError: Если файл не удалось открыть.
    """
    try:
        f = open(path, "wb")
    except OSError as e:
        raise ResourceError(f"Error opening output file {path}: {e.strerror or e}") from e
    with f:
        yield f

def iter_file_bytes(f: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[int]:
    """Побайтовый итератор по файлу, читающий блоками по chunk_size.

    Args:
        f (BinaryIO): Открытый на чтение поток.
        chunk_size (int): Размер блока чтения.

    Yields:
        int: Очередной байт 0..255.
    """
    while True:
        try:
            chunk = f.read(chunk_size)
        except OSError as e:
            raise ResourceError(f"Error reading {getattr(f, 'name', 'stream')}: {e}") from e
        if not chunk:
            break
        yield from chunk

def write_lines(path: str, lines: List[str]) -> None:
    """Записывает строки через '\\n' (с завершающим переводом строки) в ASCII."""
    with open_output(path) as f:
        for line in lines:
            f.write(line.encode("ascii") + b"\n")
