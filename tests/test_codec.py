#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit-тесты потокового кодека Хаффмана.

Запуск:
    python -m unittest -v test_codec.py
или (если запускаешь директорию tests/):
    python -m unittest discover -v

Тесты:
- roundtrip: decode(encode(B, P), P) == B для разных B и P.
- формат: выход кодера состоит только из '0'/'1' без разделителей.
- терпимость декодера: посторонние символы и незавершённый хвост молча отбрасываются.
- вырожденный алфавит из одного символа.
"""

from __future__ import annotations

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import io
import random
import unittest

from Huffman import Huffman, build_huffman_tree, code_for, bits_to_str
from Huffman_Formats import ASCII_SIZE, FormatError, NO_CODE, UsageError
from Probability import count_frequencies, to_probabilities

def _sample_table(text: bytes):
    freqs, total = count_frequencies(text)
    return to_probabilities(freqs, total)

class TestStreamCodec(unittest.TestCase):
    """Набор тестов для проверки кодировщика/декодировщика."""

    def setUp(self):
        random.seed(12345)
        self.random_table = [random.random() for _ in range(ASCII_SIZE)]
        self.text_table = _sample_table(b"the quick brown fox jumps over the lazy dog " * 20)

    def _roundtrip(self, data: bytes, table):
        h = Huffman(table)
        encoded = h.pack(data)
        self.assertTrue(set(encoded) <= {"0", "1"})
        return Huffman(table).unpack(encoded)

    def test_roundtrip_random_ascii(self):
        data = bytes(random.randrange(ASCII_SIZE) for _ in range(2048))
        for table in (self.random_table, self.text_table, [0.0] * ASCII_SIZE):
            self.assertEqual(self._roundtrip(data, table), data)

    def test_roundtrip_empty(self):
        h = Huffman(self.random_table)
        self.assertEqual(h.pack(b""), "")
        self.assertEqual(h.unpack(""), b"")

    def test_roundtrip_repeated_byte(self):
        data = b"A" * 1000
        self.assertEqual(self._roundtrip(data, self.text_table), data)

    def test_roundtrip_full_range(self):
        data = bytes(range(ASCII_SIZE)) * 3
        self.assertEqual(self._roundtrip(data, self.text_table), data)

    def test_encoded_is_concatenation_of_codes(self):
        h = Huffman(self.random_table)
        root = build_huffman_tree(list(range(ASCII_SIZE)), self.random_table)
        data = b"Hello, World!"
        expected = "".join(bits_to_str(code_for(root, b)) for b in data)
        self.assertEqual(h.pack(data), expected)

    def test_aaab_example(self):
        table = _sample_table(b"aaab")
        self.assertEqual(table[ord("a")], 0.75)
        self.assertEqual(table[ord("b")], 0.25)

        h = Huffman(table)
        h.build_tree()
        self.assertEqual(code_for(h.root, ord("a")), [1])
        self.assertEqual(code_for(h.root, ord("b")), [0, 1])

        encoded = h.pack(b"aaab")
        self.assertEqual(encoded, "11101")
        self.assertEqual(h.unpack(encoded), b"aaab")

    def test_non_alphabet_bytes_dropped(self):
        h = Huffman(self.text_table)
        self.assertEqual(h.pack(b"\x80\xff"), "")
        self.assertEqual(h.unpack(h.pack(b"a\x80b\xffc")), b"abc")

    def test_decode_skips_unknown_characters(self):
        h = Huffman(self.text_table)
        data = b"lazy dog"
        encoded = h.pack(data)
        noisy = "\n".join(encoded[i:i + 3] for i in range(0, len(encoded), 3)) + "x 2\r\n"
        self.assertEqual(h.unpack(noisy), data)

    def test_decode_drops_partial_tail(self):
        h = Huffman(self.text_table)
        encoded = h.pack(b"ab")
        # последний код без последнего бита не доходит до листа
        self.assertEqual(h.unpack(encoded[:-1]), b"a")

    def test_decode_accepts_bytes(self):
        h = Huffman(self.random_table)
        data = b"bytes in, bytes out"
        self.assertEqual(h.unpack(h.pack(data).encode("ascii")), data)

    def test_tree_rebuilt_each_call(self):
        h = Huffman(self.random_table)
        h.pack(b"a")
        first = h.root
        h.unpack("0")
        self.assertIsNot(h.root, first)

    def test_streaming_files_match_pack(self):
        data = bytes(random.randrange(ASCII_SIZE) for _ in range(5000))
        h = Huffman(self.text_table)

        dst = io.BytesIO()
        consumed, written = h.encode_file(io.BytesIO(data), dst)
        encoded = dst.getvalue()
        self.assertEqual(consumed, len(data))
        self.assertEqual(written, len(encoded))
        self.assertEqual(encoded.decode("ascii"), h.pack(data))

        out = io.BytesIO()
        consumed, written = h.decode_file(io.BytesIO(encoded), out)
        self.assertEqual(consumed, len(encoded))
        self.assertEqual(written, len(data))
        self.assertEqual(out.getvalue(), data)

    def test_code_listing(self):
        lines = Huffman(self.random_table).code_listing()
        self.assertEqual(len(lines), ASCII_SIZE)

        for sym, line in enumerate(lines):
            if 32 <= sym <= 126:
                self.assertNotEqual(line, NO_CODE)
                self.assertTrue(line and set(line) <= {"0", "1"})
            else:
                self.assertEqual(line, NO_CODE)

        self.assertEqual(lines.count(NO_CODE), 33)

    def test_short_table_rejected(self):
        with self.assertRaises(FormatError):
            Huffman([0.5] * (ASCII_SIZE - 1))

    def test_bad_alphabet_size(self):
        with self.assertRaises(UsageError):
            Huffman([1.0], alphabet_size=0)
        with self.assertRaises(UsageError):
            Huffman([1.0] * 300, alphabet_size=257)


class TestDegenerateAlphabet(unittest.TestCase):

    def test_single_symbol_roundtrip(self):
        h = Huffman([1.0], alphabet_size=1)
        data = b"\x00" * 5

        encoded = h.pack(data)
        self.assertEqual(encoded, "00000")
        self.assertEqual(h.unpack(encoded), data)

    def test_single_symbol_zero_length_code(self):
        h = Huffman([1.0], alphabet_size=1)
        h.build_tree()
        self.assertTrue(h.root.is_leaf())
        self.assertEqual(code_for(h.root, 0), [])

    def test_single_symbol_ignores_other_input(self):
        h = Huffman([1.0], alphabet_size=1)
        self.assertEqual(h.pack(b"\x00A\x00"), "00")
        self.assertEqual(h.unpack("0 1x0"), b"\x00\x00")


class TestFullByteAlphabet(unittest.TestCase):

    def test_roundtrip_256(self):
        random.seed(99)
        table = [random.random() for _ in range(256)]
        data = bytes(random.getrandbits(8) for _ in range(1024))

        h = Huffman(table, alphabet_size=256)
        self.assertEqual(h.unpack(h.pack(data)), data)


if __name__ == "__main__":
    # Запуск тестов командой: python -m unittest -v test_codec.py
    unittest.main(verbosity=2)
