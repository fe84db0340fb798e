"""
CLI Huffman coder:
Usage example:
  py src/main.py probability sample.txt probfile.txt
  py src/main.py codes probfile.txt
  py src/main.py encode probfile.txt data.txt data.txt.enc --verbose
  py src/main.py decode probfile.txt data.txt.enc data.txt.new

alphabet-size: строк в probfile и размер алфавита дерева (default 128)
"""

# =================================================================================================================

import sys

import cli

from Huffman import Huffman
from Huffman_Formats import HuffmanError, UsageError
from Probability import compute_probabilities, read_probabilities
from utils import open_input, open_output, write_lines

# =================================================================================================================

def probability_mode(args):
    """Считает вероятности символов по образцу."""
    if args.verbose:
        print("[probability] sample:", args.sample)

    total = compute_probabilities(args.sample, args.probfile, args.alphabet_size)

    if args.verbose:
        print(f"[probability] {total} bytes counted → {args.probfile}")

def codes_mode(args):
    """Строит дерево и печатает листинг кодов."""
    huffman = load_codec(args)
    lines = huffman.code_listing()
    write_lines(args.output, lines)

    print("Huffman codes [32 to 126]:")
    for line in lines:
        print(line)

    if args.verbose:
        print("[codes] listing saved to:", args.output)

def encode_mode(args):
    """Кодирует файл данных в строку из '0'/'1'."""
    huffman = load_codec(args)
    if args.verbose:
        print(f"[encode] {args.data} → {args.encoded}")

    with open_input(args.data) as src, open_output(args.encoded) as dst:
        consumed, written = huffman.encode_file(src, dst)

    if args.verbose:
        print(f"[encode] {consumed} bytes → {written} bits")

def decode_mode(args):
    """Декодирует строку из '0'/'1' обратно в байты."""
    huffman = load_codec(args)
    if args.verbose:
        print(f"[decode] {args.encoded} → {args.decoded}")

    with open_input(args.encoded) as src, open_output(args.decoded) as dst:
        consumed, written = huffman.decode_file(src, dst)

    if args.verbose:
        print(f"[decode] {consumed} bits → {written} bytes")

# =================================================================================================================

def load_codec(args) -> Huffman:
    """Читает таблицу вероятностей и создаёт кодек с тем же алфавитом."""
    probabilities = read_probabilities(args.probfile, args.alphabet_size)
    if args.verbose:
        print(f"[{args.cmd}] probabilities loaded:", args.probfile)
    return Huffman(probabilities, args.alphabet_size)

MODES = {
    "probability":  probability_mode,
    "codes":        codes_mode,
    "encode":       encode_mode,
    "decode":       decode_mode,
}

# =================================================================================================================

def main(argv=None) -> int:

    parser = cli.init()
    args = parser.parse_args(argv)

    try:
        MODES[cli.prepare_args(args).cmd](args)
    except UsageError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    except HuffmanError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0

# =================================================================================================================

if __name__ == "__main__":
    sys.exit(main())
