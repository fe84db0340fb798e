import argparse

from Huffman_Formats import ASCII_SIZE, CODES_FILE, UsageError, validate_alphabet_size

# =================================================================================================================

def init() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffman-codec",
        description="Huffman coder over a fixed ASCII probability table"
    )
    sub = parser.add_subparsers(dest="cmd")

    # общие параметры всех режимов
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--alphabet-size", type=int, default=ASCII_SIZE,
                        help=f"Размер алфавита (строк в файле вероятностей). Default {ASCII_SIZE}")
    common.add_argument("--verbose", action="store_true")

    # ------------------------------------------------------------
    # probability
    # ------------------------------------------------------------
    p = sub.add_parser("probability", parents=[common], help="Посчитать вероятности по образцу")
    p.add_argument("sample", help="Файл-образец")
    p.add_argument("probfile", help="Куда записать таблицу вероятностей")

    # ------------------------------------------------------------
    # codes
    # ------------------------------------------------------------
    s = sub.add_parser("codes", parents=[common], help="Сгенерировать листинг кодов")
    s.add_argument("probfile")
    s.add_argument("-o", "--output", default=CODES_FILE, help=f"Default {CODES_FILE}")

    # ------------------------------------------------------------
    # encode
    # ------------------------------------------------------------
    e = sub.add_parser("encode", parents=[common], help="Закодировать файл в строку битов")
    e.add_argument("probfile")
    e.add_argument("data")
    e.add_argument("encoded")

    # ------------------------------------------------------------
    # decode
    # ------------------------------------------------------------
    d = sub.add_parser("decode", parents=[common], help="Раскодировать строку битов")
    d.add_argument("probfile")
    d.add_argument("encoded")
    d.add_argument("decoded")

    return parser

# =================================================================================================================

def prepare_args(args):
    """Проверяет аргументы, которые argparse проверить не может.

    Raises:
        UsageError: Если не выбран режим или размер алфавита вне диапазона.
    """
    if not getattr(args, "cmd", None):
        raise UsageError("No command given!")

    validate_alphabet_size(args.alphabet_size)
    return args
