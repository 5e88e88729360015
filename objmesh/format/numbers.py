# objmesh/format/numbers.py
"""
Строгий разбор чисел.

Формат всегда использует '.', независимо от локали. float() в Python
локаль не учитывает, но принимает лишнее ('inf', 'nan', '1_0', пробелы,
не‑ASCII цифры), поэтому сначала сверяемся с регуляркой.
"""

import math
import re

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_float(text: str) -> float:
    """Десятичное число с необязательными знаком, дробной частью и экспонентой."""
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    value = float(text)
    # переполнение float даёт inf, а не ошибку
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_index(text: str) -> int:
    """
    Целый индекс из записи грани.

    Знак допускается: 0 и отрицательные значения доходят до сборщика
    и отклоняются там как IndexOutOfRange.
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an index: {text!r}")
    return int(text)
