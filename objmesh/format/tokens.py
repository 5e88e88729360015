# objmesh/format/tokens.py
"""
Классификация строки OBJ по ведущему токену.
"""

from enum import Enum


class Token(Enum):
    VERTEX = "v"
    NORMAL = "vn"
    TEXCOORD = "vt"
    FACE = "f"
    IGNORED = "ignored"
    UNKNOWN = "unknown"


# Структурные токены без геометрии – молча пропускаются
IGNORED_TOKENS = frozenset({"mtllib", "o", "usemtl", "s"})

_GEOMETRY = {
    "v": Token.VERTEX,
    "vn": Token.NORMAL,
    "vt": Token.TEXCOORD,
    "f": Token.FACE,
}


def tokenize(token: str) -> Token:
    """Вернуть тип записи для ведущего токена строки."""
    kind = _GEOMETRY.get(token)
    if kind is not None:
        return kind
    if token in IGNORED_TOKENS:
        return Token.IGNORED
    return Token.UNKNOWN
