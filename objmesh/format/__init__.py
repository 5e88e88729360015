"""
Format Parser: строки OBJ → Model.
"""

from objmesh.format.tokens import Token, IGNORED_TOKENS, tokenize
from objmesh.format.numbers import parse_float, parse_index
from objmesh.format.parser import parse, parse_file, read_corner, read_index

__all__ = [
    "Token",
    "IGNORED_TOKENS",
    "tokenize",
    "parse_float",
    "parse_index",
    "parse",
    "parse_file",
    "read_corner",
    "read_index",
]
