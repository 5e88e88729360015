"""
objmesh – загрузчик Wavefront OBJ в плоский буфер вершин для рендера.

Разбирает v / vn / vt / f, режет четырёхугольники веером и отдаёт
MeshBuffer (x y z nx ny nz u v на вершину) плюс число вершин.
"""

from objmesh.utils import logger
from objmesh.errors import (
    MeshLoadError,
    StreamUnavailable,
    ParseError,
    IndexOutOfRange,
    UnknownToken,
)
from objmesh.model import Position, Normal, TexCoord, CornerIndex, Face, Model
from objmesh.format import parse, parse_file
from objmesh.mesh import Vertex, MeshBuffer, CornerReport, build
from objmesh.loader import load_obj, load_models, load_configured_models

__version__ = "1.0.0"

__all__ = [
    "MeshLoadError",
    "StreamUnavailable",
    "ParseError",
    "IndexOutOfRange",
    "UnknownToken",
    "Position",
    "Normal",
    "TexCoord",
    "CornerIndex",
    "Face",
    "Model",
    "parse",
    "parse_file",
    "Vertex",
    "MeshBuffer",
    "CornerReport",
    "build",
    "load_obj",
    "load_models",
    "load_configured_models",
]
