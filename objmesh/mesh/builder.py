# objmesh/mesh/builder.py
# ---------------------------------------------------------------
# Model → MeshBuffer.
# Каждый угол каждой грани разворачивается в отдельную вершину
# (без дедупликации и index‑buffer), quad режется веером.
# ---------------------------------------------------------------

from typing import Optional, Sequence, Tuple

from objmesh.errors import IndexOutOfRange
from objmesh.mesh.buffer import MeshBuffer
from objmesh.mesh.corners import CornerReport, find_corner_vertices
from objmesh.mesh.vertex import DEFAULT_NORMAL, DEFAULT_TEXCOORD, Vertex
from objmesh.model import CornerIndex, Model
from objmesh.utils.logger import logger


def _lookup(table: Sequence, index: int, name: str, face_number: int):
    # отрицательный индекс в Python – это обход с конца, нам он не нужен
    if index < 0 or index >= len(table):
        raise IndexOutOfRange(name, index + 1, len(table), face_number)
    return table[index]


def make_vertex(model: Model, corner: CornerIndex, face_number: int = None) -> Vertex:
    """Собрать вершину по угловым индексам; отсутствующие поля → значения по умолчанию."""
    position = _lookup(model.positions, corner.vertex, "position", face_number)

    normal = DEFAULT_NORMAL
    if corner.normal is not None:
        normal = _lookup(model.normals, corner.normal, "normal", face_number).as_tuple()

    texcoord = DEFAULT_TEXCOORD
    if corner.texcoord is not None:
        texcoord = _lookup(model.texcoords, corner.texcoord, "texcoord", face_number).as_tuple()

    return Vertex(position.as_tuple(), normal, texcoord)


def build(model: Model, diagnostics: bool = False) -> Tuple[MeshBuffer, Optional[CornerReport]]:
    """
    Развернуть грани модели в плоский буфер вершин.

    Порядок: грань → треугольник → угол. Треугольник даёт (0,1,2),
    quad – (0,1,2) и (0,2,3); обход вершин никогда не переворачивается.
    При `diagnostics=True` дополнительно ищутся угловые по uv вершины.
    """
    buffer = MeshBuffer()

    for face_number, face in enumerate(model.faces, start=1):
        resolved = [make_vertex(model, c, face_number) for c in face.corners]
        for tri in face.fan():
            buffer.extend(resolved[i] for i in tri)

    logger.debug(f"[Builder] {len(model.faces)} faces → {buffer.count} vertices")

    report = find_corner_vertices(buffer) if diagnostics else None
    return buffer, report
