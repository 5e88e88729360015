"""
Mesh Builder: Model → MeshBuffer (+ необязательная диагностика углов).
"""

from objmesh.mesh.vertex import Vertex, DEFAULT_NORMAL, DEFAULT_TEXCOORD
from objmesh.mesh.buffer import MeshBuffer
from objmesh.mesh.corners import CornerReport, find_corner_vertices, log_corner_report
from objmesh.mesh.builder import build, make_vertex

__all__ = [
    "Vertex",
    "DEFAULT_NORMAL",
    "DEFAULT_TEXCOORD",
    "MeshBuffer",
    "CornerReport",
    "find_corner_vertices",
    "log_corner_report",
    "build",
    "make_vertex",
]
