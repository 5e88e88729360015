# objmesh/mesh/vertex.py
"""
Вершина итогового буфера: позиция, нормаль, uv (8 float).
"""

from typing import Tuple

DEFAULT_NORMAL: Tuple[float, float, float] = (0.0, 0.0, 1.0)
DEFAULT_TEXCOORD: Tuple[float, float] = (0.0, 0.0)


class Vertex:
    """Простое значение без идентичности – сравнивается по полям."""

    __slots__ = ("position", "normal", "texcoord")

    def __init__(self,
                 position: Tuple[float, float, float],
                 normal: Tuple[float, float, float] = DEFAULT_NORMAL,
                 texcoord: Tuple[float, float] = DEFAULT_TEXCOORD):
        self.position = tuple(float(x) for x in position)
        self.normal = tuple(float(x) for x in normal)
        self.texcoord = tuple(float(x) for x in texcoord)

    @property
    def u(self) -> float:
        return self.texcoord[0]

    @property
    def v(self) -> float:
        return self.texcoord[1]

    def as_tuple(self) -> Tuple[float, ...]:
        """x, y, z, nx, ny, nz, u, v – в порядке GPU‑раскладки."""
        return self.position + self.normal + self.texcoord

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return (f"Vertex(position={self.position}, normal={self.normal}, "
                f"texcoord={self.texcoord})")
