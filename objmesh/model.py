# objmesh/model.py
"""
Сырые таблицы Wavefront OBJ в порядке файла.

Model строится один раз на вызов загрузки и выбрасывается после того,
как MeshBuilder превратил его в MeshBuffer.
"""

from typing import Iterator, List, Optional, Tuple


class _Record:
    """Неизменяемая запись из нескольких float (позиция, нормаль, uv)."""

    __slots__ = ("_v",)
    _fields: Tuple[str, ...] = ()

    def __init__(self, *values: float):
        if len(values) != len(self._fields):
            raise TypeError(
                f"{type(self).__name__} expects {len(self._fields)} components, "
                f"got {len(values)}"
            )
        self._v = tuple(float(x) for x in values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._v)

    def __len__(self) -> int:
        return len(self._v)

    def __getitem__(self, i):
        return self._v[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, _Record):
            return type(self) is type(other) and self._v == other._v
        if isinstance(other, tuple):
            return self._v == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._v))

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={v}" for n, v in zip(self._fields, self._v))
        return f"{type(self).__name__}({body})"

    def as_tuple(self) -> tuple:
        return self._v


class Position(_Record):
    __slots__ = ()
    _fields = ("x", "y", "z")

    @property
    def x(self) -> float:
        return self._v[0]

    @property
    def y(self) -> float:
        return self._v[1]

    @property
    def z(self) -> float:
        return self._v[2]


class Normal(_Record):
    """Нормаль как есть в файле – без нормализации."""
    __slots__ = ()
    _fields = ("nx", "ny", "nz")

    @property
    def nx(self) -> float:
        return self._v[0]

    @property
    def ny(self) -> float:
        return self._v[1]

    @property
    def nz(self) -> float:
        return self._v[2]


class TexCoord(_Record):
    __slots__ = ()
    _fields = ("u", "v")

    @property
    def u(self) -> float:
        return self._v[0]

    @property
    def v(self) -> float:
        return self._v[1]


# ----------------------------------------------------------------------
class CornerIndex:
    """
    Ссылка угла грани на таблицы (уже 0‑based).

    `texcoord` и `normal` – None, если поле отсутствует; это НЕ то же
    самое, что индекс 0.
    """

    __slots__ = ("vertex", "texcoord", "normal")

    def __init__(self, vertex: int,
                 texcoord: Optional[int] = None,
                 normal: Optional[int] = None):
        self.vertex = vertex
        self.texcoord = texcoord
        self.normal = normal

    def __eq__(self, other) -> bool:
        if not isinstance(other, CornerIndex):
            return NotImplemented
        return (self.vertex, self.texcoord, self.normal) == \
               (other.vertex, other.texcoord, other.normal)

    def __hash__(self) -> int:
        return hash((self.vertex, self.texcoord, self.normal))

    def __repr__(self) -> str:
        return (f"CornerIndex(vertex={self.vertex}, "
                f"texcoord={self.texcoord}, normal={self.normal})")


class Face:
    """Треугольник (3 угла) или четырёхугольник (4 угла)."""

    __slots__ = ("corners",)

    def __init__(self, corners):
        corners = tuple(corners)
        if len(corners) not in (3, 4):
            raise ValueError(f"Face must have 3 or 4 corners, got {len(corners)}")
        self.corners: Tuple[CornerIndex, ...] = corners

    @property
    def is_quad(self) -> bool:
        return len(self.corners) == 4

    def fan(self) -> Tuple[Tuple[int, int, int], ...]:
        """Веер от первого угла: (0,1,2) и, для quad, (0,2,3). Порядок обхода сохраняется."""
        if self.is_quad:
            return (0, 1, 2), (0, 2, 3)
        return ((0, 1, 2),)

    def triangles(self) -> Iterator[Tuple[CornerIndex, CornerIndex, CornerIndex]]:
        c = self.corners
        for i, j, k in self.fan():
            yield c[i], c[j], c[k]

    def __len__(self) -> int:
        return len(self.corners)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self.corners == other.corners

    def __repr__(self) -> str:
        return f"Face({list(self.corners)!r})"


class Model:
    """Четыре растущие таблицы, заполняемые строго в порядке файла."""

    def __init__(self):
        self.positions: List[Position] = []
        self.normals: List[Normal] = []
        self.texcoords: List[TexCoord] = []
        self.faces: List[Face] = []
        # нефатальная диагностика парсера
        self.unknown_tokens: list = []

    def __repr__(self) -> str:
        return (f"Model(positions={len(self.positions)}, normals={len(self.normals)}, "
                f"texcoords={len(self.texcoords)}, faces={len(self.faces)})")
