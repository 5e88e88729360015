# objmesh/mesh/buffer.py
"""
MeshBuffer – плоский список вершин, который отдаётся рендеру.

Раскладка в памяти: x y z | nx ny nz | u v, float32, шаг 32 байта.
Атрибуты 0/1/2 рендера читают смещения 0, 12 и 24.
"""

from typing import Iterator, List

import numpy as np

from objmesh.mesh.vertex import Vertex

FLOATS_PER_VERTEX = 8


class MeshBuffer:
    """Упорядоченный, только дописываемый набор вершин + счётчик."""

    stride = FLOATS_PER_VERTEX * np.dtype(np.float32).itemsize

    def __init__(self, vertices=None):
        self._vertices: List[Vertex] = list(vertices) if vertices is not None else []
        # собранный массив; сбрасывается при дописывании
        self._array = None

    # -----------------------------------------------------------------
    def append(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)
        self._array = None

    def extend(self, vertices) -> None:
        self._vertices.extend(vertices)
        self._array = None

    @property
    def count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> tuple:
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __getitem__(self, i) -> Vertex:
        return self._vertices[i]

    # -----------------------------------------------------------------
    # Выдача для GPU
    # -----------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """(count, 8) float32, чередующиеся атрибуты. Только для чтения, собирается один раз."""
        if self._array is None:
            if self._vertices:
                arr = np.array([v.as_tuple() for v in self._vertices],
                               dtype=np.float32).reshape(-1, FLOATS_PER_VERTEX)
            else:
                arr = np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
            arr.setflags(write=False)
            self._array = arr
        return self._array

    @property
    def positions(self) -> np.ndarray:
        return self.to_numpy()[:, 0:3]

    @property
    def normals(self) -> np.ndarray:
        return self.to_numpy()[:, 3:6]

    @property
    def texcoords(self) -> np.ndarray:
        return self.to_numpy()[:, 6:8]

    def tobytes(self) -> bytes:
        """Сырые байты для backend.create_buffer(..., usage="vertex")."""
        return self.to_numpy().tobytes()

    def __repr__(self) -> str:
        return f"MeshBuffer(count={self.count})"
