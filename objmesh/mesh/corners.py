# objmesh/mesh/corners.py
"""
Диагностика: поиск «угловых» вершин по текстурным координатам.

Четыре независимых однопроходных поиска (min/max u × min/max v).
Кандидат принимается, только если он строго лучше текущего значения
сразу по u и по v. Это не bounding box и не выпуклая оболочка: для
непрямоугольной развёртки результат приблизительный, так и задумано –
вывод чисто информационный.
"""

import math
import operator
from typing import Dict, Iterable, List, Optional

from objmesh.mesh.vertex import Vertex
from objmesh.utils.logger import logger

# имя → (сравнение по u, сравнение по v, стартовые u/v «не найдено»)
CORNER_SEARCHES = {
    "min_u_min_v": (operator.lt, operator.lt, math.inf, math.inf),
    "min_u_max_v": (operator.lt, operator.gt, math.inf, -math.inf),
    "max_u_min_v": (operator.gt, operator.lt, -math.inf, math.inf),
    "max_u_max_v": (operator.gt, operator.gt, -math.inf, -math.inf),
}


class CornerReport:
    """Результат четырёх поисков; None – поиск не нашёл кандидата."""

    def __init__(self, corners: Dict[str, Optional[Vertex]]):
        self.corners = dict(corners)

    def __getitem__(self, name: str) -> Optional[Vertex]:
        return self.corners[name]

    def found(self, name: str) -> bool:
        return self.corners[name] is not None

    @property
    def all_found(self) -> bool:
        return all(v is not None for v in self.corners.values())

    @property
    def missing(self) -> List[str]:
        return [name for name, v in self.corners.items() if v is None]

    def items(self):
        return self.corners.items()

    def __repr__(self) -> str:
        return f"CornerReport({self.corners!r})"


def _search(vertices: Iterable[Vertex], better_u, better_v,
            best_u: float, best_v: float) -> Optional[Vertex]:
    candidate = None
    for vertex in vertices:
        u, v = vertex.texcoord
        if better_u(u, best_u) and better_v(v, best_v):
            best_u, best_v = u, v
            candidate = vertex
    return candidate


def find_corner_vertices(vertices: Iterable[Vertex]) -> CornerReport:
    """Прогнать все четыре поиска по уже собранным вершинам (буфер не меняется)."""
    vertices = list(vertices)
    return CornerReport({
        name: _search(vertices, *params)
        for name, params in CORNER_SEARCHES.items()
    })


def log_corner_report(report: CornerReport, name: str = "") -> None:
    """Вывести найденные углы в лог, промахи – как ошибки."""
    prefix = f"[Corners] {name}: " if name else "[Corners] "
    for corner, vertex in report.items():
        if vertex is None:
            logger.error(f"{prefix}could not find {corner} vertex")
            continue
        x, y, z = vertex.position
        u, v = vertex.texcoord
        logger.info(f"{prefix}{corner}: position=({x}, {y}, {z}) uv=({u}, {v})")
