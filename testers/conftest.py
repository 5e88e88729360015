# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.

* write_obj   – пишет .obj во временную папку и возвращает путь
* parse_text  – разбирает строку OBJ без файла
* mock_backend – мок рендера, записывающий create_buffer/draw
"""

import io
import textwrap
from typing import Any, Tuple

import pytest

from objmesh.format.parser import parse
from objmesh.utils.config import Config


def dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


# ----------------------------------------------------------------------
# MockBackend – минимальный «рендер», принимающий MeshBuffer
# ----------------------------------------------------------------------
class MockBackend:
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        self._record("create_buffer", data, usage)
        return len(self.calls)

    def set_vertex_buffers(self, vertex_buffer: Any, index_buffer: Any = None) -> None:
        self._record("set_vertex_buffers", vertex_buffer, index_buffer)

    def draw(self, vertex_count: int, start_vertex: int = 0, instance_count: int = 1) -> None:
        self._record("draw", vertex_count, start_vertex, instance_count)

    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def last(self, name: str):
        return [call for call in self.calls if call[0] == name][-1]


# ----------------------------------------------------------------------
@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def write_obj(tmp_path):
    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def parse_text():
    def _parse(text: str):
        return parse(io.StringIO(dedent(text)))
    return _parse


@pytest.fixture(autouse=True)
def fresh_config():
    """Config – синглтон, между тестами сбрасываем."""
    Config._instance = None
    yield
    Config._instance = None
