"""Vertex data and vertex buffers kept on the CPU side, and the mesh built on them."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import Iterable, Sequence, Union

import numpy as np

VERTEX_FLOATS = 14


def _floats(values: Iterable[float], length: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != length:
        raise ValueError(f"{name} needs {length} components, got {len(result)}")
    return result


@dataclass
class Vertex:
    """One vertex: position, normal, texture coordinates, tangent and bitangent."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texcoords: tuple[float, float] = (0.0, 0.0)
    tangent: tuple[float, float, float] = (0.0, 0.0, 0.0)
    bitangent: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = _floats(self.position, 3, "position")
        self.normal = _floats(self.normal, 3, "normal")
        self.texcoords = _floats(self.texcoords, 2, "texcoords")
        self.tangent = _floats(self.tangent, 3, "tangent")
        self.bitangent = _floats(self.bitangent, 3, "bitangent")

    def as_floats(self) -> list[float]:
        """The vertex as a flat list of 14 floats in buffer order."""
        return [value for part in astuple(self) for value in part]


class DrawMode(IntEnum):
    """Primitive types a buffer can be drawn with."""

    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


VertexInput = Union[Vertex, Sequence[float]]


class VertexBuffer:
    """Vertex and index data ready to be handed to a renderer."""

    def __init__(self) -> None:
        self.enabled = True
        self._vertices: list[Vertex] = []
        self._indices: list[int] = []
        self._coord_num = 0
        self._vertex_allocated = False
        self._index_allocated = False

    def set_vertex_data(self, vertices: Iterable[VertexInput]) -> None:
        """Store vertices, given as Vertex objects or as 2D or 3D coordinates."""
        items = list(vertices)
        if all(isinstance(v, Vertex) for v in items):
            self._vertices = list(items)
            self._coord_num = 3
        else:
            coords = np.asarray(items, dtype=float)
            if coords.ndim != 2 or coords.shape[1] not in (2, 3):
                raise ValueError("coordinates must be a sequence of 2D or 3D points")
            self._coord_num = coords.shape[1]
            padded = np.zeros((coords.shape[0], 3))
            padded[:, : self._coord_num] = coords
            self._vertices = [Vertex(position=tuple(row)) for row in padded]
        self._vertex_allocated = True

    def set_index_data(self, indices: Iterable[int]) -> None:
        """Store triangle or line indices; they must not be negative."""
        values = [int(i) for i in indices]
        if any(i < 0 for i in values):
            raise ValueError("indices must not be negative")
        self._indices = values
        self._index_allocated = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    @property
    def coord_num(self) -> int:
        return self._coord_num

    @property
    def vertices_num(self) -> int:
        return len(self._vertices)

    @property
    def indices_num(self) -> int:
        return len(self._indices)

    @property
    def is_vertex_data_allocated(self) -> bool:
        return self._vertex_allocated

    @property
    def is_index_data_allocated(self) -> bool:
        return self._index_allocated

    def element_count(self) -> int:
        """How many elements a draw issues: indices if present, otherwise vertices."""
        if self._index_allocated:
            return len(self._indices)
        return len(self._vertices)

    def as_array(self) -> np.ndarray:
        """Interleaved float32 data, one row of 14 floats per vertex."""
        if not self._vertices:
            return np.zeros((0, VERTEX_FLOATS), dtype=np.float32)
        return np.array([v.as_floats() for v in self._vertices], dtype=np.float32)


class Mesh:
    """A set of vertices and optional indices drawn with one draw mode."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self.vbo = VertexBuffer()
        self.draw_mode = DrawMode.TRIANGLES
        self.enabled = True

    def set_vertices(self, vertices: Iterable[Vertex], indices: Iterable[int] = ()) -> None:
        """Replace the mesh data; indices are uploaded only when there are some."""
        self.vertices = list(vertices)
        self.indices = [int(i) for i in indices]
        self.vbo.set_vertex_data(self.vertices)
        if self.indices:
            self.vbo.set_index_data(self.indices)