"""A mesh whose vertex positions and normals change from frame to frame."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

import numpy as np

from glistkit.mesh import Mesh, Vertex, VertexBuffer


def _vec3(value: Sequence[float]) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError("a 3-component vector is required")
    return arr


def _check(index: int, size: int, name: str) -> int:
    if not 0 <= index < size:
        raise IndexError(f"{name} {index} out of range 0..{size - 1}")
    return index


def _tuple(arr: np.ndarray) -> tuple[float, float, float]:
    return (float(arr[0]), float(arr[1]), float(arr[2]))


class SkinnedMesh(Mesh):
    """Mesh with per-vertex animation and per-frame vertex animation data.

    Frame data is either applied to the mesh's own vertices when the frame
    changes, or, when stored on the GPU, kept as one vertex buffer per frame.
    """

    def __init__(self) -> None:
        super().__init__()
        self.vertex_animated = False
        self.stored_on_vram = False
        self._frame = 0
        self._old_frame = 0
        self._pos = np.zeros((0, 3))
        self._norm = np.zeros((0, 3))
        self._pos_data = np.zeros((0, 0, 0, 3))
        self._norm_data = np.zeros((0, 0, 0, 3))
        self._frame_buffers: list[list[VertexBuffer]] = []

    # --- per-vertex animation -------------------------------------------

    def resize_animation(self, vertex_count: int) -> None:
        """Resize the animated vertex arrays, keeping values and zero-filling."""
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        kept = min(vertex_count, len(self._pos))
        pos = np.zeros((vertex_count, 3))
        norm = np.zeros((vertex_count, 3))
        pos[:kept] = self._pos[:kept]
        norm[:kept] = self._norm[:kept]
        self._pos, self._norm = pos, norm

    def reset_animation(self) -> None:
        self._pos[:] = 0.0
        self._norm[:] = 0.0

    def set_vertex_pos(self, vertex_no: int, value: Sequence[float]) -> None:
        self._pos[_check(vertex_no, len(self._pos), "vertex")] = _vec3(value)

    def set_vertex_norm(self, vertex_no: int, value: Sequence[float]) -> None:
        self._norm[_check(vertex_no, len(self._norm), "vertex")] = _vec3(value)

    def vertex_pos(self, vertex_no: int) -> tuple[float, float, float]:
        return _tuple(self._pos[_check(vertex_no, len(self._pos), "vertex")])

    def vertex_norm(self, vertex_no: int) -> tuple[float, float, float]:
        return _tuple(self._norm[_check(vertex_no, len(self._norm), "vertex")])

    def clear_animation(self) -> None:
        self._pos = np.zeros((0, 3))
        self._norm = np.zeros((0, 3))

    @property
    def animation_size(self) -> int:
        return len(self._pos)

    # --- per-frame vertex animation data --------------------------------

    def resize_vertex_animation_data(
        self, animation_count: int, frame_count: int, vertex_count: int, on_vram: bool
    ) -> None:
        """Allocate zeroed frame data; with ``on_vram`` also one buffer per frame."""
        if min(animation_count, frame_count, vertex_count) < 0:
            raise ValueError("sizes must not be negative")
        shape = (animation_count, frame_count, vertex_count, 3)
        self._pos_data = np.zeros(shape)
        self._norm_data = np.zeros(shape)
        if on_vram:
            self._frame_buffers = [
                [VertexBuffer() for _ in range(frame_count)] for _ in range(animation_count)
            ]

    def _data_index(self, animation_no: int, frame_no: int, vertex_no: int | None = None):
        a, f, v, _ = self._pos_data.shape
        key = (_check(animation_no, a, "animation"), _check(frame_no, f, "frame"))
        if vertex_no is not None:
            key += (_check(vertex_no, v, "vertex"),)
        return key

    def reset_vertex_animation_data(self, animation_no: int, frame_no: int) -> None:
        key = self._data_index(animation_no, frame_no)
        self._pos_data[key] = 0.0
        self._norm_data[key] = 0.0

    def set_vertex_pos_data(
        self, animation_no: int, frame_no: int, vertex_no: int, value: Sequence[float]
    ) -> None:
        self._pos_data[self._data_index(animation_no, frame_no, vertex_no)] = _vec3(value)

    def set_vertex_norm_data(
        self, animation_no: int, frame_no: int, vertex_no: int, value: Sequence[float]
    ) -> None:
        self._norm_data[self._data_index(animation_no, frame_no, vertex_no)] = _vec3(value)

    def vertex_pos_data(
        self, animation_no: int, frame_no: int, vertex_no: int
    ) -> tuple[float, float, float]:
        return _tuple(self._pos_data[self._data_index(animation_no, frame_no, vertex_no)])

    def vertex_norm_data(
        self, animation_no: int, frame_no: int, vertex_no: int
    ) -> tuple[float, float, float]:
        return _tuple(self._norm_data[self._data_index(animation_no, frame_no, vertex_no)])

    def set_vertices_data(
        self,
        animation_no: int,
        frame_no: int,
        vertices: Iterable[Vertex],
        indices: Iterable[int] = (),
    ) -> None:
        """Fill the per-frame buffer; needs data allocated with ``on_vram``."""
        animation = self._frame_buffers[_check(animation_no, len(self._frame_buffers), "animation")]
        buffer = animation[_check(frame_no, len(animation), "frame")]
        buffer.set_vertex_data(list(vertices))
        index_list = list(indices)
        if index_list:
            buffer.set_index_data(index_list)

    def frame_buffer(self, animation_no: int, frame_no: int) -> VertexBuffer:
        animation = self._frame_buffers[_check(animation_no, len(self._frame_buffers), "animation")]
        return animation[_check(frame_no, len(animation), "frame")]

    # --- frames ---------------------------------------------------------

    def set_frame(self, frame_no: int) -> None:
        self._old_frame = self._frame
        self._frame = int(frame_no)

    @property
    def frame_no(self) -> int:
        return self._frame

    def current_vertices(self) -> list[Vertex]:
        """The vertices a draw of the current frame submits, applying frame data first."""
        if self.stored_on_vram:
            if not self.enabled:
                return []
            buffer = self.frame_buffer(0, self._frame)
            self._old_frame = self._frame
            return buffer.vertices
        if self.vertex_animated and self._frame != self._old_frame:
            count = self.vbo.vertices_num
            positions = self._pos_data[self._data_index(0, self._frame)]
            normals = self._norm_data[self._data_index(0, self._frame)]
            if count > len(positions):
                raise IndexError("frame data holds fewer vertices than the mesh")
            self.vertices[:count] = [
                replace(vertex, position=_tuple(positions[i]), normal=_tuple(normals[i]))
                for i, vertex in enumerate(self.vertices[:count])
            ]
            self.vbo.set_vertex_data(self.vertices)
            self._old_frame = self._frame
        return list(self.vertices)