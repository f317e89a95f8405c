"""Ready-made meshes: box, plane, sphere and line."""

from __future__ import annotations

import math

from glistkit.mesh import DrawMode, Mesh, Vertex
from glistkit.skyboxgeometry import skybox_indices, skybox_vertices
from glistkit.utils import PI


class Box(Mesh):
    """A cube spanning -1..1 on every axis, four vertices per face."""

    def __init__(self) -> None:
        super().__init__()
        self.set_vertices(skybox_vertices(), skybox_indices())


_PLANE_POSITIONS = (
    (1.0, 1.0, 0.0),
    (1.0, -1.0, 0.0),
    (-1.0, -1.0, 0.0),
    (-1.0, 1.0, 0.0),
)
_PLANE_TEXCOORDS = (
    (1.0, 0.0),  # top right
    (1.0, 1.0),  # bottom right
    (0.0, 1.0),  # bottom left
    (0.0, 0.0),  # top left
)
_PLANE_NORMALS = (
    (-1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
)
_PLANE_INDICES = (0, 1, 3, 1, 2, 3)


class Plane(Mesh):
    """A square in the z = 0 plane spanning -1..1, made of two triangles."""

    def __init__(self) -> None:
        super().__init__()
        vertices = [
            Vertex(position=p, normal=n, texcoords=t)
            for p, t, n in zip(_PLANE_POSITIONS, _PLANE_TEXCOORDS, _PLANE_NORMALS)
        ]
        self.set_vertices(vertices, _PLANE_INDICES)


class Sphere(Mesh):
    """A unit sphere drawn as one triangle strip.

    Fewer than 3 horizontal segments become 3; fewer than 3 vertical
    segments become 2.
    """

    def __init__(self, x_segments: int = 64, y_segments: int = 64) -> None:
        super().__init__()
        if x_segments < 3:
            x_segments = 3
        if y_segments < 3:
            y_segments = 2
        self.x_segments = x_segments
        self.y_segments = y_segments

        vertices = []
        for y in range(y_segments + 1):
            v = y / y_segments
            for x in range(x_segments + 1):
                u = x / x_segments
                px = math.cos(u * 2.0 * PI) * math.sin(v * PI)
                py = math.cos(v * PI)
                pz = math.sin(u * 2.0 * PI) * math.sin(v * PI)
                vertices.append(Vertex(position=(px, py, pz), normal=(px, py, pz), texcoords=(u, v)))

        row = x_segments + 1
        indices: list[int] = []
        for y in range(y_segments):
            if y % 2 == 0:
                for x in range(row):
                    indices.extend((y * row + x, (y + 1) * row + x))
            else:
                for x in reversed(range(row)):
                    indices.extend(((y + 1) * row + x, y * row + x))

        self.set_vertices(vertices, indices)
        self.draw_mode = DrawMode.TRIANGLE_STRIP


class Line(Mesh):
    """A line segment between two points, in 2D or 3D."""

    def __init__(self, *points: float) -> None:
        super().__init__()
        self.projection_2d = False
        if points:
            self.set_points(*points)

    def set_points(self, *args: float) -> None:
        """Set the end points from ``x1, y1, x2, y2`` or ``x1, y1, z1, x2, y2, z2``."""
        if len(args) == 4:
            x1, y1, x2, y2 = args
            z1 = z2 = 0.0
            self.projection_2d = True
        elif len(args) == 6:
            x1, y1, z1, x2, y2, z2 = args
            self.projection_2d = False
        else:
            raise TypeError(f"set_points takes 4 or 6 coordinates, got {len(args)}")
        self.set_vertices([Vertex(position=(x1, y1, z1)), Vertex(position=(x2, y2, z2))])
        self.draw_mode = DrawMode.LINES