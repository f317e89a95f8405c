"""Fixed geometry used when rendering and capturing sky boxes."""

from __future__ import annotations

import numpy as np

from glistkit.mesh import Vertex

# x, y, z, nx, ny, nz, s, t for the 36 vertices of the capture cube.
_CUBE = (
    # back face
    (-1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0),
    (1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0),
    (-1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0),
    (-1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 1.0),
    # front face
    (-1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    (1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0),
    (1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    (-1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    # left face
    (-1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0),
    (-1.0, 1.0, -1.0, -1.0, 0.0, 0.0, 1.0, 1.0),
    (-1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, 1.0, -1.0, 0.0, 0.0, 0.0, 0.0),
    (-1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0),
    # right face
    (1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0),
    # bottom face
    (-1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0),
    (1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0),
    (1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0),
    (-1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 0.0, 0.0),
    (-1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0),
    # top face
    (-1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
    (1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
    (-1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0),
    (-1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0),
)

# x, y, z, s, t of the screen-space quad, drawn as a triangle strip.
_QUAD = (
    (-1.0, 1.0, 0.0, 0.0, 1.0),
    (-1.0, -1.0, 0.0, 0.0, 0.0),
    (1.0, 1.0, 0.0, 1.0, 1.0),
    (1.0, -1.0, 0.0, 1.0, 0.0),
)

# x, y, z, s, t of the 24 sky box vertices, four per face.
_SKYBOX = (
    (-1.0, 1.0, -1.0, 1.0, 1.0),  # back
    (1.0, 1.0, -1.0, 0.0, 1.0),
    (-1.0, -1.0, -1.0, 1.0, 0.0),
    (1.0, -1.0, -1.0, 0.0, 0.0),
    (-1.0, 1.0, 1.0, 0.0, 1.0),  # front
    (1.0, 1.0, 1.0, 1.0, 1.0),
    (-1.0, -1.0, 1.0, 0.0, 0.0),
    (1.0, -1.0, 1.0, 1.0, 0.0),
    (-1.0, 1.0, -1.0, 0.0, 1.0),  # left
    (-1.0, -1.0, -1.0, 0.0, 0.0),
    (-1.0, -1.0, 1.0, 1.0, 0.0),
    (-1.0, 1.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, -1.0, 1.0, 1.0),  # right
    (1.0, -1.0, -1.0, 1.0, 0.0),
    (1.0, -1.0, 1.0, 0.0, 0.0),
    (1.0, 1.0, 1.0, 0.0, 1.0),
    (-1.0, -1.0, -1.0, 0.0, 1.0),  # top
    (-1.0, -1.0, 1.0, 0.0, 0.0),
    (1.0, -1.0, 1.0, 1.0, 0.0),
    (1.0, -1.0, -1.0, 1.0, 1.0),
    (-1.0, 1.0, -1.0, 0.0, 0.0),  # bottom
    (-1.0, 1.0, 1.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, -1.0, 1.0, 0.0),
)

_SKYBOX_INDICES = (
    0, 2, 3, 0, 1, 3,  # back
    4, 6, 7, 4, 5, 7,  # front
    8, 9, 10, 11, 8, 10,  # left
    12, 13, 14, 15, 12, 14,  # right
    16, 17, 18, 16, 19, 18,  # top
    20, 21, 22, 20, 23, 22,  # bottom
)


def cube_vertices() -> np.ndarray:
    """The capture cube: 36 rows of position, normal and texture coordinates."""
    return np.array(_CUBE, dtype=np.float32)


def quad_vertices() -> np.ndarray:
    """The screen quad: 4 rows of position and texture coordinates."""
    return np.array(_QUAD, dtype=np.float32)


def skybox_vertices() -> list[Vertex]:
    """The 24 sky box vertices; each normal points along its corner's position."""
    return [
        Vertex(position=(x, y, z), normal=(x, y, z), texcoords=(s, t))
        for x, y, z, s, t in _SKYBOX
    ]


def skybox_indices() -> list[int]:
    """Triangle indices into :func:`skybox_vertices`, two triangles per face."""
    return list(_SKYBOX_INDICES)