"""A textured box drawn around the scene, loaded from six images or one panorama."""

from __future__ import annotations

import itertools
import math
import os
from typing import Iterable, Union

import numpy as np
from PIL import Image

from glistkit.mesh import VertexBuffer
from glistkit.skyboxgeometry import skybox_indices, skybox_vertices
from glistkit.transforms import identity, look_at, perspective, scale
from glistkit.utils import loge

PathLike = Union[str, os.PathLike]

CAPTURE_SIZE = 512
PREFILTER_SIZE = 128
SKYBOX_SCALE = 200.0

_texture_ids = itertools.count(1)

_CAPTURE_TARGETS = (
    ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ((-1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    ((0.0, -1.0, 0.0), (0.0, 0.0, -1.0)),
    ((0.0, 0.0, 1.0), (0.0, -1.0, 0.0)),
    ((0.0, 0.0, -1.0), (0.0, -1.0, 0.0)),
)


def capture_projection() -> np.ndarray:
    """The 90 degree square projection used to render each cube face."""
    return perspective(math.radians(90.0), 1.0, 0.1, 10.0)


def capture_views() -> list[np.ndarray]:
    """View matrices for the cube faces: +x, -x, +y, -y, +z, -z."""
    return [look_at((0.0, 0.0, 0.0), target, up) for target, up in _CAPTURE_TARGETS]


def prefilter_mip_levels(max_levels: int = 5) -> list[tuple[int, int, float]]:
    """(mip level, face size, roughness) for each level of the prefilter map."""
    if max_levels < 2:
        raise ValueError("at least two mip levels are needed")
    return [
        (mip, int(PREFILTER_SIZE * 0.5**mip), mip / (max_levels - 1))
        for mip in range(max_levels)
    ]


class Skybox:
    """Six cube faces, or one equirectangular image, drawn on a large box.

    Faces go in the order right, left, top, bottom, front, back.
    """

    def __init__(self) -> None:
        self.id = 0
        self.width = 0
        self.height = 0
        self.channels = 0
        self.hdr = False
        self.size = SKYBOX_SCALE
        self.faces: list[np.ndarray | None] = []
        self.equirectangular: np.ndarray | None = None
        self.vbo = VertexBuffer()
        self.vbo.set_vertex_data(skybox_vertices())
        self.vbo.set_index_data(skybox_indices())

    def load_textures(self, texture_paths: Iterable[PathLike], textures_dir: PathLike) -> int:
        """Load faces given relative to the textures directory."""
        base = os.fspath(textures_dir)
        return self.load([os.path.join(base, os.fspath(p)) for p in texture_paths])

    def load(self, full_paths: Iterable[PathLike]) -> int:
        """Load each face as RGB; a face that fails is logged and left empty."""
        self.id = next(_texture_ids)
        self.faces = []
        for path in full_paths:
            text = os.fspath(path)
            try:
                with Image.open(text) as image:
                    self.channels = len(image.getbands())
                    rgb = np.asarray(image.convert("RGB"), dtype=np.uint8)
            except OSError:
                loge("gSkybox").append(f"Cubemap tex failed to load at path: {text}").flush()
                self.faces.append(None)
                continue
            self.height, self.width = rgb.shape[:2]
            self.faces.append(rgb)
        return self.id

    def load_texture_equirectangular(self, texture_path: PathLike, textures_dir: PathLike) -> int:
        return self.load_equirectangular(os.path.join(os.fspath(textures_dir), os.fspath(texture_path)))

    def load_equirectangular(self, full_path: PathLike) -> int:
        """Load a panorama as float RGB; raises OSError if it cannot be read."""
        self.hdr = True
        self.id = next(_texture_ids)
        with Image.open(os.fspath(full_path)) as image:
            self.channels = len(image.getbands())
            data = np.asarray(image.convert("RGB"), dtype=np.float32) / 255.0
        self.equirectangular = np.flipud(data).copy()
        self.height, self.width = data.shape[:2]
        return self.id

    @property
    def loaded_face_count(self) -> int:
        return sum(face is not None for face in self.faces)

    def model_matrix(self) -> np.ndarray:
        """The box's model matrix: a uniform scale by :attr:`size`."""
        return scale(identity(), (self.size, self.size, self.size))