"""Shadow mapping state: light matrices and the two render passes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, Sequence

import numpy as np

from glistkit.transforms import identity, look_at, ortho

DEFAULT_SHADOWMAP_SIZE = 4096
SHADOWMAP_TEXTURE_SLOT = 9

_ORIGIN = (0.0, 0.0, 0.0)
_UP = (0.0, 1.0, 0.0)
_DEFAULT_ORTHO = (-40.0, 40.0, -40.0, 40.0, 2.0, 114.0)


class Positioned(Protocol):
    position: Sequence[float]


class RenderPass(Enum):
    """The pass that :meth:`ShadowMap.enable` configured."""

    DEPTH = "depth"
    SCENE = "scene"


class ShadowMap:
    """Tracks the light's view and projection and which pass is being drawn.

    The depth pass renders the scene from the light into the depth map;
    the scene pass draws normally while sampling that map.
    """

    def __init__(self) -> None:
        self.allocated = False
        self.activated = False
        self.enabled = False
        self.camera: Positioned | None = None
        self._light: Positioned | None = None
        self._projection = identity()
        self._view = identity()
        self._matrix = self._projection @ self._view
        self._light_position = np.zeros(3)
        self.width = 0
        self.height = 0
        self.texture_slot = SHADOWMAP_TEXTURE_SLOT
        self.update_shadows = False
        self.render_pass_no = 0
        self.render_pass_num = 1
        self.uniforms: dict[str, Any] = {}
        self.viewport: tuple[int, int] | None = None

    def allocate(
        self,
        light: Positioned,
        camera: Positioned,
        width: int = DEFAULT_SHADOWMAP_SIZE,
        height: int = DEFAULT_SHADOWMAP_SIZE,
    ) -> None:
        """Reserve a depth map of the given size and aim it from ``light``."""
        if width <= 0 or height <= 0:
            raise ValueError("shadow map size must be positive")
        self.width = int(width)
        self.height = int(height)
        self.allocated = True
        self.camera = camera
        self.set_light(light)
        self.set_light_projection(ortho(*_DEFAULT_ORTHO))

    def update(self) -> None:
        """Follow the light's current position and schedule a depth pass."""
        if self._light is None:
            raise ValueError("shadow map has no light")
        self._aim_at_light()
        self.render_pass_no = 2
        self.update_shadows = True

    def set_light(self, light: Positioned) -> None:
        self._light = light
        self._aim_at_light()

    @property
    def light(self) -> Positioned | None:
        return self._light

    def _aim_at_light(self) -> None:
        assert self._light is not None
        self._light_position = np.asarray(self._light.position, dtype=float)
        self.set_light_view(look_at(self._light_position, _ORIGIN, _UP))

    def activate(self) -> None:
        self.activated = True
        self.render_pass_num = 2
        self.update_shadows = True

    def deactivate(self) -> None:
        self.render_pass_num = 1
        self.update_shadows = False
        self.disable()
        self.activated = False

    def enable(self) -> RenderPass | None:
        """Set up the current pass; None when not allocated and activated."""
        if not self.allocated or not self.activated:
            return None
        self.enabled = True
        if self.update_shadows and self.render_pass_no == 0:
            self.viewport = (self.width, self.height)
            self.uniforms = {"lightMatrix": self._matrix.copy()}
            return RenderPass.DEPTH
        assert self.camera is not None
        self.viewport = None
        self.uniforms = {
            "aUseShadowMap": 1,
            "lightPos": self._light_position.copy(),
            "shadowLightPos": self._light_position.copy(),
            "lightMatrix": self._matrix.copy(),
            "shadowMap": self.texture_slot,
            "viewPos": np.asarray(self.camera.position, dtype=float),
        }
        self.render_pass_no = 1
        return RenderPass.SCENE

    def disable(self) -> None:
        """End the depth pass; does nothing once the scene pass has begun."""
        if not self.allocated or not self.activated or self.render_pass_no > 0:
            return
        self.enabled = False

    def set_light_projection(self, matrix: np.ndarray) -> None:
        arr = np.asarray(matrix, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError("projection must be a 4x4 matrix")
        self._projection = arr.copy()
        self._matrix = self._projection @ self._view

    def set_light_ortho(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> None:
        self.set_light_projection(ortho(left, right, bottom, top, near, far))

    def set_light_view(self, matrix: np.ndarray) -> None:
        arr = np.asarray(matrix, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError("view must be a 4x4 matrix")
        self._view = arr.copy()
        self._matrix = self._projection @ self._view

    @property
    def light_projection(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def light_view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def light_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @property
    def light_position(self) -> np.ndarray:
        return self._light_position.copy()