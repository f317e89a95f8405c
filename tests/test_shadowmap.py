from dataclasses import dataclass

import numpy as np
import pytest

from glistkit.shadowmap import RenderPass, ShadowMap
from glistkit.transforms import identity, look_at, ortho


@dataclass
class Thing:
    position: tuple


def make_map():
    shadow = ShadowMap()
    light = Thing((10.0, 20.0, 5.0))
    camera = Thing((0.0, 2.0, 8.0))
    shadow.allocate(light, camera)
    return shadow, light, camera


def test_defaults_are_identity():
    shadow = ShadowMap()
    assert np.allclose(shadow.light_matrix, identity())
    assert not shadow.allocated
    assert shadow.enable() is None


def test_allocate_sets_size_and_matrices():
    shadow, light, _ = make_map()
    assert (shadow.width, shadow.height) == (4096, 4096)
    assert np.allclose(shadow.light_projection, ortho(-40, 40, -40, 40, 2, 114))
    assert np.allclose(shadow.light_view, look_at(light.position, (0, 0, 0), (0, 1, 0)))
    assert np.allclose(shadow.light_matrix, shadow.light_projection @ shadow.light_view)


def test_allocate_rejects_bad_size():
    with pytest.raises(ValueError):
        ShadowMap().allocate(Thing((1, 1, 1)), Thing((0, 0, 1)), 0, 10)


def test_set_light_ortho_updates_matrix():
    shadow, _, _ = make_map()
    shadow.set_light_ortho(-5, 5, -5, 5, 1, 50)
    assert np.allclose(shadow.light_projection, ortho(-5, 5, -5, 5, 1, 50))
    assert np.allclose(shadow.light_matrix, shadow.light_projection @ shadow.light_view)


def test_set_light_view_rejects_wrong_shape():
    with pytest.raises(ValueError):
        ShadowMap().set_light_view(np.eye(3))


def test_update_follows_moved_light():
    shadow, light, _ = make_map()
    light.position = (-3.0, 7.0, 2.0)
    shadow.update()
    assert np.allclose(shadow.light_position, light.position)
    assert np.allclose(shadow.light_view, look_at(light.position, (0, 0, 0), (0, 1, 0)))
    assert shadow.render_pass_no == 2
    assert shadow.update_shadows


def test_enable_requires_activation():
    shadow, _, _ = make_map()
    assert shadow.enable() is None
    assert not shadow.enabled


def test_depth_pass_then_scene_pass():
    shadow, light, camera = make_map()
    shadow.activate()
    assert shadow.enable() is RenderPass.DEPTH
    assert shadow.viewport == (4096, 4096)
    assert np.allclose(shadow.uniforms["lightMatrix"], shadow.light_matrix)
    shadow.render_pass_no = 1
    assert shadow.enable() is RenderPass.SCENE
    assert shadow.uniforms["shadowMap"] == 9
    assert shadow.uniforms["aUseShadowMap"] == 1
    assert np.allclose(shadow.uniforms["viewPos"], camera.position)
    assert np.allclose(shadow.uniforms["lightPos"], light.position)


def test_disable_only_during_depth_pass():
    shadow, _, _ = make_map()
    shadow.activate()
    shadow.enable()
    shadow.disable()
    assert not shadow.enabled
    shadow.render_pass_no = 1
    shadow.enable()
    shadow.disable()
    assert shadow.enabled


def test_deactivate_turns_off():
    shadow, _, _ = make_map()
    shadow.activate()
    shadow.enable()
    shadow.deactivate()
    assert not shadow.activated
    assert not shadow.enabled
    assert not shadow.update_shadows
    assert shadow.render_pass_num == 1