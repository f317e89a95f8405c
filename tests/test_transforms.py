import math

import numpy as np
import pytest

from glistkit.transforms import identity, look_at, ortho, perspective, rotate, scale, translate


def _apply(m, p):
    return (m @ np.array([*p, 1.0]))[:3]


def test_translate_moves_origin():
    m = translate(identity(), (2.0, -3.0, 5.0))
    assert np.allclose(_apply(m, (0, 0, 0)), (2.0, -3.0, 5.0))


def test_scale_then_translate_order():
    m = scale(translate(identity(), (1.0, 1.0, 1.0)), (2.0, 3.0, 4.0))
    assert np.allclose(_apply(m, (1, 1, 1)), (1 + 2.0, 1 + 3.0, 1 + 4.0))


def test_rotate_quarter_turn_about_z():
    m = rotate(identity(), math.pi / 2, (0, 0, 1))
    assert np.allclose(_apply(m, (1, 0, 0)), (0, 1, 0))


def test_rotation_is_orthonormal():
    r = rotate(identity(), 0.7, (1, 2, 3))[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(identity(), 1.0, (0, 0, 0))


def test_ortho_maps_box_to_clip_cube():
    m = ortho(-40.0, 40.0, -40.0, 40.0, 2.0, 114.0)
    assert np.allclose(_apply(m, (-40.0, -40.0, -2.0)), (-1, -1, -1))
    assert np.allclose(_apply(m, (40.0, 40.0, -114.0)), (1, 1, 1))


def test_ortho_degenerate_raises():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, 0.0, 1.0, 0.1, 10.0)


def test_perspective_near_and_far_planes():
    near, far = 0.1, 10.0
    m = perspective(math.radians(90.0), 1.0, near, far)
    for z, expected in ((-near, -1.0), (-far, 1.0)):
        clip = m @ np.array([0.0, 0.0, z, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_look_at_places_eye_at_origin_and_center_ahead():
    eye, center = (3.0, 4.0, 5.0), (0.0, 0.0, 0.0)
    m = look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(m, eye), (0, 0, 0))
    ahead = _apply(m, center)
    assert np.allclose(ahead[:2], (0, 0))
    assert ahead[2] == pytest.approx(-np.linalg.norm(eye))


def test_look_at_same_points_raises():
    with pytest.raises(ValueError):
        look_at((1, 1, 1), (1, 1, 1), (0, 1, 0))