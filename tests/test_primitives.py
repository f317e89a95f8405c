import math

import pytest

from glistkit.mesh import DrawMode
from glistkit.primitives import Box, Line, Plane, Sphere


def test_box_geometry():
    box = Box()
    assert len(box.vertices) == 24
    assert len(box.indices) == 36
    assert box.vbo.element_count() == 36
    assert box.draw_mode is DrawMode.TRIANGLES
    assert all(0 <= i < 24 for i in box.indices)


def test_plane_geometry():
    plane = Plane()
    assert plane.indices == [0, 1, 3, 1, 2, 3]
    assert [v.position for v in plane.vertices][0] == (1.0, 1.0, 0.0)
    assert all(v.position[2] == 0.0 for v in plane.vertices)
    assert plane.vertices[3].texcoords == (0.0, 0.0)


def test_sphere_default_counts():
    sphere = Sphere()
    assert len(sphere.vertices) == (64 + 1) * (64 + 1)
    assert len(sphere.indices) == 64 * (64 + 1) * 2
    assert sphere.draw_mode is DrawMode.TRIANGLE_STRIP


def test_sphere_vertices_on_unit_sphere():
    sphere = Sphere(8, 6)
    for v in sphere.vertices:
        assert math.hypot(*v.position) == pytest.approx(1.0)
        assert v.normal == v.position


def test_sphere_clamps_segments():
    sphere = Sphere(1, 1)
    assert (sphere.x_segments, sphere.y_segments) == (3, 2)
    assert len(sphere.vertices) == (3 + 1) * (2 + 1)


def test_sphere_indices_in_range():
    sphere = Sphere(5, 4)
    assert max(sphere.indices) == len(sphere.vertices) - 1
    assert min(sphere.indices) == 0


def test_line_2d():
    line = Line(1.0, 2.0, 3.0, 4.0)
    assert line.projection_2d is True
    assert [v.position for v in line.vertices] == [(1.0, 2.0, 0.0), (3.0, 4.0, 0.0)]
    assert line.draw_mode is DrawMode.LINES


def test_line_3d_set_points():
    line = Line()
    line.set_points(1, 2, 3, 4, 5, 6)
    assert line.projection_2d is False
    assert line.vertices[1].position == (4.0, 5.0, 6.0)
    assert line.vbo.vertices_num == 2


def test_line_wrong_argument_count():
    with pytest.raises(TypeError):
        Line().set_points(1, 2, 3)