import numpy as np
import pytest

from glistkit.mesh import DrawMode, Mesh, Vertex, VertexBuffer


def test_vertex_defaults_are_zero():
    v = Vertex()
    assert v.as_floats() == [0.0] * 14


def test_vertex_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vertex(position=(1.0, 2.0))


def test_as_array_layout_follows_vertex_fields():
    v = Vertex(
        position=(1.0, 2.0, 3.0),
        normal=(0.0, 1.0, 0.0),
        texcoords=(0.5, 0.25),
        tangent=(1.0, 0.0, 0.0),
        bitangent=(0.0, 0.0, 1.0),
    )
    vbo = VertexBuffer()
    vbo.set_vertex_data([v])
    arr = vbo.as_array()
    assert arr.shape == (1, 14)
    np.testing.assert_array_equal(arr[0], np.array(v.as_floats(), dtype=np.float32))


def test_element_count_uses_vertices_without_indices():
    vbo = VertexBuffer()
    vbo.set_vertex_data([Vertex(), Vertex(), Vertex()])
    assert not vbo.is_index_data_allocated
    assert vbo.element_count() == vbo.vertices_num == 3


def test_element_count_uses_indices_when_present():
    vbo = VertexBuffer()
    vbo.set_vertex_data([Vertex(), Vertex(), Vertex()])
    vbo.set_index_data([0, 1, 2, 0, 2, 1])
    assert vbo.is_index_data_allocated
    assert vbo.element_count() == 6
    assert vbo.indices == [0, 1, 2, 0, 2, 1]


def test_negative_index_rejected():
    vbo = VertexBuffer()
    with pytest.raises(ValueError):
        vbo.set_index_data([0, -1])


def test_raw_coordinates_3d():
    vbo = VertexBuffer()
    vbo.set_vertex_data([(-0.75, -0.5, 0.0), (0.25, -0.5, 0.0), (-0.25, 0.5, 0.0)])
    assert vbo.coord_num == 3
    assert [v.position for v in vbo.vertices] == [
        (-0.75, -0.5, 0.0),
        (0.25, -0.5, 0.0),
        (-0.25, 0.5, 0.0),
    ]


def test_raw_coordinates_2d_padded_with_zero():
    vbo = VertexBuffer()
    vbo.set_vertex_data([(1.0, 2.0), (3.0, 4.0)])
    assert vbo.coord_num == 2
    assert vbo.vertices[1].position == (3.0, 4.0, 0.0)


def test_raw_coordinates_bad_shape():
    vbo = VertexBuffer()
    with pytest.raises(ValueError):
        vbo.set_vertex_data([(1.0, 2.0, 3.0, 4.0)])


def test_enable_disable():
    vbo = VertexBuffer()
    vbo.disable()
    assert vbo.enabled is False
    vbo.enable()
    assert vbo.enabled is True


def test_mesh_set_vertices_without_indices():
    mesh = Mesh()
    verts = [Vertex(position=(1.0, 0.0, 0.0)), Vertex(position=(0.0, 1.0, 0.0))]
    mesh.set_vertices(verts)
    assert mesh.vertices == verts
    assert mesh.vbo.vertices == verts
    assert not mesh.vbo.is_index_data_allocated
    assert mesh.draw_mode is DrawMode.TRIANGLES


def test_mesh_set_vertices_with_indices():
    mesh = Mesh()
    verts = [Vertex(), Vertex(), Vertex()]
    mesh.set_vertices(verts, [2, 1, 0])
    assert mesh.indices == [2, 1, 0]
    assert mesh.vbo.element_count() == 3