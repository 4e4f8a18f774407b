from math import pi
from unittest.mock import Mock, call

import numpy as np
import numpy.testing as npt
import pytest

from lightrig.geometries import box_geometry
from lightrig.materials import MeshStandardMaterial
from lightrig.objects import Mesh, WorldObject


def test_traverse():
    root = WorldObject()

    layer1_child1 = WorldObject()
    root.add(layer1_child1)
    layer1_child2 = WorldObject()
    root.add(layer1_child2)

    layer2_child1 = WorldObject()
    layer1_child2.add(layer2_child1)
    layer2_child2 = WorldObject()
    layer1_child2.add(layer2_child2)

    mock = Mock()
    root.traverse(mock)
    mock.assert_has_calls(
        [
            call(root),
            call(layer1_child1),
            call(layer1_child2),
            call(layer2_child1),
            call(layer2_child2),
        ]
    )
    assert len(mock.mock_calls) == 5


def test_traverse_skip_invisible():
    root = WorldObject()
    child1 = WorldObject(visible=False)
    child2 = WorldObject()
    grandchild = WorldObject()
    root.add(child1, child2)
    child1.add(grandchild)

    assert list(root.iter(skip_invisible=True)) == [root, child2]
    assert list(root.iter()) == [root, child1, grandchild, child2]


def test_iter_filter():
    root = WorldObject()
    named = WorldObject(name="foo")
    root.add(named, WorldObject())
    assert list(root.iter(lambda ob: ob.name == "foo")) == [named]


def test_add():
    root = WorldObject()
    child = WorldObject()
    assert root.add(child) is root
    assert child.parent is root
    assert root.children == (child,)

    # Adding to another parent moves the object
    other = WorldObject()
    other.add(child)
    assert child.parent is other
    assert root.children == ()

    with pytest.raises(TypeError):
        root.add("not an object")
    with pytest.raises(ValueError):
        root.add(root)


def test_parent_is_weak():
    child = WorldObject()
    WorldObject().add(child)
    # The parent is gone, because nothing else refers to it
    assert child.parent is None


def test_geometry_and_material_types():
    ob = WorldObject()
    assert ob.geometry is None
    assert ob.material is None
    with pytest.raises(TypeError):
        ob.geometry = "box"
    with pytest.raises(TypeError):
        ob.material = "shiny"


def test_transform_defaults():
    ob = WorldObject()
    npt.assert_array_equal(ob.position, (0, 0, 0))
    npt.assert_array_equal(ob.rotation, (0, 0, 0))
    npt.assert_array_equal(ob.scale, (1, 1, 1))
    npt.assert_array_almost_equal(ob.matrix, np.eye(4))


def test_position_and_rotation_are_set_in_place():
    ob = WorldObject()
    position = ob.position
    ob.position = (1, 2, 3)
    assert position is ob.position
    npt.assert_array_equal(position, (1, 2, 3))

    ob.rotation[1] = 0.5
    assert ob.rotation[1] == 0.5


def test_matrix():
    ob = WorldObject()
    ob.position = (1, 2, 3)
    npt.assert_array_almost_equal(ob.matrix[:3, 3], (1, 2, 3))

    # Rotating 90 degrees around y maps x to -z
    ob.rotation = (0, pi / 2, 0)
    npt.assert_array_almost_equal(ob.matrix[:3, :3] @ (1, 0, 0), (0, 0, -1))

    # Rotating -90 degrees around x maps +z to +y
    ob.rotation = (-pi / 2, 0, 0)
    npt.assert_array_almost_equal(ob.matrix[:3, :3] @ (0, 0, 1), (0, 1, 0))

    ob.rotation = (0, 0, 0)
    ob.scale = (2, 2, 2)
    npt.assert_array_almost_equal(ob.matrix[:3, :3], np.eye(3) * 2)


def test_world_matrix():
    parent = WorldObject()
    child = WorldObject()
    parent.add(child)
    parent.position = (1, 0, 0)
    child.position = (0, 2, 0)
    npt.assert_array_almost_equal(child.world_position, (1, 2, 0))

    parent.scale = (2, 2, 2)
    npt.assert_array_almost_equal(child.world_position, (1, 4, 0))


def test_mesh_needs_geometry_and_material():
    geometry = box_geometry()
    material = MeshStandardMaterial()
    mesh = Mesh(geometry, material, name="box")
    assert mesh.geometry is geometry
    assert mesh.material is material
    assert "box" in repr(mesh)

    with pytest.raises(TypeError):
        Mesh(None, material)
    with pytest.raises(TypeError):
        Mesh(geometry, None)
