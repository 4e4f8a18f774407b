import pytest

from lightrig.geometries import sphere_geometry
from lightrig.materials import MeshStandardMaterial
from lightrig.objects import (
    AmbientLight,
    DirectionalLight,
    Mesh,
    PointLight,
    Scene,
    WorldObject,
)


def make_mesh(material):
    return Mesh(sphere_geometry(1, 8, 4), material)


@pytest.mark.parametrize("n, m", [(0, 0), (1, 0), (0, 2), (4, 5), (10, 3)])
def test_scene_traversal_counts(n, m):
    material = MeshStandardMaterial()
    scene = Scene()
    meshes = [make_mesh(material) for _ in range(n)]
    lights = [PointLight() for _ in range(m)]
    scene.add(*meshes, *lights)

    assert list(scene.traverse_renderables()) == meshes
    assert list(scene.traverse_lights()) == lights


def test_scene_traversal_is_restartable():
    scene = Scene()
    material = MeshStandardMaterial()
    scene.add(make_mesh(material), AmbientLight())

    renderables = scene.traverse_renderables()
    assert len(list(renderables)) == 1
    # An exhausted iterator stays exhausted, a new call starts over
    assert len(list(renderables)) == 0
    assert len(list(scene.traverse_renderables())) == 1

    # Objects added later are included in the next traversal
    scene.add(make_mesh(material), DirectionalLight())
    assert len(list(scene.traverse_renderables())) == 2
    assert len(list(scene.traverse_lights())) == 2


def test_scene_traversal_nested_and_invisible():
    scene = Scene()
    material = MeshStandardMaterial()
    group = WorldObject()
    hidden = WorldObject(visible=False)
    scene.add(group, hidden)
    group.add(make_mesh(material), PointLight())
    hidden.add(make_mesh(material), PointLight())

    assert len(list(scene.traverse_renderables())) == 1
    assert len(list(scene.traverse_lights())) == 1
    assert len(list(scene.traverse_renderables(skip_invisible=False))) == 2
    assert len(list(scene.traverse_lights(skip_invisible=False))) == 2
