from math import pi

import numpy as np
import numpy.testing as npt
import pytest

from lightrig.controllers import OrbitController
from lightrig.demo import LightSet, bind_light_controls, build_scene, create_context
from lightrig.materials import MeshStandardMaterial
from lightrig.objects import (
    AmbientLight,
    DirectionalLight,
    HemisphereLight,
    Mesh,
    PointLight,
    RectAreaLight,
)
from lightrig.utils import Color
from lightrig.utils.surface import OffscreenSurface


def test_scene_contents():
    scene, meshes, lights = build_scene()
    assert set(meshes) == {"sphere", "cube", "torus", "plane"}

    renderables = list(scene.traverse_renderables())
    assert len(renderables) == 4
    assert all(isinstance(ob, Mesh) for ob in renderables)
    assert len(list(scene.traverse_lights())) == 5


def test_meshes_share_one_material():
    _, meshes, _ = build_scene()
    materials = {id(mesh.material) for mesh in meshes.values()}
    assert len(materials) == 1

    material = meshes["cube"].material
    assert isinstance(material, MeshStandardMaterial)
    assert material.roughness == pytest.approx(0.4)

    # A change shows up on all meshes
    material.roughness = 0.9
    for mesh in meshes.values():
        assert mesh.material.roughness == pytest.approx(0.9)


def test_mesh_placement():
    _, meshes, _ = build_scene()
    npt.assert_array_equal(meshes["sphere"].position, (-1.5, 0, 0))
    npt.assert_array_equal(meshes["cube"].position, (0, 0, 0))
    npt.assert_array_equal(meshes["torus"].position, (1.5, 0, 0))
    npt.assert_array_equal(meshes["plane"].position, (0, -0.65, 0))
    assert meshes["plane"].rotation[0] == pytest.approx(-pi / 2)

    # The plane faces up
    normal = meshes["plane"].world_matrix[:3, :3] @ (0, 0, 1)
    npt.assert_array_almost_equal(normal, (0, 1, 0))


def test_light_set():
    lights = LightSet()
    assert len(lights) == 5
    assert [type(light) for light in lights] == [
        AmbientLight,
        DirectionalLight,
        HemisphereLight,
        PointLight,
        RectAreaLight,
    ]
    assert lights["point"] is lights.point
    with pytest.raises(KeyError):
        lights["spot"]


def test_light_initial_state():
    lights = LightSet()
    assert [light.intensity for light in lights] == [0, 0, 0, 1, 0]

    assert lights.ambient.color == Color("#ffffff")
    assert lights.directional.color == Color("#00fffc")
    assert lights.hemisphere.color == Color("#ff0000")
    assert lights.hemisphere.ground_color == Color("#0000ff")
    assert lights.point.color == Color("#ff9000")
    assert lights.rectarea.color == Color("#4e00ff")

    npt.assert_array_equal(lights.directional.position, (1, 0.25, 0))
    npt.assert_array_equal(lights.point.position, (1, -0.5, 1))
    npt.assert_array_equal(lights.rectarea.position, (-1.5, 0, 1.5))
    assert lights.point.distance == 10
    assert lights.point.decay == 6
    assert lights.rectarea.width == 1
    assert lights.rectarea.height == 1


def test_light_sliders():
    lights = LightSet()
    panel = bind_light_controls(lights)
    assert panel.title == "Lights"

    expected = [
        ("Ambient Intensity", lights.ambient, 0, 1, 0.0001),
        ("Directional Int.", lights.directional, 0, 1, 0.0001),
        ("Hemisphere Int.", lights.hemisphere, 0, 1, 0.0001),
        ("Point Int.", lights.point, 0, 5, 0.001),
        ("RectArea Int.", lights.rectarea, 0, 10, 0.001),
    ]
    assert len(panel) == len(expected)
    for binding, (label, light, min, max, step) in zip(panel, expected):
        assert binding.label == label
        assert binding.target is light
        assert binding.attribute == "intensity"
        assert (binding.min, binding.max, binding.step) == (min, max, step)


def test_slider_changes_light():
    lights = LightSet()
    panel = bind_light_controls(lights)
    panel.set_value("RectArea Int.", 7.5)
    assert lights.rectarea.intensity == 7.5
    panel.set_value("Point Int.", 50)
    assert lights.point.intensity == 5


def test_create_context():
    context = create_context(size=(800, 600), pixel_ratio=3)
    camera = context.camera

    assert camera.fov == 75
    assert camera.near == 0.1
    assert camera.far == 100
    assert camera.aspect == pytest.approx(800 / 600)
    npt.assert_array_almost_equal(camera.position, (1, 1, 2))
    npt.assert_array_almost_equal(camera.forward, -np.array([1, 1, 2]) / np.sqrt(6))

    assert isinstance(context.controller, OrbitController)
    assert context.controller.enable_damping
    assert context.viewport.state.pixel_ratio == 2
    assert len(context.lights) == 5
    # The plane does not spin
    assert [ob.name for ob in context.spin.objects] == ["sphere", "cube", "torus"]
    assert not context.stopped


def test_create_context_with_surface():
    surface = OffscreenSurface()
    context = create_context(surface, size=(300, 200), pixel_ratio=1.5)
    assert context.renderer.target is surface
    assert surface.logical_size == (300, 200)
    assert surface.pixel_ratio == 1.5
