import numpy.testing as npt
import pytest

from lightrig.materials import Material, MeshStandardMaterial
from lightrig.utils import Color


def test_material_opacity():
    material = Material()
    assert material.opacity == 1
    material.opacity = 0.5
    assert material.opacity == 0.5
    assert material.uniform_data["opacity"] == 0.5

    # Clamped
    material.opacity = 3
    assert material.opacity == 1
    material.opacity = -1
    assert material.opacity == 0


def test_standard_material_defaults():
    material = MeshStandardMaterial()
    assert material.color == Color("#fff")
    assert material.emissive == Color("#000")
    assert material.roughness == 1
    assert material.metalness == 0
    assert material.opacity == 1


def test_standard_material_props():
    material = MeshStandardMaterial(color="#336699", roughness=0.4, metalness=0.25)
    assert material.color.hex == "#336699"
    assert material.roughness == pytest.approx(0.4)
    assert material.metalness == 0.25

    # Values end up in the uniform struct
    npt.assert_array_almost_equal(material.uniform_data["color"], material.color.rgba)
    assert material.uniform_data["roughness"] == pytest.approx(0.4)

    material.emissive = "red"
    npt.assert_array_almost_equal(material.uniform_data["emissive_color"], (1, 0, 0, 1))

    # Clamped to 0..1
    material.roughness = 2
    assert material.roughness == 1
    material.metalness = -1
    assert material.metalness == 0


def test_standard_material_uniform_type():
    names = MeshStandardMaterial.uniform_type.keys()
    assert list(names) == ["opacity", "color", "emissive_color", "roughness", "metalness"]
