from math import sqrt

import numpy as np
import numpy.testing as npt
import pytest

from lightrig.objects import (
    AmbientLight,
    DirectionalLight,
    HemisphereLight,
    Light,
    PointLight,
    RectAreaLight,
    WorldObject,
)
from lightrig.utils import Color


def test_light_kinds():
    kinds = [
        cls.kind
        for cls in (
            AmbientLight,
            DirectionalLight,
            HemisphereLight,
            PointLight,
            RectAreaLight,
        )
    ]
    assert kinds == ["ambient", "directional", "hemisphere", "point", "rectarea"]
    for cls in (DirectionalLight, HemisphereLight, PointLight, RectAreaLight):
        assert issubclass(cls, Light)


def test_light_color_and_intensity():
    light = PointLight("#ff9000", 2)
    assert isinstance(light.color, Color)
    assert light.color.hex == "#ff9000"
    assert light.intensity == 2

    light.color = "red"
    assert light.color == Color(1, 0, 0)


def test_light_intensity_is_not_validated():
    light = AmbientLight()
    assert light.intensity == 0.2
    for value in (0, -3.5, 1e12, 0.123456789):
        light.intensity = value
        assert light.intensity == value


def test_light_uniform_data_follows_state():
    light = AmbientLight("#ffffff", 0.5)
    light.update_uniform_data()
    assert light.uniform_data["intensity"] == 0.5
    npt.assert_array_almost_equal(light.uniform_data["color"], (1, 1, 1, 1))

    # Changes show up on the next update
    light.intensity = 0.25
    light.color = "#000000"
    light.update_uniform_data()
    assert light.uniform_data["intensity"] == 0.25
    npt.assert_array_almost_equal(light.uniform_data["color"], (0, 0, 0, 1))


def test_directional_light():
    light = DirectionalLight("#00fffc", 0)
    light.position = (1, 0.25, 0)
    expected = -np.array([1, 0.25, 0]) / sqrt(1 + 0.25**2)
    npt.assert_array_almost_equal(light.direction, expected)

    light.update_uniform_data()
    npt.assert_array_almost_equal(light.uniform_data["direction"][:3], expected)
    assert light.uniform_data["direction"][3] == 0

    # The target can be any object
    target = WorldObject()
    target.position = (1, 0.25, -2)
    light.target = target
    npt.assert_array_almost_equal(light.direction, (0, 0, -1))

    with pytest.raises(TypeError):
        light.target = (0, 0, 0)


def test_directional_light_at_target():
    light = DirectionalLight()
    npt.assert_array_almost_equal(light.direction, (0, -1, 0))


def test_hemisphere_light():
    light = HemisphereLight("#ff0000", "#0000ff", 0)
    assert light.color.hex == "#ff0000"
    assert light.ground_color.hex == "#0000ff"
    npt.assert_array_equal(light.position, (0, 1, 0))

    light.update_uniform_data()
    npt.assert_array_almost_equal(light.uniform_data["up"], (0, 1, 0, 0))
    npt.assert_array_almost_equal(light.uniform_data["ground_color"], (0, 0, 1, 1))


def test_point_light():
    light = PointLight("#ff9000", 1, distance=10, decay=6)
    light.position = (1, -0.5, 1)
    assert light.distance == 10
    assert light.decay == 6

    light.update_uniform_data()
    npt.assert_array_almost_equal(light.uniform_data["position"], (1, -0.5, 1, 1))
    assert light.uniform_data["distance"] == 10
    assert light.uniform_data["decay"] == 6

    with pytest.raises(ValueError):
        light.distance = -1


def test_rect_area_light():
    light = RectAreaLight("#4e00ff", 0, 1, 2)
    light.position = (-1.5, 0, 1.5)
    assert light.width == 1
    assert light.height == 2

    # Faces the origin
    npt.assert_array_almost_equal(light.normal, np.array([1, 0, -1]) / sqrt(2))

    right, up = light.get_axes()
    for axis in (right, up):
        assert np.linalg.norm(axis) == pytest.approx(1)
        assert np.dot(axis, light.normal) == pytest.approx(0, abs=1e-9)
    assert np.dot(right, up) == pytest.approx(0, abs=1e-9)
    assert up[1] > 0

    light.update_uniform_data()
    assert np.linalg.norm(light.uniform_data["half_width"]) == pytest.approx(0.5)
    assert np.linalg.norm(light.uniform_data["half_height"]) == pytest.approx(1)


def test_rect_area_light_facing_down():
    light = RectAreaLight(width=2, height=2)
    light.position = (0, 3, 0)
    npt.assert_array_almost_equal(light.normal, (0, -1, 0))
    right, up = light.get_axes()
    assert np.linalg.norm(right) == pytest.approx(1)
    assert np.linalg.norm(up) == pytest.approx(1)


def test_rect_area_light_invalid_size():
    with pytest.raises(ValueError):
        RectAreaLight(width=0)
    with pytest.raises(ValueError):
        RectAreaLight(height=-1)
