import pytest

from lightrig.utils import Color


def test_color_basics():
    c = Color(1, 0.5, 0.0)
    assert c.rgba == (1, 0.5, 0, 1)
    assert c.rgb == (1, 0.5, 0)
    assert len(c) == 4
    assert list(c) == [1, 0.5, 0, 1]
    assert c == (1, 0.5, 0, 1)


def test_color_init():
    assert Color(0.5).rgba == (0.5, 0.5, 0.5, 1)
    assert Color(0.5, 0.25).rgba == (0.5, 0.5, 0.5, 0.25)
    assert Color((0, 1, 0)).rgba == (0, 1, 0, 1)
    assert Color(Color(0, 0, 1)).rgba == (0, 0, 1, 1)

    # Alpha is clamped
    assert Color(0, 0, 0, 2).a == 1
    assert Color(0, 0, 0, -1).a == 0

    with pytest.raises(ValueError):
        Color(1, 2, 3, 4, 5)


def test_color_hex():
    assert Color("#ff0000").rgba == (1, 0, 0, 1)
    assert Color("#f00").rgba == (1, 0, 0, 1)
    assert Color("#ff000000").a == 0
    assert Color("#00fffc").hex == "#00fffc"
    assert Color("#4e00ff").hex == "#4e00ff"
    assert Color("#ff9000").hex == "#ff9000"

    with pytest.raises(ValueError):
        Color("#ff00f")


def test_color_names():
    assert Color("red") == Color("#ff0000")
    assert Color("WHITE") == Color(1, 1, 1)
    with pytest.raises(ValueError):
        Color("notacolor")


def test_color_clip_and_mul():
    c = Color(2, -1, 0.5)
    assert c.clip().rgb == (1, 0, 0.5)
    assert c.hex == "#ff0080"

    c = Color(0.5, 0.25, 0, 0.5) * 2
    assert c.rgba == (1, 0.5, 0, 0.5)

    with pytest.raises(TypeError):
        Color(1, 1, 1) * "x"


def test_color_to_physical():
    assert Color(0, 0, 0).to_physical() == (0, 0, 0)
    r, g, b = Color(1, 1, 1).to_physical()
    assert r == pytest.approx(1)

    # Mid-gray is darker in the physical colorspace
    r, g, b = Color(0.5, 0.5, 0.5).to_physical()
    assert 0.2 < r < 0.25
