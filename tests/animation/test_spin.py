import numpy.testing as npt
import pytest

from lightrig.animation import Spin
from lightrig.objects import WorldObject


@pytest.mark.parametrize("t", [0, 0.5, 1, 7.25, 100])
def test_spin_rotation(t):
    obs = [WorldObject(), WorldObject()]
    spin = Spin(obs)
    spin.apply(t)
    for ob in obs:
        npt.assert_array_equal(ob.rotation, (0.15 * t, 0.1 * t, 0))


def test_spin_overwrites_rotation():
    ob = WorldObject()
    spin = Spin([ob])
    spin.apply(10)
    spin.apply(1)
    npt.assert_array_equal(ob.rotation[:2], (0.15, 0.1))


def test_spin_keeps_z_rotation():
    ob = WorldObject()
    ob.rotation = (0, 0, 0.3)
    Spin([ob]).apply(2)
    assert ob.rotation[2] == 0.3


def test_spin_speed_and_add():
    spin = Spin(speed=(1, 2))
    assert spin.speed == (1.0, 2.0)
    assert spin.objects == ()

    ob = WorldObject()
    spin.add(ob)
    assert spin.objects == (ob,)
    spin.apply(0.5)
    npt.assert_array_equal(ob.rotation[:2], (0.5, 1.0))

    with pytest.raises(ValueError):
        spin.speed = (1, 2, 3)
