"""
World objects are the items that make up a scene: meshes, lights, and the
scene root itself.

.. currentmodule:: lightrig.objects

.. autosummary::
    :toctree: objects/

    WorldObject
    Scene
    Mesh
    Light
    AmbientLight
    DirectionalLight
    HemisphereLight
    PointLight
    RectAreaLight

"""

# flake8: noqa

from ._base import WorldObject
from ._mesh import Mesh
from ._lights import (
    Light,
    AmbientLight,
    DirectionalLight,
    HemisphereLight,
    PointLight,
    RectAreaLight,
)
from ._scene import Scene
