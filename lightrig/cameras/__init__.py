"""
Cameras define the viewpoint for rendering a scene.

.. currentmodule:: lightrig.cameras

.. autosummary::
    :toctree: cameras/

    Camera
    PerspectiveCamera

"""

# flake8: noqa

from ._base import Camera
from ._perspective import PerspectiveCamera
