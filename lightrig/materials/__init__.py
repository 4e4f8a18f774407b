"""
The materials define how an object is rendered.

.. currentmodule:: lightrig.materials

.. autosummary::
    :toctree: materials/

    Material
    MeshStandardMaterial

"""

# flake8: noqa

from ._base import Material
from ._mesh import MeshStandardMaterial
