"""
Containers for geometry data.

.. currentmodule:: lightrig.geometries

A geometry object contains the data that defines (the shape of) a mesh: the
vertex positions, plus data associated with these positions (normals and
texcoords), and the triangle indices.

The standardized names are:

* ``indices``: Nx3 triangle indices into the per-vertex data.
* ``positions``: Nx3 vertex positions (xyz).
* ``normals``: Nx3 normal vectors, one per vertex.
* ``texcoords``: Nx2 texture coordinates, one per vertex.

.. autosummary::
    :toctree: geometry/

    Geometry
    box_geometry
    plane_geometry
    sphere_geometry
    torus_geometry

"""

# flake8: noqa

from ._base import Geometry
from ._box import box_geometry
from ._plane import plane_geometry
from ._sphere import sphere_geometry
from ._torus import torus_geometry
