from ._base import WorldObject


class Mesh(WorldObject):
    """An object consisting of triangular faces, represented by vertices
    (3D positions) and an index that defines the connectivity.

    Meshes can share a material; a change to a shared material shows up on
    all of them.
    """

    def __init__(self, geometry, material, **kwargs):
        if geometry is None or material is None:
            raise TypeError("A Mesh needs both a geometry and a material.")
        super().__init__(geometry, material, **kwargs)
