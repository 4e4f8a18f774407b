import numpy as np

from ._base import Geometry
from ._plane import generate_plane
from ._utils import merge


# Per face: the outward normal, and the axes that the plane's x and y map to.
# For each face u x v == normal, so the winding stays counter-clockwise.
_box_faces = np.array(
    [
        [[1, 0, 0], [0, 0, -1], [0, 1, 0]],  # right
        [[-1, 0, 0], [0, 0, 1], [0, 1, 0]],  # left
        [[0, 1, 0], [1, 0, 0], [0, 0, -1]],  # top
        [[0, -1, 0], [1, 0, 0], [0, 0, 1]],  # bottom
        [[0, 0, 1], [1, 0, 0], [0, 1, 0]],  # front (this matches the default plane)
        [[0, 0, -1], [-1, 0, 0], [0, 1, 0]],  # back
    ],
    dtype=np.float32,
)


def box_geometry(
    width=1,
    height=1,
    depth=1,
    width_segments=1,
    height_segments=1,
    depth_segments=1,
):
    """Generate a box (rectangular cuboid).

    Creates a box of the given size that is centered around the local frame's
    origin. Faces may be subdivided by specifying the number of segments along
    each axis. Each face has its own vertices, so that the normals are flat.

    Parameters
    ----------
    width : float
        Size along the x-axis.
    height : float
        Size along the y-axis.
    depth : float
        Size along the z-axis.
    width_segments : int
        Number of segments along x-axis.
    height_segments : int
        Number of segments along y-axis.
    depth_segments : int
        Number of segments along z-axis.

    Returns
    -------
    box : Geometry
        A geometry object containing the requested box shape.

    """

    box_dim = np.array([width, height, depth], dtype=np.float32)
    box_seg = np.array([width_segments, height_segments, depth_segments], np.int64)

    planes = []
    for normal, u, v in _box_faces:
        iu = int(np.flatnonzero(u)[0])
        iv = int(np.flatnonzero(v)[0])
        inormal = int(np.flatnonzero(normal)[0])
        (
            plane_positions,
            plane_normals,
            plane_texcoords,
            plane_index,
        ) = generate_plane(box_dim[iu], box_dim[iv], box_seg[iu], box_seg[iv])

        positions = (
            plane_positions[:, 0:1] * u
            + plane_positions[:, 1:2] * v
            + normal * (box_dim[inormal] / 2)
        )
        normals = np.tile(normal, (len(plane_normals), 1))
        planes.append((positions, normals, plane_texcoords, plane_index))

    positions, normals, texcoords, indices = merge(planes)

    return Geometry(
        indices=indices,
        positions=positions.astype(np.float32),
        normals=normals.astype(np.float32),
        texcoords=texcoords.astype(np.float32),
    )
