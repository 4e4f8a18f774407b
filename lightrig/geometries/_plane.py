import numpy as np

from ._base import Geometry


# Note that we keep this function separate, because its used by the box as well.


def generate_plane(width, height, width_segments, height_segments):
    """Generate the data for a plane in the xy-plane, facing +z.

    Returns a (positions, normals, texcoords, indices) tuple. The triangles
    are wound counter-clockwise when seen from the +z side.
    """
    nx, ny = width_segments + 1, height_segments + 1

    x = np.linspace(-width / 2, width / 2, nx, dtype=np.float32)
    y = np.linspace(-height / 2, height / 2, ny, dtype=np.float32)
    xx, yy = np.meshgrid(x, y)
    xx, yy = xx.flatten(), yy.flatten()
    positions = np.column_stack([xx, yy, np.zeros_like(xx)])

    dim = np.array([width, height], dtype=np.float32)
    texcoords = (positions[..., :2] + dim / 2) / dim
    texcoords[..., 1] = 1 - texcoords[..., 1]

    # assign an index to every vertex on the grid
    grid = np.arange(ny * nx, dtype=np.uint32).reshape((ny, nx))
    # two triangles per panel, expressed relative to the lower-left corner
    corner = grid[:-1, :-1].reshape(-1)
    indices = np.empty((corner.size, 2, 3), dtype=np.uint32)
    indices[:, 0, 0] = corner
    indices[:, 0, 1] = corner + 1
    indices[:, 0, 2] = corner + nx
    indices[:, 1, 0] = corner + nx + 1
    indices[:, 1, 1] = corner + nx
    indices[:, 1, 2] = corner + 1

    normals = np.tile(np.array([0, 0, 1], dtype=np.float32), (ny * nx, 1))

    return positions, normals, texcoords, indices.reshape((-1, 3))


def plane_geometry(width=1, height=1, width_segments=1, height_segments=1):
    """Generate a plane.

    Creates a flat (2D) rectangle in the local xy-plane that has its center at
    local origin, with its front side facing +z. The plane may be subdivided
    into segments along the x- or y-axis respectively.

    Parameters
    ----------
    width : float
        The plane's width measured along the x-axis.
    height : float
        The plane's height measured along the y-axis.
    width_segments : int
        The number of evenly spaced segments along the x-axis.
    height_segments : int
        The number of evenly spaced segments along the y-axis.

    Returns
    -------
    plane : Geometry
        A geometry object representing the requested plane.

    """
    if width_segments < 1 or height_segments < 1:
        raise ValueError("A plane needs at least one segment in each direction.")

    positions, normals, texcoords, indices = generate_plane(
        width, height, width_segments, height_segments
    )

    return Geometry(
        indices=indices,
        positions=positions,
        normals=normals,
        texcoords=texcoords,
    )
