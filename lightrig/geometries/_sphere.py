import numpy as np

from ._base import Geometry


def sphere_geometry(radius=1, width_segments=32, height_segments=16):
    """Generate a sphere.

    Creates a sphere that has its center in the local origin and its poles on
    the y-axis. The sphere is constructed from a grid of longitudinal and
    latitudinal lines, with vertices placed at the intersections. The area
    between 4 vertices is filled with two triangles.

    Parameters
    ----------
    radius : float
        The radius of the sphere.
    width_segments : int
        The number of (evenly-spaced) longitudinal segments.
    height_segments : int
        The number of (evenly-spaced) latitudinal segments.

    Returns
    -------
    sphere : Geometry
        A geometry object that represents the requested sphere.

    """
    if width_segments < 3 or height_segments < 2:
        raise ValueError("A sphere needs at least 3 width and 2 height segments.")

    # create grid of spherical coordinates, grid has shape (ny, nx)
    nx = width_segments + 1
    ny = height_segments + 1
    phi = np.linspace(0, 2 * np.pi, num=nx, dtype=np.float32)
    theta = np.linspace(0, np.pi, num=ny, dtype=np.float32)
    phi_grid, theta_grid = np.meshgrid(phi, theta)

    # convert to cartesian coordinates
    theta_grid_sin = np.sin(theta_grid)
    xx = -np.cos(phi_grid) * theta_grid_sin
    yy = np.cos(theta_grid)
    zz = np.sin(phi_grid) * theta_grid_sin

    normals = np.stack([xx, yy, zz], axis=-1).reshape((-1, 3))
    positions = normals * radius

    uu = phi_grid / (2 * np.pi)
    vv = 1 - theta_grid / np.pi
    texcoords = np.stack([uu, vv], axis=-1).reshape((-1, 2))

    # two triangles per panel, relative to the panel's top-left vertex
    grid = np.arange(nx * ny, dtype=np.uint32).reshape((ny, nx))
    corner = grid[:-1, :-1].reshape(-1)
    indices = np.empty((corner.size, 2, 3), dtype=np.uint32)
    indices[:, 0, 0] = corner
    indices[:, 0, 1] = corner + nx
    indices[:, 0, 2] = corner + 1
    indices[:, 1, 0] = corner + nx + 1
    indices[:, 1, 1] = corner + 1
    indices[:, 1, 2] = corner + nx

    return Geometry(
        indices=indices.reshape((-1, 3)),
        positions=positions.astype(np.float32),
        normals=normals.astype(np.float32),
        texcoords=texcoords.astype(np.float32),
    )
