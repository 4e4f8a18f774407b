import numpy as np

from ._base import Geometry


def torus_geometry(radius=1, tube=0.4, radial_segments=12, tubular_segments=48):
    """Generate a torus.

    Creates a ring in the local xy-plane, centered at the origin. The ring
    is swept by a circle with radius ``tube``, whose center lies at
    distance ``radius`` from the origin.

    Parameters
    ----------
    radius : float
        The distance from the center of the torus to the center of the tube.
    tube : float
        The radius of the tube.
    radial_segments : int
        The number of segments around the tube's cross-section.
    tubular_segments : int
        The number of segments along the ring.

    Returns
    -------
    torus : Geometry
        A geometry object representing the requested torus.

    """
    if radial_segments < 3 or tubular_segments < 3:
        raise ValueError("A torus needs at least 3 radial and 3 tubular segments.")

    # u runs along the ring, v around the tube; grid has shape (nv, nu)
    nu = tubular_segments + 1
    nv = radial_segments + 1
    u = np.linspace(0, 2 * np.pi, nu, dtype=np.float32)
    v = np.linspace(0, 2 * np.pi, nv, dtype=np.float32)
    uu, vv = np.meshgrid(u, v)

    ring = radius + tube * np.cos(vv)
    positions = np.stack(
        [ring * np.cos(uu), ring * np.sin(uu), tube * np.sin(vv)], axis=-1
    ).reshape((-1, 3))

    # the normal points from the center of the tube to the vertex
    centers = np.stack(
        [radius * np.cos(uu), radius * np.sin(uu), np.zeros_like(uu)], axis=-1
    ).reshape((-1, 3))
    normals = positions - centers
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)

    texcoords = np.stack(
        [uu / (2 * np.pi), vv / (2 * np.pi)], axis=-1
    ).reshape((-1, 2))

    grid = np.arange(nu * nv, dtype=np.uint32).reshape((nv, nu))
    corner = grid[:-1, :-1].reshape(-1)
    indices = np.empty((corner.size, 2, 3), dtype=np.uint32)
    indices[:, 0, 0] = corner
    indices[:, 0, 1] = corner + 1
    indices[:, 0, 2] = corner + nu
    indices[:, 1, 0] = corner + nu + 1
    indices[:, 1, 1] = corner + nu
    indices[:, 1, 2] = corner + 1

    return Geometry(
        indices=indices.reshape((-1, 3)),
        positions=positions.astype(np.float32),
        normals=normals.astype(np.float32),
        texcoords=texcoords.astype(np.float32),
    )
