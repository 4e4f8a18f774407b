import numpy as np


def merge(groups):
    """Merge (positions, normals, texcoords, indices) tuples into one such tuple.

    The indices of each group are offset by the number of vertices that
    precede the group.
    """
    positions = np.concatenate([g[0] for g in groups])
    normals = np.concatenate([g[1] for g in groups])
    texcoords = np.concatenate([g[2] for g in groups])
    indices = []
    offset = 0
    for g in groups:
        indices.append(g[3] + offset)
        offset += len(g[0])
    return positions, normals, texcoords, np.concatenate(indices)
