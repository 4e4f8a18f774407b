import numpy as np


class Geometry:
    """An object's geometry is a container for data that 'defines' (the shape of) the object.

    The attributes are numpy arrays. Lists are converted to arrays, using
    int32 for ``indices`` and float32 for everything else. Attributes with
    a standardized name are checked for their shape.

    Example
    -------

    .. code-block:: py

        g = Geometry(positions=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], indices=[[0, 1, 2]])
        g.positions  # numpy array

    """

    _expected_widths = {
        "positions": (3,),
        "normals": (3,),
        "indices": (3,),
        "texcoords": (1, 2, 3),
    }

    def __init__(self, **attributes):
        self._names = []
        for name, val in attributes.items():
            if isinstance(val, list):
                dtype = "int32" if name == "indices" else "float32"
                val = np.array(val, dtype=dtype)
            elif not isinstance(val, np.ndarray):
                raise TypeError(
                    f"Geometry attribute {name!r} must be an array or list, not {val!r}"
                )
            widths = self._expected_widths.get(name)
            if widths is not None:
                if val.ndim != 2 or val.shape[1] not in widths:
                    raise ValueError(
                        f"Expected Nx{'|'.join(str(w) for w in widths)} data for {name}, got shape {val.shape}"
                    )
            setattr(self, name, val)
            self._names.append(name)

        if "positions" in self._names and "normals" in self._names:
            if len(self.positions) != len(self.normals):
                raise ValueError("positions and normals must have the same length")

    def __repr__(self) -> str:
        lines = ["Geometry("]
        for key in self._names:
            val = getattr(self, key)
            lines.append(f"    {key}=<{val.dtype} array {val.shape}>,")
        lines.append(f") # at {hex(id(self))}")
        return "\n".join(lines)

    def __dir__(self):
        return sorted(self._names)

    @property
    def vertex_count(self):
        """The number of vertices (the length of ``positions``)."""
        return len(self.positions)

    @property
    def face_count(self):
        """The number of triangles (the length of ``indices``)."""
        return len(self.indices)

    def interleaved(self):
        """Get the vertex data as one contiguous Nx8 float32 array.

        Each row holds the position, normal and texcoord of one vertex.
        Missing texcoords are filled with zeros.
        """
        n = self.vertex_count
        data = np.zeros((n, 8), np.float32)
        data[:, 0:3] = self.positions
        data[:, 3:6] = self.normals
        texcoords = getattr(self, "texcoords", None)
        if texcoords is not None:
            width = min(2, texcoords.shape[1])
            data[:, 6 : 6 + width] = texcoords[:, :width]
        return data
