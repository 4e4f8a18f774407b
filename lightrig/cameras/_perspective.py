from math import pi, tan

import pylinalg as la

from ._base import Camera


class PerspectiveCamera(Camera):
    """A 3D camera with a configurable field of view (fov).

    Parameters
    ----------
    fov: float
        The vertical field of view as an angle in degrees. Higher values
        give a wide-angle lens effect. This value is limited between 1 and
        179. Default 50.
    aspect: float
        The aspect ratio (width divided by height), which determines the
        vision pyramid's boundaries. Default 1.
    near: float
        The distance to the near clipping plane. Default 0.1.
    far: float
        The distance to the far clipping plane. Default 100.

    """

    _fov_range = 1, 179

    def __init__(self, fov=50, aspect=1, near=0.1, far=100):
        super().__init__()
        near, far = float(near), float(far)
        if not 0 < near < far:
            raise ValueError(f"Expected 0 < near < far, got {near} and {far}.")
        self._near = near
        self._far = far
        self.fov = fov
        self.update_projection(aspect)

    @property
    def fov(self):
        """The field of view (in degrees), between 1-179."""
        return self._fov

    @fov.setter
    def fov(self, value):
        fov = float(value)
        self._fov = min(max(fov, self._fov_range[0]), self._fov_range[1])
        if hasattr(self, "_aspect"):
            self.update_projection(self._aspect)

    @property
    def aspect(self):
        """The aspect ratio (width divided by height). Set it via ``update_projection()``."""
        return self._aspect

    @property
    def near(self):
        """The location of the near clip plane."""
        return self._near

    @property
    def far(self):
        """The location of the far clip plane."""
        return self._far

    def update_projection(self, aspect):
        """Recompute the projection matrix for the given aspect ratio.

        The fov, near and far stay as they are. Call this whenever the size
        of the output changes, otherwise the image is stretched.
        """
        aspect = float(aspect)
        if aspect <= 0:
            raise ValueError("aspect must be > 0")
        self._aspect = aspect

        top = self._near * tan(pi / 180 * 0.5 * self._fov)
        bottom = -top
        right = top * aspect
        left = -right
        projection_matrix = la.mat_perspective(
            left, right, top, bottom, self._near, self._far, depth_range=(0, 1)
        )
        projection_matrix.flags.writeable = False
        self._projection_matrix = projection_matrix

    @property
    def projection_matrix(self):
        return self._projection_matrix

    def get_state(self):
        """Get the state of the camera as a dict."""
        return {
            "position": self.position.copy(),
            "forward": self.forward,
            "fov": self.fov,
            "aspect": self.aspect,
            "near": self.near,
            "far": self.far,
        }
