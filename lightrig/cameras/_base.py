import numpy as np
import pylinalg as la

from ..objects._base import WorldObject


class Camera(WorldObject):
    """Abstract base camera.

    Camera's are world objects and can be placed in the scene, but this is not required.

    The purpose of a camera is to define the viewpoint for rendering a scene.
    This viewpoint consists of its position and orientation (in the world) and
    its projection. The camera looks along its local negative z-axis.

    Unlike other world objects, the orientation of a camera is set with
    ``look_at()`` rather than through euler angles.
    """

    def __init__(self):
        super().__init__()
        self._orientation = np.eye(3)
        self._reference_up = np.array([0.0, 1.0, 0.0])

    @property
    def matrix(self):
        """The 4x4 transform of the camera, relative to its parent."""
        matrix = np.eye(4)
        matrix[:3, :3] = self._orientation * self._scale
        matrix[:3, 3] = self._position
        return matrix

    @property
    def reference_up(self):
        """The direction that is considered "up" when calling ``look_at()``."""
        return self._reference_up

    @reference_up.setter
    def reference_up(self, value):
        value = np.asarray(value, dtype=np.float64)
        norm = np.linalg.norm(value)
        if value.shape != (3,) or norm == 0:
            raise ValueError("reference_up must be a non-zero 3-vector.")
        self._reference_up = value / norm

    @property
    def forward(self):
        """The direction in which the camera looks (unit vector)."""
        return -self._orientation[:, 2]

    def look_at(self, target):
        """Orient the camera so that it looks at the given position.

        Parameters
        ----------
        target: WorldObject or (x, y, z)
            The target to point the camera towards.

        """
        if isinstance(target, WorldObject):
            target = target.world_position
        target = np.asarray(target, dtype=np.float64)
        if target.shape != (3,):
            raise ValueError("Expected position to have 3 values.")

        z_axis = self._position - target
        if np.linalg.norm(z_axis) == 0:
            return  # nothing to look at
        z_axis = la.vec_normalize(z_axis)
        x_axis = np.cross(self._reference_up, z_axis)
        if np.linalg.norm(x_axis) < 1e-9:
            # Looking straight along the up vector, pick any perpendicular
            x_axis = np.cross((0.0, 0.0, 1.0), z_axis)
        x_axis = la.vec_normalize(x_axis)
        y_axis = np.cross(z_axis, x_axis)
        self._orientation = np.column_stack([x_axis, y_axis, z_axis])

    @property
    def view_matrix(self):
        """The world-to-camera transform (the inverse of the world matrix)."""
        return la.mat_inverse(self.world_matrix)

    @property
    def projection_matrix(self):
        """The camera-to-NDC transform, with depth in the range [0, 1]."""
        raise NotImplementedError()

    @property
    def camera_matrix(self):
        """The full world-to-NDC transform (projection @ view)."""
        return self.projection_matrix @ self.view_matrix
