from math import acos, atan2, cos, exp, log, pi, sin

import numpy as np

from ._base import Controller


class OrbitController(Controller):
    """A controller to move a camera in an orbit around a target position.

    The camera position is kept as a spherical offset from the target: a
    distance (radius), a polar angle measured from the +y axis, and an
    azimuth angle around the y axis. The distance and polar angle are
    clamped, so that the camera never crosses the target and never flips
    over the poles.

    Parameters
    ----------
    camera: Camera
        The camera to control. Its current position defines the initial orbit.
    target: tuple of float
        The position (x, y, z) that the camera orbits around. Default origin.
    min_distance: float
        The smallest allowed distance to the target. Default 0.5.
    max_distance: float
        The largest allowed distance to the target. Default 20.
    min_polar_angle: float
        The smallest allowed polar angle in radians. Default 0.01.
    max_polar_angle: float
        The largest allowed polar angle in radians. Default pi - 0.01.
    kwargs:
        Passed to :class:`Controller <lightrig.controllers.Controller>`.

    Notes
    -----
    The direction of rotation is defined such that it feels like you're
    grabbing onto the scene; if you move the mouse to the right, the camera
    moves to the left around the target.

    Default controls:

    * Left mouse button: orbit / rotate.
    * Right mouse button: pan.
    * wheel: zoom.

    """

    _default_controls = {
        "mouse1": ("rotate", "drag", (0.005, 0.005)),
        "mouse2": ("pan", "drag", (0.002, 0.002)),
        "wheel": ("zoom", "push", 0.001),
    }

    def __init__(
        self,
        camera,
        *,
        target=(0, 0, 0),
        min_distance=0.5,
        max_distance=20,
        min_polar_angle=0.01,
        max_polar_angle=pi - 0.01,
        **kwargs,
    ):
        min_distance, max_distance = float(min_distance), float(max_distance)
        if not 0 < min_distance <= max_distance:
            raise ValueError(
                f"Expected 0 < min_distance <= max_distance, got {min_distance} and {max_distance}"
            )
        min_polar_angle, max_polar_angle = float(min_polar_angle), float(max_polar_angle)
        if not 0 <= min_polar_angle <= max_polar_angle <= pi:
            raise ValueError("Expected 0 <= min_polar_angle <= max_polar_angle <= pi")

        super().__init__(camera, **kwargs)
        self._min_distance = min_distance
        self._max_distance = max_distance
        self._min_polar_angle = min_polar_angle
        self._max_polar_angle = max_polar_angle
        self._target = np.array(target, dtype=np.float64)
        if self._target.shape != (3,):
            raise ValueError("Expected target to have 3 values.")

        # Pending motion, consumed by update()
        self._delta_azimuth = 0.0
        self._delta_polar = 0.0
        self._delta_log_distance = 0.0
        self._pan_offset = np.zeros(3)

        self._set_spherical_from_camera()
        self._apply_to_camera()

    def _set_spherical_from_camera(self):
        offset = self._camera.position - self._target
        radius = float(np.linalg.norm(offset))
        if radius > 0:
            polar = acos(min(max(offset[1] / radius, -1.0), 1.0))
            azimuth = atan2(offset[0], offset[2])
        else:
            polar, azimuth = pi / 2, 0.0
        self._distance = self._clamp_distance(radius)
        self._polar_angle = self._clamp_polar(polar)
        self._azimuth_angle = azimuth

    def _clamp_distance(self, value):
        return min(max(value, self._min_distance), self._max_distance)

    def _clamp_polar(self, value):
        return min(max(value, self._min_polar_angle), self._max_polar_angle)

    @property
    def target(self):
        """The position (x, y, z) that the camera orbits around."""
        return self._target.copy()

    @target.setter
    def target(self, value):
        self._target[:] = value
        self._apply_to_camera()

    @property
    def distance(self):
        """The current distance between the camera and the target."""
        return self._distance

    @property
    def polar_angle(self):
        """The current angle between the +y axis and the camera offset (radians)."""
        return self._polar_angle

    @property
    def azimuth_angle(self):
        """The current angle of the camera around the y axis (radians)."""
        return self._azimuth_angle

    @property
    def min_distance(self):
        return self._min_distance

    @property
    def max_distance(self):
        return self._max_distance

    @property
    def min_polar_angle(self):
        return self._min_polar_angle

    @property
    def max_polar_angle(self):
        return self._max_polar_angle

    @property
    def is_moving(self):
        """Whether there is pending motion that ``update()`` will apply."""
        return bool(
            self._delta_azimuth
            or self._delta_polar
            or self._delta_log_distance
            or self._pan_offset.any()
        )

    # %% Actions

    def rotate(self, delta_azimuth, delta_polar):
        """Add rotation (in radians) to the pending motion."""
        self._delta_azimuth += float(delta_azimuth)
        self._delta_polar += float(delta_polar)

    def zoom(self, delta):
        """Add zoom to the pending motion.

        The distance is multiplied by ``exp(delta)`` in total, so positive
        values move the camera away from the target.
        """
        # The pending zoom never needs to exceed the full clamp range
        limit = log(self._max_distance) - log(self._min_distance) + 1
        new_delta = self._delta_log_distance + float(delta)
        self._delta_log_distance = min(max(new_delta, -limit), limit)

    def pan(self, delta):
        """Add a shift of the target (and camera) to the pending motion.

        The delta is (right, up) in the camera's view plane, expressed in
        units of the current distance.
        """
        dx, dy = delta
        orientation = self._camera._orientation
        right, up = orientation[:, 0], orientation[:, 1]
        self._pan_offset += (right * float(dx) + up * float(dy)) * self._distance

    def _update_rotate(self, delta):
        # Dragging right moves the camera left, dragging down moves it up
        self.rotate(-delta[0], -delta[1])

    def _update_pan(self, delta):
        # Dragging right moves the scene right, thus the target left
        self.pan((-delta[0], delta[1]))

    def _update_zoom(self, delta):
        self.zoom(delta)

    # %% Per-frame

    def update(self):
        """Apply a step of the pending motion and move the camera.

        With damping enabled, a fraction ``damping`` of the pending motion is
        applied, and the rest decays for the next frame. This is called once
        per frame, whether or not there was input.
        """
        factor = self._damping if self._enable_damping else 1.0

        self._azimuth_angle = (
            self._azimuth_angle + self._delta_azimuth * factor
        ) % (2 * pi)
        self._polar_angle = self._clamp_polar(
            self._polar_angle + self._delta_polar * factor
        )
        log_distance = log(self._distance) + self._delta_log_distance * factor
        log_distance = min(
            max(log_distance, log(self._min_distance)), log(self._max_distance)
        )
        self._distance = self._clamp_distance(exp(log_distance))
        self._target += self._pan_offset * factor

        if self._enable_damping:
            keep = 1.0 - factor
            self._delta_azimuth = _snap(self._delta_azimuth * keep)
            self._delta_polar = _snap(self._delta_polar * keep)
            self._delta_log_distance = _snap(self._delta_log_distance * keep)
            if np.abs(self._pan_offset).max() < 1e-9:
                self._pan_offset[:] = 0
            else:
                self._pan_offset *= keep
        else:
            self._delta_azimuth = self._delta_polar = self._delta_log_distance = 0.0
            self._pan_offset[:] = 0

        self._apply_to_camera()
        return self.is_moving

    def _apply_to_camera(self):
        r, phi, theta = self._distance, self._polar_angle, self._azimuth_angle
        offset = (r * sin(phi) * sin(theta), r * cos(phi), r * sin(phi) * cos(theta))
        self._camera.position = self._target + offset
        self._camera.look_at(self._target)


def _snap(value):
    """Round tiny values to zero, so that coasting comes to a full stop."""
    return 0.0 if abs(value) < 1e-9 else value
