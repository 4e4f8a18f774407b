class Spin:
    """Rotate objects about their x and y axes, as a function of time.

    The rotation is computed from the elapsed time alone (not from the
    number of frames), so the motion does not depend on the frame rate.

    Parameters
    ----------
    objects : list of WorldObject
        The objects to rotate.
    speed : tuple of float
        The angular speed (x, y) in radians per second. Default (0.15, 0.1).

    """

    def __init__(self, objects=(), speed=(0.15, 0.1)):
        self._objects = list(objects)
        self.speed = speed

    @property
    def objects(self):
        """The objects being rotated (read-only)."""
        return tuple(self._objects)

    @property
    def speed(self):
        """The angular speed (x, y) in radians per second."""
        return self._speed

    @speed.setter
    def speed(self, value):
        speed_x, speed_y = value
        self._speed = float(speed_x), float(speed_y)

    def add(self, *objects):
        """Add objects to rotate."""
        self._objects.extend(objects)

    def apply(self, elapsed_time):
        """Set the rotation of each object for the given elapsed time (in seconds)."""
        speed_x, speed_y = self._speed
        for ob in self._objects:
            ob.rotation[0] = speed_x * elapsed_time
            ob.rotation[1] = speed_y * elapsed_time
