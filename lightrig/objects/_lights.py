import numpy as np

from ._base import WorldObject
from ..utils import Color, array_from_shadertype


def _direction_to_target(light):
    """Get the unit vector pointing from the light towards its target."""
    origin_to_target = light.target.world_position - light.world_position
    distance = np.linalg.norm(origin_to_target)
    if distance > 0:
        return origin_to_target / distance
    # Light and target coincide, shine down
    return np.array([0.0, -1.0, 0.0])


class Light(WorldObject):
    """Light Base Class.

    Parameters
    ----------
    color : Color
        The color of the light emitted.
    intensity : float
        The light's intensity. Its units depend on the type of light.

    Notes
    -----
    The light's intensity scales the color in the physical colorspace, as if
    scaling the number of photons. Note that an intensity of 0.5 is not
    equivalent to halving the color value. This is because the srgb color is
    perceptually linear, while intensity is physically linear. Values over 1.0
    make perfect sense - it's just a brighter light.

    The intensity is not validated: negative or huge values are passed to the
    shader as-is.

    """

    # The name used in the shader templates to select the light model
    kind = "light"

    uniform_type = dict(
        color="4xf4",
        intensity="f4",
    )

    def __init__(self, color="#ffffff", intensity=1, **kwargs):
        super().__init__(**kwargs)
        self._uniform_data = array_from_shadertype(self.uniform_type)
        self.color = color
        self.intensity = intensity

    @property
    def uniform_data(self):
        """The uniform struct for this light, filled in by ``update_uniform_data()``."""
        return self._uniform_data

    def update_uniform_data(self):
        """Write the current state of the light into its uniform struct.

        The renderer calls this once per frame, so that changes made between
        frames are picked up.
        """
        self._uniform_data["color"] = (*self._color.to_physical(), 1)
        self._uniform_data["intensity"] = self._intensity

    @property
    def color(self):
        """The color of the light, in the srgb colorspace."""
        return self._color

    @color.setter
    def color(self, color):
        self._color = Color(color)

    @property
    def intensity(self):
        """The light intensity as a float.

        The intensity scales the color in the physical colorspace, as
        if scaling the number of photons.
        """
        return self._intensity

    @intensity.setter
    def intensity(self, value):
        self._intensity = float(value)


class AmbientLight(Light):
    """Ambient light source.

    A light that omnidirectionally illuminates all objects in the scene equally.

    Parameters
    ----------
    color : Color
        The color of the emitted light.
    intensity : float
        The light intensity. A value of ``0.2`` corresponds to a dimly lit
        scene.

    """

    kind = "ambient"

    def __init__(self, color="#ffffff", intensity=0.2, **kwargs):
        super().__init__(color, intensity, **kwargs)


class DirectionalLight(Light):
    """Directional light source.

    The light is emitted in one direction, as if it comes from infinitely
    far away: all rays are parallel. The direction is given by the light's
    position and its target.

    Parameters
    ----------
    color : Color
        The color of the emitted light.
    intensity : float
        The light intensity. A value of ``3`` corresponds to a well lit scene.
    target : WorldObject
        The object to direct the light at. Defaults to an object at the
        origin.

    """

    kind = "directional"

    uniform_type = dict(
        Light.uniform_type,
        direction="4xf4",
    )

    def __init__(self, color="#ffffff", intensity=3, *, target=None, **kwargs):
        super().__init__(color, intensity, **kwargs)
        self.target = target or WorldObject()

    @property
    def target(self):
        """The object the light is pointed at."""
        return self._target

    @target.setter
    def target(self, target):
        if not isinstance(target, WorldObject):
            raise TypeError(f"Light target must be a WorldObject, not {target!r}")
        self._target = target

    @property
    def direction(self):
        """The direction in which the light travels (unit vector, world space)."""
        return _direction_to_target(self)

    def update_uniform_data(self):
        super().update_uniform_data()
        self._uniform_data["direction"] = (*self.direction, 0)


class HemisphereLight(Light):
    """Hemisphere light source.

    A light positioned directly above the scene, whose color fades from the
    sky color to the ground color. Surfaces facing up receive the sky color,
    surfaces facing down receive the ground color.

    The "up" direction is given by the light's position, which defaults to
    (0, 1, 0).

    Parameters
    ----------
    color : Color
        The sky color.
    ground_color : Color
        The ground color.
    intensity : float
        The light intensity.

    """

    kind = "hemisphere"

    uniform_type = dict(
        Light.uniform_type,
        ground_color="4xf4",
        up="4xf4",
    )

    def __init__(
        self, color="#ffffff", ground_color="#000000", intensity=1, **kwargs
    ):
        super().__init__(color, intensity, **kwargs)
        self.ground_color = ground_color
        self.position = (0, 1, 0)

    @property
    def ground_color(self):
        """The ground color, in the srgb colorspace."""
        return self._ground_color

    @ground_color.setter
    def ground_color(self, color):
        self._ground_color = Color(color)

    def update_uniform_data(self):
        super().update_uniform_data()
        self._uniform_data["ground_color"] = (*self._ground_color.to_physical(), 1)
        up = self.world_position
        norm = np.linalg.norm(up)
        up = up / norm if norm > 0 else np.array([0.0, 1.0, 0.0])
        self._uniform_data["up"] = (*up, 0)


class PointLight(Light):
    """Radial point light source.

    A light that gets emitted from a single point in all directions.

    Parameters
    ----------
    color : Color
        The color of the emitted light.
    intensity : float
        The light intensity. A value of ``3`` corresponds to a well lit
        scene.
    distance : float
        The distance at which the light's contribution has faded to zero.
        A value of ``0`` means that the light reaches infinitely far.
    decay : float
        The rate at which the light dims as it travels. A value of ``0`` means
        no decay. A decay of ``2`` is physically correct.

    """

    kind = "point"

    uniform_type = dict(
        Light.uniform_type,
        position="4xf4",
        distance="f4",
        decay="f4",
    )

    def __init__(self, color="#ffffff", intensity=3, *, distance=0, decay=0, **kwargs):
        super().__init__(color, intensity, **kwargs)
        self.distance = distance
        self.decay = decay

    @property
    def distance(self):
        """The maximum distance at which objects are illuminated by the light.
        A value of ``0`` means that all objects are considered.
        """
        return self._distance

    @distance.setter
    def distance(self, value):
        value = float(value)
        if value < 0:
            raise ValueError("PointLight.distance must be zero or positive.")
        self._distance = value

    @property
    def decay(self):
        """The rate at which the light dims as it travels."""
        return self._decay

    @decay.setter
    def decay(self, value):
        self._decay = float(value)

    def update_uniform_data(self):
        super().update_uniform_data()
        self._uniform_data["position"] = (*self.world_position, 1)
        self._uniform_data["distance"] = self._distance
        self._uniform_data["decay"] = self._decay


class RectAreaLight(Light):
    """Rectangular area light source.

    A light that is emitted uniformly across the face of a rectangle, e.g.
    a bright window or a strip lighting. The rectangle is centered at the
    light's position and faces the target. Only the front side emits light.

    Parameters
    ----------
    color : Color
        The color of the emitted light.
    intensity : float
        The light intensity.
    width : float
        The width of the rectangle.
    height : float
        The height of the rectangle.
    target : WorldObject
        The object the rectangle faces. Defaults to an object at the origin.

    """

    kind = "rectarea"

    uniform_type = dict(
        Light.uniform_type,
        position="4xf4",
        normal="4xf4",
        half_width="4xf4",
        half_height="4xf4",
    )

    def __init__(
        self, color="#ffffff", intensity=1, width=10, height=10, *, target=None, **kwargs
    ):
        super().__init__(color, intensity, **kwargs)
        if width <= 0 or height <= 0:
            raise ValueError("RectAreaLight width and height must be positive.")
        self._width = float(width)
        self._height = float(height)
        self.target = target or WorldObject()

    @property
    def width(self):
        """The width of the light's rectangle."""
        return self._width

    @property
    def height(self):
        """The height of the light's rectangle."""
        return self._height

    @property
    def target(self):
        """The object that the light's rectangle faces."""
        return self._target

    @target.setter
    def target(self, target):
        if not isinstance(target, WorldObject):
            raise TypeError(f"Light target must be a WorldObject, not {target!r}")
        self._target = target

    @property
    def normal(self):
        """The direction the front of the rectangle faces (unit vector, world space)."""
        return _direction_to_target(self)

    def get_axes(self):
        """Get the (right, up) unit vectors that span the rectangle."""
        normal = self.normal
        right = np.cross(normal, (0, 1, 0))
        if np.linalg.norm(right) < 1e-6:
            # Facing straight up or down
            right = np.array([1.0, 0.0, 0.0])
        right = right / np.linalg.norm(right)
        up = np.cross(right, normal)
        return right, up

    def update_uniform_data(self):
        super().update_uniform_data()
        right, up = self.get_axes()
        self._uniform_data["position"] = (*self.world_position, 1)
        self._uniform_data["normal"] = (*self.normal, 0)
        self._uniform_data["half_width"] = (*(right * self._width / 2), 0)
        self._uniform_data["half_height"] = (*(up * self._height / 2), 0)
