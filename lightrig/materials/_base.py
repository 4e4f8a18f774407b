from ..utils import array_from_shadertype


class Material:
    """Material base class.

    The properties of a material that the shader needs are stored in a
    uniform struct (a numpy structured array), described by the class
    attribute ``uniform_type``. Because the renderer reads this struct on
    every frame, updating a property is cheap and visible on the next frame
    for every object that shares the material.

    Parameters
    ----------
    opacity : float
        The opacity (a.k.a. alpha value) applied to this material, expressed as
        a value between 0 and 1.

    """

    uniform_type = dict(
        opacity="f4",
    )

    def __init__(self, *, opacity=1):
        self._uniform_data = array_from_shadertype(self.uniform_type)
        self.opacity = opacity

    def __repr__(self):
        return f"<lightrig.{self.__class__.__name__} at {hex(id(self))}>"

    @property
    def uniform_data(self):
        """The uniform struct for this material (a numpy structured array)."""
        return self._uniform_data

    @property
    def opacity(self):
        """The opacity (a.k.a. alpha value) applied to this material (0..1)."""
        return float(self._uniform_data["opacity"])

    @opacity.setter
    def opacity(self, value):
        value = min(max(float(value), 0), 1)
        self._uniform_data["opacity"] = value
