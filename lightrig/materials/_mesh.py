from ._base import Material
from ..utils import Color


class MeshStandardMaterial(Material):
    """PBR shaded material.

    A standard physically based material, applying PBR (Physically based rendering)
    using the Metallic-Roughness workflow.

    Parameters
    ----------
    color : Color
        The base color of the mesh.
    emissive : Color
        The emissive color of the mesh. I.e. the color that the object emits
        even when not lit by a light source. The alpha channel is ignored.
    metalness : float
        How much the material looks like a metal. Non-metallic materials such as
        wood or stone use 0.0, metal use 1.0. Default is 0.0.
    roughness : float
        How rough the material is. 0.0 means a smooth mirror reflection, 1.0
        means fully diffuse. Default is 1.0.
    kwargs : Any
        Additional kwargs will be passed to the :class:`base class
        <lightrig.Material>`.

    """

    uniform_type = dict(
        Material.uniform_type,
        color="4xf4",
        emissive_color="4xf4",
        roughness="f4",
        metalness="f4",
    )

    def __init__(
        self, color="#fff", emissive="#000", metalness=0.0, roughness=1.0, **kwargs
    ):
        super().__init__(**kwargs)
        self.color = color
        self.emissive = emissive
        self.roughness = roughness
        self.metalness = metalness

    @property
    def color(self):
        """The uniform color of the mesh."""
        return Color(self.uniform_data["color"])

    @color.setter
    def color(self, color):
        color = Color(color)
        self.uniform_data["color"] = color.rgba

    @property
    def emissive(self):
        """The emissive color of the mesh. The alpha channel is ignored."""
        return Color(self.uniform_data["emissive_color"])

    @emissive.setter
    def emissive(self, color):
        color = Color(color)
        self.uniform_data["emissive_color"] = color.rgba

    @property
    def roughness(self):
        """How rough the material is (0..1). Default 1.0."""
        return float(self.uniform_data["roughness"])

    @roughness.setter
    def roughness(self, value):
        self.uniform_data["roughness"] = min(max(float(value), 0), 1)

    @property
    def metalness(self):
        """How much the material looks like a metal (0..1). Default 0.0."""
        return float(self.uniform_data["metalness"])

    @metalness.setter
    def metalness(self, value):
        self.uniform_data["metalness"] = min(max(float(value), 0), 1)
