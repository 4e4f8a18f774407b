"""
The lights demo: four meshes that share one material, lit by one light of
each kind, with a slider per light intensity.

All lights except the point light start at intensity zero, so that each
light's contribution can be brought in with its slider.

.. currentmodule:: lightrig.demo

.. autosummary::
    :toctree: demo/

    LightSet
    build_scene
    bind_light_controls
    create_context

"""

from math import pi

from .animation import Clock, Spin
from .cameras import PerspectiveCamera
from .controllers import OrbitController
from .controls import ControlPanel
from .geometries import box_geometry, plane_geometry, sphere_geometry, torus_geometry
from .materials import MeshStandardMaterial
from .objects import (
    AmbientLight,
    DirectionalLight,
    HemisphereLight,
    Mesh,
    PointLight,
    RectAreaLight,
    Scene,
)
from .renderers import WgpuRenderer
from .utils import logger
from .utils.loop import RenderContext
from .utils.viewport import ViewportManager


# (light name, label, min, max, step)
LIGHT_SLIDERS = [
    ("ambient", "Ambient Intensity", 0, 1, 0.0001),
    ("directional", "Directional Int.", 0, 1, 0.0001),
    ("hemisphere", "Hemisphere Int.", 0, 1, 0.0001),
    ("point", "Point Int.", 0, 5, 0.001),
    ("rectarea", "RectArea Int.", 0, 10, 0.001),
]


class LightSet:
    """One light of each kind, with the demo's colors and placement.

    The lights are available as attributes (``ambient``, ``directional``,
    ``hemisphere``, ``point`` and ``rectarea``) and by iterating over the
    set, in that order. The set itself does not change after construction.
    """

    names = ("ambient", "directional", "hemisphere", "point", "rectarea")

    def __init__(self):
        self.ambient = AmbientLight("#ffffff", 0)

        self.directional = DirectionalLight("#00fffc", 0)
        self.directional.position = (1, 0.25, 0)

        self.hemisphere = HemisphereLight("#ff0000", "#0000ff", 0)

        self.point = PointLight("#ff9000", 1, distance=10, decay=6)
        self.point.position = (1, -0.5, 1)

        self.rectarea = RectAreaLight("#4e00ff", 0, 1, 1)
        self.rectarea.position = (-1.5, 0, 1.5)

    def __repr__(self):
        return f"<LightSet of {len(self)} lights at {hex(id(self))}>"

    def __iter__(self):
        return (getattr(self, name) for name in self.names)

    def __len__(self):
        return len(self.names)

    def __getitem__(self, name):
        if name not in self.names:
            raise KeyError(f"No light named {name!r}")
        return getattr(self, name)


def build_scene():
    """Create the scene, its meshes and its lights.

    Returns
    -------
    scene : Scene
        The scene containing all meshes and lights.
    meshes : dict
        The meshes by name: "sphere", "cube", "torus" and "plane". They
        all share the same material.
    lights : LightSet
        The lights.

    """
    material = MeshStandardMaterial(roughness=0.4)

    sphere = Mesh(sphere_geometry(0.5, 32, 32), material, name="sphere")
    sphere.position = (-1.5, 0, 0)

    cube = Mesh(box_geometry(0.75, 0.75, 0.75), material, name="cube")

    torus = Mesh(torus_geometry(0.3, 0.2, 32, 64), material, name="torus")
    torus.position = (1.5, 0, 0)

    plane = Mesh(plane_geometry(5, 5), material, name="plane")
    plane.rotation = (-pi / 2, 0, 0)
    plane.position = (0, -0.65, 0)

    meshes = {"sphere": sphere, "cube": cube, "torus": torus, "plane": plane}
    lights = LightSet()

    scene = Scene()
    scene.add(*meshes.values())
    scene.add(*lights)
    return scene, meshes, lights


def bind_light_controls(lights, panel=None):
    """Add a slider for the intensity of each light to a ControlPanel.

    Returns the panel; a new one is created if not given.
    """
    if panel is None:
        panel = ControlPanel("Lights")
    for name, label, min, max, step in LIGHT_SLIDERS:
        panel.add_slider(lights[name], "intensity", min, max, step, label)
    return panel


def create_context(surface=None, *, size=(800, 600), pixel_ratio=1, clock=None, show_fps=False):
    """Create the RenderContext for the demo.

    Parameters
    ----------
    surface : Surface | None
        The surface to render to. Can be None, e.g. when the surface is
        attached later.
    size : tuple
        The initial logical size (width, height) of the output.
    pixel_ratio : float
        The device pixel ratio of the output. Capped at 2.
    clock : Clock | None
        The clock to animate with.
    show_fps : bool
        Whether the renderer logs the frames per second.

    """
    scene, meshes, lights = build_scene()

    width, height = size
    camera = PerspectiveCamera(75, width / height, 0.1, 100)
    camera.position = (1, 1, 2)
    camera.look_at((0, 0, 0))
    scene.add(camera)

    controller = OrbitController(camera, enable_damping=True)
    renderer = WgpuRenderer(surface, show_fps=show_fps)

    viewport = ViewportManager(camera, surface)
    viewport.resize(width, height, pixel_ratio)

    spin = Spin([meshes["sphere"], meshes["cube"], meshes["torus"]])

    logger.info(f"Created demo scene with {len(meshes)} meshes and {len(lights)} lights")
    return RenderContext(
        scene,
        camera,
        renderer,
        controller=controller,
        clock=clock or Clock(),
        viewport=viewport,
        lights=lights,
        spin=spin,
    )
