"""lightrig: a small lit scene with a damped orbit camera and live light sliders."""

# flake8: noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))

__wgpu_version_range__ = "0.19.0", "1.0.0"
__pylinalg_version_range__ = "0.5.0", "1.0.0"

from . import utils

from .objects import *
from .geometries import *
from .materials import *
from .cameras import *
from .controllers import *
from .animation import Clock, Spin
from .controls import *

from .renderers import Renderer, WgpuRenderer

from .utils.color import Color
from .utils.errors import InvalidConfiguration, ResourceUnavailable
from .utils.surface import Surface, OffscreenSurface, CanvasSurface
from .utils.viewport import ViewportManager, ViewportState
from .utils.loop import CancellationToken, RenderContext, RenderLoop
from .utils.show import show, Display
from .utils import logger
