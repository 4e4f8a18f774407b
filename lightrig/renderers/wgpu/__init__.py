"""
The wgpu renderer.
"""

# flake8: noqa

from ._shared import Shared, get_shared, select_power_preference
from ._renderer import WgpuRenderer
