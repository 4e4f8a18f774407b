"""
The purpose of a renderer is to render (i.e. draw) a scene to an output
surface.

.. currentmodule:: lightrig.renderers

.. autosummary::
    :toctree: renderers/

    Renderer
    WgpuRenderer

A renderer renders into an internal texture, at the surface's physical size
(its logical size times its pixel ratio). For a canvas surface, the result
is then flushed (resampled) onto the canvas::

                             __________
                            | internal |
    [scene] -- render() --> |  color   | -- flush() --> [canvas]
                            |__________|

"""

# flake8: noqa

from ._base import Renderer
from .wgpu import WgpuRenderer
