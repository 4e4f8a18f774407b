"""
Sliders that write into the attributes of scene objects, e.g. light intensities.

.. currentmodule:: lightrig.controls

.. autosummary::
    :toctree: controls/

    SliderBinding
    ControlPanel
    ImguiPanel

The ``ImguiPanel`` lives in ``lightrig.controls.imgui``, so that the
bindings can be used without a gui.

"""

# flake8: noqa

from ._binding import SliderBinding, ControlPanel
