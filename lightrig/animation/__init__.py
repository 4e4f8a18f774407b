"""
Time-driven changes to the scene.

.. currentmodule:: lightrig.animation

.. autosummary::
    :toctree: animation/

    Clock
    Spin

"""

# flake8: noqa

from .clock import Clock
from .spin import Spin
