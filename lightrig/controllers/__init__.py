"""
Controllers define how a camera is steered by user input.

.. currentmodule:: lightrig.controllers

.. autosummary::
    :toctree: controllers/

    Controller
    OrbitController

"""

# flake8: noqa

from ._base import Controller
from ._orbit import OrbitController
