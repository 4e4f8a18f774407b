"""
A global object shared by all renderers: the wgpu adapter and device.
"""

import os

import wgpu

from ...utils import logger


class Shared:
    """An object to store global data to share between multiple wgpu renderers.

    The device is created on first use, so that a renderer can be created
    (and detached from its surface) on a machine without a GPU.
    """

    _power_preference = None
    _instance = None

    def __init__(self):
        assert Shared._instance is None

        power_preference = (
            Shared._power_preference
            or os.getenv("LIGHTRIG_POWER_PREFERENCE", "")
            or "high-performance"
        )
        self._adapter = wgpu.gpu.request_adapter_sync(
            power_preference=power_preference
        )
        if self._adapter is None:
            raise RuntimeError("No wgpu adapter is available.")
        logger.info(f"Using wgpu adapter: {self._adapter.summary}")

        # There is one device per process, so that any object can be
        # drawn by any renderer.
        self._device = self._adapter.request_device_sync(
            required_features=[], required_limits={}
        )

        # Set this instance as the global one
        Shared._instance = self

    @property
    def adapter(self):
        """The shared WGPU adapter object."""
        return self._adapter

    @property
    def device(self):
        """The shared WGPU device object."""
        return self._device


def get_shared():
    """Get the globally shared instance, creating it if necessary."""
    if Shared._instance is None:
        Shared()
    return Shared._instance


def select_power_preference(power_preference):
    """Select the power preference for the adapter.

    Must be called before the first render. ``power_preference`` can be
    "high-performance" (default) or "low-power".
    """
    if power_preference not in ("high-performance", "low-power"):
        raise ValueError(f"Invalid power preference: {power_preference!r}")
    if Shared._instance is not None:
        raise RuntimeError("The power preference must be set before the first render.")
    Shared._power_preference = power_preference

