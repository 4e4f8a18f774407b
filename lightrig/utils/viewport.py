from . import logger


class ViewportState:
    """The size and pixel density of the output, as last set by a resize."""

    __slots__ = ["width", "height", "pixel_ratio"]

    def __init__(self, width, height, pixel_ratio):
        self.width = width
        self.height = height
        self.pixel_ratio = pixel_ratio

    def __repr__(self):
        return f"ViewportState({self.width}, {self.height}, {self.pixel_ratio})"

    def __eq__(self, other):
        if not isinstance(other, ViewportState):
            return NotImplemented
        return (self.width, self.height, self.pixel_ratio) == (
            other.width,
            other.height,
            other.pixel_ratio,
        )

    @property
    def aspect(self):
        """The aspect ratio (width divided by height)."""
        return self.width / self.height


class ViewportManager:
    """Keeps the camera projection and the output surface in sync with the window size.

    On each resize, the camera's projection is recomputed for the new aspect
    ratio, and the surface gets the new size and a pixel ratio that is capped
    at ``max_pixel_ratio``, to bound the cost of rendering on high-density
    displays. The manager is the only thing that changes the viewport state.

    Parameters
    ----------
    camera : Camera
        The camera, must have an ``update_projection(aspect)`` method.
    surface : Surface | None
        The output surface, must have ``resize(width, height)`` and
        ``set_pixel_ratio(ratio)`` methods. Can be None for headless use.
    max_pixel_ratio : float
        The largest pixel ratio to render at. Default 2.

    """

    def __init__(self, camera, surface=None, *, max_pixel_ratio=2):
        self._camera = camera
        self._surface = surface
        self._max_pixel_ratio = float(max_pixel_ratio)
        if self._max_pixel_ratio <= 0:
            raise ValueError("max_pixel_ratio must be positive.")
        self._state = None

    @property
    def state(self):
        """The current ViewportState, or None before the first resize."""
        return self._state

    @property
    def surface(self):
        """The output surface that is resized."""
        return self._surface

    @surface.setter
    def surface(self, surface):
        self._surface = surface
        if surface is not None and self._state is not None:
            self._apply_to_surface()

    @property
    def max_pixel_ratio(self):
        """The cap on the pixel ratio."""
        return self._max_pixel_ratio

    def resize(self, width, height, device_pixel_ratio=1):
        """Handle a change in the size of the output.

        Sizes of zero (e.g. a minimized window) are ignored. Resizing to
        the current size is harmless, so resize events can be coalesced.
        """
        width, height = float(width), float(height)
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to {width}x{height}")
            return
        pixel_ratio = min(float(device_pixel_ratio), self._max_pixel_ratio)
        self._state = ViewportState(width, height, pixel_ratio)
        self._camera.update_projection(width / height)
        if self._surface is not None:
            self._apply_to_surface()

    def _apply_to_surface(self):
        state = self._state
        self._surface.resize(state.width, state.height)
        self._surface.set_pixel_ratio(state.pixel_ratio)

    def handle_event(self, event):
        """Handle a rendercanvas "resize" event dict."""
        if event["event_type"] == "resize":
            self.resize(
                event["width"], event["height"], event.get("pixel_ratio", 1)
            )

    def register_events(self, canvas):
        """Make the manager respond to resize events of a rendercanvas canvas."""
        canvas.add_event_handler(self.handle_event, "resize")
