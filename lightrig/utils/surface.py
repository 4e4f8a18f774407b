"""
Output surfaces: what a renderer draws onto.

A surface has a logical size (in logical pixels, as used by the windowing
system) and a pixel ratio. Their product is the physical size of the image
that the renderer produces.
"""


class Surface:
    """Base class for output surfaces.

    Parameters
    ----------
    width : float
        The logical width.
    height : float
        The logical height.
    pixel_ratio : float
        The number of physical pixels per logical pixel.

    """

    def __init__(self, width=640, height=480, pixel_ratio=1):
        self._closed = False
        self.resize(width, height)
        self.set_pixel_ratio(pixel_ratio)

    def __repr__(self):
        w, h = self._logical_size
        return f"<{self.__class__.__name__} {w}x{h} @{self._pixel_ratio} at {hex(id(self))}>"

    def resize(self, width, height):
        """Set the logical size of the surface."""
        width, height = float(width), float(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self._logical_size = width, height

    def set_pixel_ratio(self, ratio):
        """Set the number of physical pixels per logical pixel."""
        ratio = float(ratio)
        if ratio <= 0:
            raise ValueError(f"Pixel ratio must be positive, got {ratio}")
        self._pixel_ratio = ratio

    @property
    def logical_size(self):
        """The size in logical pixels (width, height)."""
        return self._logical_size

    @property
    def pixel_ratio(self):
        """The number of physical pixels per logical pixel."""
        return self._pixel_ratio

    @property
    def physical_size(self):
        """The size in physical pixels (width, height), as integers."""
        w, h = self._logical_size
        r = self._pixel_ratio
        return max(1, int(w * r + 0.5)), max(1, int(h * r + 0.5))

    @property
    def is_closed(self):
        """Whether the surface has been closed (and can no longer be drawn to)."""
        return self._closed

    def close(self):
        """Close the surface."""
        self._closed = True


class OffscreenSurface(Surface):
    """A surface that exists only in memory.

    The renderer keeps the rendered image, which can be obtained with
    ``renderer.snapshot()``.
    """


class CanvasSurface(Surface):
    """A surface that wraps a rendercanvas canvas.

    The initial logical size is taken from the canvas. The pixel ratio is
    the resolution that the renderer renders at; the result is resampled
    onto the canvas.

    Parameters
    ----------
    canvas : rendercanvas.BaseRenderCanvas
        The canvas to draw onto.
    pixel_ratio : float | None
        The pixel ratio to render at. If None (default), the canvas' own
        pixel ratio is used.

    """

    def __init__(self, canvas, pixel_ratio=None):
        self._canvas = canvas
        width, height = canvas.get_logical_size()
        if pixel_ratio is None:
            pixel_ratio = canvas.get_pixel_ratio()
        super().__init__(max(width, 1), max(height, 1), pixel_ratio)

    @property
    def canvas(self):
        """The wrapped canvas."""
        return self._canvas

    @property
    def is_closed(self):
        return self._closed or self._canvas.get_closed()

    def close(self):
        super().close()
        self._canvas.close()

    def get_context(self):
        """Get the wgpu canvas context of the wrapped canvas."""
        return self._canvas.get_context("wgpu")

    def request_draw(self, draw_function=None):
        """Forward a draw request to the canvas."""
        self._canvas.request_draw(draw_function)
