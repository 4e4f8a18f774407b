"""
Show a RenderContext in a window, with as little boilerplate as possible.
"""

import sys

from . import logger
from .loop import RenderLoop
from .surface import CanvasSurface


class Display:
    """A helper to show a RenderContext in a rendercanvas window.

    This class wires up the parts of an interactive session: the canvas
    becomes the renderer's target, the controller and the viewport manager
    receive the canvas' events, and an optional control panel is drawn on
    top of the scene. The canvas schedules the frames; each draw performs
    one tick of a RenderLoop and, unless the token is cancelled, requests
    the next draw.

    Parameters
    ----------
    context : RenderContext
        The context to show.
    canvas : rendercanvas.BaseRenderCanvas | None
        The canvas to show the scene in. If not given, a canvas is created
        with ``rendercanvas.auto``.
    panel : ControlPanel | None
        The sliders to show on top of the scene.
    size : tuple
        The size of the canvas to create. Default (800, 600).
    max_fps : float
        The maximum frame rate of the canvas to create. Default 60.
    title : str
        The title of the window.
    max_ticks : int | None
        If given, the display stops after this many frames.

    """

    def __init__(
        self,
        context,
        canvas=None,
        panel=None,
        *,
        size=(800, 600),
        max_fps=60,
        title="lightrig",
        max_ticks=None,
    ):
        self.context = context
        self.canvas = canvas
        self.panel = panel
        self.size = size
        self.max_fps = max_fps
        self.title = title
        self.max_ticks = max_ticks
        self.loop = RenderLoop(context, max_fps=None)
        self._gui = None

    def _create_canvas(self):
        from rendercanvas.auto import RenderCanvas

        return RenderCanvas(
            size=self.size,
            title=self.title,
            update_mode="continuous",
            max_fps=self.max_fps,
        )

    def setup(self):
        """Create the canvas (if needed), and connect it to the context."""
        context = self.context
        if self.canvas is None:
            self.canvas = self._create_canvas()
        canvas = self.canvas
        if canvas.get_closed():
            raise RuntimeError(
                "Can not show a closed canvas. Did you repeatedly call `show`?"
            )

        if not any(context.scene.traverse_lights()):
            logger.warning(
                "Your scene does not contain any lights. Some objects may not be visible."
            )

        surface = CanvasSurface(canvas)
        context.renderer.target = surface
        if context.viewport is not None:
            context.viewport.surface = surface
            width, height = canvas.get_logical_size()
            context.viewport.resize(width, height, canvas.get_pixel_ratio())
            context.viewport.register_events(canvas)
        if context.controller is not None:
            context.controller.register_events(canvas)
        canvas.add_event_handler(self._on_close, "close")

        if self.panel is not None:
            from ..controls.imgui import ImguiPanel

            self._gui = ImguiPanel(self.panel, context.renderer.device, canvas)

        canvas.request_draw(self.draw)

    def draw(self):
        """Draw one frame. Used as the canvas' draw function."""
        if self.context.stopped:
            return
        self.loop.tick()
        if self._gui is not None:
            self._gui.render()
        if self.max_ticks is not None and self.loop.tick_count >= self.max_ticks:
            self.stop()
        if not self.context.stopped:
            self.canvas.request_draw()

    def show(self):
        """Set up, and run the canvas' event loop until the window is closed."""
        self.setup()
        logger.info("Showing lightrig display")
        sys.modules[self.canvas.__module__].loop.run()

    def stop(self):
        """Stop drawing and close the window."""
        self.context.token.cancel()
        if self.canvas is not None and not self.canvas.get_closed():
            self.canvas.close()

    def _on_close(self, event):
        logger.info("Canvas closed, stopping")
        self.context.token.cancel()


def show(context, panel=None, **kwargs):
    """Show a RenderContext in a new window. See ``Display`` for the arguments."""
    Display(context, panel=panel, **kwargs).show()
