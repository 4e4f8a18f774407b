"""
The render loop: one tick per frame, that advances time-driven state and
renders the scene once.
"""

import time

from . import logger
from .errors import ResourceUnavailable
from ..animation import Clock


class CancellationToken:
    """A flag to stop a render loop from the outside.

    Once cancelled, a token stays cancelled.
    """

    def __init__(self):
        self._cancelled = False

    def __repr__(self):
        state = "cancelled" if self._cancelled else "active"
        return f"<CancellationToken {state} at {hex(id(self))}>"

    @property
    def cancelled(self):
        """Whether ``cancel()`` has been called."""
        return self._cancelled

    def cancel(self):
        """Request the loop to stop, after the current tick."""
        self._cancelled = True


class RenderContext:
    """Everything that a render loop reads from and writes to.

    The context is created once at startup, and passed to the loop, the
    viewport manager and the input handlers.

    Parameters
    ----------
    scene : Scene
        The scene to render.
    camera : Camera
        The camera to render the scene with.
    renderer : Renderer
        The renderer. Its target may be None or closed, in which case the
        render step of a tick is skipped.
    controller : Controller | None
        The camera controller, which is advanced one step per tick.
    clock : Clock | None
        The clock that provides the elapsed time. Default a new ``Clock``.
    viewport : ViewportManager | None
        The viewport manager that keeps the camera and surface in sync with
        the output size.
    lights : iterable | None
        The lights in the scene, for those who want to bind controls to them.
    spin : Spin | None
        The time-driven rotation of the animated objects.
    token : CancellationToken | None
        The token that stops the loop. Default a new ``CancellationToken``.

    """

    def __init__(
        self,
        scene,
        camera,
        renderer,
        *,
        controller=None,
        clock=None,
        viewport=None,
        lights=None,
        spin=None,
        token=None,
    ):
        self.scene = scene
        self.camera = camera
        self.renderer = renderer
        self.controller = controller
        self.clock = clock if clock is not None else Clock()
        self.viewport = viewport
        self.lights = lights
        self.spin = spin
        self.token = token if token is not None else CancellationToken()

    @property
    def stopped(self):
        """Whether the context's token has been cancelled."""
        return self.token.cancelled


class RenderLoop:
    """Drives a RenderContext, one tick at a time.

    Each tick reads the elapsed time from the clock, rotates the animated
    objects accordingly, advances the camera controller one damping step,
    and renders the scene. The motion is derived from the elapsed time only,
    so it does not depend on how many ticks there were, or how long they
    took.

    Parameters
    ----------
    context : RenderContext
        The state to drive.
    max_fps : float
        The maximum number of ticks per second when the loop is driven by
        ``run()``. Zero or None means no limit. Default 60.
    sleep : callable
        The function to wait with. Default ``time.sleep``.

    """

    def __init__(self, context, *, max_fps=60, sleep=None):
        self._context = context
        self.max_fps = max_fps
        self._sleep = sleep or time.sleep
        self._tick_count = 0
        self._last_tick_time = None

    @property
    def context(self):
        """The RenderContext that this loop drives."""
        return self._context

    @property
    def token(self):
        """The CancellationToken of the context."""
        return self._context.token

    @property
    def max_fps(self):
        """The maximum number of ticks per second, or None for no limit."""
        return self._max_fps

    @max_fps.setter
    def max_fps(self, value):
        if value is not None:
            value = float(value)
            if value < 0:
                raise ValueError("max_fps must not be negative.")
        self._max_fps = value or None

    @property
    def tick_count(self):
        """The number of ticks performed so far."""
        return self._tick_count

    def tick(self):
        """Perform one tick and return the elapsed time it was based on.

        If the renderer's target is unavailable, the render step is skipped
        and the tick still counts.
        """
        context = self._context
        self._last_tick_time = time.perf_counter()

        elapsed_time = context.clock.get_elapsed_time()
        if context.spin is not None:
            context.spin.apply(elapsed_time)
        if context.controller is not None:
            context.controller.update()

        try:
            context.renderer.render(context.scene, context.camera)
        except ResourceUnavailable as err:
            logger.debug(f"Skipping render of tick {self._tick_count}: {err}")

        self._tick_count += 1
        return elapsed_time

    def wait_for_next_frame(self):
        """Sleep until the next tick is due, according to ``max_fps``."""
        if self._max_fps is None or self._last_tick_time is None:
            return
        next_time = self._last_tick_time + 1 / self._max_fps
        remaining = next_time - time.perf_counter()
        if remaining > 0:
            self._sleep(remaining)

    def run(self, max_ticks=None):
        """Tick until the token is cancelled, or ``max_ticks`` ticks have passed.

        Returns the number of ticks performed in this call.
        """
        token = self._context.token
        count = 0
        logger.info("Render loop started")
        try:
            while not token.cancelled:
                self.tick()
                count += 1
                if max_ticks is not None and count >= max_ticks:
                    break
                self.wait_for_next_frame()
        finally:
            logger.info(f"Render loop stopped after {count} ticks")
        return count

    def stop(self):
        """Cancel the token, so that the loop stops after the current tick."""
        self._context.token.cancel()
