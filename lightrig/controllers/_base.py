from ..cameras import Camera
from ..utils import logger


class Controller:
    """The base camera controller.

    The purpose of a controller is to provide an API to control a camera,
    and to convert user (mouse) events into camera adjustments.

    Parameters
    ----------
    camera: Camera
        The camera to control.
    enabled: bool
        Whether the controller is enabled (i.e. responds to events).
    damping: float
        The fraction of the pending motion that is applied on each call to
        ``update()``, between 0 and 1. The remainder carries over to the next
        frame, so motion coasts to a halt. Default 0.05.
    enable_damping: bool
        If False, pending motion is applied in full by the next ``update()``.
    register_events: rendercanvas canvas
        If given and not None, will call ``.register_events()``.

    Usage
    -----

    Input events only set the motion to apply (they never touch the camera
    directly). The camera is moved by ``update()``, which should be called
    once per frame, also when there was no input.

    Events can be fed through ``handle_event()``, which accepts the event
    dicts that a rendercanvas canvas emits. The controller can also be used
    programmatically by calling the action methods, such as ``rotate()``,
    ``pan()`` and ``zoom()``.
    """

    # Maps a button to (action name, mode, multiplier)
    _default_controls = {}

    def __init__(
        self,
        camera,
        *,
        enabled=True,
        damping=0.05,
        enable_damping=True,
        register_events=None,
    ):
        if not isinstance(camera, Camera):
            raise TypeError(f"Controller needs a Camera, not {camera!r}")
        self._camera = camera
        self.enabled = enabled
        self.damping = damping
        self.enable_damping = enable_damping
        self._controls = dict(self._default_controls)

        # The drag in progress: (action name, multiplier, last position)
        self._drag = None

        if register_events is not None:
            self.register_events(register_events)

    @property
    def camera(self):
        """The camera that this controller steers."""
        return self._camera

    @property
    def enabled(self):
        """Whether the controller responds to events."""
        return self._enabled

    @enabled.setter
    def enabled(self, value):
        self._enabled = bool(value)
        if not self._enabled:
            self._drag = None

    @property
    def damping(self):
        """The fraction of the pending motion applied per frame (0..1)."""
        return self._damping

    @damping.setter
    def damping(self, value):
        value = float(value)
        if not 0 < value <= 1:
            raise ValueError(f"damping must be in (0, 1], not {value}")
        self._damping = value

    @property
    def enable_damping(self):
        """Whether motion is spread over multiple frames."""
        return self._enable_damping

    @enable_damping.setter
    def enable_damping(self, value):
        self._enable_damping = bool(value)

    @property
    def controls(self):
        """A dictionary that maps buttons to actions.

        Each value is a tuple (action_name, mode, multiplier). The mode is
        "drag" for mouse buttons and "push" for the wheel. The multiplier
        converts pixels (or wheel units) to the action's units.
        """
        return self._controls

    def register_events(self, canvas):
        """Make the controller respond to the pointer and wheel events of
        a rendercanvas canvas.
        """
        canvas.add_event_handler(
            self.handle_event, "pointer_down", "pointer_move", "pointer_up", "wheel"
        )

    def handle_event(self, event):
        """Handle a rendercanvas event dict.

        Returns True if the event resulted in pending motion.
        """
        if not self._enabled:
            return False

        type = event["event_type"]
        if type == "pointer_down":
            action_tuple = self._controls.get(f"mouse{event['button']}")
            if action_tuple and action_tuple[1] == "drag" and self._drag is None:
                name, _, multiplier = action_tuple
                self._drag = name, multiplier, (event["x"], event["y"])
        elif type == "pointer_move":
            if self._drag is not None:
                name, multiplier, (x0, y0) = self._drag
                x, y = event["x"], event["y"]
                self._drag = name, multiplier, (x, y)
                delta = (x - x0) * multiplier[0], (y - y0) * multiplier[1]
                self._apply_action(name, delta)
                return True
        elif type == "pointer_up":
            self._drag = None
        elif type == "wheel":
            action_tuple = self._controls.get("wheel")
            if action_tuple:
                name, _, multiplier = action_tuple
                # Technically there is horizontal and vertical scroll,
                # but this does not work well cross-platform, so we consider it 1D.
                d = event.get("dy", 0) or event.get("dx", 0)
                self._apply_action(name, d * multiplier)
                return True
        return False

    def _apply_action(self, name, delta):
        func = getattr(self, "_update_" + name, None)
        if func is None:
            logger.warning(f"{self.__class__.__name__} has no action {name!r}")
            return
        func(delta)

    def update(self):
        """Advance the controller one frame, moving the camera.

        Returns True if the camera is still moving.
        """
        raise NotImplementedError()
