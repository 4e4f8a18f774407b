from ..utils.errors import ResourceUnavailable


class Renderer:
    """Renderer base class.

    A renderer draws a scene, as seen through a camera, onto its target
    surface. The target can be detached (set to None), in which case
    ``render()`` raises ``ResourceUnavailable``.
    """

    def __init__(self, target=None):
        self._target = target

    @property
    def target(self):
        """The surface to render to, or None."""
        return self._target

    @target.setter
    def target(self, target):
        self._target = target

    def _check_target(self):
        """Get the target, raising ResourceUnavailable if it cannot be drawn to."""
        target = self._target
        if target is None:
            raise ResourceUnavailable("The renderer has no target surface.")
        if target.is_closed:
            raise ResourceUnavailable("The target surface is closed.")
        return target

    def render(self, scene, camera):
        """Render a scene with the specified camera as the viewpoint."""
        raise NotImplementedError()
