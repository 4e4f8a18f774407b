from ._base import WorldObject
from ._mesh import Mesh
from ._lights import Light


class Scene(WorldObject):
    """The scene is a WorldObject that represents the root of a scene graph.

    Meshes and lights are added to it (or to its descendants) with ``add()``.
    The renderer walks the scene through ``traverse_renderables()`` and
    ``traverse_lights()``, so that it always sees the current membership.
    """

    def traverse_renderables(self, skip_invisible=True):
        """Get an iterator over all meshes in this scene.

        A new iterator is created on each call, so the traversal can be
        repeated, and reflects objects added in the meantime.
        """
        return self.iter(lambda ob: isinstance(ob, Mesh), skip_invisible)

    def traverse_lights(self, skip_invisible=True):
        """Get an iterator over all lights in this scene."""
        return self.iter(lambda ob: isinstance(ob, Light), skip_invisible)
