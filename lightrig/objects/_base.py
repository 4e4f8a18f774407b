from __future__ import annotations

import weakref
from typing import Callable, Iterator, List

import numpy as np
import pylinalg as la

from ..geometries import Geometry
from ..materials import Material


class WorldObject:
    """Base class for objects.

    This class represents objects in the world, i.e., the scene graph. Each
    WorldObject has geometry to define its data, and material to define its
    appearance. The object itself is only responsible for defining object
    hierarchies (parent / children) and its position and orientation in the
    world.

    Parameters
    ----------
    geometry : Geometry
        The data defining the shape of the object.
    material : Material
        The data defining the appearance of the object.
    visible : bool
        Whether the object is visible.
    name : str
        The name of the object.

    Notes
    -----
    The transform is kept as three plain arrays: ``position``, ``rotation``
    (euler angles in radians, applied in XYZ order) and ``scale``. Assigning
    to them (or to their individual elements, e.g. ``obj.rotation[1] = 0.5``)
    is picked up the next time ``matrix`` is read.

    """

    def __init__(
        self,
        geometry: Geometry | None = None,
        material: Material | None = None,
        *,
        visible: bool = True,
        name: str = "",
    ) -> None:
        self._parent: weakref.ReferenceType[WorldObject] | None = None
        self._children: List[WorldObject] = []

        self.geometry = geometry
        self.material = material
        self.visible = visible
        self.name = name

        self._position = np.zeros(3, dtype=np.float64)
        self._rotation = np.zeros(3, dtype=np.float64)
        self._scale = np.ones(3, dtype=np.float64)

    def __repr__(self):
        return f"<lightrig.{self.__class__.__name__} {self.name} at {hex(id(self))}>"

    @property
    def geometry(self) -> Geometry | None:
        """The object's geometry, the data that defines (the shape of) this object."""
        return self._geometry

    @geometry.setter
    def geometry(self, geometry: Geometry | None):
        if not (geometry is None or isinstance(geometry, Geometry)):
            raise TypeError(
                f"WorldObject.geometry must be a Geometry object or None, not {geometry!r}"
            )
        self._geometry = geometry

    @property
    def material(self) -> Material | None:
        """The object's material, the data that defines the appearance of this object."""
        return self._material

    @material.setter
    def material(self, material: Material | None):
        if not (material is None or isinstance(material, Material)):
            raise TypeError(
                f"WorldObject.material must be a Material object or None, not {material!r}"
            )
        self._material = material

    @property
    def visible(self) -> bool:
        """Whether is object is rendered or not. Default True."""
        return self._visible

    @visible.setter
    def visible(self, visible: bool) -> None:
        self._visible = bool(visible)

    # %% Transform

    @property
    def position(self) -> np.ndarray:
        """The position (x, y, z) of the object, relative to its parent."""
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position[:] = value

    @property
    def rotation(self) -> np.ndarray:
        """The orientation as euler angles (x, y, z) in radians, in XYZ order."""
        return self._rotation

    @rotation.setter
    def rotation(self, value) -> None:
        self._rotation[:] = value

    @property
    def scale(self) -> np.ndarray:
        """The scale factors (x, y, z) of the object."""
        return self._scale

    @scale.setter
    def scale(self, value) -> None:
        self._scale[:] = value

    @property
    def quaternion(self) -> np.ndarray:
        """The rotation expressed as a quaternion (x, y, z, w)."""
        return la.quat_from_euler(self._rotation, order="XYZ")

    @property
    def matrix(self) -> np.ndarray:
        """The 4x4 transform of this object, relative to its parent."""
        return la.mat_compose(self._position, self.quaternion, self._scale)

    @property
    def world_matrix(self) -> np.ndarray:
        """The 4x4 transform of this object, in world space."""
        parent = self.parent
        if parent is None:
            return self.matrix
        return parent.world_matrix @ self.matrix

    @property
    def world_position(self) -> np.ndarray:
        """The position of this object, in world space."""
        return self.world_matrix[:3, 3].copy()

    # %% Hierarchy

    @property
    def parent(self) -> WorldObject | None:
        """Object's parent on the scene graph (read-only)."""
        return self._parent and self._parent()

    @property
    def children(self) -> tuple[WorldObject, ...]:
        """tuple of children of this object. (read-only)"""
        return tuple(self._children)

    def add(self, *objects: WorldObject) -> WorldObject:
        """Add child objects.

        Any number of objects may be added. Adding an object that already has
        a parent moves it to this object.

        Parameters
        ----------
        *objects : WorldObject
            The world object(s) to add as children.

        Returns
        -------
        self : WorldObject
            Returns itself, so calls can be chained.

        """
        for obj in objects:
            if not isinstance(obj, WorldObject):
                raise TypeError(f"Can only add WorldObject instances, not {obj!r}")
            if obj is self:
                raise ValueError("Cannot add an object to itself.")
            current_parent = obj.parent
            if current_parent is not None:
                current_parent._children.remove(obj)
            obj._parent = weakref.ref(self)
            self._children.append(obj)
        return self

    def traverse(self, callback: Callable[[WorldObject], None], skip_invisible=False):
        """Executes the callback on this object and all descendants.

        If ``skip_invisible`` is given and True, objects whose
        ``visible`` property is False - and their children - are
        skipped.
        """
        for child in self.iter(skip_invisible=skip_invisible):
            callback(child)

    def iter(
        self, filter_fn: Callable[[WorldObject], bool] = None, skip_invisible=False
    ) -> Iterator[WorldObject]:
        """Create a generator that iterates over this objects and its children.
        If ``filter_fn`` is given, only objects for which it returns ``True``
        are included.
        """
        if skip_invisible and not self.visible:
            return

        if filter_fn is None:
            yield self
        elif filter_fn(self):
            yield self

        for child in self._children:
            yield from child.iter(filter_fn, skip_invisible)
