"""Named mesh instances arranged in a parent/child hierarchy."""

from __future__ import annotations

from typing import Optional

import numpy as np

from . import transforms as tf
from .entity import Entity


class SceneObject(Entity):
    """A mesh placed in the scene with a material, a parent and children.

    Rotation is kept in degrees, one angle per axis.
    """

    def __init__(
        self,
        name,
        mesh_file_path,
        position=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
        material=None,
        mesh=None,
    ):
        super().__init__(position, rotation, scale)
        # Entity keeps a cached matrix attribute; here it is computed on demand.
        del self.model_matrix
        self._model_matrix = np.identity(4)
        self.name = str(name)
        self.mesh_file_path = str(mesh_file_path)
        self.material = material
        self.mesh = mesh
        self.parent: Optional[SceneObject] = None
        self.children: list[SceneObject] = []

    def __repr__(self) -> str:
        return f"SceneObject(name={self.name!r}, children={len(self.children)})"

    def make_parent(self, parent) -> None:
        """Record the object this one hangs under."""
        self.parent = parent

    def add_child(self, child) -> None:
        """Hang child under this object."""
        child.make_parent(self)
        self.children.append(child)

    def model_matrix(self) -> np.ndarray:
        """World transform: positions accumulate up the hierarchy; rotation and
        scale are the object's own."""
        global_position = self.position.copy()
        node = self.parent
        while node is not None:
            global_position += node.position
            node = node.parent
        matrix = (
            tf.translate(np.identity(4), global_position)
            @ tf.euler_to_matrix(np.radians(self.rotation))
            @ tf.scale(np.identity(4), self.scale)
        )
        self._model_matrix = matrix
        return matrix

    def has_children(self) -> bool:
        return bool(self.children)

    def clear_children(self) -> None:
        """Remove the whole subtree below this object."""
        for child in self.children:
            child.clear_children()
        self.children.clear()