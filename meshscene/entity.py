"""Base of everything placed in a scene."""

from __future__ import annotations

import numpy as np


def _vec3(values) -> np.ndarray:
    vector = np.array(values, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected three components, got shape {vector.shape}")
    return vector


class Entity:
    """Something with a position, a rotation and a scale."""

    def __init__(self, position, rotation, scale):
        self.position = _vec3(position)
        self.rotation = _vec3(rotation)
        self.scale = _vec3(scale)
        self.model_matrix = np.identity(4)

    def move(self, position) -> None:
        """Place the entity at a new position."""
        self.position = _vec3(position)

    def rotate(self, radians) -> None:
        """Replace the entity's rotation."""
        self.rotation = _vec3(radians)