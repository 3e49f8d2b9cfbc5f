"""Point light and its uniform-block layout."""

from __future__ import annotations

import struct

import numpy as np

from .entity import Entity

_VEC4 = 16
BLOCK_SIZE = 4 * _VEC4


class Light(Entity):
    """Point light whose ambient, diffuse and specular terms scale with intensity."""

    def __init__(self, position, color, intensity):
        super().__init__(position, (1.0, 1.0, 1.0), (1.0, 1.0, 1.0))
        self.color = np.array(color, dtype=np.float64)
        if self.color.shape != (3,):
            raise ValueError("color must have three components")
        self.intensity = float(intensity)

    def ambient(self) -> np.ndarray:
        return self.diffuse() * (0.2 * self.intensity)

    def diffuse(self) -> np.ndarray:
        return self.color * (0.5 * self.intensity)

    def specular(self) -> np.ndarray:
        return np.full(3, self.intensity)

    def uniform_block(self) -> bytes:
        """Contents of the light uniform buffer: position, ambient, diffuse, specular."""
        block = bytearray(BLOCK_SIZE)
        for slot, vector in enumerate(
            (self.position, self.ambient(), self.diffuse(), self.specular())
        ):
            struct.pack_into("<3f", block, slot * _VEC4, *vector)
        return bytes(block)