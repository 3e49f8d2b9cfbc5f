"""Surface material and its uniform-block layout."""

from __future__ import annotations

import struct

import numpy as np

from .conventions import ShaderType

_VEC4 = 16
_FLOAT = 4
_VEC3 = 12
BLOCK_SIZE = 3 * _VEC4 + 2 * _FLOAT + 4

_SHININESS_OFFSET = 2 * _VEC4 + _VEC3
_REFLECTIVENESS_OFFSET = _SHININESS_OFFSET + _FLOAT
_TRANSPARENT_OFFSET = _SHININESS_OFFSET + 2 * _FLOAT


class Material:
    """Colour and lighting parameters of a surface."""

    def __init__(
        self,
        id,
        color,
        shininess=32.0,
        reflectiveness=0.5,
        transparent=True,
        shader_type=ShaderType.LIGHT,
    ):
        self.id = int(id)
        self.color = np.asarray(color, dtype=np.float64).copy()
        if self.color.shape != (3,):
            raise ValueError("color must have three components")
        self.diffuse = self.color * 0.6
        self.specular = self.color * 0.3
        self.shininess = float(shininess)
        self.reflectiveness = float(reflectiveness)
        self.transparent = int(transparent)
        self.shader_type = ShaderType(shader_type)

    def uniform_block(self) -> bytes:
        """Contents of the material uniform buffer, as the shaders read it."""
        block = bytearray(BLOCK_SIZE)
        struct.pack_into("<3f", block, 0, *self.color)
        struct.pack_into("<3f", block, _VEC4, *self.diffuse)
        struct.pack_into("<3f", block, 2 * _VEC4, *self.specular)
        struct.pack_into("<f", block, _SHININESS_OFFSET, self.shininess)
        struct.pack_into("<f", block, _REFLECTIVENESS_OFFSET, self.reflectiveness)
        struct.pack_into("<I", block, _TRANSPARENT_OFFSET, self.transparent)
        return bytes(block)