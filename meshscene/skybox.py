"""Cube-map sky box: the six face images and the cube drawn around the camera."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

FACE_NAMES = ("right", "left", "top", "bottom", "front", "back")

_CUBE_TRIANGLES = (
    (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0),

    (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0),

    (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0),

    (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0),

    (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0),

    (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0),
)


def face_paths(folder) -> list[str]:
    """Paths of the six cube faces in cube-map order."""
    return [f"{folder}/{name}.jpg" for name in FACE_NAMES]


class SkyBox:
    """Six face images of a cube map and the unit cube they are drawn on."""

    VERTEX_COUNT = len(_CUBE_TRIANGLES)

    def __init__(self):
        self.folder = ""
        self.faces: list[Optional[Image.Image]] = []

    @staticmethod
    def vertices() -> np.ndarray:
        """Cube positions, three per triangle."""
        return np.array(_CUBE_TRIANGLES, dtype=np.float32)

    @property
    def is_complete(self) -> bool:
        return len(self.faces) == len(FACE_NAMES) and all(
            face is not None for face in self.faces
        )

    def load_cube_map(self, folder) -> list[Optional[Image.Image]]:
        """Load right, left, top, bottom, front and back images from folder."""
        self.folder = str(folder)
        return self.load_cube_map_faces(face_paths(self.folder))

    def load_cube_map_faces(self, faces: Iterable) -> list[Optional[Image.Image]]:
        """Load each face as RGB; a face that cannot be read is left as None."""
        loaded: list[Optional[Image.Image]] = []
        for path in faces:
            try:
                with Image.open(path) as image:
                    loaded.append(image.convert("RGB"))
            except (OSError, ValueError):
                logger.warning("Cubemap texture failed to load at path: %s", path)
                loaded.append(None)
        self.faces = loaded
        return loaded