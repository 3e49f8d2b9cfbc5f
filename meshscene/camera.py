"""A camera holding view and projection matrices."""

from __future__ import annotations

import math

import numpy as np

from . import transforms as tf

NEAR_PLANE = 0.1
FAR_PLANE = 20.0
ORTHO_DEPTH = 20.0


def _aspect(width, height) -> float:
    if width == 0 or height == 0:
        return 0.0
    return float(width) / float(height)


class Camera:
    """Perspective or orthographic camera looking from eye towards look_at."""

    def __init__(self, width, height, eye, look_at, up):
        self.width = int(width)
        self.height = int(height)
        self.aspect_ratio = _aspect(self.width, self.height)
        self.eye = np.asarray(eye, dtype=np.float64)
        self.look_at = np.asarray(look_at, dtype=np.float64)
        self.up = np.asarray(up, dtype=np.float64)
        self.fov = 45.0
        self.ortho_limit = 1.0
        self.is_ortho = False
        self.view_matrix = np.identity(4)
        self.projection_matrix = np.identity(4)
        self.update_matrices()

    def set_camera_view(self, eye, look_at, up) -> None:
        """Place the camera and rebuild the view matrix."""
        self.eye = np.asarray(eye, dtype=np.float64)
        self.look_at = np.asarray(look_at, dtype=np.float64)
        self.up = np.asarray(up, dtype=np.float64)
        self.update_view_matrix()

    def set_view_matrix(self, view_matrix) -> None:
        """Replace the view matrix directly, leaving eye and target untouched."""
        self.view_matrix = np.array(view_matrix, dtype=np.float64)

    def change_mode(self) -> None:
        """Toggle between perspective and orthographic projection."""
        self.is_ortho = not self.is_ortho
        self.update_projection_matrix()

    def update_zoom(self, zoom) -> None:
        """Zoom by a scroll amount: scales the ortho box or narrows the field of view."""
        if self.is_ortho:
            with np.errstate(divide="ignore", invalid="ignore"):
                if zoom <= 0.0:
                    limit = np.float64(self.ortho_limit) / -(np.float64(0.9) * zoom)
                else:
                    limit = np.float64(self.ortho_limit) * (0.9 * zoom)
            self.ortho_limit = float(limit)
        else:
            self.fov = self.fov - zoom
        self.update_projection_matrix()

    def update_matrices(self) -> None:
        self.update_projection_matrix()
        self.update_view_matrix()

    def update_view_matrix(self) -> None:
        self.view_matrix = tf.look_at(self.eye, self.look_at, self.up)

    def update_projection_matrix(self) -> None:
        if self.is_ortho:
            extent = self.ortho_limit * self.aspect_ratio
            self.projection_matrix = tf.ortho(
                -extent, extent, -extent, extent, -ORTHO_DEPTH, ORTHO_DEPTH
            )
        else:
            self.projection_matrix = tf.perspective(
                math.radians(self.fov), self.aspect_ratio, NEAR_PLANE, FAR_PLANE
            )

    def resize(self, width, height) -> None:
        """Adopt a new viewport size; a zero dimension gives an aspect ratio of 0."""
        self.width = int(width)
        self.height = int(height)
        self.aspect_ratio = _aspect(self.width, self.height)
        self.update_projection_matrix()

    def view_dir(self) -> np.ndarray:
        """Direction the camera looks along, in world space."""
        return -self.view_matrix[2, :3].copy()

    def right_vector(self) -> np.ndarray:
        """Camera's right axis, in world space."""
        return self.view_matrix[0, :3].copy()