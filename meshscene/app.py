"""Application callbacks, engine settings and the orbiting mesh viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from . import transforms as tf
from .camera import Camera
from .conventions import ShaderType
from .scene import Scene

KEY_P = 80
PRESS = 1
RELEASE = 0
MOUSE_BUTTON_3 = 2

DEFAULT_WINDOW_TITLE = "OpenGL App"


class App:
    """Receiver of window, input and frame events; every handler does nothing by default."""

    def init_callback(self, window) -> None:
        pass

    def display_callback(self, window, elapsed) -> None:
        pass

    def window_close_callback(self, window) -> None:
        pass

    def window_size_callback(self, window, width, height) -> None:
        pass

    def cursor_callback(self, window, xpos, ypos) -> None:
        pass

    def key_callback(self, window, key, scancode, action, mods) -> None:
        pass

    def mouse_button_callback(self, window, button, action, mods) -> None:
        pass

    def scroll_callback(self, window, xoffset, yoffset) -> None:
        pass

    def joystick_callback(self, jid, event) -> None:
        pass


class Engine:
    """Window and context settings together with the application they drive."""

    def __init__(self):
        self.app: App | None = None
        self.window_width = 640
        self.window_height = 480
        self.gl_major = 3
        self.gl_minor = 3
        self.fullscreen = 0
        self.vsync = 0
        self.window_title = DEFAULT_WINDOW_TITLE

    def set_app(self, app) -> None:
        self.app = app

    def set_opengl(self, major, minor) -> None:
        """Request a context of this OpenGL version."""
        self.gl_major = int(major)
        self.gl_minor = int(minor)

    def set_window(self, width, height, title, fullscreen, vsync) -> None:
        """Choose the window size, title, fullscreen mode and swap interval."""
        self.window_width = int(width)
        self.window_height = int(height)
        self.window_title = str(title)
        self.fullscreen = int(fullscreen)
        self.vsync = int(vsync)


@dataclass
class Cursor:
    """Pointer position now and at the last camera update."""

    x_pos: float = 0.0
    y_pos: float = 0.0
    last_x_pos: float = 0.0
    last_y_pos: float = 0.0
    pressing: bool = False


class MeshViewerApp(App):
    """Shows a scene and orbits the camera around its target with the middle mouse button."""

    def __init__(self, scene=None):
        self.scene = scene if scene is not None else Scene()
        self.cursor = Cursor()

    def init_callback(self, window) -> None:
        """Set up the camera, material, model and light; window is its (width, height)."""
        width, height = window
        self.scene.init(Camera(width, height, (0.0, 0.0, -12.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)))
        materials = self.scene.materials
        materials.create_material(
            "reflectiveTransparent", (0.9, 0.9, 0.9), 32.0, 0.7, False, ShaderType.LIGHT
        )
        self.scene.create_entity(
            "bull",
            "Bull.obj",
            materials.material_id("reflectiveTransparent"),
            (0.0, -3.0, 0.0),
            (-90.0, 0.0, 0.0),
            (0.03, 0.03, 0.03),
        )
        self.scene.create_light((0.0, 4.0, 0.0), (1.0, 1.0, 1.0), 0.8)

    def window_size_callback(self, window, width, height) -> None:
        self.scene.camera.resize(width, height)

    def cursor_callback(self, window, xpos, ypos) -> None:
        self.cursor.x_pos = float(xpos)
        self.cursor.y_pos = float(ypos)

    def display_callback(self, window, elapsed) -> None:
        if self.cursor.pressing:
            self.update_camera()

    def key_callback(self, window, key, scancode, action, mods) -> None:
        if key == KEY_P and action == PRESS:
            self.scene.camera.change_mode()

    def mouse_button_callback(self, window, button, action, mods) -> None:
        if button != MOUSE_BUTTON_3:
            return
        if action == PRESS:
            self.cursor.pressing = True
            self.cursor.last_x_pos = self.cursor.x_pos
            self.cursor.last_y_pos = self.cursor.y_pos
        elif action == RELEASE:
            self.cursor.pressing = False

    def scroll_callback(self, window, xoffset, yoffset) -> None:
        self.scene.camera.update_zoom(yoffset)

    def update_camera(self) -> None:
        """Orbit the camera around its target by the pointer movement since the last update."""
        camera = self.scene.camera
        cursor = self.cursor
        position = np.append(camera.eye, 1.0)
        pivot = np.append(camera.look_at, 1.0)

        # A full sweep across the view turns by 2*pi horizontally and pi vertically.
        with np.errstate(divide="ignore", invalid="ignore"):
            delta_x = np.float64(2.0 * math.pi) / np.float64(camera.width)
            delta_y = np.float64(math.pi) / np.float64(camera.height)
            x_angle = float((cursor.last_x_pos - cursor.x_pos) * delta_x)
            y_angle = float((cursor.last_y_pos - cursor.y_pos) * delta_y)

        # Stop before the view direction lines up with the up vector.
        cos_angle = float(np.dot(camera.view_dir(), camera.up))
        if cos_angle * np.sign(y_angle) > 0.99:
            y_angle = 0.0

        rotation_x = tf.rotate(np.identity(4), x_angle, camera.up)
        position = rotation_x @ (position - pivot) + pivot

        rotation_y = tf.rotate(np.identity(4), y_angle, camera.right_vector())
        final_position = (rotation_y @ (position - pivot) + pivot)[:3]

        camera.set_camera_view(final_position, camera.look_at, camera.up)

        cursor.last_x_pos = cursor.x_pos
        cursor.last_y_pos = cursor.y_pos