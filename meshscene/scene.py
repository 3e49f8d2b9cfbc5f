"""The scene: top-level objects, their hierarchy, the camera, the light and the sky box."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional

from .light import Light
from .materials_library import MaterialsLibrary
from .mesh import Mesh, SourceMesh
from .scene_object import SceneObject
from .skybox import SkyBox


def _resolve_index(token: str, count: int, path) -> int:
    index = int(token)
    resolved = index - 1 if index > 0 else count + index
    if not 0 <= resolved < count:
        raise ValueError(f"{path}: index {index} out of range")
    return resolved


def _load_wavefront(path) -> Mesh:
    """Read a Wavefront OBJ file into a mesh, joining identical vertices."""
    path = Path(path)
    if path.suffix.lower() != ".obj":
        raise ValueError(f"unsupported mesh format: {path}")
    positions, texcoords, normals = [], [], []
    out_positions, out_texcoords, out_normals = [], [], []
    slots: dict[tuple, int] = {}
    faces = []

    def corner(token: str) -> int:
        fields = token.split("/")
        v = _resolve_index(fields[0], len(positions), path)
        vt = (
            _resolve_index(fields[1], len(texcoords), path)
            if len(fields) > 1 and fields[1]
            else None
        )
        vn = (
            _resolve_index(fields[2], len(normals), path)
            if len(fields) > 2 and fields[2]
            else None
        )
        key = (v, vt, vn)
        if key not in slots:
            slots[key] = len(out_positions)
            out_positions.append(positions[v])
            out_texcoords.append(None if vt is None else texcoords[vt])
            out_normals.append(None if vn is None else normals[vn])
        return slots[key]

    with path.open(encoding="utf-8") as stream:
        for line in stream:
            parts = line.split()
            if not parts or parts[0].startswith("#"):
                continue
            tag, values = parts[0], parts[1:]
            if tag == "v":
                positions.append(tuple(float(x) for x in values[:3]))
            elif tag == "vt":
                uv = [float(x) for x in values[:2]]
                texcoords.append(tuple(uv + [0.0] * (2 - len(uv))))
            elif tag == "vn":
                normals.append(tuple(float(x) for x in values[:3]))
            elif tag == "f":
                corners = [corner(token) for token in values]
                if len(corners) < 3:
                    raise ValueError(f"{path}: face with fewer than three vertices")
                first = corners[0]
                faces.extend(
                    (first, second, third)
                    for second, third in zip(corners[1:], corners[2:])
                )

    if not faces:
        raise ValueError(f"{path}: no faces found")

    def complete(stream):
        return stream if all(item is not None for item in stream) else None

    source = SourceMesh(
        vertices=out_positions,
        faces=faces,
        normals=complete(out_normals),
        texcoords=complete(out_texcoords),
    )
    mesh = Mesh()
    mesh.join_identical_vertices()
    mesh.create([source])
    return mesh


class Scene:
    """Objects placed in the world together with the camera, light and sky box."""

    def __init__(
        self,
        materials: Optional[MaterialsLibrary] = None,
        models_dir=None,
        mesh_loader: Optional[Callable] = None,
    ):
        self.materials = materials if materials is not None else MaterialsLibrary()
        self.models_dir = models_dir
        self.mesh_loader = mesh_loader if mesh_loader is not None else _load_wavefront
        self.objects: list[SceneObject] = []
        self.camera = None
        self.light: Optional[Light] = None
        self.skybox = SkyBox()

    def init(self, camera) -> None:
        """Attach the camera the scene is viewed through."""
        self.camera = camera

    def _models_path(self) -> Path:
        if self.models_dir is None:
            return Path.cwd() / "resources" / "models"
        return Path(self.models_dir)

    def create_entity(
        self,
        name,
        mesh_file,
        material_id,
        position=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
        parent="",
    ) -> SceneObject:
        """Load a mesh from the models folder and place it at the top level or under parent."""
        parent_object = None
        if parent:
            parent_object = self.search_object_by_name(parent)
            if parent_object is None:
                raise KeyError(f"{parent} not found")
        material = self.materials.get_material(material_id)
        mesh_path = str(self._models_path() / mesh_file)
        mesh = self.mesh_loader(mesh_path)
        obj = SceneObject(name, mesh_path, position, rotation, scale, material, mesh)
        if parent_object is None:
            self.objects.append(obj)
        else:
            parent_object.add_child(obj)
        return obj

    def create_light(self, position, color, intensity) -> Light:
        """Replace the scene light."""
        self.light = Light(position, color, intensity)
        return self.light

    def search_in_children(self, parent, name) -> Optional[SceneObject]:
        """Depth-first search below parent for an object with this name."""
        for child in parent.children:
            if child.name == name:
                return child
            found = self.search_in_children(child, name)
            if found is not None:
                return found
        return None

    def search_object_by_name(self, name) -> Optional[SceneObject]:
        """First object with this name, top-level objects before their descendants."""
        for obj in self.objects:
            if obj.name == name:
                return obj
            found = self.search_in_children(obj, name)
            if found is not None:
                return found
        return None

    def add_child_to(self, parent_name, child) -> None:
        """Hang child under the named object."""
        parent = self.search_object_by_name(parent_name)
        if parent is None:
            raise KeyError(f"{parent_name} not found")
        parent.add_child(child)

    def clear(self) -> None:
        """Remove every object and its descendants."""
        for obj in self.objects:
            obj.clear_children()
        self.objects.clear()