"""Saving a scene and its materials to a YAML ``.scene`` file and loading it back."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Optional

import yaml

from .conventions import ShaderType
from .light import Light
from .material import Material
from .materials_library import MaterialsLibrary
from .scene import Scene
from .scene_object import SceneObject
from .skybox import SkyBox

logger = logging.getLogger(__name__)


def _floats(vector) -> list[float]:
    return [float(component) for component in vector]


def _field(node: Mapping, key: str):
    try:
        return node[key]
    except (KeyError, TypeError):
        raise KeyError(f"scene node is missing {key!r}") from None


def _vec3(node: Mapping, key: str) -> tuple[float, float, float]:
    value = _field(node, key)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise ValueError(f"{key!r} must be a sequence of three numbers, got {value!r}")
    x, y, z = (float(component) for component in value)
    return x, y, z


def _entries(node) -> list:
    if node is None:
        return []
    if isinstance(node, (str, bytes)) or not isinstance(node, Sequence):
        raise ValueError(f"expected a sequence, got {node!r}")
    return list(node)


def _mesh_name(path: str) -> str:
    return path.rpartition("/")[2].rpartition("\\")[2]


def serialize_material(name, material: Material) -> dict:
    """Mapping that describes one named material."""
    return {
        "Name": str(name),
        "ID": int(material.id),
        "color": _floats(material.color),
        "diffuse": _floats(material.diffuse),
        "specular": _floats(material.specular),
        "shininess": float(material.shininess),
        "reflectiveness": float(material.reflectiveness),
        "transparent": int(material.transparent),
        "shaderType": int(material.shader_type),
    }


def serialize_object(obj: SceneObject) -> dict:
    """Mapping that describes an object and, nested, all its descendants."""
    if obj.material is None:
        raise ValueError(f"object {obj.name!r} has no material")
    node = {
        "Name": obj.name,
        "MeshName": _mesh_name(obj.mesh_file_path),
        "Position": _floats(obj.position),
        "Rotation": _floats(obj.rotation),
        "Scale": _floats(obj.scale),
        "MaterialID": int(obj.material.id),
    }
    if obj.has_children():
        node["Children"] = [serialize_object(child) for child in obj.children]
    return node


def serialize_light(light: Light) -> dict:
    """Mapping that describes the scene light."""
    return {
        "position": _floats(light.position),
        "color": _floats(light.color),
        "intensity": float(light.intensity),
    }


def serialize_skybox(skybox: SkyBox) -> dict:
    """Mapping that records where the sky box images come from."""
    return {"skyboxFolder": skybox.folder}


def scene_to_dict(scene: Scene, materials: MaterialsLibrary) -> dict:
    """The whole document: materials, objects, light and sky box."""
    material_nodes = []
    for name, material in materials.materials.items():
        material_nodes.append(serialize_material(name, material))
        logger.info("Serialize material with name =%s", name)
    object_nodes = []
    for obj in scene.objects:
        object_nodes.append(serialize_object(obj))
        logger.info("Serialize object with name =%s", obj.name)
    light_nodes = [] if scene.light is None else [serialize_light(scene.light)]
    logger.info("Serialize light")
    skybox_nodes = [serialize_skybox(scene.skybox)]
    logger.info("Serialize skybox")
    return {
        "Materials": material_nodes,
        "Objects": object_nodes,
        "Light": light_nodes,
        "Skybox": skybox_nodes,
    }


def serialize(scene: Scene, materials: MaterialsLibrary, filepath) -> None:
    """Write the scene and its materials to filepath as YAML."""
    document = scene_to_dict(scene, materials)
    with open(filepath, "w", encoding="utf-8") as stream:
        yaml.safe_dump(document, stream, sort_keys=False, default_flow_style=None)


def deserialize_material(materials: MaterialsLibrary, node: Mapping) -> Material:
    """Add the material a node describes to the library, keeping its id."""
    name = str(_field(node, "Name"))
    logger.info("Deserialized material with name = %s", name)
    return materials.load_material(
        int(_field(node, "ID")),
        name,
        _vec3(node, "color"),
        float(_field(node, "shininess")),
        float(_field(node, "reflectiveness")),
        int(_field(node, "transparent")),
        ShaderType(int(_field(node, "shaderType"))),
    )


def deserialize_object(
    scene: Scene, node: Mapping, parent: Optional[SceneObject] = None
) -> SceneObject:
    """Create the object a node describes, under parent if given, then its children."""
    name = str(_field(node, "Name"))
    logger.info("Deserialized object with name = %s", name)
    obj = scene.create_entity(
        name,
        str(_field(node, "MeshName")),
        int(_field(node, "MaterialID")),
        _vec3(node, "Position"),
        _vec3(node, "Rotation"),
        _vec3(node, "Scale"),
        parent.name if parent is not None else "",
    )
    for child in _entries(node.get("Children")):
        deserialize_object(scene, child, scene.search_object_by_name(name))
    return obj


def deserialize_light(scene: Scene, node: Mapping) -> Light:
    """Replace the scene light with the one a node describes."""
    logger.info("Deserialized light")
    return scene.create_light(
        _vec3(node, "position"), _vec3(node, "color"), float(_field(node, "intensity"))
    )


def deserialize_skybox(scene: Scene, node: Mapping) -> None:
    """Load the sky box images from the folder a node names."""
    logger.info("Deserialized skybox")
    scene.skybox.load_cube_map(str(_field(node, "skyboxFolder")))


def deserialize(scene: Scene, materials: MaterialsLibrary, filepath) -> None:
    """Replace the materials and objects with those in a ``.scene`` file.

    The light and sky box are replaced only when the file has them.
    """
    with open(filepath, encoding="utf-8") as stream:
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to load .scene file {filepath}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Failed to load .scene file {filepath}: not a mapping")

    materials.clear()
    for node in _entries(data.get("Materials")):
        deserialize_material(materials, node)

    scene.clear()
    for node in _entries(data.get("Objects")):
        deserialize_object(scene, node, None)

    for node in _entries(data.get("Light")):
        deserialize_light(scene, node)

    for node in _entries(data.get("Skybox")):
        deserialize_skybox(scene, node)