"""Named collection of materials with sequential ids."""

from __future__ import annotations

from .conventions import ShaderType
from .material import Material


class MaterialsLibrary:
    """Materials keyed by name; new materials get the next free id."""

    def __init__(self):
        self.materials: dict[str, Material] = {}
        self.latest_id = 0

    def create_material(
        self,
        name,
        color,
        shininess=32.0,
        reflectiveness=0.5,
        transparent=True,
        shader_type=ShaderType.LIGHT,
    ) -> Material:
        """Create a material under the current id and advance the id."""
        material = Material(
            self.latest_id, color, shininess, reflectiveness, transparent, shader_type
        )
        self.add_material(name, material)
        self.latest_id += 1
        return material

    def load_material(
        self, id, name, color, shininess, reflectiveness, transparent, shader_type
    ) -> Material:
        """Add a material with a known id, keeping the id counter at least that high."""
        material = Material(id, color, shininess, reflectiveness, transparent, shader_type)
        self.add_material(name, material)
        self.latest_id = max(self.latest_id, material.id)
        return material

    def add_material(self, name, material) -> None:
        self.materials[name] = material

    def material_id(self, name) -> int:
        """Id of the material with this name."""
        try:
            return self.materials[name].id
        except KeyError:
            raise KeyError(f"no material named {name!r}") from None

    def get_material(self, id) -> Material:
        """The material with this id."""
        for material in self.materials.values():
            if material.id == id:
                return material
        raise KeyError(f"Invalid material with: {id} id!!")

    def clear(self) -> None:
        """Remove every material; the id counter is kept."""
        self.materials.clear()