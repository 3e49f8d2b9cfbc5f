"""Scene model for a mesh viewer: cameras, transforms, materials, lights, meshes, objects, skyboxes and YAML scene files."""

__version__ = "0.1.0"