[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshscene"
version = "0.1.0"
description = "Scene model for a small mesh viewer: cameras, transforms, materials, lights, object hierarchies and YAML scene files."
requires-python = ">=3.10"
keywords = ["3d", "scene", "camera", "mesh", "materials", "yaml", "wavefront", "obj"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyyaml",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshscene"]

[tool.hatch.build.targets.sdist]
include = ["meshscene", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
