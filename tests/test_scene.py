from pathlib import Path

import numpy as np
import pytest

from meshscene.materials_library import MaterialsLibrary
from meshscene.mesh import Mesh
from meshscene.scene import Scene
from meshscene.scene_object import SceneObject


class _RecordingLoader:
    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return ("mesh", path)


@pytest.fixture
def library():
    materials = MaterialsLibrary()
    materials.create_material("grey", (0.5, 0.5, 0.5))
    materials.create_material("red", (1.0, 0.0, 0.0))
    return materials


@pytest.fixture
def scene(library, tmp_path):
    return Scene(library, tmp_path, _RecordingLoader())


def test_create_entity_at_top_level(scene, library, tmp_path):
    obj = scene.create_entity("bull", "Bull.obj", library.material_id("red"))
    assert scene.objects == [obj]
    assert obj.name == "bull"
    assert obj.mesh_file_path == str(tmp_path / "Bull.obj")
    assert obj.material is library.get_material(1)
    assert obj.mesh == ("mesh", str(tmp_path / "Bull.obj"))
    np.testing.assert_allclose(obj.position, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(obj.scale, [1.0, 1.0, 1.0])


def test_create_entity_under_parent(scene):
    parent = scene.create_entity("parent", "a.obj", 0, position=(1.0, 2.0, 3.0))
    child = scene.create_entity("child", "b.obj", 0, parent="parent")
    assert scene.objects == [parent]
    assert parent.children == [child]
    assert child.parent is parent


def test_create_entity_with_missing_parent(scene):
    with pytest.raises(KeyError):
        scene.create_entity("orphan", "a.obj", 0, parent="nobody")
    assert scene.objects == []


def test_create_entity_with_unknown_material(scene):
    with pytest.raises(KeyError):
        scene.create_entity("thing", "a.obj", 99)


def test_search_finds_nested_objects(scene):
    scene.create_entity("root", "a.obj", 0)
    scene.create_entity("middle", "b.obj", 0, parent="root")
    leaf = scene.create_entity("leaf", "c.obj", 0, parent="middle")
    assert scene.search_object_by_name("leaf") is leaf
    assert scene.search_in_children(scene.objects[0], "leaf") is leaf
    assert scene.search_object_by_name("missing") is None


def test_add_child_to(scene):
    scene.create_entity("root", "a.obj", 0)
    extra = SceneObject("extra", "x.obj")
    scene.add_child_to("root", extra)
    assert extra.parent is scene.objects[0]
    assert scene.search_object_by_name("extra") is extra


def test_add_child_to_missing_parent(scene):
    with pytest.raises(KeyError):
        scene.add_child_to("nobody", SceneObject("extra", "x.obj"))


def test_clear_removes_everything(scene):
    root = scene.create_entity("root", "a.obj", 0)
    scene.create_entity("child", "b.obj", 0, parent="root")
    scene.clear()
    assert scene.objects == []
    assert root.children == []


def test_create_light_replaces_light(scene):
    first = scene.create_light((0.0, 4.0, 0.0), (1.0, 1.0, 1.0), 0.8)
    second = scene.create_light((1.0, 1.0, 1.0), (0.0, 1.0, 0.0), 0.5)
    assert scene.light is second
    assert first is not second
    np.testing.assert_allclose(scene.light.position, [1.0, 1.0, 1.0])
    assert scene.light.intensity == 0.5


def test_init_attaches_camera(scene):
    marker = object()
    scene.init(marker)
    assert scene.camera is marker


def test_default_models_dir_is_under_working_directory(library, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    loader = _RecordingLoader()
    scene = Scene(library, mesh_loader=loader)
    scene.create_entity("bull", "Bull.obj", 0)
    assert Path(loader.paths[0]) == tmp_path / "resources" / "models" / "Bull.obj"


def test_default_loader_reads_wavefront_files(library, tmp_path):
    (tmp_path / "quad.obj").write_text(
        "# quad\n"
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
        "vn 0 0 1\n"
        "f 1//1 2//1 3//1 4//1\n",
        encoding="utf-8",
    )
    scene = Scene(library, tmp_path)
    obj = scene.create_entity("quad", "quad.obj", 0)
    mesh = obj.mesh
    assert isinstance(mesh, Mesh)
    assert mesh.initialized
    assert len(mesh.positions) == 4
    assert mesh.indices == [0, 1, 2, 0, 2, 3]
    assert mesh.has_normals
    assert not mesh.has_texcoords


def test_default_loader_joins_shared_corners(library, tmp_path):
    (tmp_path / "tris.obj").write_text(
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
        "f 1 2 3\nf 1 3 4\n",
        encoding="utf-8",
    )
    mesh = Scene(library, tmp_path).create_entity("t", "tris.obj", 0).mesh
    assert len(mesh.positions) == 4
    assert mesh.draw_calls() == [(6, 0, 0)]


def test_default_loader_rejects_bad_index(library, tmp_path):
    (tmp_path / "bad.obj").write_text("v 0 0 0\nf 1 2 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Scene(library, tmp_path).create_entity("bad", "bad.obj", 0)


def test_default_loader_rejects_other_formats(library, tmp_path):
    (tmp_path / "model.fbx").write_bytes(b"")
    with pytest.raises(ValueError):
        Scene(library, tmp_path).create_entity("m", "model.fbx", 0)