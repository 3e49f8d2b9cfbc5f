import numpy as np
import pytest

from meshscene.scene_object import SceneObject
from meshscene.transforms import decompose_transform


def test_default_object_has_identity_model_matrix():
    obj = SceneObject("cube", "models/cube.obj")
    np.testing.assert_allclose(obj.model_matrix(), np.identity(4), atol=1e-12)


def test_translation_appears_in_last_column():
    obj = SceneObject("cube", "cube.obj", position=(1.0, 2.0, 3.0))
    matrix = obj.model_matrix()
    np.testing.assert_allclose(matrix[:3, 3], [1.0, 2.0, 3.0])


def test_positions_accumulate_through_parents():
    root = SceneObject("root", "a.obj", position=(1.0, 0.0, 0.0))
    middle = SceneObject("middle", "b.obj", position=(0.0, 2.0, 0.0))
    leaf = SceneObject("leaf", "c.obj", position=(0.0, 0.0, 3.0), scale=(2.0, 2.0, 2.0))
    root.add_child(middle)
    middle.add_child(leaf)
    translation, _, factors = decompose_transform(leaf.model_matrix())
    np.testing.assert_allclose(translation, [1.0, 2.0, 3.0])
    np.testing.assert_allclose(factors, [2.0, 2.0, 2.0])


def test_parent_rotation_and_scale_are_not_inherited():
    parent = SceneObject("p", "p.obj", rotation=(0.0, 0.0, 45.0), scale=(3.0, 3.0, 3.0))
    child = SceneObject("c", "c.obj")
    parent.add_child(child)
    np.testing.assert_allclose(child.model_matrix(), np.identity(4), atol=1e-12)


def test_rotation_is_in_degrees():
    obj = SceneObject("r", "r.obj", rotation=(0.0, 0.0, 90.0))
    rotated = obj.model_matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(rotated, [0.0, 1.0, 0.0, 1.0], atol=1e-12)


def test_scale_roundtrips_through_decomposition():
    obj = SceneObject("s", "s.obj", position=(4.0, -1.0, 0.5), scale=(1.5, 2.5, 0.5))
    translation, _, factors = decompose_transform(obj.model_matrix())
    np.testing.assert_allclose(translation, obj.position)
    np.testing.assert_allclose(factors, obj.scale)


def test_add_child_links_both_ways():
    parent = SceneObject("parent", "p.obj")
    child = SceneObject("child", "c.obj")
    assert not parent.has_children()
    parent.add_child(child)
    assert parent.has_children()
    assert parent.children == [child]
    assert child.parent is parent


def test_make_parent_only_sets_parent():
    parent = SceneObject("parent", "p.obj")
    child = SceneObject("child", "c.obj")
    child.make_parent(parent)
    assert child.parent is parent
    assert parent.children == []


def test_clear_children_empties_whole_subtree():
    root = SceneObject("root", "a.obj")
    middle = SceneObject("middle", "b.obj")
    leaf = SceneObject("leaf", "c.obj")
    root.add_child(middle)
    middle.add_child(leaf)
    root.clear_children()
    assert root.children == []
    assert middle.children == []


def test_move_changes_model_matrix():
    obj = SceneObject("m", "m.obj")
    obj.move((5.0, 6.0, 7.0))
    np.testing.assert_allclose(obj.model_matrix()[:3, 3], [5.0, 6.0, 7.0])


def test_bad_vector_is_rejected():
    with pytest.raises(ValueError):
        SceneObject("bad", "bad.obj", position=(1.0, 2.0))