import numpy as np
import pytest

from meshscene.entity import Entity


def test_construction_keeps_values():
    entity = Entity((1, 2, 3), (0, 90, 0), (2, 2, 2))
    np.testing.assert_array_equal(entity.position, [1, 2, 3])
    np.testing.assert_array_equal(entity.rotation, [0, 90, 0])
    np.testing.assert_array_equal(entity.scale, [2, 2, 2])
    np.testing.assert_array_equal(entity.model_matrix, np.identity(4))


def test_move_replaces_position():
    entity = Entity((1, 2, 3), (0, 0, 0), (1, 1, 1))
    entity.move((4, 5, 6))
    np.testing.assert_array_equal(entity.position, [4, 5, 6])


def test_rotate_replaces_rotation():
    entity = Entity((0, 0, 0), (10, 0, 0), (1, 1, 1))
    entity.rotate((0, 0, 30))
    np.testing.assert_array_equal(entity.rotation, [0, 0, 30])


def test_inputs_are_copied():
    source = np.array([1.0, 1.0, 1.0])
    entity = Entity(source, source, source)
    source[0] = 9.0
    assert entity.position[0] == 1.0


def test_bad_vector_rejected():
    with pytest.raises(ValueError):
        Entity((1, 2), (0, 0, 0), (1, 1, 1))
    entity = Entity((0, 0, 0), (0, 0, 0), (1, 1, 1))
    with pytest.raises(ValueError):
        entity.move((1, 2, 3, 4))