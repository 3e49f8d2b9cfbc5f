import pytest

from meshscene.conventions import ShaderType


def test_shader_type_values_are_stable():
    assert [ShaderType(value) for value in (0, 1, 2)] == list(ShaderType)
    assert [int(ShaderType(value)) for value in (0, 1, 2)] == [0, 1, 2]


@pytest.mark.parametrize("shader_type", list(ShaderType))
def test_shader_type_round_trips_through_int(shader_type):
    assert ShaderType(int(shader_type)) is shader_type


def test_shader_type_from_int():
    assert ShaderType(1) is ShaderType.LIGHT


def test_shader_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        ShaderType(7)