import pytest

from meshscene.errors import (
    DebugSeverity,
    DebugSource,
    DebugType,
    GLErrorCode,
    OpenGLError,
    check_errors,
    error_severity,
    error_source,
    error_string,
    error_type,
    format_debug_message,
)


def test_error_string_no_error():
    assert error_string(GLErrorCode.NO_ERROR) == "No error has been recorded."


def test_error_string_accepts_plain_int():
    assert error_string(int(GLErrorCode.INVALID_VALUE)) == "A numeric argument is out of range."


def test_error_string_unknown_code():
    with pytest.raises(ValueError):
        error_string(0x1234)


def test_every_error_code_has_a_description():
    descriptions = {error_string(code) for code in GLErrorCode}
    assert len(descriptions) == len(GLErrorCode)


def test_error_source_names():
    assert error_source(DebugSource.SHADER_COMPILER) == "shader compiler"
    with pytest.raises(ValueError):
        error_source(DebugType.ERROR)


def test_error_type_names():
    assert error_type(DebugType.MARKER) == "stream annotation"
    assert error_type(DebugType.OTHER) == "other"
    with pytest.raises(ValueError):
        error_type(DebugSeverity.HIGH)


def test_error_severity_names():
    assert error_severity(DebugSeverity.NOTIFICATION) == "notification"
    with pytest.raises(ValueError):
        error_severity(DebugSource.API)


def test_check_errors_stops_at_no_error():
    codes = iter([GLErrorCode.NO_ERROR, GLErrorCode.INVALID_ENUM])
    assert check_errors(codes, "draw", "scene.py", 3) is None
    assert next(codes) == GLErrorCode.INVALID_ENUM


def test_check_errors_raises_with_all_pending_errors():
    codes = [GLErrorCode.INVALID_ENUM, GLErrorCode.OUT_OF_MEMORY, GLErrorCode.NO_ERROR]
    with pytest.raises(OpenGLError) as info:
        check_errors(codes, "draw", "scene.py", 42)
    err = info.value
    assert err.messages == [
        error_string(GLErrorCode.INVALID_ENUM),
        error_string(GLErrorCode.OUT_OF_MEMORY),
    ]
    assert err.function == "draw"
    assert err.line == 42
    assert "ERROR @ FN 'draw' (scene.py:42)" in str(err)


def test_check_errors_without_terminator_still_reports():
    with pytest.raises(OpenGLError) as info:
        check_errors([GLErrorCode.STACK_OVERFLOW], "f", "g.py", 1)
    assert info.value.messages == [error_string(GLErrorCode.STACK_OVERFLOW)]


def test_format_debug_message():
    text = format_debug_message(
        DebugSource.API, DebugType.PERFORMANCE, DebugSeverity.HIGH, "slow path"
    )
    assert text == (
        "GL ERROR:\n"
        "  source:     API\n"
        "  type:       performance issue\n"
        "  severity:   high\n"
        "  debug call: \nslow path\n\n"
    )