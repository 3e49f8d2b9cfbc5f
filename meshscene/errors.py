"""OpenGL error codes, debug-output categories and their descriptions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import IntEnum


class GLErrorCode(IntEnum):
    NO_ERROR = 0x0000
    INVALID_ENUM = 0x0500
    INVALID_VALUE = 0x0501
    INVALID_OPERATION = 0x0502
    STACK_OVERFLOW = 0x0503
    STACK_UNDERFLOW = 0x0504
    OUT_OF_MEMORY = 0x0505
    INVALID_FRAMEBUFFER_OPERATION = 0x0506


class DebugSource(IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugType(IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251
    MARKER = 0x8268
    PUSH_GROUP = 0x8269
    POP_GROUP = 0x826A


class DebugSeverity(IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


_ERROR_STRINGS = {
    GLErrorCode.NO_ERROR: "No error has been recorded.",
    GLErrorCode.INVALID_ENUM: "An unacceptable value is specified for an enumerated argument.",
    GLErrorCode.INVALID_VALUE: "A numeric argument is out of range.",
    GLErrorCode.INVALID_OPERATION: "The specified operation is not allowed in the current state.",
    GLErrorCode.INVALID_FRAMEBUFFER_OPERATION: "The framebuffer object is not complete.",
    GLErrorCode.OUT_OF_MEMORY: "There is not enough memory left to execute the command.",
    GLErrorCode.STACK_UNDERFLOW: (
        "An attempt has been made to perform an operation that would cause "
        "an internal stack to underflow."
    ),
    GLErrorCode.STACK_OVERFLOW: (
        "An attempt has been made to perform an operation that would cause "
        "an internal stack to overflow."
    ),
}

_SOURCE_STRINGS = {
    DebugSource.API: "API",
    DebugSource.WINDOW_SYSTEM: "window system",
    DebugSource.SHADER_COMPILER: "shader compiler",
    DebugSource.THIRD_PARTY: "third party",
    DebugSource.APPLICATION: "application",
    DebugSource.OTHER: "other",
}

_TYPE_STRINGS = {
    DebugType.ERROR: "error",
    DebugType.DEPRECATED_BEHAVIOR: "deprecated behavior",
    DebugType.UNDEFINED_BEHAVIOR: "undefined behavior",
    DebugType.PORTABILITY: "portability issue",
    DebugType.PERFORMANCE: "performance issue",
    DebugType.MARKER: "stream annotation",
    DebugType.PUSH_GROUP: "push group",
    DebugType.POP_GROUP: "pop group",
    DebugType.OTHER: "other",
}

_SEVERITY_STRINGS = {
    DebugSeverity.HIGH: "high",
    DebugSeverity.MEDIUM: "medium",
    DebugSeverity.LOW: "low",
    DebugSeverity.NOTIFICATION: "notification",
}


class OpenGLError(RuntimeError):
    """One or more OpenGL errors were pending after a call."""

    def __init__(self, messages, function, file, line):
        self.messages = list(messages)
        self.function = function
        self.file = file
        self.line = line
        lines = [f"OpenGL ERROR [{message}]." for message in self.messages]
        lines.append(f"ERROR @ FN '{function}' ({file}:{line})")
        super().__init__("\n".join(lines))


def _describe(table: Mapping[int, str], value, what: str) -> str:
    try:
        return table[value]
    except (KeyError, TypeError):
        raise ValueError(f"unknown OpenGL {what}: {value!r}") from None


def error_string(code) -> str:
    """Describe an OpenGL error code."""
    return _describe(_ERROR_STRINGS, code, "error code")


def error_source(source) -> str:
    """Describe the source of a debug message."""
    return _describe(_SOURCE_STRINGS, source, "debug source")


def error_type(kind) -> str:
    """Describe the type of a debug message."""
    return _describe(_TYPE_STRINGS, kind, "debug type")


def error_severity(severity) -> str:
    """Describe the severity of a debug message."""
    return _describe(_SEVERITY_STRINGS, severity, "debug severity")


def check_errors(codes: Iterable[int], function, file, line) -> None:
    """Consume pending error codes up to NO_ERROR; raise OpenGLError if any were set."""
    messages = []
    for code in codes:
        if code == GLErrorCode.NO_ERROR:
            break
        messages.append(error_string(code))
    if messages:
        raise OpenGLError(messages, function, file, line)


def format_debug_message(source, kind, severity, message) -> str:
    """Render a debug-output callback message as a report block."""
    return (
        "GL ERROR:\n"
        f"  source:     {error_source(source)}\n"
        f"  type:       {error_type(kind)}\n"
        f"  severity:   {error_severity(severity)}\n"
        f"  debug call: \n{message}\n\n"
    )