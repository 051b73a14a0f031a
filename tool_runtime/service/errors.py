from __future__ import annotations


class ToolError(Exception):
    """Base error type for all tool invocation failures."""

    code = "toolError"


class NoArguments(ToolError):
    """A tool that requires input was called with an empty argument sequence."""

    code = "noArguments"


class InvalidArgumentType(ToolError):
    """Arguments were supplied but none matches the type the tool decodes."""

    code = "invalidArgumentType"


class ToolNotFound(ToolError):
    """No tool is registered under the requested name."""

    code = "toolNotFound"


class ToolConfigurationError(ToolError):
    """Misuse of the registry (duplicate names, registering after freeze)."""

    code = "configuration"


class ToolTimeoutError(ToolError):
    """Timeout while waiting for a tool to produce its output."""

    code = "timeout"


__all__ = [
    "ToolError",
    "NoArguments",
    "InvalidArgumentType",
    "ToolNotFound",
    "ToolConfigurationError",
    "ToolTimeoutError",
]
