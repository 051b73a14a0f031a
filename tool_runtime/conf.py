"""
Tool runtime configuration from Django settings.
"""
from django.conf import settings


def get_call_timeout() -> float | None:
    """Per-call timeout in seconds. None disables the timeout."""
    value = getattr(settings, "TOOL_RUNTIME_CALL_TIMEOUT", None)
    return float(value) if value is not None else None


def should_log_calls() -> bool:
    return bool(getattr(settings, "TOOL_RUNTIME_LOG_CALLS", True))


def get_tool_modules() -> list[str]:
    """Dotted module paths imported at startup so their tools register."""
    return list(getattr(settings, "TOOL_RUNTIME_TOOL_MODULES", []))
