"""
Tool call logging helpers.

These functions write to ToolCallLog without ever raising. A logging failure must
never surface to the caller. They touch the ORM, so async callers wrap them in
``sync_to_async``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from tool_runtime.types.arguments import Argument
    from tool_runtime.types.context import RunContext
    from tool_runtime.types.outputs import ToolOutput

logger = logging.getLogger(__name__)


def _serialize_arguments(arguments: "List[Argument]") -> list:
    """Convert argument bags to their wire dicts."""
    return [a.model_dump(mode="json") for a in arguments]


def log_call(
    tool_name: str,
    arguments: "List[Argument]",
    output: "ToolOutput",
    context: "RunContext",
    duration_ms: int,
) -> None:
    """Write a SUCCESS log entry. output = ToolOutput wire JSON."""
    try:
        from tool_runtime.models import ToolCallLog

        ToolCallLog.objects.create(
            run_id=context.run_id,
            tool_name=tool_name,
            arguments=_serialize_arguments(arguments),
            output=output.to_json(),
            duration_ms=duration_ms,
            status=ToolCallLog.Status.SUCCESS,
        )
    except Exception:
        logger.exception("Failed to write tool call log for %s", tool_name)


def log_error(
    tool_name: str,
    arguments: "List[Argument]",
    exc: BaseException,
    context: "RunContext",
    duration_ms: int,
) -> None:
    """Write an ERROR log entry."""
    try:
        from tool_runtime.models import ToolCallLog

        ToolCallLog.objects.create(
            run_id=context.run_id,
            tool_name=tool_name,
            arguments=_serialize_arguments(arguments),
            output="",
            duration_ms=duration_ms,
            status=ToolCallLog.Status.ERROR,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
    except Exception:
        logger.exception("Failed to write tool error log for %s", tool_name)


__all__ = ["log_call", "log_error"]
