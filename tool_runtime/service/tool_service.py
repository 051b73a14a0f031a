"""
ToolService: facade for invoking registered tools by name.

Use from other apps (Django views, Celery tasks, async orchestrators):

    from tool_runtime import get_tool_service
    from tool_runtime.tools.builtins import CalcSquareRoot

    service = get_tool_service()
    output = await service.call(
        "calculate_square_root",
        [CalcSquareRoot.InputArgument(number=9.0)],
    )
    output.model_dump()  # {"double": 3.0}

From synchronous code:

    output = service.run("test_tool", [])
"""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Callable, List, Optional, Sequence

from asgiref.sync import async_to_sync, sync_to_async

from tool_runtime.conf import get_call_timeout, should_log_calls
from tool_runtime.service.errors import ToolTimeoutError
from tool_runtime.service.logger import log_call, log_error
from tool_runtime.tools.interfaces import Tool
from tool_runtime.tools.registry import ToolRegistry, get_tool_registry
from tool_runtime.types.arguments import Argument, ArgumentLike, normalize_arguments
from tool_runtime.types.context import RunContext
from tool_runtime.types.outputs import ToolOutput


class ToolService:
    """Facade that resolves tools, enforces deadlines and records call logs.

    Errors from the registry, the decode step or the tool itself are re-raised
    unchanged; a failed call never yields a partial output.
    """

    def __init__(
        self,
        tool_registry: ToolRegistry | None = None,
        timeout_fn: Callable[[], Optional[float]] | None = None,
    ) -> None:
        self._tool_registry = tool_registry
        self._timeout_fn = timeout_fn

    # -- private accessors --------------------------------------------------

    def _get_tool_registry(self) -> ToolRegistry:
        if self._tool_registry is not None:
            return self._tool_registry
        return get_tool_registry()

    def _resolve_timeout(self, context: RunContext) -> Optional[float]:
        if context.deadline_seconds is not None:
            return context.deadline_seconds
        fn = self._timeout_fn or get_call_timeout
        return fn()

    # -- async API ----------------------------------------------------------

    async def call(
        self,
        tool_name: str,
        arguments: Sequence[ArgumentLike],
        context: RunContext | None = None,
    ) -> ToolOutput:
        """Invoke ``tool_name`` with ``arguments`` and return its output."""
        context = context or RunContext.create()
        registry = self._get_tool_registry()
        if not registry.frozen:
            # First invocation ends the initialization phase.
            registry.freeze()
        tool = registry.get_tool(tool_name)
        bags = normalize_arguments(arguments)
        timeout = self._resolve_timeout(context)

        t0 = time.monotonic()
        try:
            if timeout is None:
                output = await tool.call(bags)
            else:
                output = await self._call_with_deadline(tool, bags, timeout)
        except Exception as exc:
            await self._log_error(tool_name, bags, exc, context, t0)
            raise

        await self._log_call(tool_name, bags, output, context, t0)
        return output

    async def _call_with_deadline(self, tool: Tool, bags: List[Argument], timeout: float) -> ToolOutput:
        # A TimeoutError raised by the tool itself passes through unchanged.
        task = asyncio.ensure_future(tool.call(bags))
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if not done:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            raise ToolTimeoutError(f"Tool '{tool.name}' did not finish within {timeout}s")
        return task.result()

    # -- sync bridge --------------------------------------------------------

    def run(
        self,
        tool_name: str,
        arguments: Sequence[ArgumentLike],
        context: RunContext | None = None,
    ) -> ToolOutput:
        """Sync wrapper around ``call()`` for Celery tasks and Django sync code."""
        return async_to_sync(self.call)(tool_name, arguments, context)

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _elapsed_ms(t0: float) -> int:
        return int((time.monotonic() - t0) * 1000)

    async def _log_call(
        self,
        tool_name: str,
        bags: List[Argument],
        output: ToolOutput,
        context: RunContext,
        t0: float,
    ) -> None:
        if should_log_calls():
            await sync_to_async(log_call)(tool_name, bags, output, context, self._elapsed_ms(t0))

    async def _log_error(
        self,
        tool_name: str,
        bags: List[Argument],
        exc: BaseException,
        context: RunContext,
        t0: float,
    ) -> None:
        if should_log_calls():
            await sync_to_async(log_error)(tool_name, bags, exc, context, self._elapsed_ms(t0))


_global_service: ToolService | None = None
_global_service_lock = threading.Lock()


def get_tool_service() -> ToolService:
    """Return the process-wide ToolService singleton (thread-safe)."""
    global _global_service
    if _global_service is None:
        with _global_service_lock:
            if _global_service is None:
                _global_service = ToolService()
    return _global_service


__all__ = ["ToolService", "get_tool_service"]
