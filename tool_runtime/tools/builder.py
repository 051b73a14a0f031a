"""Explicit registration of plain functions as tools.

    from tool_runtime.tools.builder import register_function_tool
    from tool_runtime.types import ArgumentModel, ToolOutput

    class EchoInput(ArgumentModel):
        text: str

    def echo(args: EchoInput) -> ToolOutput:
        return ToolOutput(string=args.text)

    register_function_tool("echo", "Echo the given text", echo, EchoInput)
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Optional, Sequence, Type

from tool_runtime.tools.interfaces import Tool
from tool_runtime.tools.registry import ToolRegistry, get_tool_registry
from tool_runtime.types.arguments import ArgumentLike, ArgumentModel, EmptyArgument
from tool_runtime.types.definitions import ToolDefinition
from tool_runtime.types.outputs import ToolOutput

Handler = Callable[..., Any]


class FunctionTool(Tool):
    """Tool backed by a handler function instead of a subclass."""

    def __init__(
        self,
        name: str,
        description: str,
        handler: Handler,
        argument_type: Type[ArgumentModel] = EmptyArgument,
    ) -> None:
        self.name = name
        self.description = description
        self.argument_type = argument_type
        self.definition = ToolDefinition.build(name, description, argument_type)
        self._handler = handler

    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        args = () if not self.requires_arguments else (self.decode(arguments),)
        if inspect.iscoroutinefunction(self._handler):
            result = await self._handler(*args)
        else:
            result = await asyncio.to_thread(self._handler, *args)
        if not isinstance(result, ToolOutput):
            raise TypeError(
                f"Tool '{self.name}' handler returned {type(result).__name__}, expected ToolOutput"
            )
        return result


def register_function_tool(
    name: str,
    description: str,
    handler: Handler,
    argument_type: Type[ArgumentModel] = EmptyArgument,
    registry: Optional[ToolRegistry] = None,
) -> FunctionTool:
    """Build a FunctionTool and register it (process-wide registry by default)."""
    tool = FunctionTool(name, description, handler, argument_type)
    if registry is None:
        registry = get_tool_registry()
    registry.register_tool(tool)
    return tool


__all__ = ["FunctionTool", "register_function_tool"]
