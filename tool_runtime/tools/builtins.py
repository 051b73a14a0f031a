"""Built-in tools for testing and demos."""

from __future__ import annotations

import math
from typing import ClassVar, Sequence

from pydantic import Field

from tool_runtime.types.arguments import ArgumentLike, ArgumentModel
from tool_runtime.types.outputs import ToolOutput

from .interfaces import Tool
from .registry import get_tool_registry


class TestTool(Tool):
    """Zero-argument tool that always returns the same string. Used for testing tool wiring."""

    # Keep test collectors from treating this as a test class.
    __test__ = False

    name = "test_tool"
    description = "A test tool that returns a fixed result"

    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        return ToolOutput(string="test result")


class CalcSquareRoot(Tool):
    """Square root of a single number. Negative input raises the math domain error unchanged."""

    class InputArgument(ArgumentModel):
        type_tag: ClassVar[str] = "calculate_square_root.input"

        number: float = Field(description="The number to take the square root of")

    name = "calculate_square_root"
    description = "Calculates the square root of a number"
    argument_type = InputArgument

    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        args = self.decode(arguments)
        return ToolOutput(double=math.sqrt(args.number))


# Register on import so callers can resolve by name.
_registry = get_tool_registry()
_registry.register_tool(TestTool())
_registry.register_tool(CalcSquareRoot())


__all__ = ["TestTool", "CalcSquareRoot"]
