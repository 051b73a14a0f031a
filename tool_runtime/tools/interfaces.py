"""Tool interface for the tool runtime."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Sequence, Type

from tool_runtime.types.arguments import ArgumentLike, ArgumentModel, EmptyArgument, decode_argument
from tool_runtime.types.definitions import ToolDefinition
from tool_runtime.types.outputs import ToolOutput


class Tool(ABC):
    """Abstract base for callable tools.

    Subclasses declare ``name``, ``description`` and, when they take input,
    ``argument_type``. The ``definition`` is built once when the subclass is
    created. Tools keep no mutable state between calls.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    argument_type: ClassVar[Type[ArgumentModel]] = EmptyArgument
    definition: ClassVar[ToolDefinition]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        overrides = any(attr in cls.__dict__ for attr in ("name", "description", "argument_type"))
        if cls.name and overrides:
            cls.definition = ToolDefinition.build(cls.name, cls.description, cls.argument_type)

    @property
    def requires_arguments(self) -> bool:
        return self.argument_type is not EmptyArgument

    def decode(self, arguments: Sequence[ArgumentLike]) -> ArgumentModel:
        """Decode this tool's own argument type from ``arguments``."""
        return decode_argument(arguments, self.argument_type)

    @abstractmethod
    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        """Execute the tool and return exactly one output."""
        ...


__all__ = ["Tool"]
