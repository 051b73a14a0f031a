"""Registry for tools by name."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from tool_runtime.service.errors import ToolConfigurationError, ToolNotFound
from tool_runtime.tools.interfaces import Tool
from tool_runtime.types.arguments import ArgumentLike
from tool_runtime.types.definitions import ToolDefinition
from tool_runtime.types.outputs import ToolOutput

logger = logging.getLogger(__name__)


@dataclass
class ToolRegistry:
    """Maps tool name to tool instance.

    Populated during initialization, then frozen; tools are never removed.
    """

    _tools: Dict[str, Tool] = field(default_factory=dict)
    _frozen: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def register_tool(self, tool: Tool) -> None:
        """Register a tool by its name."""
        if not tool.name:
            raise ValueError("Tool name must be non-empty")
        with self._lock:
            if self._frozen:
                raise ToolConfigurationError(
                    f"Cannot register tool '{tool.name}': registry is frozen"
                )
            if tool.name in self._tools:
                raise ToolConfigurationError(f"Tool '{tool.name}' is already registered")
            self._tools[tool.name] = tool
        logger.debug("Registered tool %s", tool.name)

    def get_tool(self, name: str) -> Tool:
        """Return the tool with the given name. Raises ToolNotFound if missing."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFound(
                f"Unknown tool '{name}'. Available: {sorted(self._tools) or '[]'}"
            )
        return tool

    def get_definition(self, name: str) -> ToolDefinition:
        return self.get_tool(name).definition

    def list_tools(self) -> Dict[str, Tool]:
        """Return a copy of the name -> tool mapping."""
        return dict(self._tools)

    def list_definitions(self) -> List[ToolDefinition]:
        return [self._tools[name].definition for name in sorted(self._tools)]

    async def invoke(self, name: str, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        """Route a named invocation to the matching tool."""
        return await self.get_tool(name).call(arguments)

    def freeze(self) -> None:
        """Mark the end of initialization; later registrations fail."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


_global_registry: Optional[ToolRegistry] = None
_global_registry_lock = threading.Lock()


def get_tool_registry() -> ToolRegistry:
    """Return the process-wide ToolRegistry singleton (thread-safe)."""
    global _global_registry
    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = ToolRegistry()
    return _global_registry


__all__ = ["ToolRegistry", "get_tool_registry"]
