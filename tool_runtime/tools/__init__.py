from .builder import FunctionTool, register_function_tool
from .interfaces import Tool
from .registry import ToolRegistry, get_tool_registry
from .schema import definitions_to_function_schemas

__all__ = [
    "Tool",
    "FunctionTool",
    "register_function_tool",
    "ToolRegistry",
    "get_tool_registry",
    "definitions_to_function_schemas",
]
