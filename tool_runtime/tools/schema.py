"""Convert tool definitions to OpenAI-compatible function-calling schemas."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from tool_runtime.types.definitions import ToolDefinition


def definitions_to_function_schemas(definitions: Iterable[ToolDefinition]) -> List[Dict[str, Any]]:
    """Convert definitions to OpenAI-format dicts.

    Returns a list of dicts: {"type": "function", "function": {"name": ..., "description": ..., "parameters": ...}}
    """
    return [definition.to_function_schema() for definition in definitions]


__all__ = ["definitions_to_function_schemas"]
