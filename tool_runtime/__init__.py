"""
Tool runtime app: register named tools and invoke them through one contract.

Public entrypoints:

    from tool_runtime import get_tool_registry, get_tool_service
    registry = get_tool_registry()
    service = get_tool_service()
"""

from .service.tool_service import get_tool_service  # noqa: F401
from .tools.registry import get_tool_registry  # noqa: F401

__all__ = ["get_tool_registry", "get_tool_service"]
