from .arguments import Argument, ArgumentModel, EmptyArgument, decode_argument, normalize_arguments
from .context import RunContext
from .definitions import InputSchema, PropertySchema, ToolDefinition
from .outputs import ToolOutput

__all__ = [
    "Argument",
    "ArgumentModel",
    "EmptyArgument",
    "decode_argument",
    "normalize_arguments",
    "RunContext",
    "InputSchema",
    "PropertySchema",
    "ToolDefinition",
    "ToolOutput",
]
