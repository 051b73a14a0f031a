from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from .arguments import ArgumentModel

TOOL_NAME_PATTERN = r"^[a-zA-Z0-9_-]{1,64}$"


# Keywords whose values are instance data rather than subschemas.
_LITERAL_KEYWORDS = frozenset({"default", "const", "enum", "examples"})
# Keywords whose values map user-chosen names to subschemas.
_SCHEMA_MAPS = frozenset({"properties", "$defs"})


def _strip_titles(node: Any) -> Any:
    """Drop pydantic's generated ``title`` keys, which carry no schema meaning here."""
    if isinstance(node, dict):
        stripped: Dict[str, Any] = {}
        for key, value in node.items():
            if key == "title" and isinstance(value, str):
                continue
            if key in _LITERAL_KEYWORDS:
                stripped[key] = value
            elif key in _SCHEMA_MAPS and isinstance(value, dict):
                stripped[key] = {name: _strip_titles(sub) for name, sub in value.items()}
            else:
                stripped[key] = _strip_titles(value)
        return stripped
    if isinstance(node, list):
        return [_strip_titles(item) for item in node]
    return node


class PropertySchema(BaseModel):
    """JSON Schema for a single input field. Extra keywords are preserved."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Optional[str] = None
    description: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_unset_keywords(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if not (key in ("type", "description") and value is None)
        }


class InputSchema(BaseModel):
    """Structural description of a tool's expected argument (JSON Schema subset)."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type: str = "object"
    properties: Dict[str, PropertySchema] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)
    defs: Optional[Dict[str, Any]] = Field(default=None, alias="$defs")

    @model_validator(mode="after")
    def _required_are_declared(self) -> "InputSchema":
        if self.type != "object":
            raise ValueError(f"Input schema type must be 'object', got {self.type!r}")
        unknown = [name for name in self.required if name not in self.properties]
        if unknown:
            raise ValueError(f"Required fields not declared in properties: {unknown}")
        return self

    @model_serializer(mode="wrap")
    def _omit_missing_defs(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        key = "$defs" if "$defs" in data else "defs"
        if data.get(key) is None:
            data.pop(key, None)
        return data

    @classmethod
    def from_argument_model(cls, argument_type: Type[ArgumentModel]) -> "InputSchema":
        raw = _strip_titles(argument_type.model_json_schema())
        return cls(
            properties=raw.get("properties", {}),
            required=raw.get("required", []),
            defs=raw.get("$defs"),
        )

    def to_json_schema(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ToolDefinition(BaseModel):
    """Static descriptor of a tool: name, description and input schema."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(pattern=TOOL_NAME_PATTERN)
    description: str = Field(min_length=1)
    input_schema: InputSchema = Field(default_factory=InputSchema)

    @classmethod
    def build(
        cls,
        name: str,
        description: str,
        argument_type: Type[ArgumentModel],
    ) -> "ToolDefinition":
        return cls(
            name=name,
            description=description,
            input_schema=InputSchema.from_argument_model(argument_type),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "ToolDefinition":
        return cls.model_validate_json(data)

    def to_function_schema(self) -> Dict[str, Any]:
        """OpenAI-style function-calling entry for this tool."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema.to_json_schema(),
            },
        }


__all__ = ["TOOL_NAME_PATTERN", "PropertySchema", "InputSchema", "ToolDefinition"]
