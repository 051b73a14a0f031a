from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_serializer,
    model_validator,
)

OUTPUT_KINDS: Tuple[str, ...] = ("string", "double", "integer", "boolean", "object")


class ToolOutput(BaseModel):
    """Closed result envelope returned by every tool call.

    Exactly one case is active. The wire form is a single-key object tagged by
    the case name, e.g. ``{"string": "ok"}`` or ``{"double": 3.0}``, so new
    cases can be added without changing how existing ones serialize.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", ser_json_inf_nan="constants")

    string: Optional[StrictStr] = None
    double: Optional[StrictFloat] = None
    integer: Optional[StrictInt] = None
    boolean: Optional[StrictBool] = None
    object: Optional[Dict[str, Any]] = None

    @model_validator(mode="before")
    @classmethod
    def _single_tag(cls, data: Any) -> Any:
        # A null payload still counts as a tag.
        if isinstance(data, dict) and len(data) != 1:
            raise ValueError(
                f"ToolOutput requires exactly one of {list(OUTPUT_KINDS)}, got tags {sorted(data) or 'none'}"
            )
        return data

    @model_validator(mode="after")
    def _exactly_one_case(self) -> "ToolOutput":
        active = [kind for kind in OUTPUT_KINDS if getattr(self, kind) is not None]
        if len(active) != 1:
            raise ValueError(
                f"ToolOutput requires exactly one of {list(OUTPUT_KINDS)}, got {active or 'none'}"
            )
        return self

    @model_serializer(mode="plain")
    def _serialize(self) -> Dict[str, Any]:
        return {self.kind: self.value}

    def __hash__(self) -> int:
        # The object case holds a dict, so it hashes by its wire form.
        if self.kind == "object":
            return hash((self.kind, self.to_json()))
        return hash((self.kind, self.value))

    @property
    def kind(self) -> str:
        """Tag of the active case."""
        for kind in OUTPUT_KINDS:
            if getattr(self, kind) is not None:
                return kind
        raise AssertionError("unreachable: validated ToolOutput has no active case")

    @property
    def value(self) -> Any:
        return getattr(self, self.kind)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "ToolOutput":
        return cls.model_validate_json(data)


__all__ = ["OUTPUT_KINDS", "ToolOutput"]
