"""Type-erased argument bags and the type-checked decode operation.

A concrete argument schema is an ``ArgumentModel`` subclass. Before crossing
the uniform invocation surface it is wrapped into an ``Argument``: a tag
naming its schema type plus the serialized payload. Tools recover their typed
input with ``decode_argument``, which matches on the tag and never coerces
between unrelated schema types.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Dict, Iterable, List, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tool_runtime.service.errors import InvalidArgumentType, NoArguments


class ArgumentModel(BaseModel):
    """Base for concrete argument schema types.

    ``type_tag`` is the stable identifier carried on the wire. It defaults to
    the class ``__qualname__``; set it explicitly in the class body to keep it
    stable across renames.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_tag: ClassVar[str] = ""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if not cls.__dict__.get("type_tag"):
            cls.type_tag = cls.__qualname__

    def to_argument(self) -> "Argument":
        return Argument.of(self)


class EmptyArgument(ArgumentModel):
    """Argument type of tools that take no input."""

    type_tag: ClassVar[str] = "empty"


class Argument(BaseModel):
    """Opaque bag wrapping exactly one value of one concrete schema type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(min_length=1)
    value: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(cls, model: ArgumentModel) -> "Argument":
        return cls(type=model.type_tag, value=model.model_dump(mode="json"))

    def matches(self, argument_type: Type[ArgumentModel]) -> bool:
        return self.type == argument_type.type_tag


ArgumentLike = Union[Argument, ArgumentModel]
A = TypeVar("A", bound=ArgumentModel)


def normalize_arguments(arguments: Iterable[ArgumentLike]) -> List[Argument]:
    """Wrap concrete argument values; pass bags through unchanged."""
    normalized: List[Argument] = []
    for item in arguments:
        if isinstance(item, Argument):
            normalized.append(item)
        elif isinstance(item, ArgumentModel):
            normalized.append(Argument.of(item))
        else:
            raise InvalidArgumentType(
                f"Expected Argument or ArgumentModel, got {type(item).__name__}"
            )
    return normalized


def decode_argument(arguments: Iterable[ArgumentLike], argument_type: Type[A]) -> A:
    """Extract one value of ``argument_type`` from an argument sequence.

    The first element tagged with ``argument_type.type_tag`` wins; later
    candidates of the same type are ignored. Raises ``NoArguments`` for an
    empty sequence and ``InvalidArgumentType`` when no element matches or the
    matching payload does not validate.
    """
    bags = normalize_arguments(arguments)
    if not bags:
        raise NoArguments(f"Expected an argument of type '{argument_type.type_tag}', got none")

    for bag in bags:
        if not bag.matches(argument_type):
            continue
        try:
            # Strict JSON-mode validation: ISO strings still decode to dates,
            # but scalars are never converted between kinds.
            payload = json.dumps(bag.model_dump(mode="json")["value"])
            return argument_type.model_validate_json(payload, strict=True)
        except ValidationError as exc:
            raise InvalidArgumentType(
                f"Argument of type '{bag.type}' has an invalid payload: {exc.error_count()} error(s)"
            ) from exc

    raise InvalidArgumentType(
        f"No argument of type '{argument_type.type_tag}'. "
        f"Supplied: {[bag.type for bag in bags]}"
    )


__all__ = [
    "ArgumentModel",
    "EmptyArgument",
    "Argument",
    "ArgumentLike",
    "normalize_arguments",
    "decode_argument",
]
