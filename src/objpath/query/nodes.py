"""Tagged views over the values of a parsed document tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias


@dataclass(frozen=True)
class MappingNode:
    value: Mapping[str, Any]
    kind: Literal["mapping"] = "mapping"


@dataclass(frozen=True)
class SequenceNode:
    value: Sequence[Any]
    kind: Literal["sequence"] = "sequence"


@dataclass(frozen=True)
class ScalarNode:
    value: Any
    kind: Literal["scalar"] = "scalar"


@dataclass(frozen=True)
class NullNode:
    kind: Literal["null"] = "null"

    @property
    def value(self) -> None:
        return None


Node: TypeAlias = MappingNode | SequenceNode | ScalarNode | NullNode


def classify(value: object) -> Node:
    """Wrap ``value`` in the node variant matching its shape.

    Strings and bytes are scalars even though they are sequences. Anything
    that is neither a mapping nor a list-like sequence is a scalar.
    """

    if value is None:
        return NullNode()
    if isinstance(value, Mapping):
        return MappingNode(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return SequenceNode(value)
    return ScalarNode(value)


def type_name(value: object) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = [
    "MappingNode",
    "Node",
    "NullNode",
    "ScalarNode",
    "SequenceNode",
    "classify",
    "type_name",
]
