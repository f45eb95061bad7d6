"""Walk a document tree one path segment at a time."""

from __future__ import annotations

import re
from typing import Any, assert_never

from ..errors import InvalidPathError
from ..runtime.logging import get_logger
from ..stash import EMPTY_STASH, SubstitutionStore, stringify
from .nodes import MappingNode, NullNode, ScalarNode, SequenceNode, classify, type_name
from .paths import parse_path

ARBITRARY_KEY = "_arbitrary_key_"

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def evaluate(
    document: Any,
    path: str,
    stash: SubstitutionStore = EMPTY_STASH,
) -> Any:
    """Return the value at ``path`` inside ``document``.

    Returns ``None`` as soon as a mapping lookup misses; later segments are
    then neither resolved nor validated. The empty path returns ``document``.

    Raises ``InvalidPathError`` when a segment cannot apply to the node it
    reaches: a non-numeric or out-of-range index into a sequence, any segment
    against a scalar, or the arbitrary-key token against an empty mapping or
    one that holds that token as a real key.
    """

    current = document
    for segment in parse_path(path):
        if current is None:
            return None
        current = _step(current, _substitute(segment, stash))
        if current is None:
            get_logger().debug("path %r: no value for segment [%s]", path, segment)
    return current


def _substitute(segment: str, stash: SubstitutionStore) -> str:
    if not stash.contains_stashed_value(segment):
        return segment
    replacement = stringify(stash.get_value(segment))
    get_logger().debug("substituted stashed segment [%s] with [%s]", segment, replacement)
    return replacement


def _step(current: Any, key: str) -> Any:
    node = classify(current)
    match node:
        case MappingNode():
            if key == ARBITRARY_KEY:
                return _arbitrary_key(node)
            return node.value.get(key)
        case SequenceNode():
            return _index(node, key)
        case ScalarNode():
            raise InvalidPathError(
                f"no object found for [{key}] within object of type [{type_name(node.value)}]"
            )
        case NullNode():
            return None
        case _:
            assert_never(node)


def _arbitrary_key(node: MappingNode) -> str:
    if not node.value:
        raise InvalidPathError(f"requested [{ARBITRARY_KEY}] but the map was empty")
    if ARBITRARY_KEY in node.value:
        raise InvalidPathError(
            f"requested meta-key [{ARBITRARY_KEY}] but the map unexpectedly contains this key"
        )
    return next(iter(node.value))


def _index(node: SequenceNode, key: str) -> Any:
    if _INDEX_PATTERN.fullmatch(key) is None:
        raise InvalidPathError(f"element was a list, but [{key}] was not numeric")
    size = len(node.value)
    # More digits than the length can never be in range, and int() refuses
    # strings past the interpreter's digit limit.
    in_range = len(key.lstrip("+-").lstrip("0")) <= len(str(size))
    index = int(key) if in_range else -1
    if index < 0 or index >= size:
        raise InvalidPathError(
            f"element was a list with {size} elements, but [{key}] was out of bounds"
        )
    return node.value[index]


__all__ = ["ARBITRARY_KEY", "evaluate"]
