from .eval import ARBITRARY_KEY, evaluate
from .nodes import (
    MappingNode,
    Node,
    NullNode,
    ScalarNode,
    SequenceNode,
    classify,
)
from .paths import escape_segment, join_path, parse_path

__all__ = [
    "ARBITRARY_KEY",
    "MappingNode",
    "Node",
    "NullNode",
    "ScalarNode",
    "SequenceNode",
    "classify",
    "escape_segment",
    "evaluate",
    "join_path",
    "parse_path",
]
