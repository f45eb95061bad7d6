"""Content-type aware conversion between wire payloads and document trees."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any, Literal

import yaml

from ..config import OBJPATH_CONFIG
from ..errors import UnsupportedContentTypeError
from ..stash import stringify

DocumentFormat = Literal["json", "yaml"]

_CHARSET_PATTERN = re.compile(r"charset\s*=\s*([^\s;]+)", re.IGNORECASE)

_MERGE_TAG = "tag:yaml.org,2002:merge"


class _DocumentLoader(yaml.SafeLoader):
    """Safe loader producing string keys that are unique within each mapping."""


def _construct_mapping(
    loader: _DocumentLoader, node: yaml.MappingNode
) -> dict[str, Any]:
    seen: set[str] = set()
    for key_node, _ in node.value:
        if key_node.tag == _MERGE_TAG:
            continue
        key = stringify(loader.construct_object(key_node, deep=True))
        if key in seen:
            raise ValueError(
                f"duplicate key {key!r} in YAML mapping{key_node.start_mark}"
            )
        seen.add(key)

    # Keys merged in through "<<" may be overridden by explicit ones.
    loader.flatten_mapping(node)
    result: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = stringify(loader.construct_object(key_node, deep=True))
        result[key] = loader.construct_object(value_node)
    return result


_DocumentLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping
)


def detect_format(content_type: str) -> DocumentFormat:
    """Map a Content-Type header value to a document format.

    Matches on substrings so ``application/vnd.api+json`` and
    ``application/x-yaml; charset=utf-8`` are recognized.
    """

    media_type = content_type.split(";", 1)[0].strip().lower()
    if "json" in media_type:
        return "json"
    if "yaml" in media_type:
        return "yaml"
    raise UnsupportedContentTypeError(
        f"unsupported content type {content_type!r}; expected a JSON or YAML media type"
    )


def charset(content_type: str) -> str:
    match = _CHARSET_PATTERN.search(content_type)
    if match is None:
        return "utf-8"
    return match.group(1).strip("\"'")


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key {key!r} in JSON object")
        result[key] = value
    return result


def decode(payload: bytes | bytearray | str, content_type: str) -> Any:
    """Parse ``payload`` into a tree of dicts, lists and scalars.

    Mapping keys are always strings (YAML keys such as ``0`` or ``true`` are
    stringified) and a key repeated within one mapping raises ``ValueError``.
    Parser errors are not caught: malformed JSON raises
    ``json.JSONDecodeError`` and malformed YAML raises ``yaml.YAMLError``.
    """

    fmt = detect_format(content_type)
    if isinstance(payload, (bytes, bytearray)):
        text = bytes(payload).decode(charset(content_type))
    else:
        text = payload

    if fmt == "json":
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    return yaml.load(text, Loader=_DocumentLoader)


def _to_builtin(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return {key: _to_builtin(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(item) for item in obj]
    return obj


def encode(document: Mapping[str, Any], content_type: str) -> bytes:
    """Serialize ``document`` in the format named by ``content_type``."""

    fmt = detect_format(content_type)
    built = _to_builtin(document)
    if fmt == "json":
        indent = 2 if OBJPATH_CONFIG.pretty else None
        text = json.dumps(built, ensure_ascii=False, indent=indent)
    else:
        text = yaml.safe_dump(built, sort_keys=False, allow_unicode=True)
    return text.encode(charset(content_type))


__all__ = ["DocumentFormat", "charset", "decode", "detect_format", "encode"]
