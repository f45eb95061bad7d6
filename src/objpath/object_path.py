from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .config import OBJPATH_CONFIG
from .errors import UnsupportedOperationError
from .query.eval import evaluate
from .runtime.logging import get_logger
from .serialization.codec import decode, detect_format, encode
from .stash import EMPTY_STASH, SubstitutionStore


class ResponseLike(Protocol):
    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...


class ObjectPath:
    """Holds a document and extracts values from it by dotted path."""

    __slots__ = ("_object",)

    def __init__(self, obj: Any) -> None:
        self._object = obj

    @property
    def object(self) -> Any:
        return self._object

    @classmethod
    def from_response(cls, response: ResponseLike) -> ObjectPath:
        """Decode the body of an HTTP response according to its Content-Type."""

        content_type = response.headers.get("Content-Type")
        return cls.from_content(response.content, content_type)

    @classmethod
    def from_content(
        cls,
        payload: bytes | bytearray | str,
        content_type: str | None = None,
    ) -> ObjectPath:
        """Decode ``payload`` into a root mapping or sequence.

        ``content_type`` falls back to ``OBJPATH_CONFIG.default_content_type``.
        Decoding errors propagate unchanged.
        """

        content_type = content_type or OBJPATH_CONFIG.default_content_type
        unit = "characters" if isinstance(payload, str) else "bytes"
        get_logger().debug(
            "decoding %s document of %d %s",
            detect_format(content_type),
            len(payload),
            unit,
        )
        document = decode(payload, content_type)
        if isinstance(document, Mapping):
            return cls(document)
        if isinstance(document, Sequence) and not isinstance(document, str):
            return cls(list(document))
        raise ValueError(
            f"expected a top-level object or array, got {type(document).__name__}"
        )

    @staticmethod
    def evaluate_object(obj: Any, path: str) -> Any:
        """Shorthand for ``ObjectPath(obj).evaluate(path)``."""

        return ObjectPath(obj).evaluate(path)

    def evaluate(self, path: str, stash: SubstitutionStore = EMPTY_STASH) -> Any:
        """Return the value at ``path``, or ``None`` if a mapping key is absent."""

        return evaluate(self._object, path, stash)

    def to_content(self, content_type: str | None = None) -> bytes:
        """Serialize the held document.

        Only a mapping root can be written back out; an ``ObjectPath`` over a
        sequence or a scalar, including one extracted by an earlier evaluation,
        raises ``UnsupportedOperationError``.
        """

        if not isinstance(self._object, Mapping):
            raise UnsupportedOperationError(
                "only an ObjectPath created from a mapping can be serialized"
            )
        return encode(self._object, content_type or OBJPATH_CONFIG.default_content_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._object!r})"


__all__ = ["ObjectPath", "ResponseLike"]
