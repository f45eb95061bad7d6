"""Substitution store consulted by the evaluator for every path segment."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from .errors import StashLookupError


@runtime_checkable
class SubstitutionStore(Protocol):
    def contains_stashed_value(self, key: str) -> bool: ...

    def get_value(self, key: str) -> Any: ...


class Stash:
    """Mutable key to value table shared by the steps of a test.

    Path evaluation only reads from it; callers that mutate a stash while
    another caller evaluates against it must serialize those calls themselves.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def stash_value(self, key: str, value: Any) -> None:
        if not key:
            raise ValueError("stash key must be non-empty")
        self._values[key] = value

    def contains_stashed_value(self, key: str) -> bool:
        return key in self._values

    def get_value(self, key: str) -> Any:
        try:
            return self._values[key]
        except KeyError:
            raise StashLookupError(f"stash does not hold [{key}]") from None

    def clear(self) -> None:
        self._values.clear()

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


class _EmptyStash(Stash):
    def __init__(self) -> None:
        super().__init__()

    def stash_value(self, key: str, value: Any) -> None:
        raise TypeError("the empty stash is read-only")

    def clear(self) -> None:
        raise TypeError("the empty stash is read-only")


EMPTY_STASH: Stash = _EmptyStash()


def stringify(value: Any) -> str:
    """Render a stashed value as the path segment it stands for."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


__all__ = ["EMPTY_STASH", "Stash", "SubstitutionStore", "stringify"]
