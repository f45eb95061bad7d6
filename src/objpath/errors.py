"""Exceptions raised by objpath."""

from __future__ import annotations


class ObjectPathError(Exception):
    """Base class for all objpath errors."""


class InvalidPathError(ObjectPathError, ValueError):
    """A path segment cannot be applied to the node it was evaluated against."""


class UnsupportedOperationError(ObjectPathError, NotImplementedError):
    """The held object does not support the requested operation."""


class UnsupportedContentTypeError(ObjectPathError, ValueError):
    """The content type names no document format we can decode or encode."""


class StashLookupError(ObjectPathError, KeyError):
    """A key was read from a stash that does not hold it."""


__all__ = [
    "InvalidPathError",
    "ObjectPathError",
    "StashLookupError",
    "UnsupportedContentTypeError",
    "UnsupportedOperationError",
]
