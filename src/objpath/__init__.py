"""
objpath: dotted-path extraction from parsed JSON and YAML documents.

This package uses a src-layout. Import the package as `objpath`.
"""

from importlib.metadata import version

__version__ = version("objpath")

from .config import OBJPATH_CONFIG, ObjectPathConfig
from .errors import (
    InvalidPathError,
    ObjectPathError,
    StashLookupError,
    UnsupportedContentTypeError,
    UnsupportedOperationError,
)
from .object_path import ObjectPath
from .query import ARBITRARY_KEY, escape_segment, evaluate, join_path, parse_path
from .runtime import configure_logging, get_logger
from .stash import EMPTY_STASH, Stash, SubstitutionStore

__all__ = [
    "__version__",
    "ARBITRARY_KEY",
    "EMPTY_STASH",
    "InvalidPathError",
    "OBJPATH_CONFIG",
    "ObjectPath",
    "ObjectPathConfig",
    "ObjectPathError",
    "Stash",
    "StashLookupError",
    "SubstitutionStore",
    "UnsupportedContentTypeError",
    "UnsupportedOperationError",
    "configure_logging",
    "escape_segment",
    "evaluate",
    "get_logger",
    "join_path",
    "parse_path",
]
