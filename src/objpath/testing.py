from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import pytest

from .config import OBJPATH_CONFIG, ObjectPathConfig
from .stash import Stash


@contextmanager
def objpath_config_env(**overrides: Any) -> Generator[ObjectPathConfig, None, None]:
    """Apply ``overrides`` to ``OBJPATH_CONFIG`` and restore it on exit."""
    snapshot = OBJPATH_CONFIG.model_dump()
    unknown = set(overrides) - set(snapshot)
    if unknown:
        raise TypeError(f"unknown objpath config fields: {sorted(unknown)}")
    validated = ObjectPathConfig.model_validate({**snapshot, **overrides})
    try:
        for name in overrides:
            setattr(OBJPATH_CONFIG, name, getattr(validated, name))
        yield OBJPATH_CONFIG
    finally:
        for name, value in snapshot.items():
            setattr(OBJPATH_CONFIG, name, value)


@pytest.fixture()
def objpath_stash() -> Generator[Stash, None, None]:
    """A fresh stash for the test, cleared afterwards."""
    stash = Stash()
    yield stash
    stash.clear()
