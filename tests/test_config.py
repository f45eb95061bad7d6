import pytest
from pydantic import ValidationError

from objpath import OBJPATH_CONFIG, ObjectPathConfig
from objpath.testing import objpath_config_env


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OBJPATH_DEFAULT_CONTENT_TYPE", "OBJPATH_PRETTY", "OBJPATH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = ObjectPathConfig()

    assert config.default_content_type == "application/json"
    assert config.pretty is False
    assert config.log_level == "WARNING"


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJPATH_DEFAULT_CONTENT_TYPE", "application/yaml")
    monkeypatch.setenv("OBJPATH_PRETTY", "true")
    monkeypatch.setenv("OBJPATH_LOG_LEVEL", "debug")

    config = ObjectPathConfig()

    assert config.default_content_type == "application/yaml"
    assert config.pretty is True
    assert config.log_level == "DEBUG"


def test_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJPATH_LOG_LEVEL", "loud")

    with pytest.raises(ValidationError):
        ObjectPathConfig()


def test_config_env_restores_values() -> None:
    before = OBJPATH_CONFIG.model_dump()

    with objpath_config_env(pretty=not before["pretty"], log_level="INFO") as config:
        assert config.pretty is not before["pretty"]
        assert config.log_level == "INFO"

    assert OBJPATH_CONFIG.model_dump() == before


def test_config_env_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="unknown objpath config fields"):
        with objpath_config_env(colour=True):
            pass


def test_config_env_validates_overrides() -> None:
    before = OBJPATH_CONFIG.model_dump()

    with pytest.raises(ValidationError):
        with objpath_config_env(log_level="loud"):
            pass

    assert OBJPATH_CONFIG.model_dump() == before
