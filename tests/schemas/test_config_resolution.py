"""Tests for resolve_config precedence and validation."""

import pytest
from pydantic import ValidationError

from fallible.schemas import CLIConfig, InternalConfig, ParamConfig, resolve_config
from fallible.schemas.resolve import deep_merge


class TestDefaults:
    """Resolution with no overrides reproduces the fixed scenario."""

    def test_defaults(self, internal_config):
        assert isinstance(internal_config, InternalConfig)
        assert internal_config.variant == "value"
        assert internal_config.messages == {"is_empty": "is empty"}
        assert internal_config.samples == [[], [-1, 2, 0]]
        assert internal_config.log_file.enabled is True
        assert internal_config.log_file.directory is None
        assert internal_config.log_file.filename == "log.txt"
        assert internal_config.logging.level == "WARNING"

    def test_resolve_without_arguments(self):
        assert resolve_config() == resolve_config(ParamConfig(), CLIConfig())

    def test_internal_config_is_frozen(self, internal_config):
        with pytest.raises(ValidationError):
            internal_config.variant = "index"


class TestPrecedence:
    """CLI overrides win over defaults."""

    def test_cli_variant_overrides_default(self, make_config):
        assert make_config(variant="index").variant == "index"

    def test_cli_log_path_keeps_log_enabled(self, make_config):
        config = make_config(log_path="/tmp/run/errors.log")
        assert config.log_file.enabled is True
        assert config.log_file.directory == "/tmp/run"
        assert config.log_file.filename == "errors.log"

    def test_cli_accepts_dict(self):
        config = resolve_config(None, {"log_level": "DEBUG"})
        assert config.logging.level == "DEBUG"

    def test_param_dict_is_validated(self):
        config = resolve_config({"samples": [[5, 1]]}, None)
        assert config.samples == [[5, 1]]


class TestMessageValidation:
    """The message table must cover exactly the error kinds."""

    def test_missing_message_rejected(self):
        with pytest.raises(ValidationError, match="is_empty"):
            resolve_config({"messages": {}})

    def test_unknown_message_rejected(self):
        with pytest.raises(ValidationError):
            resolve_config({"messages": {"is_empty": "is empty", "is_full": "is full"}})

    def test_custom_message_text(self):
        config = resolve_config({"messages": {"is_empty": "has no elements"}})
        assert config.messages["is_empty"] == "has no elements"


def test_deep_merge_nested():
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    override = {"b": {"d": 4, "e": 5}, "f": 6}
    assert deep_merge(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}, "f": 6}
    assert base == {"a": 1, "b": {"c": 2, "d": 3}}
