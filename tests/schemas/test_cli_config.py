"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError
from fallible.schemas.cli import CLIConfig


def test_cli_to_internal_overrides_with_variant():
    cli = CLIConfig(variant="index")
    overrides = cli.to_internal_overrides()
    assert overrides["variant"] == "index"


def test_cli_to_internal_overrides_with_log_level():
    cli = CLIConfig(log_level="DEBUG")
    overrides = cli.to_internal_overrides()
    assert overrides["logging"]["level"] == "DEBUG"


def test_cli_log_path_splits_directory_and_filename():
    cli = CLIConfig(log_path="/var/tmp/errors.log")
    overrides = cli.to_internal_overrides()
    assert overrides["log_file"] == {"directory": "/var/tmp", "filename": "errors.log"}


def test_cli_no_log_file_disables_log():
    cli = CLIConfig(no_log_file=True)
    overrides = cli.to_internal_overrides()
    assert overrides["log_file"] == {"enabled": False}


def test_cli_to_internal_overrides_empty():
    cli = CLIConfig()
    assert cli.to_internal_overrides() == {}


def test_cli_rejects_log_path_with_no_log_file():
    with pytest.raises(ValidationError, match="no_log_file"):
        CLIConfig(log_path="log.txt", no_log_file=True)


def test_cli_rejects_unknown_variant():
    with pytest.raises(ValidationError):
        CLIConfig(variant="position")


def test_cli_rejects_extra_fields():
    with pytest.raises(ValidationError):
        CLIConfig(samples=[[1]])
