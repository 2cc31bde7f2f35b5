"""Root-level pytest fixtures for the fallible test suite.

Provides shared configuration and handler fixtures. Tests should use these
instead of building registries and configs by hand.
"""

import pytest

from fallible.errors import MessageRegistry, SearchError
from fallible.handlers import RaisingHandler, ResultHandler
from fallible.schemas import CLIConfig, ParamConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Default configuration."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for configs with CLI overrides.

    Examples
    --------
    >>> def test_index_variant(make_config):
    ...     config = make_config(variant="index")
    ...     assert config.variant == "index"
    """
    def _make(**cli_overrides):
        if cli_overrides:
            return resolve_config(param_config, CLIConfig(**cli_overrides))
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Handler Fixtures
# =============================================================================

@pytest.fixture
def registry():
    """Registry with the default message for each kind."""
    return MessageRegistry(["is empty"], SearchError)


@pytest.fixture
def result_handler(registry):
    return ResultHandler(registry)


@pytest.fixture
def raising_handler(registry):
    return RaisingHandler(registry)
