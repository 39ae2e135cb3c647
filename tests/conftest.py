"""Root-level pytest fixtures for the cursortools test suite.

Every test starts from the library defaults (contracts enabled) regardless
of CURSORTOOLS_* variables in the environment running the suite.
"""

import pytest

from cursortools.contracts import configure
from cursortools.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Library defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_release_mode(make_config):
    ...     config = make_config(DBC="off")
    ...     assert config.contracts.enabled is False
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides), None)
        return resolve_config(param_config, None, None)

    return _make


@pytest.fixture(autouse=True)
def default_contracts(internal_config):
    """Install the default configuration around every test."""
    configure(internal_config)
    yield internal_config
    configure(internal_config)


@pytest.fixture
def contracts_disabled(make_config):
    """Run a test with require/check/ensure switched off."""
    return configure(make_config(DBC=False))
