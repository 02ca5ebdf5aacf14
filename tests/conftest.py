"""Root-level pytest fixtures for the textpipe test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests should use these fixtures instead of raw dict configs.
"""

import logging
import textwrap

import pytest

from textpipe.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_lowercase(make_config):
    ...     config = make_config(OPERATION="to_lowercase")
    ...     assert config.operation == "to_lowercase"
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        return resolve_config(param_config, None, None)

    return _make


@pytest.fixture
def user_config_file(tmp_path):
    """Factory writing a Python user config file with the given CONFIG body."""
    def _write(body: str, name: str = "user_config.py"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(body))
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() changes to the root logger after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's own capture handlers are subclasses; only drop plain ones
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
