"""Shared fixtures: isolate every test from CI variables and the real config dir."""

import os
import sys

import pytest

# Ensure tests/fakes/ is importable from every test directory.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "fakes"))

from create_next_app.environment import CI_INDICATOR_VARIABLES  # noqa: E402
from create_next_app.preferences import CONFIG_DIR_ENV  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Clear CI indicators and point the preference store at a temp dir."""
    for name in CI_INDICATOR_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("npm_config_user_agent", raising=False)
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    return config_dir
