"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Iterator

import pytest

from debugger_paths.config import reset_config


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Iterator[None]:
    """Reset config singleton between tests for isolation."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all DEBUGGER_PATHS_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("DEBUGGER_PATHS_")]
    for key in keys_to_remove:
        del os.environ[key]


@pytest.fixture
def project_with_json_mapping(tmp_path: Path) -> Path:
    """Create a project directory with debugger-paths.json."""
    project_dir = tmp_path / "json_project"
    (project_dir / "src").mkdir(parents=True)

    config_file = project_dir / "debugger-paths.json"
    config_file.write_text(
        """
{
    "pathMappings": {
        "/var/www/sub": "/home/user/other",
        "/var/www": "/home/user/project"
    }
}
"""
    )
    return project_dir


@pytest.fixture
def project_with_pyproject(tmp_path: Path) -> Path:
    """Create a project directory with pyproject.toml."""
    project_dir = tmp_path / "toml_project"
    (project_dir / "src").mkdir(parents=True)

    config_file = project_dir / "pyproject.toml"
    config_file.write_text(
        """
[tool.debugger-paths.path-mappings]
"/C:/inetpub" = 'C:\\wamp\\www'
"/var/www" = "/home/user/project"
"""
    )
    return project_dir
