"""Test configuration and fixtures for dirscaffold."""

import pytest

from dirscaffold.file_system.fixture import FixtureError, FixtureFileSystem, FixtureSymlink


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_layout():
    """A small project layout exercising every entry kind."""
    return {
        "src": {
            "main.rs": None,
            "lib": {"mod.rs": None, "util.rs": None},
        },
        "public": {"index.html": None, "assets": {"logo.png": None}},
        "secret": FixtureError("Permission denied"),
        "loop": FixtureSymlink("."),
        "app.log": None,
        "node_modules": {"left-pad": {"index.js": None}},
        "README.md": None,
        ".env": None,
    }


@pytest.fixture
def project_fs(project_layout):
    """A fixture filesystem mounted at 'project'."""
    return FixtureFileSystem(project_layout, root="project")
