"""
Pytest configuration and shared fixtures for carthage-cache tests.
"""

import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.projects import (
    carthage_project,
    single_dependency_project,
    empty_project,
)
from tests.fixtures.directories import (
    cache_root,
    cache_dir,
    populated_cache,
)
from tests.mocks import FakeProcessRunner

from carthagecache.config.settings import Configuration


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "posix: marks tests that spawn POSIX processes"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    """Fake process runner that simulates carthage."""
    return FakeProcessRunner()


@pytest.fixture
def make_config(cache_root):
    """
    Factory for Configuration objects rooted in the test cache.

    Example:
        def test_something(make_config, carthage_project):
            config = make_config(carthage_project, force=True)
    """

    def _make(project_path: Path, **overrides) -> Configuration:
        values = dict(
            project_path=project_path,
            xcode_version="15.0.0",
            swift_version="5.9",
            platform="iOS",
            cache_root=cache_root,
        )
        values.update(overrides)
        return Configuration(**values)

    return _make


@pytest.fixture
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Create isolated home and cache environment for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.delenv("LOCALAPPDATA", raising=False)

    return fake_home
