"""Reusable Carthage project fixtures for testing.

This module provides pytest fixtures that create project directories with
Cartfile and Cartfile.resolved manifests.
"""

import pytest
from pathlib import Path


CARTFILE = """# Networking
github "Alamofire/Alamofire" ~> 5.8
github "ReactiveX/RxSwift" ~> 6.0
"""

CARTFILE_RESOLVED = """github "Alamofire/Alamofire" "5.8.1"
github "ReactiveX/RxSwift" "6.6.0"
"""


@pytest.fixture
def carthage_project(tmp_path) -> Path:
    """
    Create a project with two resolved dependencies.

    Creates:
    - Cartfile (Alamofire, RxSwift)
    - Cartfile.resolved (Alamofire 5.8.1, RxSwift 6.6.0)

    Returns:
        Path to project root directory
    """
    project_root = tmp_path / "App"
    project_root.mkdir()
    (project_root / "Cartfile").write_text(CARTFILE)
    (project_root / "Cartfile.resolved").write_text(CARTFILE_RESOLVED)
    return project_root


@pytest.fixture
def single_dependency_project(tmp_path) -> Path:
    """
    Create a project with one dependency resolved at 2.0.0.

    Returns:
        Path to project root directory
    """
    project_root = tmp_path / "Single"
    project_root.mkdir()
    (project_root / "Cartfile").write_text('github "Example/Widget" ~> 2.0\n')
    (project_root / "Cartfile.resolved").write_text(
        'github "Example/Widget" "2.0.0"\n'
    )
    return project_root


@pytest.fixture
def empty_project(tmp_path) -> Path:
    """Create a project directory without any manifests."""
    project_root = tmp_path / "Empty"
    project_root.mkdir()
    return project_root
