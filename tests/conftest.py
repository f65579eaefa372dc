"""
Pytest configuration and shared fixtures for solprep tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """
    Create a contracts project and make it the working directory.

    Layout:
        contracts/A.sol   pragma x; @@include('inc/B.txt')
        inc/B.txt         uint x = 1;
        build/            (not created)
    """
    contracts = tmp_path / "contracts"
    contracts.mkdir()
    inc = tmp_path / "inc"
    inc.mkdir()
    (contracts / "A.sol").write_text("pragma x; @@include('inc/B.txt')")
    (inc / "B.txt").write_text("uint x = 1;")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def source_dir(project_dir) -> Path:
    return project_dir / "contracts"


@pytest.fixture
def destination_dir(project_dir) -> Path:
    return project_dir / "build"


@pytest.fixture
def progress_lines():
    """Collects progress lines emitted by the directory driver."""
    return []
