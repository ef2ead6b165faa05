"""
Pytest configuration and shared fixtures for sanity tests.
"""

import pytest

from sanity.random import set_seed


@pytest.fixture
def seeded():
    """Seed the shared random source and reseed from entropy afterwards."""

    def _seed(seed: int = 1234) -> None:
        set_seed(seed)

    yield _seed
    set_seed(None)


@pytest.fixture
def sample_numbers() -> list[int]:
    """Mixed-sign numbers used across sequence tests."""
    return [1, 2, 3, -10, -1, 4]


@pytest.fixture
def text_file(tmp_path):
    """Factory fixture for files with known content."""

    def _create(content: str, name: str = "input.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _create
