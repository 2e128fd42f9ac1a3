"""
Pytest configuration and shared fixtures for chaintable tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from chaintable import HashMap
from chaintable.config import TableSettings
from chaintable.config import loader as config_loader
from chaintable.shared.constants import FileSystem


class CollidingKey:
    """Key whose hash is fixed, so every instance lands in one bucket."""

    def __init__(self, name: str, hash_value: int = 42) -> None:
        self.name = name
        self.hash_value = hash_value

    def __hash__(self) -> int:
        return self.hash_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CollidingKey):
            return NotImplemented
        return self.name == other.name

    def __repr__(self) -> str:
        return f"CollidingKey({self.name!r})"


@pytest.fixture
def table() -> HashMap[int, str]:
    """Create an empty default-capacity table.

    Returns:
        Empty HashMap with 16 buckets.
    """
    return HashMap()


@pytest.fixture
def small_settings() -> TableSettings:
    """Table settings with a tiny default capacity to force early resizes."""
    return TableSettings(default_capacity=2)


@pytest.fixture
def colliding_keys() -> list[CollidingKey]:
    """Five distinct keys that share one hash value."""
    return [CollidingKey(f"key{i}") for i in range(5)]


@pytest.fixture(autouse=True)
def _reset_global_state(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Reset the cached global settings around each test.

    Runs each test from an empty directory with no CHAINTABLE_ variables,
    so stray config.toml files or environment overrides cannot leak in.
    """
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith(FileSystem.ENV_PREFIX):
            monkeypatch.delenv(name)
    config_loader._loader._instance = None
    yield
    config_loader._loader._instance = None


@pytest.fixture
def make_colliding_key() -> type[CollidingKey]:
    """Expose the CollidingKey type to tests that build their own keys."""
    return CollidingKey
