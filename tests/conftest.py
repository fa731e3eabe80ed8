"""
Shared fixtures for regcreds tests.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() so handlers opened by a test do not outlive it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_credentials() -> dict[str, dict[str, str]]:
    """Raw config.json content with two registries."""
    return {
        "registry.example.com": {"username": "alice", "password": "s3cr3t"},
        "docker.io": {"username": "bob", "password": "hunter2"},
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write data as JSON into a fresh config.json and return its path."""

    def _write(data: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_path(write_config, sample_credentials) -> Path:
    """Config file holding sample_credentials."""
    return write_config(sample_credentials)
