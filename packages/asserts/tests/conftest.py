"""Pytest configuration and fixtures for asserts package tests."""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from dataknobs_asserts.config import ENV_PREFIX, reset_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against the default configuration and a clean environment."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def env_vars(monkeypatch):
    """Helper to set environment variables."""

    def _set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, str(value))

    return _set_env


class ApiError(Exception):
    """Custom failure carrying extra fields, as a caller would define."""

    def __init__(self, message, code=400):
        super().__init__(message)
        self.code = code


@pytest.fixture
def api_error():
    """A pre-built custom failure object."""
    return ApiError("bad input", code=422)
