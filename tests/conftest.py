"""Pytest configuration and shared fixtures"""

import os
import sys

import pytest

from didyoumean import hooks
from didyoumean.config import Config

DEFAULT_SCOPE = "main"


class FakeNamespace:
    """In-memory host: scope name -> names defined there, in definition order."""

    def __init__(self, scopes: dict[str, list[str]]):
        self.scopes = scopes
        self.calls = []

    def list_defined_names(self, scope):
        self.calls.append(scope)
        return list(self.scopes.get(scope, []))

    def is_default_scope(self, scope):
        return scope == DEFAULT_SCOPE


@pytest.fixture
def namespace():
    """Fake host namespace modelled on a script that imported a dumper module"""
    return FakeNamespace(
        {
            DEFAULT_SCOPE: ["Dumper", "Dumps", "load_data"],
            "Data::Dumper": ["Dumper", "Indent", "Sortkeys"],
            "Tied": ["Dumps", "Dumper"],
            "Empty": [],
        }
    )


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears DIDYOUMEAN_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    didyoumean_vars = {
        key: value
        for key, value in os.environ.items()
        if key.upper().startswith("DIDYOUMEAN_")
    }

    for key in didyoumean_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key, value in didyoumean_vars.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment."""
    return Config()


@pytest.fixture
def restore_excepthook():
    """Undo any hook installation done by a test"""
    original = sys.excepthook
    try:
        yield
    finally:
        hooks.uninstall()
        sys.excepthook = original
