"""Shared pytest configuration for the Hello Threads test suite."""

from __future__ import annotations

import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import importlib

import pytest

import config
from hello_threads.core.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def fresh_config_manager():
    """Every test starts without runtime overrides."""
    ConfigManager._instance = None
    yield
    ConfigManager._instance = None


@pytest.fixture
def config_manager():
    return ConfigManager()


@pytest.fixture
def env_config(monkeypatch):
    """
    Reload config.py under patched environment variables.

    Usage: env_config(HELLO_THREADS_DELAY_MS="250") before building anything
    that reads configuration.
    """
    def apply(**variables):
        for name, value in variables.items():
            monkeypatch.setenv(name, value)
        importlib.reload(config)
        ConfigManager._instance = None

    yield apply
    monkeypatch.undo()
    importlib.reload(config)
