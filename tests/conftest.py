# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep SQLPARAM_* variables and any local .env file out of the tests."""
    for key in list(os.environ):
        if key.startswith("SQLPARAM_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    root = logging.getLogger("sqlparam")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
