"""Pytest configuration and shared fixtures for pandocwalk test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import copy
import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import make_document, sample_blocks

from pandocwalk.filters import filter_registry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def sample_document() -> list:
    """Provide an array-form document with nested blocks and inlines.

    Returns
    -------
    list
        ``[{"unMeta": {...}}, Header, Para, Div]``

    """
    return make_document(*sample_blocks(), meta={"title": {"t": "MetaInlines", "c": [{"t": "Str", "c": "Doc"}]}})


@pytest.fixture
def frozen_sample(sample_document) -> list:
    """Provide a deep copy of ``sample_document`` for mutation checks."""
    return copy.deepcopy(sample_document)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run a test in an empty directory with no discoverable configuration.

    Yields
    ------
    Path
        The working directory used by the test.

    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("PANDOCWALK_CONFIG", raising=False)
    monkeypatch.chdir(work)
    yield work


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo root logger changes made by configure_logging during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's own capture handlers are subclasses and are left alone
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def clean_registry():
    """Reset the global filter registry before and after a test."""
    filter_registry.clear()
    yield filter_registry
    filter_registry.clear()
