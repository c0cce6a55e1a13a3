"""Shared test fixtures."""

import io
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typesalad import System
from typesalad.config import SystemSettings


@pytest.fixture
def stdout():
    """In-memory stream standing in for standard output."""
    return io.StringIO()


@pytest.fixture
def system(stdout):
    """Fresh System that does not warn on new storage keys."""
    return System(settings=SystemSettings(warn_on_new_key=False), stdout=stdout)


@pytest.fixture
def warning_system(stdout):
    """Fresh System with default warnings enabled."""
    return System(settings=SystemSettings(warn_on_new_key=True), stdout=stdout)
