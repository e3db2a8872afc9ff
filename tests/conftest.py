"""Core test fixtures for dicepool tests."""

import os
from enum import Enum

import pytest

from dicepool.config import get_settings
from dicepool.dice.faces import EnumFaces


class Shapes(Enum):
    """A custom face type: three shapes, no numeric total."""

    TRIANGLE = "triangle"
    SQUARE = "square"
    CIRCLE = "circle"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and DICEPOOL_ env vars around every test."""
    for key in list(os.environ):
        if key.startswith("DICEPOOL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def shape_faces() -> EnumFaces:
    """Enum-backed face type over Shapes."""
    return EnumFaces(Shapes)
