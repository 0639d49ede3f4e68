"""
Shared pytest fixtures.

A seeded RNG keeps random generation reproducible and the INI-backed
QSettings keep tests away from the user's real settings.
"""

import random

import pytest
from PyQt5.QtCore import QSettings

from shapecanvas.shapes import ShapeFactory


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def factory():
    return ShapeFactory()


@pytest.fixture
def ini_settings(tmp_path):
    return QSettings(str(tmp_path / "shapecanvas.ini"), QSettings.IniFormat)
