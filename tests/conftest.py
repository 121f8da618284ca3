"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the src directory to the path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from core.vector import Vector3
from geometry.light import Light
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import Scene


@pytest.fixture
def floor():
    """Horizontal plane through the origin with its normal pointing up."""
    return Plane((0, 255, 0), Vector3(0, 1, 0), Vector3(0, 0, 0), 0.6, 0.0)


@pytest.fixture
def floor_scene(floor):
    """Scene holding only the floor plane, no lights."""
    scene = Scene()
    scene.add_object(floor)
    return scene


@pytest.fixture
def red_sphere_scene():
    """One red sphere straight ahead of the origin, lit from the camera side."""
    scene = Scene()
    scene.add_object(Sphere(Vector3(0, 0, 3), (255, 0, 0), 1.0, 0.9, 0.0))
    scene.add_light(Light(Vector3(0, 0, 1), 20.0))
    return scene
