# core/utils.py
from typing import Sequence, Tuple
from core.vector import Vector3

# Planes only accept rays whose direction has at least this dot product with the normal.
PARALLEL_EPSILON = 1e-6

Color = Tuple[int, int, int]

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def check_color(color: Sequence[int]) -> Color:
    """
    Validates an RGB byte triple and returns it as a tuple of ints.
    """
    channels = tuple(color)
    if len(channels) != 3:
        raise ValueError(f"Color must have 3 channels, got {len(channels)}")
    for c in channels:
        if not 0 <= c <= 255:
            raise ValueError(f"Color channel out of range 0..255: {c}")
    return (int(channels[0]), int(channels[1]), int(channels[2]))
