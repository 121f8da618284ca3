# geometry/light.py
from core.vector import Vector3

class Light:
    """
    A point light. Its contribution falls off with the inverse square of the
    distance.
    """
    def __init__(self, position: Vector3, intensity: float):
        if intensity < 0:
            raise ValueError(f"Light intensity must be non-negative, got {intensity}")
        self.position = position
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"Light({self.position!r}, intensity={self.intensity})"
