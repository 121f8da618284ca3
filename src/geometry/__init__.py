from geometry.hittable import HitRecord, SceneObject
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.light import Light
from geometry.world import Scene

__all__ = ["HitRecord", "SceneObject", "Sphere", "Plane", "Light", "Scene"]
