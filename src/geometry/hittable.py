# geometry/hittable.py
from typing import Sequence, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import Color, check_color, reflect

class HitRecord:
    """
    Records the nearest intersection along a ray. The object is a reference
    into the scene, not a copy.
    """
    def __init__(self, obj: "SceneObject", t: float, p: Vector3):
        self.obj = obj  # Object that was hit
        self.t = t      # Distance along the ray
        self.p = p      # Intersection point

    def __repr__(self) -> str:
        return f"HitRecord({self.obj!r}, t={self.t}, p={self.p!r})"

class SceneObject:
    """
    Abstract class for objects that can be hit by a ray. Holds the surface
    properties shared by every primitive:

    - color: RGB byte triple used as the diffuse color
    - lambert: diffuse coefficient
    - specular: reflectivity in [0, 1], the share of energy carried by the
      mirror-reflected ray
    """
    def __init__(self, position: Vector3, color: Sequence[int], lambert: float, specular: float):
        if lambert < 0:
            raise ValueError(f"Lambert coefficient must be non-negative, got {lambert}")
        if not 0.0 <= specular <= 1.0:
            raise ValueError(f"Specular coefficient must be in [0, 1], got {specular}")
        self.position = position
        self.color = check_color(color)
        self.lambert = lambert
        self.specular = specular

    def intersect(self, ray: Ray) -> Tuple[float, Vector3]:
        """
        Returns (distance, hit_point). A miss is reported as math.inf.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_to(self, hit_ray: Ray) -> Vector3:
        """
        Unit surface normal for a ray whose origin lies on the surface.
        """
        raise NotImplementedError("normal_to() must be implemented by subclasses.")

    def get_position(self) -> Vector3:
        return self.position

    def get_color(self) -> Color:
        return self.color

    def get_lambert(self) -> float:
        return self.lambert

    def get_specular(self) -> float:
        return self.specular

    def reflect_ray(self, ray: Ray, point: Vector3) -> Ray:
        """
        Mirror-reflects the incoming ray about the surface normal at point.
        """
        normal = self.normal_to(Ray(point, ray.direction))
        return Ray(point, reflect(ray.direction, normal))
