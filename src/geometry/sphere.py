# geometry/sphere.py
import math
from typing import Sequence, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import SceneObject

class Sphere(SceneObject):
    """
    Represents a sphere defined by its center, radius and surface properties.
    """
    def __init__(self, position: Vector3, color: Sequence[int], radius: float,
                 lambert: float, specular: float):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(position, color, lambert, specular)
        self.radius = radius
        self.sq_radius = radius * radius

    def intersect(self, ray: Ray) -> Tuple[float, Vector3]:
        # Closest approach: project the center onto the ray, then step back
        # along the ray to the near surface. Ray origins are assumed to be
        # outside the sphere.
        distance = math.inf
        to_center = self.position - ray.origin
        midpoint = to_center.dot(ray.direction)
        if midpoint > 0:
            sq_perpendicular = to_center.squared_length() - midpoint * midpoint
            if sq_perpendicular < self.sq_radius:
                distance = midpoint - math.sqrt(self.sq_radius - sq_perpendicular)
        return distance, ray.at(distance)

    def normal_to(self, hit_ray: Ray) -> Vector3:
        return (hit_ray.origin - self.position).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.position!r}, radius={self.radius})"
