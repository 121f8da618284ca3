# geometry/plane.py
import math
from typing import Sequence, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import PARALLEL_EPSILON
from geometry.hittable import SceneObject

class Plane(SceneObject):
    """
    An infinite plane through a point with a unit normal.

    Width and height are kept for planes built from corner points but do not
    bound the intersection test.
    """
    def __init__(self, color: Sequence[int], normal: Vector3, point: Vector3,
                 lambert: float, specular: float,
                 width: float = math.inf, height: float = math.inf):
        super().__init__(point, color, lambert, specular)
        self.normal = normal.normalize()
        self.width = width
        self.height = height

    @classmethod
    def from_points(cls, color: Sequence[int], top_right: Vector3, bottom_right: Vector3,
                    bottom_left: Vector3, lambert: float, specular: float) -> "Plane":
        """
        Builds a plane from three corners of a rectangle. The normal follows
        the right-hand rule over the bottom edge then the right edge.
        """
        height_vec = top_right - bottom_right
        width_vec = bottom_right - bottom_left
        normal = width_vec.cross(height_vec)
        return cls(color, normal, top_right, lambert, specular,
                   width=width_vec.length(), height=height_vec.length())

    def intersect(self, ray: Ray) -> Tuple[float, Vector3]:
        # Only rays travelling along the normal are accepted.
        distance = math.inf
        norm_ray_dot = ray.direction.dot(self.normal)
        if norm_ray_dot > PARALLEL_EPSILON:
            to_point = self.position - ray.origin
            t = to_point.dot(self.normal) / norm_ray_dot
            if t > 0:
                distance = t
        return distance, ray.at(distance)

    def normal_to(self, hit_ray: Ray) -> Vector3:
        # Always face the incoming ray.
        if hit_ray.direction.dot(self.normal) < 0:
            return self.normal
        return -self.normal

    def __repr__(self) -> str:
        return f"Plane({self.position!r}, normal={self.normal!r})"
