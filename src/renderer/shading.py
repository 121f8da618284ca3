# renderer/shading.py
"""
Visibility queries and diffuse light accumulation over a scene.

Every query walks the scene's objects linearly; there is no acceleration
structure.
"""
import math
from typing import List, Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import HitRecord, SceneObject
from geometry.world import Scene

def nearest_hit(scene: Scene, ray: Ray) -> Optional[HitRecord]:
    """
    Returns the closest object in front of the ray, or None when nothing is
    hit. On exactly equal distances the object added first wins.
    """
    closest = None
    min_dist = math.inf
    for obj in scene.objects:
        distance, hit_point = obj.intersect(ray)
        if 0 < distance < min_dist:
            min_dist = distance
            closest = HitRecord(obj, distance, hit_point)
    return closest

def all_positive_intersections(scene: Scene, ray: Ray) -> List[float]:
    """
    Every finite, positive hit distance along the ray, in ascending order.
    """
    intersections = []
    for obj in scene.objects:
        distance, _ = obj.intersect(ray)
        if 0 < distance < math.inf:
            intersections.append(distance)
    intersections.sort()
    return intersections

def is_shadowed(scene: Scene, point: Vector3, dir_to_light: Vector3,
                dist_to_light: float, shadow_bias: float) -> bool:
    """
    True when any object lies between point and a light dist_to_light away.
    The shadow ray starts shadow_bias towards the light so a surface does not
    shadow itself.
    """
    shadow_point = point + dir_to_light * shadow_bias
    intersections = all_positive_intersections(scene, Ray(shadow_point, dir_to_light))
    return bool(intersections) and intersections[0] < dist_to_light

def lambert_shade(scene: Scene, obj: SceneObject, point: Vector3, shadow_bias: float) -> float:
    """
    Diffuse illumination factor at point on obj, clamped to at most 1.0.

    Each unshadowed light adds cos(theta) * intensity / (4 pi d^2), where theta
    is the angle between the light direction and the surface normal facing
    the light. Lights at or below the horizon contribute nothing.
    """
    lambert_amount = 0.0
    for light in scene.lights:
        to_light = light.position - point
        dist_to_light = to_light.length()
        dir_to_light = to_light / dist_to_light
        if is_shadowed(scene, point, dir_to_light, dist_to_light, shadow_bias):
            continue
        normal = obj.normal_to(Ray(point, -dir_to_light))
        contribution = dir_to_light.dot(normal)
        if contribution > 0:
            lambert_amount += contribution * light.intensity / (4 * math.pi * dist_to_light ** 2)
    return min(lambert_amount, 1.0)
