# geometry/world.py
from typing import List
from geometry.hittable import SceneObject
from geometry.light import Light

class Scene:
    """
    The objects and point lights to render. Built once by the caller, then
    only read by the renderer. Objects are tested linearly; their order only
    decides ties between exactly equal distances.
    """
    def __init__(self):
        self.objects: List[SceneObject] = []
        self.lights: List[Light] = []

    def add_object(self, obj: SceneObject):
        self.objects.append(obj)

    def add_light(self, light: Light):
        self.lights.append(light)

    def __repr__(self) -> str:
        return f"Scene({len(self.objects)} objects, {len(self.lights)} lights)"
