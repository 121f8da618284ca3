# renderer/raytracer.py
import logging
import time
from typing import List, Optional, Sequence, Tuple
import numpy as np
from core.vector import Vector3
from core.ray import Ray
from core.utils import check_color
from camera.camera import Camera
from geometry.world import Scene
from renderer.shading import nearest_hit, lambert_shade
from renderer.tone_mapping import quantize

logger = logging.getLogger(__name__)

DEFAULT_SHADOW_BIAS = 1e-3

class View:
    """
    Camera and render settings for one image.

    Each pixel starts from a black accumulator and follows its primary ray
    through up to max_depth mirror bounces. Every hit adds the object's
    diffuse color, scaled by its lambert shading and by the product of the
    specular coefficients met so far. Tracing stops early when a ray escapes
    the scene or the reflection weight drops to zero.

    The background color is stored for callers but not blended in; pixels
    that hit nothing stay black.
    """
    def __init__(self, image_width: int, image_height: int, cam_position: Vector3,
                 fov: float, direction: Vector3, max_depth: int,
                 background: Sequence[int] = (0, 0, 0),
                 shadow_bias: float = DEFAULT_SHADOW_BIAS):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if shadow_bias < 0:
            raise ValueError(f"shadow_bias must be non-negative, got {shadow_bias}")
        self.camera = Camera(cam_position, direction, fov, image_width, image_height)
        self.image_width = image_width
        self.image_height = image_height
        self.max_depth = max_depth
        self.background = check_color(background)
        self.shadow_bias = shadow_bias

    @property
    def cam_position(self) -> Vector3:
        return self.camera.position

    @property
    def direction(self) -> Vector3:
        return self.camera.direction

    @property
    def fov_rad(self) -> float:
        return self.camera.fov_rad

    def render(self, scene: Scene) -> np.ndarray:
        """
        Render the scene into a (width, height, 3) uint8 buffer indexed [x, y].
        """
        logger.info("Rendering %dx%d image, max depth %d, %d objects, %d lights",
                    self.image_width, self.image_height, self.max_depth,
                    len(scene.objects), len(scene.lights))
        start = time.perf_counter()
        accumulation = np.zeros((self.image_width, self.image_height, 3), dtype=np.float64)
        progress_step = max(1, self.image_width // 10)

        for x in range(self.image_width):
            if x % progress_step == 0:
                logger.debug("Progress: column %d/%d", x, self.image_width)
            for y in range(self.image_height):
                accumulation[x, y] = self.trace_pixel(scene, x, y)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return quantize(accumulation)

    def trace_pixel(self, scene: Scene, x: int, y: int) -> List[float]:
        """
        Linear color of pixel (x, y) before quantization.
        """
        ray = self.camera.get_ray(x, y)
        pixel_color = [0.0, 0.0, 0.0]
        reflection_coef = 1.0
        depth = 0
        while depth < self.max_depth and reflection_coef > 0:
            bounce = self.color_trace(scene, reflection_coef, ray, pixel_color)
            if bounce is None:
                break
            ray, reflection_coef = bounce
            depth += 1
        return pixel_color

    def color_trace(self, scene: Scene, reflection_coef: float, ray: Ray,
                    current_color: List[float]) -> Optional[Tuple[Ray, float]]:
        """
        Trace a single bounce, adding its contribution to current_color.

        Returns the reflected ray and the remaining reflection weight, or None
        when the ray hits nothing and current_color is left untouched.
        """
        hit = nearest_hit(scene, ray)
        if hit is None:
            return None

        obj = hit.obj
        light = lambert_shade(scene, obj, hit.p, self.shadow_bias)
        object_color = obj.get_color()
        for i in range(3):
            current_color[i] += (object_color[i] / 255) * light * obj.get_lambert() * reflection_coef

        return obj.reflect_ray(ray, hit.p), reflection_coef * obj.get_specular()

def render(view: View, scene: Scene) -> np.ndarray:
    """Render scene as seen from view."""
    return view.render(scene)
