# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera producing one primary ray per pixel. Pixel (0, 0) is the
    top-left corner of the image.
    """
    def __init__(self, position: Vector3, direction: Vector3, fov: float,
                 image_width: int, image_height: int):
        if image_width <= 0 or image_height <= 0:
            raise ValueError(f"Image size must be positive, got {image_width}x{image_height}")
        self.position = position
        self.direction = direction.normalize()
        self.fov = fov
        self.fov_rad = math.radians(fov)
        self.image_width = image_width
        self.image_height = image_height
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and per-pixel steps."""
        global_up = Vector3(0, 1, 0)

        try:
            self.right = global_up.cross(self.direction).normalize()
        except ValueError:
            raise ValueError(f"View direction {self.direction!r} is parallel to world up") from None
        self.up = self.right.cross(self.direction).normalize()

        self.half_width = math.tan(self.fov_rad / 2)
        self.half_height = self.half_width * (self.image_height / self.image_width)
        self.pixel_width = self.half_width * 2 / self.image_width
        self.pixel_height = self.half_height * 2 / self.image_height

    def get_ray(self, x: int, y: int) -> Ray:
        """Primary ray through pixel (x, y)."""
        x_offset = self.right * (self.pixel_width * x - self.half_width)
        y_offset = self.up * (self.pixel_height * y - self.half_height)
        return Ray(self.position, self.direction + x_offset + y_offset)
