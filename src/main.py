# main.py
import logging
import sys
from core.vector import Vector3
from geometry.world import Scene
from geometry.light import Light
from geometry.sphere import Sphere
from geometry.plane import Plane
from renderer.raytracer import View, render
from renderer.image_output import save_image

# Resolution and bounce limits per quality level
RENDER_PRESETS = {
    "preview": {"width": 480, "height": 270, "max_depth": 4},
    "balanced": {"width": 960, "height": 540, "max_depth": 8},
    "final": {"width": 1920, "height": 1080, "max_depth": 12},
}

def create_view(quality: str = "final") -> View:
    """
    Camera at the origin looking down +z. Reflections are only guaranteed
    to look right from this position.
    """
    if quality not in RENDER_PRESETS:
        raise ValueError(f"Unknown quality {quality!r}, expected one of {sorted(RENDER_PRESETS)}")
    preset = RENDER_PRESETS[quality]
    return View(
        preset["width"],
        preset["height"],
        Vector3(0, 0, 0),
        90.0,
        Vector3(0, 0, 1),
        preset["max_depth"],
        background=(50, 100, 200),
        shadow_bias=1e-3,
    )

def create_world() -> Scene:
    """
    A box of coloured walls with mirrors front and back, two spheres and
    two lights.
    """
    print("\n=== Creating World ===")
    scene = Scene()
    scene.add_light(Light(Vector3(0, 1, 7), 20.0))
    scene.add_light(Light(Vector3(2, 0.5, 2), 40.0))

    scene.add_object(Sphere(Vector3(0, -0.3, 3), (255, 0, 0), 0.2, 0.9, 0.0))
    scene.add_object(Sphere(Vector3(1, -0.3, 5), (0, 0, 255), 0.3, 0.9, 0.3))
    print("Added red sphere at (0, -0.3, 3) and blue sphere at (1, -0.3, 5)")

    # Floor and left wall
    scene.add_object(Plane((0, 255, 0), Vector3(0, -1, 0), Vector3(0, -1, 0), 0.6, 0.0))
    scene.add_object(Plane((0, 0, 255), Vector3(-1, 0, 0), Vector3(-1, 0, 0), 0.6, 0.0))
    # Mirrors behind the spheres and behind the camera
    scene.add_object(Plane((255, 255, 255), Vector3(0, 0, 1), Vector3(0, 0, 8), 0.05, 1.0))
    scene.add_object(Plane((255, 255, 255), Vector3(0, 0, -1), Vector3(0, 0, -3), 0.05, 1.0))
    # Right wall and ceiling
    scene.add_object(Plane((100, 0, 100), Vector3(1, 0, 0), Vector3(3, 0, 0), 0.6, 0.0))
    scene.add_object(Plane((255, 255, 255), Vector3(0, 1, 0), Vector3(0, 2, 0), 0.6, 0.0))
    print(f"Scene has {len(scene.objects)} objects and {len(scene.lights)} lights")
    return scene

def main(quality: str = "final", output_path: str = "trace.png"):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    view = create_view(quality)
    scene = create_world()

    print(f"\n=== Rendering ({quality}) ===")
    print(f"Render resolution: {view.image_width}x{view.image_height}")
    print(f"Max bounces: {view.max_depth}")
    image = render(view, scene)

    save_image(image, output_path)
    print(f"Saved {output_path}")

if __name__ == "__main__":
    main(*sys.argv[1:3])
