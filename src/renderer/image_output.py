# renderer/image_output.py
import numpy as np
from PIL import Image

def to_image(buffer: np.ndarray) -> Image.Image:
    """
    Wrap a rendered (width, height, 3) uint8 buffer, indexed [x, y], in a
    PIL image.
    """
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"Expected a (width, height, 3) buffer, got shape {buffer.shape}")
    # PIL wants rows first.
    rows = np.ascontiguousarray(buffer.transpose(1, 0, 2), dtype=np.uint8)
    return Image.fromarray(rows)

def save_image(buffer: np.ndarray, image_path: str) -> None:
    """
    Save a rendered buffer to disk. The format follows the file extension.
    """
    to_image(buffer).save(image_path)
