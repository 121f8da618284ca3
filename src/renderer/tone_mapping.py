# renderer/tone_mapping.py
import numpy as np

def quantize(accumulated: np.ndarray) -> np.ndarray:
    """
    Convert a linear color image to 8-bit. Channels are scaled by 255,
    saturated to [0, 255] and truncated, so accumulated values above 1.0
    come out as 255 rather than wrapping.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) * 255
    return scaled.clip(0, 255).astype("uint8")
