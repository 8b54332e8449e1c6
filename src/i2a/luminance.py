import numpy as np
from PIL import Image

# Luminosity weights for red, green and blue
WEIGHTS = (0.21, 0.72, 0.07)


def to_gray(r: float, g: float, b: float, a: float) -> float:
    """Normalised RGBA to a 0-1 gray level. Transparent pixels are black."""
    gray = a * (WEIGHTS[0] * r + WEIGHTS[1] * g + WEIGHTS[2] * b)
    return min(max(gray, 0.0), 1.0)


def invert_aa_color(value: int) -> int:
    return 255 - value


def to_aa_color(r: float, g: float, b: float, a: float, invert: bool = False) -> int:
    """Normalised RGBA to a 0-255 intensity, truncated rather than rounded."""
    value = int(to_gray(r, g, b, a) * 255)
    return invert_aa_color(value) if invert else value


def aa_colors(image: Image.Image, invert: bool = False) -> np.ndarray:
    """Apply ``to_aa_color`` to every pixel. Returns uint8 array of shape (height, width)."""
    rgba = np.asarray(image.convert("RGBA"), dtype=np.float64) / 255.0
    r, g, b, a = (rgba[:, :, i] for i in range(4))
    gray = np.clip(a * (WEIGHTS[0] * r + WEIGHTS[1] * g + WEIGHTS[2] * b), 0.0, 1.0)
    values = np.trunc(gray * 255).astype(np.uint8)
    if invert:
        values = 255 - values
    return values
