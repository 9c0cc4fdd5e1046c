import numpy as np
from PIL import Image

from textmap.errors import ConfigurationError


def mask_to_image(mask, cell_width: int = 4, cell_height: int = 8) -> Image.Image:
    """Draw a mask as a greyscale image, ink cells white on black.

    Each mask cell becomes a ``cell_width`` x ``cell_height`` pixel rectangle,
    roughly the proportions of a terminal character.
    """
    for name, value in (("cell_width", cell_width), ("cell_height", cell_height)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"`{name}` should be a positive integer, got {value!r}")

    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise ConfigurationError(f"`mask` should be two-dimensional, got shape {mask.shape}")

    pixels = np.repeat(np.repeat(mask, cell_height, axis=0), cell_width, axis=1)
    if pixels.size == 0:
        return Image.new("L", (pixels.shape[1], pixels.shape[0]), 0)
    return Image.fromarray(pixels.astype(np.uint8) * 255)
