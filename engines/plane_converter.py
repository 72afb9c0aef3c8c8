"""RGB raster <-> padded per-channel planes."""

import numpy as np
from typing import Tuple

from engines.block_processor import pad_to_multiple
from models.compression_params import is_int
from models.errors import InvalidParameter
from models.planes import PlaneSet
from utils.constants import ROUNDING_MODES, PIXEL_MIN, PIXEL_MAX


def check_image(image: np.ndarray) -> None:
    """Raise unless image is a non-empty (h, w, >=3) raster."""
    if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] < 3:
        shape = getattr(image, 'shape', None)
        raise InvalidParameter(f"Expected an (h, w, 3) RGB image, got shape {shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidParameter(f"Image is empty: {image.shape}")


def to_planes(image: np.ndarray, block_size: int) -> PlaneSet:
    """Split RGB image into three float planes zero-padded to block_size."""
    if not is_int(block_size) or block_size <= 0:
        raise InvalidParameter(f"Block size must be a positive integer, got {block_size}")
    check_image(image)

    planes = []
    original_shape = image.shape[:2]
    for c in range(3):
        padded, original_shape = pad_to_multiple(image[:, :, c], block_size)
        planes.append(padded)

    return PlaneSet(
        red=planes[0],
        green=planes[1],
        blue=planes[2],
        original_shape=original_shape,
        block_size=block_size
    )


def to_pixels(plane: np.ndarray, rounding: str = 'truncate') -> np.ndarray:
    """Real samples -> integers clamped to [0, 255].

    'truncate' drops the fraction toward zero before clamping, so 99.7 -> 99,
    -5.2 -> 0 and 260.7 -> 255. 'nearest' rounds half to even instead.
    """
    if rounding == 'truncate':
        values = np.trunc(plane)
    elif rounding == 'nearest':
        values = np.rint(plane)
    else:
        raise InvalidParameter(f"Rounding must be one of {ROUNDING_MODES}, got {rounding}")
    return np.clip(values, PIXEL_MIN, PIXEL_MAX).astype(np.uint8)


def to_image(
    red: np.ndarray,
    green: np.ndarray,
    blue: np.ndarray,
    original_shape: Tuple[int, int],
    rounding: str = 'truncate'
) -> np.ndarray:
    """Crop planes to original_shape and assemble a uint8 RGB image."""
    h, w = original_shape
    for plane in (red, green, blue):
        if plane.shape[0] < h or plane.shape[1] < w:
            raise InvalidParameter(
                f"Plane {plane.shape} is smaller than the image {original_shape}"
            )
    return np.stack(
        [to_pixels(plane[:h, :w], rounding) for plane in (red, green, blue)],
        axis=-1
    )
