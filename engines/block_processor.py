"""Block processing: padding, splitting, merging."""

import numpy as np
from typing import Tuple

from models.errors import InvalidParameter


def padded_size(length: int, block_size: int) -> int:
    """Round length up to the next multiple of block_size."""
    return -(-length // block_size) * block_size


def pad_to_multiple(channel: np.ndarray, block_size: int) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Zero-pad channel on the bottom/right to a multiple of block_size."""
    h, w = channel.shape
    pad_h = padded_size(h, block_size) - h
    pad_w = padded_size(w, block_size) - w
    padded = np.pad(
        channel.astype(np.float64), ((0, pad_h), (0, pad_w)),
        mode='constant', constant_values=0.0
    )
    return padded, (h, w)


def check_aligned(plane: np.ndarray, block_size: int) -> None:
    """Raise unless plane is 2D and tiles exactly into block_size blocks."""
    if block_size <= 0:
        raise InvalidParameter(f"Block size must be positive, got {block_size}")
    if plane.ndim != 2:
        raise InvalidParameter(f"Expected a 2D plane, got shape {plane.shape}")
    h, w = plane.shape
    if h % block_size or w % block_size:
        raise InvalidParameter(
            f"Plane {w}x{h} is not a multiple of block size {block_size}"
        )


def split_into_blocks(plane: np.ndarray, block_size: int) -> np.ndarray:
    """View plane as (block_rows, block_cols, B, B)."""
    check_aligned(plane, block_size)
    h, w = plane.shape
    return (
        plane.reshape(h // block_size, block_size, w // block_size, block_size)
        .swapaxes(1, 2)
    )


def merge_blocks(blocks: np.ndarray) -> np.ndarray:
    """Inverse of split_into_blocks; returns a new contiguous plane."""
    rows, cols, b, _ = blocks.shape
    return np.ascontiguousarray(blocks.swapaxes(1, 2)).reshape(rows * b, cols * b)
