"""Threshold and staircase quantization of DCT coefficients."""

import logging
import threading
from typing import Optional, Tuple

import numpy as np

from engines.block_processor import split_into_blocks, merge_blocks
from models.compression_params import is_int
from models.errors import InvalidParameter, QuantizationError, CompressionCancelled

logger = logging.getLogger(__name__)


def block_extrema(blocks: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Per-block max and min of |coefficient|, shaped to broadcast over blocks.

    The min starts from 0 and is only ever lowered, so it stays 0 for every
    block. Kept as-is to reproduce the reference step sizes.
    """
    magnitude = np.abs(blocks)
    block_max = np.maximum(0.0, magnitude.max(axis=(-2, -1), keepdims=True))
    block_min = np.minimum(0.0, magnitude.min(axis=(-2, -1), keepdims=True))
    return block_max, block_min


def quantization_step(block_max: np.ndarray, block_min: np.ndarray, rate: int) -> np.ndarray:
    """(max - min) / 2**rate; underflows to 0 rather than overflowing."""
    return np.ldexp(block_max - block_min, -rate)


def _staircase(magnitude: np.ndarray, block_max: np.ndarray, step: np.ndarray) -> np.ndarray:
    """Largest max - k*step (k >= 0) that is <= magnitude."""
    gap = block_max - magnitude
    safe_step = np.where(step > 0, step, 1.0)
    # unstalled coefficients are finite; the rest are masked out by the caller
    with np.errstate(over='ignore', invalid='ignore'):
        k = np.where(step > 0, np.ceil(gap / safe_step), 0.0)
    k = np.maximum(k, 0.0)
    with np.errstate(invalid='ignore'):
        level = block_max - k * step
    # ceil on a rounded quotient can be one step off either way
    too_high = level > magnitude
    level = np.where(too_high, level - step, level)
    k = np.where(too_high, k + 1, k)
    can_rise = (k > 0) & (level + step <= magnitude)
    return np.where(can_rise, level + step, level)


def quantize(
    plane: np.ndarray,
    block_size: int,
    threshold: float,
    rate: int,
    cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Zero small coefficients, snap the rest onto a per-block staircase.

    For each block, ``step = (max - min) / 2**rate``. A coefficient with
    ``|c| < threshold`` becomes 0; any other coefficient becomes
    ``sign(c) * level`` where ``level`` is reached by walking down from the
    block maximum in ``step`` increments until it is ``<= |c|``.

    Returns a new plane; the input is not modified.

    Raises:
        InvalidParameter: negative threshold, negative or non-integer rate.
        QuantizationError: a block's step vanished or became subnormal
            (huge ``rate``) while some coefficient lies below the block
            maximum; the walk would never end.
    """
    if not threshold >= 0:
        raise InvalidParameter(f"Threshold must be non-negative, got {threshold}")
    if not is_int(rate) or rate < 0:
        raise InvalidParameter(f"Rate must be a non-negative integer, got {rate}")

    blocks = split_into_blocks(np.asarray(plane, dtype=np.float64), block_size)
    out = np.empty_like(blocks)

    for r in range(blocks.shape[0]):
        if cancel_event is not None and cancel_event.is_set():
            raise CompressionCancelled("Compression cancelled")
        row = blocks[r]
        block_max, block_min = block_extrema(row)
        step = quantization_step(block_max, block_min, rate)

        magnitude = np.abs(row)
        kept = magnitude >= threshold
        # a zero or subnormal step cannot reach |c| in finitely many steps
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            steps_needed = (block_max - magnitude) / step
        stalled = kept & (magnitude < block_max) & ~np.isfinite(steps_needed)
        if np.any(stalled):
            raise QuantizationError(
                f"Quantization step vanished in block row {r} (rate={rate})"
            )

        level = _staircase(magnitude, block_max, step)
        out[r] = np.where(kept, np.sign(row) * level, 0.0)

    return merge_blocks(out)


def count_nonzero(plane: np.ndarray) -> int:
    """Number of non-zero coefficients in a plane."""
    return int(np.count_nonzero(plane))
