"""Compression parameters."""

import numbers
from dataclasses import dataclass
from typing import Literal

from models.errors import InvalidParameter
from utils.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_THRESHOLD,
    DEFAULT_RATE,
    DEFAULT_WORKERS,
    DCT_METHODS,
    ROUNDING_MODES,
)


@dataclass
class CompressionParams:
    """Block DCT compression parameters."""
    
    block_size: int = DEFAULT_BLOCK_SIZE
    threshold: float = DEFAULT_THRESHOLD
    rate: int = DEFAULT_RATE
    dct_method: Literal['direct', 'separable', 'fast'] = 'direct'
    rounding: Literal['truncate', 'nearest'] = 'truncate'
    workers: int = DEFAULT_WORKERS
    
    def __post_init__(self):
        if not is_int(self.block_size) or self.block_size <= 0:
            raise InvalidParameter(f"Block size must be a positive integer, got {self.block_size}")
        if not isinstance(self.threshold, numbers.Real) or not self.threshold >= 0:
            raise InvalidParameter(f"Threshold must be non-negative, got {self.threshold}")
        if not is_int(self.rate) or self.rate < 0:
            raise InvalidParameter(f"Rate must be a non-negative integer, got {self.rate}")
        if self.dct_method not in DCT_METHODS:
            raise InvalidParameter(f"DCT method must be one of {DCT_METHODS}, got {self.dct_method}")
        if self.rounding not in ROUNDING_MODES:
            raise InvalidParameter(f"Rounding must be one of {ROUNDING_MODES}, got {self.rounding}")
        if not is_int(self.workers) or self.workers < 1:
            raise InvalidParameter(f"Workers must be >= 1, got {self.workers}")


def is_int(value) -> bool:
    """True for Python and numpy integers, False for bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
