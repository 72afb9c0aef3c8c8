"""Per-channel planes produced from an RGB image."""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass
class PlaneSet:
    """Zero-padded R, G, B planes plus the shape they were cut from."""
    
    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray
    original_shape: Tuple[int, int]
    block_size: int
    
    @property
    def padded_shape(self) -> Tuple[int, int]:
        return self.red.shape
    
    def channels(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.red, self.green, self.blue
