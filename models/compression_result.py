"""Compression result with metrics."""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from models.compression_params import CompressionParams


@dataclass
class CompressionResult:
    """Results from compression/reconstruction pipeline."""
    
    original_image: np.ndarray
    reconstructed_image: np.ndarray
    params: CompressionParams
    padded_shape: Tuple[int, int]
    
    # Coefficient stats (all three channels, padding included)
    nonzero_coeffs: int
    total_coeffs: int
    
    # Quality metrics
    psnr_rgb: float
    ssim_rgb: float
    
    # Runtime
    encode_time_ms: float
    decode_time_ms: float
    
    @property
    def sparsity(self) -> float:
        """Fraction of coefficients zeroed by quantization."""
        if self.total_coeffs == 0:
            return 0.0
        return 1.0 - self.nonzero_coeffs / self.total_coeffs
