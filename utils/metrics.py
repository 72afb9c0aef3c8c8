"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def _ssim_window(shape) -> int:
    # skimage needs an odd window no larger than the image
    side = min(shape[0], shape[1], 7)
    return side if side % 2 else side - 1


def compute_psnr_ssim(original_rgb: np.ndarray, reconstructed_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM over all RGB channels.
    
    PSNR is inf for identical images. SSIM is nan for images under 3 pixels
    on a side.
    """
    if np.array_equal(original_rgb, reconstructed_rgb):
        psnr_rgb = float('inf')
    else:
        psnr_rgb = peak_signal_noise_ratio(original_rgb, reconstructed_rgb, data_range=255)
    
    win_size = _ssim_window(original_rgb.shape)
    if win_size < 3:
        ssim_rgb = float('nan')
    else:
        ssim_rgb = structural_similarity(
            original_rgb, reconstructed_rgb, channel_axis=2, data_range=255, win_size=win_size
        )
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb)
    }


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
