"""Synthetic images for demos and tests."""

import numpy as np


def generate_uniform(height: int, width: int, value=(100, 100, 100)) -> np.ndarray:
    """Flat colour - only DC coefficients survive the DCT."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = value
    return img


def generate_gradient(height: int = 256, width: int = 256) -> np.ndarray:
    """Smooth diagonal gradient - reveals banding from coarse quantization."""
    t = (np.arange(height)[:, None] + np.arange(width)[None, :]) / max(height + width - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_noise(height: int = 64, width: int = 64, seed: int = 0) -> np.ndarray:
    """Uniform random pixels - worst case for energy compaction."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (height, width, 3), dtype=np.uint8)

