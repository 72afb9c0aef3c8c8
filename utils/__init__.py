"""Shared utilities."""

from .constants import DEFAULT_BLOCK_SIZE, DEFAULT_THRESHOLD, DEFAULT_RATE, CHANNEL_NAMES
from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_uniform,
    generate_gradient,
    generate_noise,
)
from .image_io import load_image, save_image

__all__ = [
    'DEFAULT_BLOCK_SIZE',
    'DEFAULT_THRESHOLD',
    'DEFAULT_RATE',
    'CHANNEL_NAMES',
    'compute_psnr_ssim',
    'Timer',
    'generate_uniform',
    'generate_gradient',
    'generate_noise',
    'load_image',
    'save_image',
]
