"""Main compression/reconstruction pipeline."""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

import numpy as np

from models.compression_params import CompressionParams
from models.compression_result import CompressionResult
from models.errors import InvalidParameter
from engines.plane_converter import check_image, to_planes, to_image
from engines.dct_engine import create_alpha, forward, inverse
from engines.quantizer import quantize, count_nonzero
from utils.constants import CHANNEL_NAMES
from utils.metrics import compute_psnr_ssim, Timer

logger = logging.getLogger(__name__)


def encode_channel(
    plane: np.ndarray,
    params: CompressionParams,
    alpha: np.ndarray,
    cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Forward DCT then quantize one padded plane."""
    coeffs = forward(plane, params.block_size, alpha, params.dct_method, cancel_event)
    return quantize(coeffs, params.block_size, params.threshold, params.rate, cancel_event)


def decode_channel(
    coeffs: np.ndarray,
    params: CompressionParams,
    alpha: np.ndarray,
    cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Inverse DCT of one quantized coefficient plane."""
    return inverse(coeffs, params.block_size, alpha, params.dct_method, cancel_event)


def _map_channels(func, planes, params, alpha, cancel_event):
    if params.workers == 1:
        return [func(p, params, alpha, cancel_event) for p in planes]
    with ThreadPoolExecutor(max_workers=min(params.workers, len(planes))) as pool:
        futures = [pool.submit(func, p, params, alpha, cancel_event) for p in planes]
        # result() re-raises the first channel failure
        return [f.result() for f in futures]


def check_block_fits(image: np.ndarray, block_size: int) -> None:
    """Block size may not exceed either image dimension."""
    h, w = image.shape[:2]
    if block_size > h or block_size > w:
        raise InvalidParameter(
            f"Block size {block_size} exceeds image size {w}x{h}"
        )


def compress_reconstruct(
    image_rgb: np.ndarray,
    params: CompressionParams,
    cancel_event: Optional[threading.Event] = None
) -> CompressionResult:
    """Run DCT -> quantize -> IDCT on each RGB channel and rebuild the image."""
    check_image(image_rgb)
    check_block_fits(image_rgb, params.block_size)
    timer = Timer()
    alpha = create_alpha(params.block_size)

    logger.debug(
        "Compressing %dx%d image: block=%d threshold=%s rate=%d method=%s",
        image_rgb.shape[1], image_rgb.shape[0], params.block_size,
        params.threshold, params.rate, params.dct_method
    )
    if params.threshold == 0:
        logger.warning("Quantizing with threshold 0; no coefficient will be zeroed by threshold")

    # === ENCODING ===
    planes = to_planes(image_rgb, params.block_size)
    quantized = timer.measure_encode(
        _map_channels, encode_channel, planes.channels(), params, alpha, cancel_event
    )
    nonzero = 0
    for name, coeffs in zip(CHANNEL_NAMES, quantized):
        channel_nonzero = count_nonzero(coeffs)
        logger.debug("Channel %s: %d/%d non-zero coefficients", name, channel_nonzero, coeffs.size)
        nonzero += channel_nonzero

    # === DECODING ===
    red, green, blue = timer.measure_decode(
        _map_channels, decode_channel, quantized, params, alpha, cancel_event
    )
    rgb_recon = to_image(red, green, blue, planes.original_shape, params.rounding)

    # === METRICS ===
    metrics = compute_psnr_ssim(image_rgb[:, :, :3], rgb_recon)

    return CompressionResult(
        original_image=image_rgb,
        reconstructed_image=rgb_recon,
        params=params,
        padded_shape=planes.padded_shape,
        nonzero_coeffs=nonzero,
        total_coeffs=sum(c.size for c in quantized),
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms
    )


def compress(
    image_rgb: np.ndarray,
    block_size: int,
    threshold: float,
    rate: int,
    **options
) -> np.ndarray:
    """Compress and reconstruct, returning only the reconstructed image.

    Extra keyword options (dct_method, rounding, workers) go to
    CompressionParams.
    """
    params = CompressionParams(block_size=block_size, threshold=threshold, rate=rate, **options)
    return compress_reconstruct(image_rgb, params).reconstructed_image


def compress_async(
    image_rgb: np.ndarray,
    params: CompressionParams,
    executor: Optional[Executor] = None,
    cancel_event: Optional[threading.Event] = None
) -> Future:
    """Submit compress_reconstruct and return its Future.

    Without an executor a private single-thread one is used and shut down
    once the job finishes. Set cancel_event to stop between blocks; the
    Future then raises CompressionCancelled.
    """
    if executor is not None:
        return executor.submit(compress_reconstruct, image_rgb, params, cancel_event)

    own = ThreadPoolExecutor(max_workers=1, thread_name_prefix='dct-codec')
    try:
        return own.submit(compress_reconstruct, image_rgb, params, cancel_event)
    finally:
        own.shutdown(wait=False)

