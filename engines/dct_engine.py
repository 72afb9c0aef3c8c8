"""Block DCT/IDCT with precomputed alpha normalisation.

Three interchangeable evaluations of the same orthonormal Type-II DCT:

- ``direct``: the quadruple sum over every (u, v, i, j) per block as one
  einsum against the 1-D basis. Above DIRECT_SUM_MAX_BLOCK the einsum is
  allowed to factor the sum into two matrix products.
- ``separable``: ``T @ f @ T.T`` with the 1-D basis ``T``.
- ``fast``: ``scipy.fft`` with ``norm='ortho'``.

All of them agree within floating-point tolerance.
"""

import logging
import threading
from functools import lru_cache
from typing import Optional

import numpy as np
from scipy.fft import dctn, idctn

from engines.block_processor import split_into_blocks, merge_blocks
from models.errors import InvalidParameter, CompressionCancelled
from utils.constants import DCT_METHODS, DIRECT_SUM_MAX_BLOCK

logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def create_alpha(block_size: int) -> np.ndarray:
    """alpha[0] = 1/sqrt(N), alpha[k] = sqrt(2/N). Read-only, cached per N."""
    if block_size <= 0:
        raise InvalidParameter(f"Block size must be positive, got {block_size}")
    alpha = np.full(block_size, np.sqrt(2.0 / block_size))
    alpha[0] = 1.0 / np.sqrt(block_size)
    alpha.setflags(write=False)
    return alpha


@lru_cache(maxsize=16)
def _cosines(block_size: int) -> np.ndarray:
    # cos[i, u] = cos((2i+1) u pi / 2N)
    n = np.arange(block_size)
    table = np.cos(np.outer(2 * n + 1, n) * np.pi / (2 * block_size))
    table.setflags(write=False)
    return table


def _basis(block_size: int, alpha: np.ndarray) -> np.ndarray:
    """T[u, i] = alpha[u] * cos((2i+1) u pi / 2N)."""
    return alpha[:, None] * _cosines(block_size).T


def dct2(block: np.ndarray) -> np.ndarray:
    """2D DCT-II with orthonormal normalization."""
    return dctn(block, type=2, norm='ortho')


def idct2(coeffs: np.ndarray) -> np.ndarray:
    """2D inverse DCT (Type-III)."""
    return idctn(coeffs, type=2, norm='ortho')


def _check_alpha(alpha: np.ndarray, block_size: int) -> None:
    if alpha.shape != (block_size,):
        raise InvalidParameter(
            f"Alpha vector has length {alpha.shape[0]}, expected {block_size}"
        )


def _check_cancel(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise CompressionCancelled("Compression cancelled")


def _transform(plane, block_size, alpha, method, cancel_event, inverse):
    if method not in DCT_METHODS:
        raise InvalidParameter(f"DCT method must be one of {DCT_METHODS}, got {method}")
    _check_alpha(alpha, block_size)
    blocks = split_into_blocks(np.asarray(plane, dtype=np.float64), block_size)
    out = np.empty_like(blocks)
    
    if method == 'direct':
        basis = _basis(block_size, alpha)
        # forward sums over (i, j), inverse over (u, v)
        subscripts = 'ux,cuv,vy->cxy' if inverse else 'ui,cij,vj->cuv'
        factor = block_size > DIRECT_SUM_MAX_BLOCK
        for r in range(blocks.shape[0]):
            _check_cancel(cancel_event)
            out[r] = np.einsum(subscripts, basis, blocks[r], basis, optimize=factor)
    elif method == 'separable':
        basis = _basis(block_size, alpha)
        for r in range(blocks.shape[0]):
            _check_cancel(cancel_event)
            if inverse:
                out[r] = basis.T @ blocks[r] @ basis
            else:
                out[r] = basis @ blocks[r] @ basis.T
    else:
        func = idctn if inverse else dctn
        for r in range(blocks.shape[0]):
            _check_cancel(cancel_event)
            out[r] = func(blocks[r], type=2, norm='ortho', axes=(1, 2))
    
    logger.debug(
        "%s DCT (%s) over %dx%d blocks of size %d",
        'Inverse' if inverse else 'Forward', method,
        blocks.shape[1], blocks.shape[0], block_size
    )
    return merge_blocks(out)


def forward(
    plane: np.ndarray,
    block_size: int,
    alpha: np.ndarray,
    method: str = 'direct',
    cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Blockwise forward DCT; returns a new coefficient plane."""
    return _transform(plane, block_size, alpha, method, cancel_event, inverse=False)


def inverse(
    coeffs: np.ndarray,
    block_size: int,
    alpha: np.ndarray,
    method: str = 'direct',
    cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Blockwise inverse DCT; exact inverse of forward without quantization."""
    return _transform(coeffs, block_size, alpha, method, cancel_event, inverse=True)
