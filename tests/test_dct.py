"""Tests for blockwise DCT/IDCT."""

import threading

import numpy as np
import pytest
from engines.dct_engine import create_alpha, dct2, idct2, forward, inverse
from models.errors import InvalidParameter, CompressionCancelled

METHODS = ['direct', 'separable', 'fast']


def test_alpha_values():
    """alpha[0] = 1/sqrt(N), the rest sqrt(2/N)."""
    alpha = create_alpha(8)
    assert alpha.shape == (8,)
    assert np.isclose(alpha[0], 1 / np.sqrt(8))
    assert np.allclose(alpha[1:], np.sqrt(2 / 8))


def test_alpha_cached_and_read_only():
    alpha = create_alpha(16)
    assert create_alpha(16) is alpha
    with pytest.raises(ValueError):
        alpha[0] = 1.0


def test_alpha_rejects_non_positive():
    with pytest.raises(InvalidParameter):
        create_alpha(0)


@pytest.mark.parametrize('method', METHODS)
@pytest.mark.parametrize('block_size, shape', [(8, (16, 24)), (4, (8, 8)), (5, (10, 15))])
def test_forward_inverse_round_trip(method, block_size, shape):
    """Without quantization inverse(forward(P)) == P."""
    rng = np.random.default_rng(1)
    plane = rng.random(shape) * 255
    alpha = create_alpha(block_size)
    coeffs = forward(plane, block_size, alpha, method)
    recovered = inverse(coeffs, block_size, alpha, method)
    assert np.allclose(recovered, plane, rtol=1e-9, atol=1e-9)


def test_methods_agree():
    """Direct summation, separable and scipy paths give the same coefficients."""
    rng = np.random.default_rng(2)
    plane = rng.random((16, 16)) * 255 - 128
    alpha = create_alpha(8)
    direct = forward(plane, 8, alpha, 'direct')
    for method in ['separable', 'fast']:
        assert np.allclose(forward(plane, 8, alpha, method), direct, atol=1e-9)
        assert np.allclose(inverse(direct, 8, alpha, method), inverse(direct, 8, alpha, 'direct'), atol=1e-9)


def test_direct_matches_summation_formula():
    """Spot-check one coefficient against the literal double sum."""
    rng = np.random.default_rng(3)
    n = 4
    block = rng.random((n, n)) * 100
    alpha = create_alpha(n)
    coeffs = forward(block, n, alpha, 'direct')
    u, v = 1, 3
    total = sum(
        block[i, j]
        * np.cos((2 * i + 1) * u * np.pi / (2 * n))
        * np.cos((2 * j + 1) * v * np.pi / (2 * n))
        for i in range(n) for j in range(n)
    )
    assert np.isclose(coeffs[u, v], alpha[u] * alpha[v] * total)


@pytest.mark.parametrize('method', METHODS)
def test_uniform_block_dc_only(method):
    """Uniform 100 block -> DC = 64 * 100 * alpha0^2 = 800, nothing else."""
    block = np.full((8, 8), 100.0)
    alpha = create_alpha(8)
    coeffs = forward(block, 8, alpha, method)
    assert np.isclose(coeffs[0, 0], 64 * 100 * alpha[0] * alpha[0])
    assert np.isclose(coeffs[0, 0], 800.0)
    assert np.allclose(coeffs.flatten()[1:], 0, atol=1e-9)
    
    dc_only = np.zeros((8, 8))
    dc_only[0, 0] = coeffs[0, 0]
    assert np.allclose(inverse(dc_only, 8, alpha, method), 100.0)


def test_blocks_are_independent():
    """Changing one block leaves the other blocks' coefficients untouched."""
    rng = np.random.default_rng(4)
    plane = rng.random((16, 16)) * 255
    alpha = create_alpha(8)
    before = forward(plane, 8, alpha)
    plane[:8, :8] = 0
    after = forward(plane, 8, alpha)
    assert np.allclose(after[:8, 8:], before[:8, 8:], atol=1e-9)
    assert np.allclose(after[8:, :], before[8:, :], atol=1e-9)
    assert np.allclose(after[:8, :8], 0)


def test_forward_does_not_modify_input():
    plane = np.arange(64, dtype=np.float64).reshape(8, 8)
    original = plane.copy()
    forward(plane, 8, create_alpha(8))
    assert np.array_equal(plane, original)


def test_energy_preservation():
    """Parseval's theorem: sum(block^2) == sum(dct^2) for ortho norm."""
    block = np.random.rand(8, 8) * 255 - 128.0
    dct_block = forward(block, 8, create_alpha(8))
    assert np.isclose(np.sum(block ** 2), np.sum(dct_block ** 2), rtol=1e-10)


def test_single_block_helpers_match_forward():
    block = np.random.rand(8, 8) * 255
    alpha = create_alpha(8)
    assert np.allclose(dct2(block), forward(block, 8, alpha), atol=1e-9)
    assert np.allclose(idct2(dct2(block)), block, atol=1e-9)


def test_misaligned_plane_rejected():
    with pytest.raises(InvalidParameter):
        forward(np.zeros((10, 16)), 8, create_alpha(8))


def test_alpha_length_mismatch_rejected():
    with pytest.raises(InvalidParameter):
        forward(np.zeros((8, 8)), 8, create_alpha(4))


def test_unknown_method_rejected():
    with pytest.raises(InvalidParameter):
        forward(np.zeros((8, 8)), 8, create_alpha(8), 'wavelet')


def test_cancel_between_blocks():
    event = threading.Event()
    event.set()
    with pytest.raises(CompressionCancelled):
        forward(np.zeros((16, 16)), 8, create_alpha(8), cancel_event=event)


@pytest.mark.parametrize('block_size', [64, 128, 256])
def test_direct_handles_large_blocks(block_size):
    """Blocks up to the whole image stay within basis-sized memory."""
    rng = np.random.default_rng(block_size)
    plane = rng.random((256, 256)) * 255
    alpha = create_alpha(block_size)
    coeffs = forward(plane, block_size, alpha)
    assert np.allclose(coeffs, forward(plane, block_size, alpha, 'fast'), atol=1e-6)
    assert np.allclose(inverse(coeffs, block_size, alpha), plane, atol=1e-6)
