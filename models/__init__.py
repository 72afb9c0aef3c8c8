"""Data models for compression parameters and results."""

from .errors import InvalidParameter, QuantizationError, CompressionCancelled
from .compression_params import CompressionParams
from .compression_result import CompressionResult
from .planes import PlaneSet

__all__ = [
    'InvalidParameter',
    'QuantizationError',
    'CompressionCancelled',
    'CompressionParams',
    'CompressionResult',
    'PlaneSet',
]
