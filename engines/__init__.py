"""DSP engines - pure computation, no I/O."""

from .block_processor import pad_to_multiple, split_into_blocks, merge_blocks
from .plane_converter import to_planes, to_image
from .dct_engine import create_alpha, dct2, idct2, forward, inverse
from .quantizer import block_extrema, quantize, count_nonzero
from .pipeline import compress, compress_reconstruct, compress_async

__all__ = [
    'pad_to_multiple',
    'split_into_blocks',
    'merge_blocks',
    'to_planes',
    'to_image',
    'create_alpha',
    'dct2',
    'idct2',
    'forward',
    'inverse',
    'block_extrema',
    'quantize',
    'count_nonzero',
    'compress',
    'compress_reconstruct',
    'compress_async',
]
