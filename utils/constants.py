"""Codec defaults and option names."""

DEFAULT_BLOCK_SIZE = 8
DEFAULT_THRESHOLD = 10.0
DEFAULT_RATE = 4
DEFAULT_WORKERS = 3

DCT_METHODS = ('direct', 'separable', 'fast')
ROUNDING_MODES = ('truncate', 'nearest')

CHANNEL_NAMES = ('R', 'G', 'B')
PIXEL_MIN = 0
PIXEL_MAX = 255

# Largest block evaluated as the unfactored quadruple sum
DIRECT_SUM_MAX_BLOCK = 32
