"""Exceptions raised by the codec."""


class InvalidParameter(ValueError):
    """Caller-supplied parameter or image is unusable."""


class QuantizationError(ArithmeticError):
    """Quantization step vanished while coefficients still need descending."""


class CompressionCancelled(RuntimeError):
    """Compression was cancelled between blocks."""
