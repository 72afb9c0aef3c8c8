"""
DCT Block Codec
Block DCT + staircase quantization demo
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py <image_path> [block_size] [threshold] [rate] [output]
       python main.py --synthetic [block_size] [threshold] [rate] [output]"""


def parse_args(args):
    """Positional CLI arguments -> (source, block_size, threshold, rate, output)."""
    from utils.constants import DEFAULT_BLOCK_SIZE, DEFAULT_THRESHOLD, DEFAULT_RATE

    source = args[0]
    block_size = int(args[1]) if len(args) > 1 else DEFAULT_BLOCK_SIZE
    threshold = float(args[2]) if len(args) > 2 else DEFAULT_THRESHOLD
    rate = int(args[3]) if len(args) > 3 else DEFAULT_RATE
    output = args[4] if len(args) > 4 else "reconstructed.png"
    return source, block_size, threshold, rate, output


def run_cli(args) -> int:
    """Compress one image and report the result."""
    from models.compression_params import CompressionParams
    from models.errors import InvalidParameter, QuantizationError
    from engines.pipeline import compress_reconstruct
    from utils.test_images import generate_gradient
    from utils.image_io import load_image, save_image

    if not args or args[0] in ('-h', '--help'):
        print(USAGE)
        return 0

    try:
        source, block_size, threshold, rate, output = parse_args(args)
    except ValueError as e:
        print(f"Bad argument: {e}\n{USAGE}")
        return 2

    if source == '--synthetic':
        logging.info("Generating test image...")
        image = generate_gradient(256, 256)
    else:
        logging.info("Loading: %s", source)
        try:
            image = load_image(source)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    print(f"Image:     {image.shape[1]}x{image.shape[0]}")
    print(f"Block:     {block_size}  Threshold: {threshold}  Rate: {rate}")

    try:
        params = CompressionParams(block_size=block_size, threshold=threshold, rate=rate)
        result = compress_reconstruct(image, params)
    except (InvalidParameter, QuantizationError) as e:
        print(f"Error: {e}")
        return 1

    print("\n=== Results ===")
    print(f"PSNR:      {result.psnr_rgb:.2f} dB")
    print(f"SSIM:      {result.ssim_rgb:.4f}")
    print(f"Non-zero:  {result.nonzero_coeffs}/{result.total_coeffs} ({result.sparsity:.1%} zeroed)")
    print(f"Padded:    {result.padded_shape[1]}x{result.padded_shape[0]}")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")

    save_image(result.reconstructed_image, output)
    print(f"\nSaved: {output}")
    return 0


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == '__main__':
    main()
