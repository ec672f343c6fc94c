#!/usr/bin/env python3
"""
RLA Image Encoder CLI

Usage:
    python encode.py --input <path> --output <path.rla>

Example:
    python encode.py --input render.png --output render.rla --frame 12
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np
from rlacodec.io import read_image
from rlacodec.codec import write_rla


def main():
    parser = argparse.ArgumentParser(
        description='RLA Image Encoder - Write images as Wavefront RLA files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a PNG
  python encode.py --input render.png --output render.rla

  # Encode with frame number and gamma metadata
  python encode.py --input render.png --output render.rla --frame 12 \\
      --colorspace GammaCorrected --gamma 2.2 --verbose

  # Encode raw float RGB pixels (requires dimensions)
  python encode.py --input beauty.raw --output beauty.rla \\
      --width 640 --height 480 --channels 3 --dtype float32
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input image path (.npy, .raw or a Pillow format)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output RLA file path (.rla)')

    # Metadata
    parser.add_argument('--frame', type=int, default=0,
                        help='Frame number (default: 0)')
    parser.add_argument('--job', type=int, default=0,
                        help='Job number (default: 0)')
    parser.add_argument('--description', default='',
                        help='Image description text')
    parser.add_argument('--colorspace', choices=['Linear', 'GammaCorrected'],
                        help='Color space written to the Gamma field')
    parser.add_argument('--gamma', type=float, default=1.0,
                        help='Gamma for GammaCorrected data (default: 1.0)')

    # Raw input
    parser.add_argument('--width', '-W', type=int,
                        help='Image width (required for raw files)')
    parser.add_argument('--height', '-H', type=int,
                        help='Image height (required for raw files)')
    parser.add_argument('--channels', '-c', type=int, default=1,
                        help='Channel count for raw files (default: 1)')
    parser.add_argument('--dtype', choices=['uint8', 'uint16', 'float32'],
                        default='uint8', help='Pixel type for raw files (default: uint8)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    # Check raw file requirements
    input_ext = os.path.splitext(args.input)[1].lower()
    if input_ext == '.raw':
        if args.width is None or args.height is None:
            print("Error: --width and --height are required for raw files",
                  file=sys.stderr)
            sys.exit(1)

    try:
        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        pixels, spec = read_image(args.input, width=args.width, height=args.height,
                                  nchannels=args.channels, dtype=np.dtype(args.dtype))

        spec.attribute('rla:FrameNumber', args.frame)
        spec.attribute('rla:JobNumber', args.job)
        if args.description:
            spec.attribute('ImageDescription', args.description)
        if args.colorspace:
            spec.attribute('oiio:ColorSpace', args.colorspace)
            spec.attribute('oiio:Gamma', args.gamma)

        if args.verbose:
            print(f"  Shape: {pixels.shape}")
            print(f"  Dtype: {pixels.dtype}")
            print(f"  Channels: {spec.nchannels}")

        header = write_rla(args.output, pixels, spec)

        elapsed = time.time() - start_time

        if args.verbose:
            print(f"\nHeader:")
            print(f"  Color/Matte/Aux channels: {header.NumOfColorChannels}/"
                  f"{header.NumOfMatteChannels}/{header.NumOfAuxChannels}")
            print(f"  Bits: {header.NumOfChannelBits}")
            print(f"  Aspect ratio: {header.AspectRatio}")
            print(f"  Date: {header.DateCreated}")
            print(f"  Encoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Encoded: {args.input} -> {args.output} "
                  f"({spec.width}x{spec.height}, {spec.nchannels} channels)")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
