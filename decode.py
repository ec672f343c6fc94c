#!/usr/bin/env python3
"""
RLA Header Inspector CLI

Usage:
    python decode.py --input <path.rla>

Example:
    python decode.py --input render.rla --json
"""

import argparse
import json
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rlacodec.constants import HEADER_SIZE
from rlacodec.io import unpack_header, unpack_offset_table


def read_rla_header(path: str) -> dict:
    """Read header fields and the scanline offset table of an RLA file."""
    with open(path, 'rb') as f:
        data = f.read()

    if len(data) < HEADER_SIZE:
        raise ValueError(f"Data too short: {len(data)} bytes, need at least {HEADER_SIZE}")

    fields = unpack_header(data[:HEADER_SIZE])
    height = fields['ActiveTop'] - fields['ActiveBottom'] + 1
    fields['Offsets'] = unpack_offset_table(data[HEADER_SIZE:], max(height, 0))
    return fields


def main():
    parser = argparse.ArgumentParser(
        description='RLA Header Inspector - Print the header of an RLA file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print header fields
  python decode.py --input render.rla

  # Print as JSON
  python decode.py --input render.rla --json
        """
    )

    parser.add_argument('--input', '-i', required=True,
                        help='Input RLA file path (.rla)')
    parser.add_argument('--json', action='store_true',
                        help='Print fields as JSON')
    parser.add_argument('--offsets', action='store_true',
                        help='Also print the scanline offset table')

    args = parser.parse_args()

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        fields = read_rla_header(args.input)
        offsets = fields.pop('Offsets')
        fields.pop('Reserved')

        if args.offsets:
            fields['Offsets'] = offsets

        if args.json:
            print(json.dumps(fields, indent=2))
        else:
            for name, value in fields.items():
                print(f"  {name:20s} {value}")

    except ValueError as e:
        print(f"Error: Invalid RLA file - {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
