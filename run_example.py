"""
Forward-mode example: value and partials of z = x^2 + y sin(y).
"""

import argparse
import math

from dualad import define_family, gradient


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Dual-number gradient of z = x^2 + y*sin(y)',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--x', type=float, default=5.0, help='x coordinate')
    parser.add_argument('--y', type=float, default=7.0, help='y coordinate')
    return parser.parse_args()


def main():
    args = parse_args()
    XY = define_family("XY", ["x", "y"])

    z, partials = gradient(lambda x, y: x.powf(2) + y * y.sin(), XY, {"x": args.x, "y": args.y})

    print("=" * 50)
    print(f"z(x={args.x}, y={args.y}) = {z:.12f}")
    print(f"  dz/dx = {partials['x']:.12f}   (exact {2 * args.x:.12f})")
    exact_dy = args.y * math.cos(args.y) + math.sin(args.y)
    print(f"  dz/dy = {partials['y']:.12f}   (exact {exact_dy:.12f})")
    print("=" * 50)


if __name__ == "__main__":
    main()
