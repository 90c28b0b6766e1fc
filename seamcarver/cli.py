"""
Command line entry point.

    seamcarver image.jpg 40                # remove 40 columns
    seamcarver image.jpg 40 --horizontal   # remove 40 rows

The result is written to out_<name> next to the input unless -o is given.
"""

import argparse
import logging
import sys
import time

from .carving import carve_image
from .image_io import load_image, save_image, output_path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarver',
        description="Remove low-energy seams from an image (content-aware resizing).")
    parser.add_argument('image', help="Input image file")
    parser.add_argument('n_seams', type=int, help="Number of seams to remove")
    parser.add_argument('--horizontal', action='store_true',
                        help="Remove horizontal seams (rows) instead of columns")
    parser.add_argument('-o', '--output', default=None,
                        help="Output file (default: out_<name> beside the input)")
    parser.add_argument('--full-rebuild', action='store_true',
                        help="Rebuild the cost table after every seam instead of repairing it")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Log every removed seam")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    direction = 'horizontal' if args.horizontal else 'vertical'
    out_path = args.output if args.output is not None else output_path(args.image)

    try:
        image = load_image(args.image)
        logger.info("Loaded %s: %d x %d, %d channel(s)",
                    args.image, image.shape[2], image.shape[1], image.shape[0])

        start = time.perf_counter()
        carved = carve_image(image, args.n_seams, direction=direction,
                             incremental=not args.full_rebuild)
        elapsed_ms = (time.perf_counter() - start) * 1000

        save_image(carved, out_path)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    print(f"Calculated in {elapsed_ms:.0f}ms")
    logger.info("Saved: %s", out_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
