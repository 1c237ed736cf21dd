"""
Command-line driver: shrink an image file by seam carving.

    seamcarver input.png output.png --width 300 --height 200
"""

import argparse
import logging
import sys

import torch

from .carving import ORDERS, SeamCarver, carve_picture, draw_seam
from .picture import Picture

logger = logging.getLogger(__name__)


def energy_to_picture(energy: torch.Tensor) -> Picture:
    """Greyscale rendering of an energy field, scaled so the maximum is white."""
    scale = energy.max().item()
    if scale > 0:
        grey = energy / scale
    else:
        grey = torch.zeros_like(energy)
    return Picture.from_tensor(grey.unsqueeze(0).expand(3, -1, -1).float())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarver',
        description='Content-aware image shrinking by seam carving'
    )
    parser.add_argument('input', help='Image to carve')
    parser.add_argument('output', help='Where to write the carved image')
    parser.add_argument(
        '--width', type=int, default=None,
        help='Target width in pixels (default: keep)'
    )
    parser.add_argument(
        '--height', type=int, default=None,
        help='Target height in pixels (default: keep)'
    )
    parser.add_argument(
        '--order', choices=ORDERS, default='vertical-first',
        help='Which seams to remove first (default: vertical-first)'
    )
    parser.add_argument(
        '--energy-out', default=None,
        help='Also write the initial energy field as a greyscale image'
    )
    parser.add_argument(
        '--seam-out', default=None,
        help='Also write the input with its first vertical seam overlaid'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Log every seam removal'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        picture = Picture.open(args.input)
        logger.info("Loaded %s (%dx%d)", args.input, picture.width, picture.height)

        if args.energy_out or args.seam_out:
            carver = SeamCarver(picture)
            if args.energy_out:
                energy_to_picture(carver.energy_map()).save(args.energy_out)
                logger.info("Saved energy map to %s", args.energy_out)
            if args.seam_out:
                draw_seam(picture, carver.find_vertical_seam()).save(args.seam_out)
                logger.info("Saved seam overlay to %s", args.seam_out)

        carved = carve_picture(picture, width=args.width, height=args.height,
                               order=args.order)
        carved.save(args.output)
        logger.info("Saved %s (%dx%d)", args.output, carved.width, carved.height)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
