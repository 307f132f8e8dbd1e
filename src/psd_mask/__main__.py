import argparse
import logging
import sys
from typing import Optional

from psd_mask.api.mask import masks_of
from psd_mask.exceptions import TruncatedSectionError
from psd_mask.psd.layer_mask_data import MaskSection
from psd_mask.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def _offset(value: str) -> int:
    offset = int(value)
    if offset < 0:
        raise argparse.ArgumentTypeError("offset must be non-negative: %d" % offset)
    return offset


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="psd-mask command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Show the masks of the section")
    show_parser.add_argument("input_file", help="Input binary file")

    debug_parser = subparsers.add_parser("debug", help="Show the decoded section")
    debug_parser.add_argument("input_file", help="Input binary file")

    for sub in (show_parser, debug_parser):
        sub.add_argument(
            "--offset",
            type=_offset,
            default=0,
            help="Byte offset of the length marker of the section.",
        )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("psd_mask")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    with open(args.input_file, "rb") as f:
        f.seek(args.offset)
        try:
            section = MaskSection.read(f)
        except TruncatedSectionError as e:
            logger.error("%s: %s", args.input_file, e)
            return 1

    if args.command == "show":
        masks = masks_of(section)
        if not masks:
            logger.info("No mask in %s", args.input_file)
        pprint(masks)

    elif args.command == "debug":
        pprint(section)

    return None


if __name__ == "__main__":
    sys.exit(main())
