import argparse
import logging
import sys

from .common import configure_logging, add_image_argument
from ..pipeline.mean_color import compute_mean_color, format_mean_color
from ..repositories.image_repository import ImageDecodeError

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    configure_logging()
    ap = argparse.ArgumentParser(description="Print the mean red/green/blue value of an image.")
    add_image_argument(ap)
    args = ap.parse_args(argv)

    if not args.image:
        logger.error("No image given (pass a path or set IMAGE_PATH)")
        print("Failed to load image", file=sys.stderr)
        return 1

    try:
        mean = compute_mean_color(args.image)
    except (FileNotFoundError, ImageDecodeError) as err:
        logger.error(str(err))
        print("Failed to load image", file=sys.stderr)
        return 1

    print(format_mean_color(mean))
    return 0


if __name__ == "__main__":
    sys.exit(main())
