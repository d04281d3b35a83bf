import argparse
import logging
import sys

from .common import configure_logging, add_image_argument
from ..pipeline.texture_features import (
    GLCM_ANGLE,
    GLCM_DISTANCE,
    extract_texture_features,
    format_texture_report,
)
from ..repositories.image_repository import ImageDecodeError

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    configure_logging()
    ap = argparse.ArgumentParser(description="Print GLCM texture features (contrast, correlation, energy).")
    add_image_argument(ap)
    ap.add_argument("--distance", type=int, default=GLCM_DISTANCE,
                    help="pixel distance between compared pixels (default: %(default)s)")
    ap.add_argument("--angle", type=int, default=GLCM_ANGLE,
                    help="0 = horizontal, 90 = vertical (default: %(default)s)")
    ap.add_argument("--symmetric", action="store_true",
                    help="use row and column marginals for the correlation statistics")
    args = ap.parse_args(argv)

    if not args.image:
        logger.error("No image given (pass a path or set IMAGE_PATH)")
        print("Failed to load image", file=sys.stderr)
        return 1

    try:
        report = extract_texture_features(
            args.image,
            distance=args.distance,
            angle=args.angle,
            symmetric=args.symmetric,
        )
    except (FileNotFoundError, ImageDecodeError) as err:
        logger.error(str(err))
        print("Failed to load image", file=sys.stderr)
        return 1

    print(format_texture_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
