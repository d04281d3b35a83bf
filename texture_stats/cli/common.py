import argparse
import logging
import os

from dotenv import load_dotenv


def configure_logging() -> None:
    """Centralized logging configuration, run once per entry point before any work."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def add_image_argument(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("image", nargs="?", default=os.getenv("IMAGE_PATH"),
                    help="PPM (P6) image to analyse; defaults to $IMAGE_PATH")
