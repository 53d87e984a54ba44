#!/usr/bin/env python3
"""
PPM Image Editor CLI
Reads a P3 image, applies one filter, writes the result.
"""

import os
import sys
import logging
from typing import List, Optional
from dotenv import load_dotenv

from ..models.errors import UsageError, MalformedInput, InvalidDimension
from ..pipeline.apply_filter import apply_filter, validate_filter_args
from ..services.image_service import ImageService

# Load environment variables first
load_dotenv()

USAGE = ("USAGE: image-editor <in-file> <out-file> "
         "<grayscale|invert|emboss|motionblur> {motion-blur-length}")

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def usage() -> None:
    print(USAGE)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Returns the process exit status: 0 on success or misuse (usage printed),
    1 when the input cannot be read or parsed.
    """
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv

    # Validate the whole invocation before touching any file
    try:
        if len(argv) < 3:
            raise UsageError(f"Expected at least 3 arguments, got {len(argv)}")
        # Plain positional split: paths may start with "-"
        in_file, out_file, filter_name, *extra = argv
        validate_filter_args(filter_name, extra)
    except UsageError as e:
        logger.debug(f"Bad invocation: {e}")
        usage()
        return 0

    image_service = ImageService()
    try:
        image = image_service.load(in_file)
    except (MalformedInput, InvalidDimension, OSError) as e:
        logger.error(f"Cannot read {in_file}: {e}")
        return 1

    apply_filter(image, filter_name, extra)

    try:
        image_service.save(image, out_file)
    except OSError as e:
        logger.error(f"Cannot write {out_file}: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
