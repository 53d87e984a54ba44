"""
Filter dispatch
Maps command-line filter names to FilterService entry points and checks
their extra arguments before any image is touched.
"""

import logging
import re
from typing import Callable, Dict, List, Sequence, Tuple

from ..models.image import Image
from ..models.errors import UsageError
from ..services.filter_service import FilterService

logger = logging.getLogger(__name__)

# name -> (number of extra args, FilterService method name)
FILTERS: Dict[str, Tuple[int, str]] = {
    "grayscale": (0, "grayscale"),
    "greyscale": (0, "grayscale"),
    "invert": (0, "invert"),
    "emboss": (0, "emboss"),
    "motionblur": (1, "motion_blur"),
}

INTEGER_ARG = re.compile(r"[+-]?[0-9]+")  # ASCII digits only


def available_filters() -> List[str]:
    return list(FILTERS)


def _parse_length(arg: str) -> int:
    if not INTEGER_ARG.fullmatch(arg):
        raise UsageError(f"Motion blur length must be an integer, got {arg!r}")
    length = int(arg)
    if length < 0:
        raise UsageError(f"Motion blur length must be non-negative, got {length}")
    return length


def validate_filter_args(name: str, extra_args: Sequence[str] = ()) -> Tuple[int, ...]:
    """
    Check that *name* is a known filter and *extra_args* match it.

    Returns:
        Tuple[int, ...]: the parsed extra arguments, ready to pass to the filter.
    Raises:
        UsageError: unknown filter, wrong argument count or bad blur length.
    """
    if name not in FILTERS:
        raise UsageError(f"Unknown filter: {name!r}")

    arity, _ = FILTERS[name]
    if len(extra_args) != arity:
        raise UsageError(
            f"Filter {name!r} takes {arity} extra argument(s), got {len(extra_args)}"
        )
    return tuple(_parse_length(arg) for arg in extra_args)


def apply_filter(
    image: Image,
    name: str,
    extra_args: Sequence[str] = (),
    *,
    filter_service: FilterService = FilterService(),
) -> Image:
    """
    Validate the invocation and run the named filter on *image* in place.
    """
    params = validate_filter_args(name, extra_args)
    _, method = FILTERS[name]
    run: Callable[..., Image] = getattr(filter_service, method)

    logger.info(f"Applying {name} (params={params}) to {image.width}x{image.height} image")
    return run(image, *params)
